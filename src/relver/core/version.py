"""Semantic version parsing, formatting and bumping.

Versions follow the ``major.minor.patch[-prerelease]`` grammar from
https://semver.org/ without build metadata. The pre-release label is
split into a prefix, a separator and a numeric counter so that
successive pre-releases can be counted up:

    1.0.0-alpha      -> prefix "alpha", no counter
    1.0.0-alpha.1    -> prefix "alpha", separator ".", counter 1
    1.0.0-rc2        -> prefix "rc", separator "", counter 2

Bumping keeps two project conventions:

- A pre-release only ever advances its counter.
- While the major version is 0, breaking changes promote to 1.0.0 and
  everything else is a patch bump.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum
from functools import total_ordering
from typing import Any

from relver._logging import get_logger
from relver.exceptions import InvalidVersionError

_NUMERIC = r"0|[1-9]\d*"
_IDENTIFIER = rf"(?:{_NUMERIC}|\d*[a-zA-Z-][0-9a-zA-Z-]*)"

SEMVER_PATTERN = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_IDENTIFIER}(?:\.{_IDENTIFIER})*))?",
    re.ASCII,
)

_TRAILING_COUNTER = re.compile(r"(?P<prefix>.*?)(?P<counter>\d+)", re.ASCII)


class ChangeLevel(IntEnum):
    """Highest kind of change observed, ordered none < patch < minor < major."""

    NONE = 0
    PATCH = 1
    MINOR = 2
    MAJOR = 3

    def __str__(self) -> str:
        return self.name.lower()


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """A parsed semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Non-numeric part of the pre-release label ("" if none)
        prerelease_separator: Text between prefix and counter ("." or "")
        prerelease_number: Pre-release counter, if any
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    prerelease_separator: str = ""
    prerelease_number: int | None = None

    @classmethod
    def parse(cls, version_str: str) -> Version:
        """Parse a version string.

        Args:
            version_str: Version string such as "1.2.3" or "1.0.0-beta.2"

        Returns:
            Parsed Version

        Raises:
            InvalidVersionError: If the string does not match the grammar
        """
        match = SEMVER_PATTERN.fullmatch(version_str)
        if match is None:
            raise InvalidVersionError(f"invalid version format: {version_str!r}", version_str)

        prefix, separator, counter = _split_prerelease(match.group("prerelease") or "")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=prefix,
            prerelease_separator=separator,
            prerelease_number=counter,
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
            if self.prerelease_number is not None:
                version += f"{self.prerelease_separator}{self.prerelease_number}"
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[Any, ...]:
        # A release sorts above any of its pre-releases; a missing counter
        # sorts below counter 0.
        counter = -1 if self.prerelease_number is None else self.prerelease_number
        return (
            self.major,
            self.minor,
            self.patch,
            not self.prerelease,
            self.prerelease,
            counter,
        )

    def increment_prerelease(self) -> Version:
        """Return a copy with the pre-release counter advanced by one.

        A label without a counter gains ".1".
        """
        if self.prerelease_number is None:
            return replace(self, prerelease_separator=".", prerelease_number=1)
        return replace(self, prerelease_number=self.prerelease_number + 1)

    def bump(self, level: ChangeLevel) -> Version:
        """Return the next version for a change of the given level.

        Args:
            level: Highest change level observed since this version

        Returns:
            The bumped version (``self`` for ``ChangeLevel.NONE``)
        """
        if level == ChangeLevel.NONE:
            return self

        if self.prerelease:
            return self.increment_prerelease()

        if self.major == 0:
            if level == ChangeLevel.MAJOR:
                return Version(1, 0, 0)
            return replace(self, patch=self.patch + 1)

        if level == ChangeLevel.MAJOR:
            return Version(self.major + 1, 0, 0)
        if level == ChangeLevel.MINOR:
            return Version(self.major, self.minor + 1, 0)
        return replace(self, patch=self.patch + 1)


def _split_prerelease(label: str) -> tuple[str, str, int | None]:
    """Split a pre-release label into (prefix, separator, counter)."""
    if not label:
        return "", "", None

    head, dot, tail = label.rpartition(".")
    if dot and tail.isdigit():
        return head, ".", int(tail)

    match = _TRAILING_COUNTER.fullmatch(label)
    # A label made only of digits keeps them as its prefix so that it
    # still formats as a pre-release.
    if match and match.group("prefix"):
        return match.group("prefix"), "", int(match.group("counter"))

    return label, "", None


def parse_version(version_str: str) -> Version:
    """Parse a version string into a :class:`Version`.

    Raises:
        InvalidVersionError: If the string does not match the grammar
    """
    return Version.parse(version_str)


def derive_next(level: ChangeLevel, current_version: str) -> str:
    """Compute the next version string.

    Args:
        level: Highest change level observed since ``current_version``
        current_version: Current version string

    Returns:
        Next version string. ``current_version`` is returned unchanged,
        without being parsed, when ``level`` is ``ChangeLevel.NONE``.

    Raises:
        InvalidVersionError: If ``current_version`` cannot be parsed
    """
    if level == ChangeLevel.NONE:
        return current_version

    try:
        version = Version.parse(current_version)
    except InvalidVersionError as e:
        raise InvalidVersionError(
            f"failed to parse current version: {e}", current_version
        ) from e

    return str(version.bump(level))


def max_version(*version_strings: str, logger: Any | None = None) -> str:
    """Return the greatest of the given version strings.

    Invalid strings are logged and skipped.

    Returns:
        The greatest valid version, formatted, or "" if there is none
    """
    log = get_logger(logger, __name__)
    versions: list[Version] = []
    for version_str in version_strings:
        try:
            versions.append(Version.parse(version_str))
        except InvalidVersionError:
            log.warning("invalid_version_string", version=version_str)

    if not versions:
        return ""
    return str(max(versions))
