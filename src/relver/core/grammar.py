"""Conventional commit line grammar.

Header::

    type(scope)!: description

Footers are ``Key: value`` lines, where the key is letters and hyphens
or the literal ``BREAKING CHANGE``. A footer block starts after a blank
line whose next non-blank line is footer-shaped; lines that are not
footer-shaped continue the value of the previous footer.

See https://www.conventionalcommits.org/en/v1.0.0/
"""

from __future__ import annotations

import re
from dataclasses import dataclass

BREAKING_CHANGE_KEY = "BREAKING CHANGE"

HEADER_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<type>\w+)"  # type (e.g. feat, fix, chore)
    r"(?:\((?P<scope>.*)\))?"  # optional scope in parens, greedy
    r"(?P<breaking>!)?"  # optional breaking change indicator
    r":\s"  # colon + whitespace
    r"(?P<description>.*)$",
    re.ASCII,
)

FOOTER_PATTERN: re.Pattern[str] = re.compile(
    rf"^(?P<key>[A-Za-z-]+|{BREAKING_CHANGE_KEY}):\s(?P<value>.*)$",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class Header:
    """The parsed first line of a conventional commit."""

    commit_type: str
    scope: str | None
    description: str
    is_breaking: bool


def parse_header(line: str) -> Header | None:
    """Parse a commit header line.

    Args:
        line: First line of a commit message

    Returns:
        The parsed header, or None if the line is not a conventional
        commit header (including an empty description)
    """
    match = HEADER_PATTERN.match(line)
    if match is None:
        return None

    description = match.group("description").strip()
    if not description:
        return None

    return Header(
        commit_type=match.group("type"),
        scope=match.group("scope") or None,
        description=description,
        is_breaking=match.group("breaking") == "!",
    )


def is_footer(line: str) -> bool:
    """Return True if the line starts a footer entry."""
    return FOOTER_PATTERN.match(line) is not None


def separate_body_and_footers(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split the lines after the header into body lines and footer lines.

    A blank line only separates body from footers when the next non-blank
    line is footer-shaped. Other blank lines stay in the body. The
    separator itself belongs to neither part.

    Args:
        lines: Message lines following the header

    Returns:
        ``(body_lines, footer_lines)``
    """
    for i, line in enumerate(lines):
        if line.strip():
            continue
        following = next((candidate for candidate in lines[i + 1 :] if candidate.strip()), None)
        if following is not None and is_footer(following):
            return lines[:i], lines[i + 1 :]
    return list(lines), []


def parse_footers(lines: list[str]) -> tuple[dict[str, str], bool]:
    """Parse footer lines into an ordered key/value mapping.

    A repeated key keeps its last value. A non-blank line that is not
    footer-shaped is appended, newline-joined, to the most recent key; with
    no preceding key it is dropped.

    Args:
        lines: Footer block lines

    Returns:
        ``(footers, is_breaking)`` where ``is_breaking`` is True if a
        ``BREAKING CHANGE`` footer was seen
    """
    footers: dict[str, str] = {}
    is_breaking = False
    last_key: str | None = None

    for line in lines:
        match = FOOTER_PATTERN.match(line)
        if match is None:
            if last_key is not None and line.strip():
                footers[last_key] += "\n" + line
            continue

        key = match.group("key").strip()
        footers[key] = match.group("value").strip()
        last_key = key
        if key == BREAKING_CHANGE_KEY:
            is_breaking = True

    return footers, is_breaking
