"""Exception hierarchy for relver.

Only hard input errors are raised. Malformed commit parts and
unterminated blocks are logged and dropped instead.
"""

from __future__ import annotations


class RelverError(Exception):
    """Base class for all relver errors."""


# =============================================================================
# Commit errors
# =============================================================================


class CommitParseError(RelverError):
    """A commit could not be interpreted at all."""


class EmptyCommitMessageError(CommitParseError):
    """The commit message is empty or whitespace only."""


# =============================================================================
# Version errors
# =============================================================================


class VersionError(RelverError):
    """Base class for version errors."""


class InvalidVersionError(VersionError):
    """A version string does not match the semantic version grammar."""

    def __init__(self, message: str, version: str | None = None) -> None:
        super().__init__(message)
        self.version = version


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigError(RelverError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml could be found."""


class ConfigValidationError(ConfigError):
    """Configuration is present but invalid."""
