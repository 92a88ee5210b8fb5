"""relver: conventional commit interpretation and semantic version derivation."""

from __future__ import annotations

from relver._logging import configure_logging
from relver.core import (
    ChangeLevel,
    ParsedCommit,
    Version,
    calculate_bump,
    derive_next,
    next_version,
    parse_commit,
    parse_commits,
    parse_version,
)
from relver.exceptions import (
    CommitParseError,
    EmptyCommitMessageError,
    InvalidVersionError,
    RelverError,
)
from relver.vcs import Commit

__version__ = "0.1.0"

__all__ = [
    "ChangeLevel",
    "Commit",
    "CommitParseError",
    "EmptyCommitMessageError",
    "InvalidVersionError",
    "ParsedCommit",
    "RelverError",
    "Version",
    "__version__",
    "calculate_bump",
    "configure_logging",
    "derive_next",
    "next_version",
    "parse_commit",
    "parse_commits",
    "parse_version",
]
