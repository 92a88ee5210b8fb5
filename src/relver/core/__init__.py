"""Core business logic for relver.

This module contains the fundamental building blocks:
- Conventional commit grammar, override and nested commit blocks
- Commit interpretation and change classification
- Semantic version parsing and bumping
"""

from __future__ import annotations

from relver.core.commits import (
    ParsedCommit,
    calculate_bump,
    classify_commit,
    filter_skip_release_commits,
    format_commit_for_changelog,
    get_breaking_changes,
    group_commits_by_type,
    parse_commit,
    parse_commits,
    should_exclude,
)
from relver.core.release import format_tag, next_version
from relver.core.version import ChangeLevel, Version, derive_next, max_version, parse_version

__all__ = [
    # Version
    "ChangeLevel",
    # Commits
    "ParsedCommit",
    "Version",
    "calculate_bump",
    "classify_commit",
    "derive_next",
    "filter_skip_release_commits",
    "format_commit_for_changelog",
    # Release
    "format_tag",
    "get_breaking_changes",
    "group_commits_by_type",
    "max_version",
    "next_version",
    "parse_commit",
    "parse_commits",
    "parse_version",
    "should_exclude",
]
