"""Conventional commit interpretation.

Turns one physical commit into one or more :class:`ParsedCommit` records:

1. An override block, if complete, replaces the message.
2. Nested commit blocks split the message into a primary part and
   nested parts.
3. Each part is parsed as a conventional commit. Parts whose header is
   not conventional are logged and skipped.

Only an empty message is an error. Everything else degrades to fewer
records.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from relver._logging import get_logger
from relver.core.blocks import CommitPart, extract_override, extract_parts
from relver.core.grammar import parse_footers, parse_header, separate_body_and_footers
from relver.core.version import ChangeLevel
from relver.exceptions import CommitParseError, EmptyCommitMessageError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from datetime import datetime

    from relver.config.models import CommitsConfig
    from relver.vcs.commit import Commit

# Footers copied to top-level keys in the serialized form
SOURCE_COMMIT_HASH_FOOTER = "git-commit-hash"
PIPER_CL_NUMBER_FOOTER = "PiperOrigin-RevId"


@dataclass(frozen=True, slots=True)
class ParsedCommit:
    """One logical conventional commit.

    Attributes:
        commit_type: Type of change (e.g. "feat", "fix")
        scope: Optional scope of the change
        description: One-line subject
        body: Long-form description ("" if none)
        footers: Footer key/value pairs in message order
        is_breaking: True for a "!" header or a BREAKING CHANGE footer
        is_nested: True if this record came from a nested commit block
        sha: Identifier of the physical commit
        date: Timestamp of the physical commit
        component: Caller-supplied component identifier
    """

    commit_type: str
    description: str
    sha: str
    date: datetime
    component: str
    scope: str | None = None
    body: str = ""
    footers: dict[str, str] = field(default_factory=dict)
    is_breaking: bool = False
    is_nested: bool = False

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for state files and changelog rendering."""
        data: dict[str, Any] = {
            "type": self.commit_type,
            "scope": self.scope,
            "subject": self.description,
            "body": self.body,
            "footers": dict(self.footers),
            "is_breaking": self.is_breaking,
            "is_nested": self.is_nested,
            "sha": self.sha,
            "when": self.date.isoformat(),
            "component": self.component,
        }
        if SOURCE_COMMIT_HASH_FOOTER in self.footers:
            data["source_commit_hash"] = self.footers[SOURCE_COMMIT_HASH_FOOTER]
        if PIPER_CL_NUMBER_FOOTER in self.footers:
            data["piper_cl_number"] = self.footers[PIPER_CL_NUMBER_FOOTER]
        return data


def parse_commit(
    commit: Commit,
    component: str,
    *,
    logger: Any | None = None,
) -> list[ParsedCommit]:
    """Parse a commit message into conventional commit records.

    Args:
        commit: The physical commit
        component: Component identifier attached to every record
        logger: Diagnostic sink (defaults to the relver structlog logger)

    Returns:
        Records in document order: the primary part first, then nested
        parts. May be empty.

    Raises:
        EmptyCommitMessageError: If the message is blank
    """
    log = get_logger(logger, __name__)

    if not commit.message.strip():
        raise EmptyCommitMessageError(f"empty commit message in {commit.sha}")

    message = extract_override(commit.message)

    records = []
    for part in extract_parts(message, logger=log):
        record = _parse_part(part, commit, component, log)
        if record is not None:
            records.append(record)
    return records


def _parse_part(
    part: CommitPart,
    commit: Commit,
    component: str,
    log: Any,
) -> ParsedCommit | None:
    text = part.message.strip()
    if not text:
        return None

    header_line, *rest = text.split("\n")
    header = parse_header(header_line)
    if header is None:
        log.warning("invalid_conventional_commit", message=part.message, hash=commit.sha)
        return None

    body_lines, footer_lines = separate_body_and_footers(rest)
    footers, footer_breaking = parse_footers(footer_lines)

    return ParsedCommit(
        commit_type=header.commit_type,
        scope=header.scope,
        description=header.description,
        body="\n".join(body_lines).strip(),
        footers=footers,
        is_breaking=header.is_breaking or footer_breaking,
        is_nested=part.is_nested,
        sha=commit.sha,
        date=commit.date,
        component=component,
    )


def filter_skip_release_commits(commits: Sequence[Commit], patterns: Sequence[str]) -> list[Commit]:
    """Drop commits whose message contains a skip-release marker.

    Markers are matched case-insensitively anywhere in the message.
    """
    if not patterns:
        return list(commits)

    lowered = [p.lower() for p in patterns]
    return [c for c in commits if not any(p in c.message.lower() for p in lowered)]


def should_exclude(files: Iterable[str], exclude_paths: Sequence[str]) -> bool:
    """Return True if every changed file lies under an excluded path.

    A commit that touches no files is excluded.
    """
    return all(any(f.startswith(prefix) for prefix in exclude_paths) for f in files)


def parse_commits(
    commits: Sequence[Commit],
    component: str,
    config: CommitsConfig | None = None,
    *,
    changed_files: Mapping[str, Sequence[str]] | None = None,
    logger: Any | None = None,
) -> list[ParsedCommit]:
    """Parse many commits for one component.

    Args:
        commits: Physical commits, in the order records should appear
        component: Component identifier attached to every record
        config: Commit configuration (skip-release markers, exclude paths)
        changed_files: Files touched by each commit, keyed by sha. A commit
            listed here whose files all fall under ``config.exclude_paths``
            is skipped. Commits missing from the mapping are kept.
        logger: Diagnostic sink

    Returns:
        All records of all commits, flattened in order

    Raises:
        CommitParseError: If a commit has an empty message
    """
    if config is None:
        from relver.config.models import CommitsConfig

        config = CommitsConfig()

    parsed: list[ParsedCommit] = []
    for commit in filter_skip_release_commits(commits, config.skip_release_patterns):
        if _is_excluded(commit, changed_files, config.exclude_paths):
            continue
        try:
            parsed.extend(parse_commit(commit, component, logger=logger))
        except EmptyCommitMessageError as e:
            raise CommitParseError(f"failed to parse commit {commit.sha}: {e}") from e
    return parsed


def _is_excluded(
    commit: Commit,
    changed_files: Mapping[str, Sequence[str]] | None,
    exclude_paths: Sequence[str],
) -> bool:
    if changed_files is None or not exclude_paths or commit.sha not in changed_files:
        return False
    return should_exclude(changed_files[commit.sha], exclude_paths)


def classify_commit(commit: ParsedCommit, config: CommitsConfig) -> ChangeLevel:
    """Map one record to the change level it implies."""
    if commit.is_nested and config.nested_change_level is not None:
        return config.nested_change_level
    if commit.is_breaking or commit.commit_type in config.types_major:
        return ChangeLevel.MAJOR
    if commit.commit_type in config.types_minor:
        return ChangeLevel.MINOR
    if commit.commit_type in config.types_patch:
        return ChangeLevel.PATCH
    return ChangeLevel.NONE


def calculate_bump(commits: Iterable[ParsedCommit], config: CommitsConfig) -> ChangeLevel:
    """Return the highest change level among the records.

    Returns:
        ``ChangeLevel.NONE`` for no records or only unrecognized types
    """
    return max((classify_commit(c, config) for c in commits), default=ChangeLevel.NONE)


def group_commits_by_type(commits: Iterable[ParsedCommit]) -> dict[str, list[ParsedCommit]]:
    """Group records by commit type, keeping order within each group."""
    grouped: dict[str, list[ParsedCommit]] = defaultdict(list)
    for commit in commits:
        grouped[commit.commit_type].append(commit)
    return dict(grouped)


def get_breaking_changes(commits: Iterable[ParsedCommit]) -> list[ParsedCommit]:
    return [c for c in commits if c.is_breaking]


def format_commit_for_changelog(
    commit: ParsedCommit,
    *,
    include_scope: bool = True,
    include_sha: bool = False,
) -> str:
    """Format a record as a changelog bullet.

    Args:
        commit: Record to format
        include_scope: Prefix the scope in bold
        include_sha: Append the short commit hash

    Returns:
        Markdown list item
    """
    parts = ["-"]
    if include_scope and commit.scope:
        parts.append(f"**{commit.scope}:**")
    if commit.is_breaking:
        parts.append("[BREAKING]")
    parts.append(commit.description)
    if include_sha:
        parts.append(f"({commit.short_sha})")
    return " ".join(parts)
