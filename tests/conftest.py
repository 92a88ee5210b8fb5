"""Shared fixtures for relver tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
import structlog

from relver.vcs import Commit

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

COMMIT_DATE = datetime(2025, 6, 1, 12, 30, tzinfo=UTC)


@pytest.fixture
def when() -> datetime:
    return COMMIT_DATE


@pytest.fixture
def make_commit():
    """Build a Commit with a fixed timestamp."""

    def _make(message: str, sha: str = "abc123") -> Commit:
        return Commit(sha=sha, message=message, date=COMMIT_DATE)

    return _make


@pytest.fixture
def feat_commit() -> Commit:
    return Commit("feat123", "feat: add user authentication", COMMIT_DATE)


@pytest.fixture
def fix_commit() -> Commit:
    return Commit("fix456", "fix(core): handle empty config", COMMIT_DATE)


@pytest.fixture
def breaking_commit() -> Commit:
    return Commit(
        "break789",
        "feat(api)!: redesign client\n\nBREAKING CHANGE: Client is now Connection",
        COMMIT_DATE,
    )


@pytest.fixture
def sample_commits(feat_commit: Commit, fix_commit: Commit, breaking_commit: Commit) -> list[Commit]:
    return [
        feat_commit,
        fix_commit,
        Commit("docs001", "docs: update readme", COMMIT_DATE),
        Commit("chore01", "chore: bump dependencies", COMMIT_DATE),
        breaking_commit,
        Commit("misc001", "Merge branch 'main' into feature", COMMIT_DATE),
    ]


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """A directory holding a pyproject.toml with a [tool.relver] table."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.relver.commits]
types_minor = ["feat", "feature"]
nested_change_level = "minor"

[tool.relver.version]
tag_format = "v{version}"
"""
    )
    return tmp_path


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
