"""Version control records consumed by relver."""

from __future__ import annotations

from relver.vcs.commit import Commit

__all__ = ["Commit"]
