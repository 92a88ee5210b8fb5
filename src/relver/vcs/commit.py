"""The raw commit record handed to the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class Commit:
    """A single commit as read from version control.

    Attributes:
        sha: Content-addressed commit identifier
        message: Full commit message
        date: Author timestamp
        author_name: Author name, if known
        author_email: Author email, if known
    """

    sha: str
    message: str
    date: datetime
    author_name: str = ""
    author_email: str = ""
