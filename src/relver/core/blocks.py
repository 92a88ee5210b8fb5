"""Override and nested-commit block extraction.

A message may carry an override region that replaces the whole message::

    BEGIN_COMMIT_OVERRIDE
    fix: the message that should be used instead
    END_COMMIT_OVERRIDE

and any number of nested regions, each one additional logical commit
squashed into the same physical commit::

    feat: primary change

    BEGIN_NESTED_COMMIT
    fix(api): a second change
    END_NESTED_COMMIT

Markers are matched in first-encounter order. Malformed regions are
dropped rather than reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from relver._logging import get_logger

BEGIN_COMMIT_OVERRIDE = "BEGIN_COMMIT_OVERRIDE"
END_COMMIT_OVERRIDE = "END_COMMIT_OVERRIDE"
BEGIN_NESTED_COMMIT = "BEGIN_NESTED_COMMIT"
END_NESTED_COMMIT = "END_NESTED_COMMIT"


@dataclass(frozen=True, slots=True)
class CommitPart:
    """One logical commit message cut out of a physical commit message."""

    message: str
    is_nested: bool = False


def extract_override(message: str) -> str:
    """Return the override region of ``message``, or ``message`` itself.

    Only a begin marker followed by an end marker counts. A begin marker
    without an end marker leaves the message untouched.
    """
    begin = message.find(BEGIN_COMMIT_OVERRIDE)
    if begin == -1:
        return message

    after_begin = message[begin + len(BEGIN_COMMIT_OVERRIDE) :]
    end = after_begin.find(END_COMMIT_OVERRIDE)
    if end == -1:
        return message

    return after_begin[:end].strip()


def extract_parts(message: str, *, logger: Any | None = None) -> list[CommitPart]:
    """Split a message into its primary part and nested parts.

    Args:
        message: Commit message, after override extraction
        logger: Diagnostic sink for dropped segments

    Returns:
        The primary part (if non-blank) followed by every properly
        terminated, non-blank nested part, in document order
    """
    log = get_logger(logger, __name__)
    primary, *segments = message.split(BEGIN_NESTED_COMMIT)

    parts: list[CommitPart] = []
    if primary.strip():
        parts.append(CommitPart(primary.strip()))

    for segment in segments:
        end = segment.find(END_NESTED_COMMIT)
        if end == -1:
            log.warning("unterminated_nested_commit", segment=segment)
            continue
        nested = segment[:end].strip()
        if nested:
            parts.append(CommitPart(nested, is_nested=True))

    return parts
