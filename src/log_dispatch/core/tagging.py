"""Level tags embedded in message text.

Messages carry their severity as a leading ``[Level] `` tag. Filters and sinks
that care about the level parse it back out of the text; there is no separate
metadata field.
"""

from __future__ import annotations

from datetime import datetime

from .errors import ParseError
from .models import SeverityLevel

CONSOLE_TIME_FORMAT = "%H:%M:%S"
FILE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_tagged(level: SeverityLevel, body: str) -> str:
    """Return ``body`` prefixed with the canonical ``[Level] `` tag."""
    return f"[{level.value}] {body}"


def split_tag(text: str) -> tuple[str, str] | None:
    """Split a leading ``[token]`` off ``text``.

    Returns ``(token, rest)`` or None when the text does not start with ``[``,
    has no closing ``]``, or the brackets are empty. The token is returned
    as written; it is not checked against the severity scale.
    """
    if not text.startswith("["):
        return None
    end = text.find("]", 1)
    if end <= 1:
        return None
    return text[1:end], text[end + 1 :].lstrip(" ")


def extract_level(text: str) -> SeverityLevel | None:
    """Return the level named by the leading tag, or None if there is none."""
    parts = split_tag(text)
    if parts is None:
        return None
    try:
        return SeverityLevel.parse(parts[0])
    except ParseError:
        return None


def console_line(text: str, *, now: datetime) -> str:
    return f"{now.strftime(CONSOLE_TIME_FORMAT)} {text}"


def file_line(text: str, *, now: datetime) -> str:
    return f"{now.strftime(FILE_TIME_FORMAT)} {text}"
