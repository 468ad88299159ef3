"""Core data models for the dispatch pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import DeliveryFailure, ParseError


class SeverityLevel(str, Enum):
    """Severity scale, ordered from least to most severe.

    Values are the canonical tag spellings. Only the relative order of the
    members is meaningful; comparisons use declaration order, not the string
    values.
    """

    TRACE = "Trace"
    DEBUG = "Debug"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        """Position of the level on the scale (TRACE is 0)."""
        return _RANKS[self]

    @property
    def syslog_priority(self) -> str:
        """Name of the matching priority in the platform ``syslog`` module."""
        return _SYSLOG_PRIORITIES[self]

    @classmethod
    def parse(cls, token: str) -> SeverityLevel:
        """Parse a level name case-insensitively."""
        if not isinstance(token, str):
            raise ParseError(f"Severity level must be a name, got {token!r}")
        key = token.strip().upper()
        try:
            return cls[key]
        except KeyError as e:
            valid = ", ".join(level.value for level in cls)
            raise ParseError(f"Unknown severity level {token!r}. Valid values: {valid}") from e

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {level: i for i, level in enumerate(SeverityLevel)}

_SYSLOG_PRIORITIES = {
    SeverityLevel.TRACE: "LOG_DEBUG",
    SeverityLevel.DEBUG: "LOG_DEBUG",
    SeverityLevel.INFO: "LOG_INFO",
    SeverityLevel.WARNING: "LOG_WARNING",
    SeverityLevel.ERROR: "LOG_ERR",
    SeverityLevel.CRITICAL: "LOG_CRIT",
}


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of one message passing through a dispatcher."""

    text: str
    admitted: bool
    attempted: int = 0
    failures: tuple[DeliveryFailure, ...] = ()

    @property
    def delivered(self) -> int:
        """Number of sinks that completed without raising."""
        return self.attempted - len(self.failures)
