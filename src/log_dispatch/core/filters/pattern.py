"""Regular-expression filter."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..errors import PatternError


@dataclass(frozen=True, slots=True)
class PatternFilter:
    """Admit messages where ``pattern`` matches anywhere in the text.

    The pattern is compiled once at construction, so bad syntax surfaces as
    a PatternError before the filter is ever used.
    """

    pattern: str
    case_insensitive: bool = False

    _re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.case_insensitive else 0
        try:
            compiled = re.compile(self.pattern, flags)
        except re.error as e:
            raise PatternError(f"Invalid pattern {self.pattern!r}: {e}") from e
        object.__setattr__(self, "_re", compiled)

    def match(self, text: str) -> bool:
        """Return True if the pattern is found in the text."""
        return self._re.search(text) is not None
