"""Minimum-level filter."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import SeverityLevel
from ..tagging import extract_level


@dataclass(frozen=True, slots=True)
class MinimumLevelFilter:
    """Admit '[Level] text' messages at or above ``threshold``.

    Untagged text, malformed tags and unknown level names are rejected.
    """

    threshold: SeverityLevel

    def __post_init__(self) -> None:
        if not isinstance(self.threshold, SeverityLevel):
            object.__setattr__(self, "threshold", SeverityLevel.parse(self.threshold))

    def match(self, text: str) -> bool:
        level = extract_level(text)
        if level is None:
            return False
        return level >= self.threshold
