"""Substring filter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SubstringFilter:
    """Admit messages containing ``pattern`` (case-sensitive)."""

    pattern: str

    def match(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in the text."""
        return self.pattern in text
