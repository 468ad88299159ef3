"""Admission filter interface."""

from __future__ import annotations

from typing import Protocol


class AdmissionFilter(Protocol):
    """Filter interface: return True to admit a message, False to reject it."""

    def match(self, text: str) -> bool:
        """Decide whether ``text`` may reach the sinks."""
        ...
