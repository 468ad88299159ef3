"""Admission filters.

Substring, regular-expression and minimum-level filters plus AND composition.
"""

from __future__ import annotations

from .base import AdmissionFilter
from .composite import AllFilters
from .level import MinimumLevelFilter
from .pattern import PatternFilter
from .substring import SubstringFilter

__all__ = [
    "AdmissionFilter",
    "AllFilters",
    "MinimumLevelFilter",
    "PatternFilter",
    "SubstringFilter",
]
