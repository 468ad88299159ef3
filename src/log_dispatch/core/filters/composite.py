"""Filter composition utilities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .base import AdmissionFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AllFilters:
    """Admit only if every filter admits, checked in order.

    Evaluation stops at the first rejection. A filter that raises counts as
    a rejection and is reported on the diagnostic logger.
    """

    filters: Sequence[AdmissionFilter]

    def match(self, text: str) -> bool:
        """Return True when all configured filters admit the text."""
        for f in self.filters:
            try:
                if not f.match(text):
                    return False
            except Exception as e:
                logger.error("Filter %r failed on %r, rejecting: %s", f, text, e)
                return False
        return True
