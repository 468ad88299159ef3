"""Console sink."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from ..tagging import console_line


@dataclass(frozen=True, slots=True)
class ConsoleSink:
    """Write 'HH:MM:SS text' lines to a stream (stdout by default).

    Write errors are not caught here.
    """

    stream: TextIO | None = field(default=None, repr=False)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    def handle(self, text: str) -> None:
        """Write one timestamped line."""
        out = self.stream if self.stream is not None else sys.stdout
        out.write(console_line(text, now=self.clock()) + "\n")
        out.flush()
