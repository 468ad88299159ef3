"""Append-only file sink."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import aiofiles

from ..tagging import file_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileSink:
    """Append 'YYYY-MM-DD HH:MM:SS text' lines to ``path``.

    The file is opened per call and created if missing. ``handle`` reports
    I/O errors on the diagnostic logger and swallows them; ``deliver`` raises.
    """

    path: Path
    encoding: str = "utf-8"
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def _line(self, text: str) -> str:
        # text mode translates "\n" to the platform newline
        return file_line(text, now=self.clock()) + "\n"

    def deliver(self, text: str) -> None:
        """Append one line to the file, raising OSError on failure."""
        with self.path.open("a", encoding=self.encoding) as f:
            f.write(self._line(text))

    async def adeliver(self, text: str) -> None:
        """Async ``deliver`` using aiofiles."""
        async with aiofiles.open(self.path, mode="a", encoding=self.encoding) as f:
            await f.write(self._line(text))

    def handle(self, text: str) -> None:
        """Append one line to the file."""
        try:
            self.deliver(text)
        except OSError as e:
            logger.error("FileSink could not write to %s: %s", self.path, e)

    async def ahandle(self, text: str) -> None:
        """Append one line to the file without blocking the event loop."""
        try:
            await self.adeliver(text)
        except OSError as e:
            logger.error("FileSink could not write to %s: %s", self.path, e)
