"""System log sink."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TextIO

from ..models import SeverityLevel
from ..tagging import console_line, extract_level

try:
    import syslog
except ImportError:  # not available on Windows
    syslog = None

# openlog() state is process-wide; guard it and only reopen when the ident changes
_syslog_lock = threading.Lock()
_open_ident: str | None = None


def _send_to_syslog(ident: str, priority: int, text: str) -> None:
    global _open_ident
    with _syslog_lock:
        if _open_ident != ident:
            syslog.openlog(ident)
            _open_ident = ident
        syslog.syslog(priority, text)


@dataclass(frozen=True, slots=True)
class SystemLogSink:
    """Pass messages to the platform syslog facility.

    Where there is no syslog module (or ``use_platform`` is False) the text is
    written to a console stream as 'HH:MM:SS [Syslog] text' instead. Callers
    should treat this as one more best-effort text sink.
    """

    ident: str = "log_dispatch"
    use_platform: bool | None = None
    stream: TextIO | None = field(default=None, repr=False)
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    @property
    def platform_available(self) -> bool:
        if self.use_platform is False:
            return False
        return syslog is not None

    def handle(self, text: str) -> None:
        """Send one message to syslog or the fallback stream."""
        if self.platform_available:
            level = extract_level(text) or SeverityLevel.INFO
            _send_to_syslog(self.ident, getattr(syslog, level.syslog_priority), text)
            return

        out = self.stream if self.stream is not None else sys.stdout
        out.write(console_line(f"[Syslog] {text}", now=self.clock()) + "\n")
        out.flush()
