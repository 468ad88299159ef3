"""Diagnostic channel setup.

Sink and filter faults are reported through the stdlib ``logging`` loggers of
this package, never through the sinks themselves. Applications that already
configure logging need nothing from here.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LOG_DISPATCH_LOG_LEVEL"


def configure_logging(level: str | int | None = None) -> None:
    """Send diagnostics to stderr at ``level`` (env override, default WARNING)."""
    if level is None:
        level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
