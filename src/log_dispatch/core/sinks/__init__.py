"""Output sinks: console, append-only file, TCP and system log."""

from __future__ import annotations

from .base import AsyncOutputSink, DeliveringSink, OutputSink, sink_name
from .console import ConsoleSink
from .file import FileSink
from .network import NetworkSink
from .system import SystemLogSink

__all__ = [
    "AsyncOutputSink",
    "ConsoleSink",
    "DeliveringSink",
    "FileSink",
    "NetworkSink",
    "OutputSink",
    "SystemLogSink",
    "sink_name",
]
