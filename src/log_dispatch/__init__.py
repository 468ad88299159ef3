"""Structured logging pipeline.

Messages tagged with a severity level pass through an ordered chain of
admission filters and, when admitted, are fanned out to independent sinks.
"""

from __future__ import annotations

from .core.config import DispatcherConfig, build_dispatcher, load_config
from .core.diagnostics import configure_logging
from .core.dispatcher import Dispatcher
from .core.errors import (
    ConfigurationError,
    DeliveryFailure,
    LogDispatchError,
    ParseError,
    PatternError,
)
from .core.filters import (
    AdmissionFilter,
    AllFilters,
    MinimumLevelFilter,
    PatternFilter,
    SubstringFilter,
)
from .core.models import DispatchResult, SeverityLevel
from .core.settings import DispatchSettings, resolve_settings
from .core.sinks import ConsoleSink, FileSink, NetworkSink, OutputSink, SystemLogSink
from .core.tagging import extract_level, format_tagged

__all__ = [
    "AdmissionFilter",
    "AllFilters",
    "ConfigurationError",
    "ConsoleSink",
    "DeliveryFailure",
    "DispatchResult",
    "DispatchSettings",
    "Dispatcher",
    "DispatcherConfig",
    "FileSink",
    "LogDispatchError",
    "MinimumLevelFilter",
    "NetworkSink",
    "OutputSink",
    "ParseError",
    "PatternError",
    "PatternFilter",
    "SeverityLevel",
    "SubstringFilter",
    "SystemLogSink",
    "build_dispatcher",
    "configure_logging",
    "extract_level",
    "format_tagged",
    "load_config",
    "resolve_settings",
]
