"""Declarative dispatcher configuration.

A config document lists filters and sinks by ``kind``::

    {
      "filters": [{"kind": "level", "threshold": "info"},
                  {"kind": "pattern", "pattern": "error|warning", "case_insensitive": true}],
      "sinks": [{"kind": "console"}, {"kind": "file", "path": "app.log"}]
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .dispatcher import Dispatcher
from .errors import ConfigurationError
from .filters import AdmissionFilter, MinimumLevelFilter, PatternFilter, SubstringFilter
from .sinks import ConsoleSink, FileSink, NetworkSink, OutputSink, SystemLogSink


class _Spec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class SubstringFilterSpec(_Spec):
    kind: Literal["substring"] = "substring"
    pattern: str = Field(description="Case-sensitive substring to require.")

    def build(self) -> AdmissionFilter:
        return SubstringFilter(self.pattern)


class PatternFilterSpec(_Spec):
    kind: Literal["pattern"] = "pattern"
    pattern: str = Field(description="Regular expression searched anywhere in the text.")
    case_insensitive: bool = False

    def build(self) -> AdmissionFilter:
        return PatternFilter(self.pattern, case_insensitive=self.case_insensitive)


class LevelFilterSpec(_Spec):
    kind: Literal["level"] = "level"
    threshold: str = Field(description="Minimum level name, case-insensitive.")

    def build(self) -> AdmissionFilter:
        return MinimumLevelFilter(self.threshold)


class ConsoleSinkSpec(_Spec):
    kind: Literal["console"] = "console"

    def build(self) -> OutputSink:
        return ConsoleSink()


class FileSinkSpec(_Spec):
    kind: Literal["file"] = "file"
    path: str
    encoding: str = "utf-8"

    def build(self) -> OutputSink:
        return FileSink(Path(self.path), encoding=self.encoding)


class NetworkSinkSpec(_Spec):
    kind: Literal["network"] = "network"
    host: str
    port: int = Field(ge=1, le=65535)
    timeout: float | None = Field(default=None, gt=0)
    line_ending: str = "\n"

    def build(self) -> OutputSink:
        return NetworkSink(
            self.host, self.port, timeout=self.timeout, line_ending=self.line_ending
        )


class SystemLogSinkSpec(_Spec):
    kind: Literal["syslog"] = "syslog"
    ident: str = "log_dispatch"
    use_platform: bool | None = None

    def build(self) -> OutputSink:
        return SystemLogSink(ident=self.ident, use_platform=self.use_platform)


FilterSpec = Annotated[
    Union[SubstringFilterSpec, PatternFilterSpec, LevelFilterSpec],
    Field(discriminator="kind"),
]
SinkSpec = Annotated[
    Union[ConsoleSinkSpec, FileSinkSpec, NetworkSinkSpec, SystemLogSinkSpec],
    Field(discriminator="kind"),
]


class DispatcherConfig(_Spec):
    filters: list[FilterSpec] = Field(default_factory=list)
    sinks: list[SinkSpec] = Field(default_factory=list)
    max_concurrency: int | None = Field(default=None, ge=1)


def parse_config(data: DispatcherConfig | Mapping[str, Any]) -> DispatcherConfig:
    """Validate a mapping into a DispatcherConfig."""
    if isinstance(data, DispatcherConfig):
        return data
    try:
        return DispatcherConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid dispatcher config: {e}") from e


def load_config(path: str | Path) -> DispatcherConfig:
    """Read a JSON config document from ``path``."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config {p}: {e}") from e
    try:
        return DispatcherConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid dispatcher config {p}: {e}") from e


def build_dispatcher(config: DispatcherConfig | Mapping[str, Any]) -> Dispatcher:
    """Construct filters and sinks in document order and wire a Dispatcher."""
    cfg = parse_config(config)
    return Dispatcher(
        filters=[spec.build() for spec in cfg.filters],
        sinks=[spec.build() for spec in cfg.sinks],
        max_concurrency=cfg.max_concurrency,
    )
