"""Runtime settings with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .errors import ConfigurationError

NETWORK_TIMEOUT_ENV = "LOG_DISPATCH_NETWORK_TIMEOUT"
MAX_CONCURRENCY_ENV = "LOG_DISPATCH_MAX_CONCURRENCY"


@dataclass(frozen=True, slots=True)
class DispatchSettings:
    network_timeout: float = 5.0  # seconds, connect and write
    max_concurrency: int = 8  # sinks in flight per async dispatch


def resolve_settings(settings: DispatchSettings | None = None) -> DispatchSettings:
    """Return settings with optional env overrides applied."""
    if settings is None:
        settings = DispatchSettings()

    env = os.getenv(NETWORK_TIMEOUT_ENV)
    if env:
        try:
            timeout = float(env)
        except ValueError as exc:
            raise ConfigurationError(f"{NETWORK_TIMEOUT_ENV} must be a number") from exc
        if timeout <= 0:
            raise ConfigurationError(f"{NETWORK_TIMEOUT_ENV} must be > 0")
        settings = replace(settings, network_timeout=timeout)

    env = os.getenv(MAX_CONCURRENCY_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ConfigurationError(f"{MAX_CONCURRENCY_ENV} must be an integer") from exc
        if value < 1:
            raise ConfigurationError(f"{MAX_CONCURRENCY_ENV} must be >= 1")
        settings = replace(settings, max_concurrency=value)

    return settings
