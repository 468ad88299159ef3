"""Error taxonomy for the dispatch pipeline."""

from __future__ import annotations


class LogDispatchError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(LogDispatchError, ValueError):
    """Invalid filter/sink parameters, config documents or settings."""


class ParseError(ConfigurationError):
    """A token does not name a known severity level."""


class PatternError(ConfigurationError):
    """A regular expression could not be compiled."""


class DeliveryFailure(LogDispatchError):
    """A sink could not deliver one message.

    Raised nowhere; instances are built at the dispatch boundary, reported to
    the diagnostic channel and collected in ``DispatchResult.failures``.
    """

    def __init__(self, sink: str, cause: BaseException) -> None:
        super().__init__(f"{sink}: {cause}")
        self.sink = sink
        self.cause = cause
