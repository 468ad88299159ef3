"""Admit-then-fan-out dispatcher.

A message is checked against every filter in order. If all of them admit it,
it is handed to every sink in order. A sink that raises is reported and
skipped; the remaining sinks still run and nothing reaches the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from .errors import ConfigurationError, DeliveryFailure
from .filters import AdmissionFilter, AllFilters
from .models import DispatchResult, SeverityLevel
from .settings import resolve_settings
from .sinks import AsyncOutputSink, DeliveringSink, OutputSink, sink_name
from .tagging import format_tagged

logger = logging.getLogger(__name__)


def _report(sink: OutputSink, exc: BaseException) -> DeliveryFailure:
    failure = DeliveryFailure(sink_name(sink), exc)
    logger.error("Error in sink %s: %s", failure.sink, exc)
    return failure


class Dispatcher:
    """Route messages through filters to sinks."""

    def __init__(
        self,
        filters: Iterable[AdmissionFilter] = (),
        sinks: Iterable[OutputSink] = (),
        *,
        max_concurrency: int | None = None,
    ) -> None:
        self._filters: list[AdmissionFilter] = list(filters)
        self._sinks: list[OutputSink] = list(sinks)
        if max_concurrency is None:
            max_concurrency = resolve_settings().max_concurrency
        elif max_concurrency < 1:
            raise ConfigurationError("max_concurrency must be >= 1")
        self._max_concurrency = max_concurrency

    def __repr__(self) -> str:
        return f"Dispatcher(filters={self._filters!r}, sinks={self._sinks!r})"

    @property
    def filters(self) -> tuple[AdmissionFilter, ...]:
        return tuple(self._filters)

    @property
    def sinks(self) -> tuple[OutputSink, ...]:
        return tuple(self._sinks)

    def add_filter(self, f: AdmissionFilter) -> None:
        """Append a filter; it runs after the existing ones."""
        self._filters.append(f)

    def add_sink(self, sink: OutputSink) -> None:
        """Append a sink; it receives messages after the existing ones."""
        self._sinks.append(sink)

    def admits(self, text: str) -> bool:
        """Return True if every filter admits ``text``.

        No filters means no restriction.
        """
        return AllFilters(self._filters).match(text)

    def dispatch(self, text: str) -> DispatchResult:
        """Filter ``text`` and deliver it to every sink, one after another."""
        if not self.admits(text):
            return DispatchResult(text=text, admitted=False)

        sinks = list(self._sinks)
        failures: list[DeliveryFailure] = []
        for sink in sinks:
            try:
                if isinstance(sink, DeliveringSink):
                    sink.deliver(text)
                else:
                    sink.handle(text)
            except Exception as e:
                failures.append(_report(sink, e))

        return DispatchResult(
            text=text, admitted=True, attempted=len(sinks), failures=tuple(failures)
        )

    def log(self, text: str) -> None:
        """Filter and deliver ``text``. Never raises for filter or sink faults."""
        self.dispatch(text)

    async def adispatch(self, text: str) -> DispatchResult:
        """Like ``dispatch`` but delivers to all sinks concurrently.

        Sinks with an ``adeliver`` or ``ahandle`` coroutine are awaited
        directly; others run in a worker thread. At most ``max_concurrency``
        deliveries are in flight. Failures are collected in registration order.
        """
        if not self.admits(text):
            return DispatchResult(text=text, admitted=False)

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def deliver(sink: OutputSink) -> None:
            async with semaphore:
                if isinstance(sink, DeliveringSink):
                    await sink.adeliver(text)
                elif isinstance(sink, AsyncOutputSink):
                    await sink.ahandle(text)
                else:
                    await asyncio.to_thread(sink.handle, text)

        sinks = list(self._sinks)
        outcomes = await asyncio.gather(
            *(deliver(sink) for sink in sinks), return_exceptions=True
        )

        failures: list[DeliveryFailure] = []
        for sink, outcome in zip(sinks, outcomes):
            if isinstance(outcome, Exception):
                failures.append(_report(sink, outcome))
            elif isinstance(outcome, BaseException):
                # cancellation and interpreter exits are not delivery failures
                raise outcome

        return DispatchResult(
            text=text, admitted=True, attempted=len(sinks), failures=tuple(failures)
        )

    async def alog(self, text: str) -> None:
        """Async counterpart of ``log``."""
        await self.adispatch(text)

    def trace(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.TRACE, message))

    def debug(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.DEBUG, message))

    def info(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.INFO, message))

    def warning(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.WARNING, message))

    def error(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.ERROR, message))

    def critical(self, message: str) -> None:
        self.log(format_tagged(SeverityLevel.CRITICAL, message))
