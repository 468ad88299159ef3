"""Output sink interfaces."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class OutputSink(Protocol):
    """Sink interface: perform one external effect for an admitted message."""

    def handle(self, text: str) -> None:
        """Deliver ``text``.

        Exceptions may escape; the dispatcher catches them per sink and keeps
        going with the remaining sinks.
        """
        ...


@runtime_checkable
class AsyncOutputSink(Protocol):
    """Sink that can also deliver without blocking the event loop."""

    def handle(self, text: str) -> None: ...

    async def ahandle(self, text: str) -> None: ...


@runtime_checkable
class DeliveringSink(Protocol):
    """Sink whose ``handle`` reports and swallows its own I/O errors.

    ``deliver``/``adeliver`` do the same work but let the error escape, so the
    dispatcher can record it as a failed delivery.
    """

    def handle(self, text: str) -> None: ...

    def deliver(self, text: str) -> None: ...

    async def adeliver(self, text: str) -> None: ...


def sink_name(sink: object) -> str:
    """Identity used when reporting a sink's failures."""
    return repr(sink)
