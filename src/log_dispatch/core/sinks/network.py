"""TCP sink: one connection per message."""

from __future__ import annotations

import asyncio
import logging
import socket
from dataclasses import dataclass

from ..settings import resolve_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NetworkSink:
    """Send each message as a single line over a fresh TCP connection.

    ``timeout`` bounds connect, write and close; None means the configured
    default, read once at construction (see ``resolve_settings``). ``handle``
    reports failures on the diagnostic logger, ``deliver`` raises them.
    Nothing is retried.
    """

    host: str
    port: int
    timeout: float | None = None
    line_ending: str = "\n"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.timeout is None:
            object.__setattr__(self, "timeout", resolve_settings().network_timeout)

    def _payload(self, text: str) -> bytes:
        return (text + self.line_ending).encode(self.encoding)

    def deliver(self, text: str) -> None:
        """Connect, send the line, close. Raises OSError on failure."""
        with socket.create_connection((self.host, self.port), timeout=self.timeout) as conn:
            conn.sendall(self._payload(text))

    async def adeliver(self, text: str) -> None:
        """Async ``deliver``; every step is bounded by ``timeout``."""
        writer: asyncio.StreamWriter | None = None
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
            writer.write(self._payload(text))
            await asyncio.wait_for(writer.drain(), timeout=self.timeout)
            writer.close()
            await asyncio.wait_for(writer.wait_closed(), timeout=self.timeout)
        except BaseException:
            # a graceful close would wait on the unsent buffer
            if writer is not None:
                writer.transport.abort()
            raise

    def handle(self, text: str) -> None:
        """Send one line, reporting failures instead of raising."""
        try:
            self.deliver(text)
        except OSError as e:
            logger.error("NetworkSink could not send to %s:%s: %s", self.host, self.port, e)

    async def ahandle(self, text: str) -> None:
        """Async variant of ``handle``."""
        try:
            await self.adeliver(text)
        except OSError as e:
            # TimeoutError is an OSError subclass
            logger.error("NetworkSink could not send to %s:%s: %s", self.host, self.port, e)
