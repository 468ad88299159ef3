from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

import pytest

FIXED_NOW = datetime(2025, 12, 30, 8, 12, 4)


@dataclass
class RecordingSink:
    name: str = "recording"
    received: list[str] = field(default_factory=list)

    def handle(self, text: str) -> None:
        self.received.append(text)


@dataclass
class FailingSink:
    name: str = "failing"
    calls: int = 0

    def handle(self, text: str) -> None:
        self.calls += 1
        raise RuntimeError(f"{self.name} is broken")


@dataclass
class RecordingFilter:
    """Filter with a fixed verdict that notes when it was consulted."""

    verdict: bool
    label: str
    seen: list[str]

    def match(self, text: str) -> bool:
        self.seen.append(self.label)
        return self.verdict


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def recording_sink() -> type[RecordingSink]:
    return RecordingSink


@pytest.fixture
def failing_sink() -> type[FailingSink]:
    return FailingSink


@pytest.fixture
def recording_filter() -> type[RecordingFilter]:
    return RecordingFilter
