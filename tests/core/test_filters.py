from __future__ import annotations

import logging

import pytest

from log_dispatch.core.errors import ParseError, PatternError
from log_dispatch.core.filters import (
    AllFilters,
    MinimumLevelFilter,
    PatternFilter,
    SubstringFilter,
)
from log_dispatch.core.models import SeverityLevel


def test_substring_filter_is_case_sensitive() -> None:
    assert SubstringFilter("User").match("User admin logged in")
    assert not SubstringFilter("user").match("User admin logged in")
    assert not SubstringFilter("User").match("System started")


def test_empty_substring_matches_everything() -> None:
    assert SubstringFilter("").match("")
    assert SubstringFilter("").match("anything at all")


def test_pattern_filter_searches_anywhere() -> None:
    f = PatternFilter(r"error|warning", case_insensitive=True)
    assert f.match("[Error] Module failure")
    assert f.match("[Warning] disk almost full")
    assert not f.match("[Info] all good")


def test_pattern_filter_case_sensitive_by_default() -> None:
    f = PatternFilter(r"error")
    assert f.match("an error occurred")
    assert not f.match("[Error] Module failure")


def test_pattern_filter_rejects_bad_syntax_at_construction() -> None:
    with pytest.raises(PatternError, match="Invalid pattern"):
        PatternFilter("(unclosed")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[Info] x", False),
        ("[Debug] x", False),
        ("[Warning] x", True),
        ("[Error] x", True),
        ("[CRITICAL] x", True),
        ("[warning] lowercase tag", True),
        ("not tagged", False),
        ("[] empty tag", False),
        ("[Error no closing bracket", False),
        ("]Error[ reversed", False),
        ("prefix [Error] not at start", False),
        ("[Fatal] unknown name", False),
        ("", False),
    ],
)
def test_minimum_level_filter(text: str, expected: bool) -> None:
    assert MinimumLevelFilter(SeverityLevel.WARNING).match(text) is expected


def test_minimum_level_filter_accepts_level_name() -> None:
    f = MinimumLevelFilter("info")
    assert f.threshold is SeverityLevel.INFO
    assert f.match("[Info] started")
    assert not f.match("[Trace] noise")


def test_minimum_level_filter_unknown_threshold_raises() -> None:
    with pytest.raises(ParseError):
        MinimumLevelFilter("loud")


def test_all_filters_short_circuits_in_order(recording_filter) -> None:
    seen: list[str] = []
    chain = AllFilters(
        [
            recording_filter(True, "first", seen),
            recording_filter(False, "second", seen),
            recording_filter(True, "third", seen),
        ]
    )

    assert not chain.match("anything")
    assert seen == ["first", "second"]


def test_all_filters_empty_admits() -> None:
    assert AllFilters([]).match("untagged text")


def test_all_filters_treats_raising_filter_as_rejection(
    caplog: pytest.LogCaptureFixture,
) -> None:
    class Broken:
        def match(self, text: str) -> bool:
            raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        assert not AllFilters([Broken()]).match("[Error] x")

    assert "boom" in caplog.text


def test_minimum_level_filter_non_string_threshold_raises() -> None:
    with pytest.raises(ParseError):
        MinimumLevelFilter(None)  # type: ignore[arg-type]
