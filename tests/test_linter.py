"""Tests for SourceChecker, using a parser-free ParsedFile.

Covers:
- Mode validated at construction
- Errors bound to rule name and filename
- Parsed files reused across checks of identical text
- from_config builds an equivalent checker
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from object_brace_spacing.config import BracketSpacingMode, ConfigError, RuleConfig
from object_brace_spacing.linter import SourceChecker


@pytest.fixture
def parser(make_file: Callable[[str], Any]) -> Callable[[str, str], Any]:
    return lambda source, source_type: make_file(source)


class TestSourceChecker:
    def test_invalid_mode_rejected(self, parser: Any) -> None:
        with pytest.raises(ConfigError):
            SourceChecker(mode="strict", parser=parser)

    def test_default_mode_is_all(self, parser: Any) -> None:
        assert SourceChecker(parser=parser).mode is BracketSpacingMode.ALL

    def test_check_reports_with_filename(self, parser: Any) -> None:
        checker = SourceChecker(mode="all", parser=parser)
        errors = checker.check("var x = {a: 1};", filename="x.js")
        assert [v.format() for v in errors] == [
            "x.js:1:9: [requireSpacesInsideObjectBrackets] "
            "Missing space after opening curly brace",
            "x.js:1:13: [requireSpacesInsideObjectBrackets] "
            "Missing space before closing curly brace",
        ]

    def test_all_but_nested(self, parser: Any) -> None:
        checker = SourceChecker(mode="allButNested", parser=parser)
        assert checker.check("var x = { a: { b: 1 }};").is_empty()

    def test_fresh_errors_per_call(self, parser: Any) -> None:
        checker = SourceChecker(parser=parser)
        first = checker.check("var x = {a: 1};", filename="a.js")
        second = checker.check("var x = {a: 1};", filename="b.js")
        assert len(first) == len(second) == 2
        assert {v.filename for v in second} == {"b.js"}

    def test_reuses_parsed_file(self, make_file: Callable[[str], Any]) -> None:
        calls: list[str] = []

        def counting(source: str, source_type: str) -> Any:
            calls.append(source)
            return make_file(source)

        checker = SourceChecker(parser=counting)
        checker.check("var x = { a: 1 };", filename="a.js")
        checker.check("var x = { a: 1 };", filename="b.js")
        assert calls == ["var x = { a: 1 };"]
        assert checker.cache.curr_size == 1

    def test_from_config(self, parser: Any) -> None:
        config = RuleConfig(mode=BracketSpacingMode.ALL_BUT_NESTED)
        checker = SourceChecker.from_config(config, parser=parser)
        assert checker.mode is BracketSpacingMode.ALL_BUT_NESTED
