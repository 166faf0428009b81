"""Public API functions for object-brace-spacing.

This module provides the user-facing functions: check_file, check_source and
is_valid.  Each call creates a fresh BracketSpacingChecker (or
SourceChecker) to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from object_brace_spacing.checker import BracketSpacingChecker
from object_brace_spacing.config import BracketSpacingMode
from object_brace_spacing.linter import SourceChecker
from object_brace_spacing.protocols import ParsedFile
from object_brace_spacing.result import Errors, Violation

__all__ = ["check_file", "check_source", "is_valid"]


def check_file(
    file: ParsedFile,
    mode: Any = BracketSpacingMode.ALL,
    filename: str | None = None,
) -> list[Violation]:
    """Check an already-parsed file.

    Args:
        file:     Any object satisfying the ``ParsedFile`` Protocol.
        mode:     ``"all"`` or ``"allButNested"``.  Defaults to ``"all"``.
        filename: Name attached to each violation.

    Returns:
        The violations in discovery order.

    Raises:
        ConfigError: If mode is invalid.
    """
    checker = BracketSpacingChecker()
    checker.configure(mode)
    errors = Errors(rule=checker.get_option_name(), filename=filename)
    checker.check(file, errors)
    return list(errors)


def check_source(
    source: str,
    mode: Any = BracketSpacingMode.ALL,
    filename: str | None = None,
) -> list[Violation]:
    """Parse JavaScript ``source`` with esprima and check it.

    Returns:
        The violations in discovery order.

    Raises:
        ConfigError: If mode is invalid.
        ParseError:  If the source cannot be parsed.
        ImportError: If the ``esprima`` extra is not installed.
    """
    checker = SourceChecker(mode=mode, max_cache_size=1)
    return list(checker.check(source, filename=filename))


def is_valid(source: str, mode: Any = BracketSpacingMode.ALL) -> bool:
    """Return True if ``source`` has no object-bracket spacing violations."""
    return not check_source(source, mode=mode)
