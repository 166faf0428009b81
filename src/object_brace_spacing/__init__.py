"""Object brace spacing - require spaces inside JavaScript object-literal braces."""

from __future__ import annotations

from object_brace_spacing.api import check_file, check_source, is_valid
from object_brace_spacing.checker import BracketSpacingChecker
from object_brace_spacing.config import (
    OPTION_NAME,
    BracketSpacingMode,
    ConfigError,
    RuleConfig,
)
from object_brace_spacing.linter import SourceChecker
from object_brace_spacing.result import Errors, Violation

__version__: str = "0.1.0"
__all__: list[str] = [
    "OPTION_NAME",
    "BracketSpacingChecker",
    "BracketSpacingMode",
    "ConfigError",
    "Errors",
    "RuleConfig",
    "SourceChecker",
    "Violation",
    "check_file",
    "check_source",
    "is_valid",
]
