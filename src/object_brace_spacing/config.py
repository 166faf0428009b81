"""BracketSpacingMode and RuleConfig for the object-bracket spacing rule.

BracketSpacingMode is a closed two-variant StrEnum: ``all`` requires interior
spacing on every non-empty object literal, ``allButNested`` lets a closing
brace sit directly against another closing brace.  Option values are
validated and converted exactly once, here, so the checking path never has
to look at raw strings again.

RuleConfig can be loaded from a linter options mapping (for example a parsed
``.jscsrc``) with :func:`load_options`, or straight from a JSON file with
:func:`load_config_file`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

__all__ = [
    "OPTION_NAME",
    "BracketSpacingMode",
    "ConfigError",
    "RuleConfig",
    "load_config_file",
    "load_options",
    "parse_mode",
]

OPTION_NAME = "requireSpacesInsideObjectBrackets"

_INVALID_MODE_MSG = (
    f"{OPTION_NAME} option requires string value 'all' or 'allButNested'"
)


class ConfigError(ValueError):
    """Raised when the rule is given an unrecognised option value."""


class BracketSpacingMode(StrEnum):
    """Which object literals must carry interior spacing.

    - ALL:            Every non-empty literal, ``{ a: { b: 1 } }``.
    - ALL_BUT_NESTED: As ALL, but ``}}`` is allowed, ``{ a: { b: 1 }}``.
    """

    ALL = "all"
    ALL_BUT_NESTED = "allButNested"


def parse_mode(value: Any) -> BracketSpacingMode:
    """Convert a raw option value into a BracketSpacingMode.

    Args:
        value: The option value as read from configuration.  Only the exact
            strings ``"all"`` and ``"allButNested"`` are accepted (members of
            BracketSpacingMode are strings and pass too).

    Returns:
        The matching BracketSpacingMode member.

    Raises:
        ConfigError: If value is not one of the two accepted strings.
    """
    if not isinstance(value, str):
        raise ConfigError(_INVALID_MODE_MSG)
    try:
        return BracketSpacingMode(value)
    except ValueError:
        raise ConfigError(_INVALID_MODE_MSG) from None


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Immutable configuration for one checking run.

    Attributes:
        mode: Spacing mode.  Raw strings are accepted and converted.
    """

    mode: BracketSpacingMode = BracketSpacingMode.ALL

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to store the converted member
        object.__setattr__(self, "mode", parse_mode(self.mode))


def load_options(options: Mapping[str, Any]) -> RuleConfig | None:
    """Read the rule's configuration out of a linter options mapping.

    Args:
        options: Mapping of option names to values, e.g. a parsed ``.jscsrc``.

    Returns:
        A RuleConfig, or None when the rule is absent or explicitly disabled
        with a ``null`` value.

    Raises:
        ConfigError: If the rule's value is present but invalid.
    """
    value = options.get(OPTION_NAME)
    if value is None:
        return None
    return RuleConfig(mode=parse_mode(value))


def load_config_file(path: str | Path) -> RuleConfig | None:
    """Load the rule's configuration from a JSON options file.

    Raises:
        ConfigError: If the file does not hold a JSON object, or the rule's
            value is invalid.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON: {exc.msg} (line {exc.lineno})"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path}: expected a JSON object at top level, got {type(data).__name__}"
        raise ConfigError(msg)
    return load_options(data)
