"""SourceChecker: orchestrator that wires ParsedFileCache + BracketSpacingChecker.

This is the wiring layer between the raw rule and the public API.  It turns
source text into an ``Errors`` collection bound to a filename.

Architecture:
- The mode is validated once, in ``__init__``, through
  ``BracketSpacingChecker.configure``.
- Parsed files are cached per instance (``ParsedFileCache``), keyed by the
  source text, so the filename never affects cache hits.
- ``check()`` creates a fresh ``Errors`` per call; nothing leaks between
  files.
"""

from __future__ import annotations

import logging
from typing import Any

from object_brace_spacing.cache import ParsedFileCache, Parser
from object_brace_spacing.checker import BracketSpacingChecker
from object_brace_spacing.config import BracketSpacingMode, RuleConfig
from object_brace_spacing.result import Errors

__all__ = ["SourceChecker"]

logger = logging.getLogger(__name__)


class SourceChecker:
    """Check JavaScript source text for object-bracket spacing.

    Example::

        from object_brace_spacing.linter import SourceChecker

        checker = SourceChecker(mode="allButNested")
        errors = checker.check("var x = { a: { b: 1 }};", filename="x.js")
        assert errors.is_empty()
    """

    def __init__(
        self,
        mode: Any = BracketSpacingMode.ALL,
        max_cache_size: int = 128,
        parser: Parser | None = None,
        source_type: str = "script",
    ) -> None:
        """Initialise the checker.

        Args:
            mode: Spacing mode, ``"all"`` or ``"allButNested"``.
            max_cache_size: Maximum number of parsed files held in the
                per-instance LRU cache.  Defaults to 128.
            parser: Optional ``(source, source_type) -> ParsedFile`` callable.
                Defaults to parsing with esprima.
            source_type: ``"script"`` or ``"module"``.

        Raises:
            ConfigError: If mode is invalid.
        """
        self._rule = BracketSpacingChecker()
        self._rule.configure(mode)
        self._files = ParsedFileCache(parser=parser, max_size=max_cache_size)
        self._source_type = source_type

    @classmethod
    def from_config(cls, config: RuleConfig, **kwargs: Any) -> SourceChecker:
        """Build a checker from a loaded RuleConfig (see ``load_options``)."""
        return cls(mode=config.mode, **kwargs)

    @property
    def mode(self) -> BracketSpacingMode:
        mode = self._rule.mode
        assert mode is not None
        return mode

    @property
    def cache(self) -> ParsedFileCache:
        return self._files

    def check(self, source: str, filename: str | None = None) -> Errors:
        """Parse (or reuse) ``source`` and return its violations.

        Raises:
            ParseError: If the source cannot be parsed.
        """
        parsed = self._files.get(source, self._source_type)
        errors = Errors(rule=self._rule.get_option_name(), filename=filename)
        self._rule.check(parsed, errors)
        if not errors.is_empty():
            logger.debug("%s: %d violation(s)", filename or "<input>", len(errors))
        return errors
