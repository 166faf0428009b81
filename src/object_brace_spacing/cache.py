"""ParsedFileCache: LRU-backed cache of parsed source files.

Parsing dominates the cost of a check; the rule itself is a linear scan.
Re-checking unchanged text (editor integrations, watch loops, several modes
over one file) is served from memory instead of reparsing.  LRU eviction
happens silently when ``max_size`` is exceeded.

Each ``ParsedFileCache`` instance owns its own ``LRUCache``; there is no
class-level shared state.

Example::

    from object_brace_spacing.cache import ParsedFileCache

    cache = ParsedFileCache(max_size=64)
    first = cache.get("var x = {a: 1};")
    again = cache.get("var x = {a: 1};")
    assert first is again
"""

from __future__ import annotations

from collections.abc import Callable

from cachetools import LRUCache

from object_brace_spacing.hosts.esprima import EsprimaFile
from object_brace_spacing.protocols import ParsedFile

__all__ = ["ParsedFileCache"]

Parser = Callable[[str, str], ParsedFile]


def _parse_with_esprima(source: str, source_type: str) -> ParsedFile:
    return EsprimaFile(source, source_type=source_type)


class ParsedFileCache:
    """LRU cache from ``(source, source_type)`` to a parsed file.

    Args:
        parser:   Callable ``(source, source_type) -> ParsedFile``.  Defaults
            to an ``EsprimaFile`` factory.
        max_size: Maximum number of parsed files held.  Defaults to 128.
    """

    def __init__(self, parser: Parser | None = None, max_size: int = 128) -> None:
        self._parser: Parser = parser if parser is not None else _parse_with_esprima
        self._cache: LRUCache[tuple[str, str], ParsedFile] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, source: str, source_type: str = "script") -> ParsedFile:
        """Return the parsed file for ``source``, parsing only on a miss.

        Parse failures propagate and are not cached.
        """
        key = (source, source_type)
        parsed = self._cache.get(key)
        if parsed is None:
            parsed = self._parser(source, source_type)
            self._cache[key] = parsed
        return parsed

    def clear(self) -> None:
        self._cache.clear()
