"""EsprimaFile: ParsedFile host backed by the esprima-python parser.

Wraps ``esprima.parseScript`` / ``esprima.parseModule`` with a lazy import so
that the base install (no esprima installed) never triggers an
``ImportError`` at module level.  The ``esprima`` package is only required
when ``EsprimaFile`` is *instantiated*.

Install the optional dependency with::

    pip install object-brace-spacing[esprima]

Example::

    from object_brace_spacing.hosts.esprima import EsprimaFile

    file = EsprimaFile("var x = {a: 1};", filename="x.js")
    [node.range for node in file.iterate_nodes_by_type("ObjectExpression")]
    # [(8, 14)]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from object_brace_spacing.tree.index import TokenIndex
from object_brace_spacing.tree.nodes import Position, SyntaxNode, Token

__all__ = ["EsprimaFile", "ParseError"]

logger = logging.getLogger(__name__)

# Node attributes that never hold child syntax nodes.
_NON_CHILD_KEYS = frozenset(
    {
        "type",
        "range",
        "loc",
        "tokens",
        "comments",
        "errors",
        "leadingComments",
        "trailingComments",
        "innerComments",
    }
)


class ParseError(ValueError):
    """Raised when the source cannot be parsed.

    Attributes:
        line:   1-based line of the parse failure, when known.
        column: Column of the parse failure, when known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def _is_node(value: Any) -> bool:
    attrs = getattr(value, "__dict__", None)
    return isinstance(attrs, dict) and isinstance(attrs.get("type"), str)


def _children(node: Any) -> list[Any]:
    """Return the direct child nodes of ``node`` in source order."""
    found: dict[int, Any] = {}
    for key, value in vars(node).items():
        if key in _NON_CHILD_KEYS:
            continue
        candidates = value if isinstance(value, list) else [value]
        for item in candidates:
            # shorthand properties share one node between key and value
            if _is_node(item):
                found.setdefault(id(item), item)
    return sorted(found.values(), key=lambda child: child.range[0])


def _convert_token(raw: Any) -> Token:
    start, end = raw.range
    return Token(
        type=raw.type,
        value=raw.value,
        range=(start, end),
        loc=Position(line=raw.loc.start.line, column=raw.loc.start.column),
    )


class EsprimaFile:
    """A JavaScript source file parsed by esprima, exposed as a ParsedFile.

    Parsing happens once, in ``__init__``.  Tokens are converted to immutable
    ``Token`` objects and the tree is snapshotted into ``SyntaxNode`` lists
    per node type on first request.

    Args:
        source:      JavaScript source text.
        filename:    Name used when reporting; None for in-memory input.
        source_type: ``"script"`` (default) or ``"module"``.

    Raises:
        ImportError: If ``esprima`` is not installed.  The message includes
            the install command.
        ParseError:  If esprima rejects the source.
        ValueError:  If source_type is neither ``"script"`` nor ``"module"``.
    """

    def __init__(
        self,
        source: str,
        filename: str | None = None,
        source_type: str = "script",
    ) -> None:
        try:
            import esprima
        except ImportError as exc:
            raise ImportError(
                "esprima is required for EsprimaFile. "
                "Install it with: pip install object-brace-spacing[esprima]"
            ) from exc

        if source_type == "script":
            parse = esprima.parseScript
        elif source_type == "module":
            parse = esprima.parseModule
        else:
            msg = f"source_type must be 'script' or 'module', got {source_type!r}"
            raise ValueError(msg)

        self.source = source
        self.filename = filename
        self.source_type = source_type

        try:
            program: Any = parse(source, {"range": True, "loc": True, "tokens": True})
        except esprima.Error as exc:
            raise ParseError(
                str(exc),
                line=getattr(exc, "lineNumber", None),
                column=getattr(exc, "column", None),
            ) from exc

        self._program = program
        self._tokens = TokenIndex(_convert_token(raw) for raw in program.tokens)
        self._nodes_by_type: dict[str, list[SyntaxNode]] | None = None
        logger.debug(
            "parsed %s: %d token(s)", filename or "<input>", len(self._tokens)
        )

    # ------------------------------------------------------------------
    # ParsedFile Protocol surface
    # ------------------------------------------------------------------

    def iterate_nodes_by_type(self, node_type: str) -> Iterator[SyntaxNode]:
        """Yield every node of ``node_type``, pre-order, in source order."""
        if self._nodes_by_type is None:
            self._nodes_by_type = self._index_nodes()
        yield from self._nodes_by_type.get(node_type, [])

    def get_tokens(self) -> TokenIndex:
        return self._tokens

    def get_token_pos_by_range_start(self, offset: int) -> int:
        return self._tokens.pos_by_range_start(offset)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _index_nodes(self) -> dict[str, list[SyntaxNode]]:
        by_type: dict[str, list[SyntaxNode]] = {}
        stack: list[Any] = [self._program]
        while stack:
            node = stack.pop()
            start, end = node.range
            by_type.setdefault(node.type, []).append(
                SyntaxNode(type=node.type, range=(start, end))
            )
            # reversed so the leftmost child is popped first
            stack.extend(reversed(_children(node)))
        return by_type
