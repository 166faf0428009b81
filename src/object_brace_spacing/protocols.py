"""ParsedFile and ErrorSink Protocols: the checker's host interface.

The checker never parses source itself.  Anything with the methods below
can feed it, with no inheritance required::

    from object_brace_spacing.protocols import ParsedFile

    class MyFile:
        def iterate_nodes_by_type(self, node_type): ...
        def get_tokens(self): ...
        def get_token_pos_by_range_start(self, offset): ...

    assert isinstance(MyFile(), ParsedFile)  # True: structural conformance
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from object_brace_spacing.tree.nodes import Position, SyntaxNode, Token


@runtime_checkable
class ParsedFile(Protocol):
    """Read-only view of one parsed source file.

    - ``iterate_nodes_by_type`` yields every node of the given ESTree type in
      traversal order (outer before inner, siblings in source order).
    - ``get_tokens`` returns the file's full token sequence.
    - ``get_token_pos_by_range_start`` maps a character offset to the index
      of the token starting there.  It must resolve every brace offset of
      every object literal the file yields.
    """

    def iterate_nodes_by_type(self, node_type: str) -> Iterator[SyntaxNode]: ...

    def get_tokens(self) -> Sequence[Token]: ...

    def get_token_pos_by_range_start(self, offset: int) -> int: ...


@runtime_checkable
class ErrorSink(Protocol):
    """Append-only receiver for reported violations."""

    def add(self, message: str, location: Position) -> None: ...
