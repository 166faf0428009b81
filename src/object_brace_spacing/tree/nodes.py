"""Token, SyntaxNode and Position dataclasses for parsed JavaScript files.

These are the immutable shapes the checker reads.  Hosts (see
``object_brace_spacing.hosts``) build them once per file from whatever their
parser produces; nothing mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["NodeType", "Position", "SyntaxNode", "Token", "TokenType"]


class TokenType(StrEnum):
    """Token kinds as reported by ESTree-style tokenizers."""

    BOOLEAN = "Boolean"
    EOF = "EOF"
    IDENTIFIER = "Identifier"
    KEYWORD = "Keyword"
    NULL = "Null"
    NUMERIC = "Numeric"
    PUNCTUATOR = "Punctuator"
    STRING = "String"
    REGULAR_EXPRESSION = "RegularExpression"
    TEMPLATE = "Template"


class NodeType(StrEnum):
    """The syntax node kinds the checker asks its host for."""

    OBJECT_EXPRESSION = "ObjectExpression"


@dataclass(frozen=True, slots=True)
class Position:
    """A human-readable source location.

    Attributes:
        line:   1-based line number.
        column: 0-based column within the line.
    """

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of a source file.

    Attributes:
        type:  Token kind, e.g. ``"Punctuator"`` or ``"Identifier"``.
        value: Literal source text of the token.
        range: Half-open ``(start, end)`` character offsets into the source.
        loc:   Location of the token's first character.
    """

    type: str
    value: str
    range: tuple[int, int]
    loc: Position


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """A syntax tree node reduced to what the checker needs.

    Attributes:
        type:  ESTree node type, e.g. ``"ObjectExpression"``.
        range: Half-open ``(start, end)`` character offsets.  For object
               literals, ``start`` is the ``{`` and ``end - 1`` the ``}``.
    """

    type: str
    range: tuple[int, int]
