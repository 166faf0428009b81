"""Tree subpackage: the token and syntax-node shapes the checker consumes.

Re-exports the public API for the tree module:
- Token, SyntaxNode, Position: immutable parsed-file data
- TokenType, NodeType: StrEnums of the kinds the checker inspects
- TokenIndex: token sequence with lookup by start offset
"""

from object_brace_spacing.tree.index import TokenIndex
from object_brace_spacing.tree.nodes import (
    NodeType,
    Position,
    SyntaxNode,
    Token,
    TokenType,
)

__all__ = ["NodeType", "Position", "SyntaxNode", "Token", "TokenIndex", "TokenType"]
