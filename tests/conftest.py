"""Shared fixtures: a parser-free ParsedFile for checker tests.

``FakeFile`` tokenizes a small JavaScript subset with a regex and treats
every ``{ ... }`` pair as an object literal, which is all the checker tests
need (their fixtures only contain object literals).  Nodes are yielded in
order of their opening brace, i.e. outer before inner, siblings left to
right.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

import pytest

from object_brace_spacing.tree import Position, SyntaxNode, Token, TokenIndex

_TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<Keyword>\b(?:var|let|const|return|function)\b)"
    r"|(?P<Identifier>[A-Za-z_$][\w$]*)"
    r"|(?P<Numeric>\d+(?:\.\d+)?)"
    r"|(?P<String>'[^']*'|\"[^\"]*\")"
    r"|(?P<Punctuator>[{}()\[\];:,=.+\-*/])"
)


def tokenize(source: str) -> list[Token]:
    tokens: list[Token] = []
    line, line_start = 1, 0
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup
        assert kind is not None
        if kind != "ws":
            tokens.append(
                Token(
                    type=kind,
                    value=match.group(),
                    range=(match.start(), match.end()),
                    loc=Position(line=line, column=match.start() - line_start),
                )
            )
        for offset, char in enumerate(match.group()):
            if char == "\n":
                line += 1
                line_start = match.start() + offset + 1
    return tokens


class FakeFile:
    """Minimal ParsedFile over ``tokenize`` output."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens = TokenIndex(tokenize(source))
        self._objects = self._match_braces()

    def _match_braces(self) -> list[SyntaxNode]:
        stack: list[int] = []
        nodes: list[SyntaxNode] = []
        for token in self._tokens:
            if token.type != "Punctuator":
                continue
            if token.value == "{":
                stack.append(token.range[0])
            elif token.value == "}":
                start = stack.pop()
                nodes.append(SyntaxNode("ObjectExpression", (start, token.range[1])))
        nodes.sort(key=lambda node: node.range[0])
        return nodes

    def iterate_nodes_by_type(self, node_type: str) -> Iterator[SyntaxNode]:
        if node_type == "ObjectExpression":
            yield from self._objects

    def get_tokens(self) -> TokenIndex:
        return self._tokens

    def get_token_pos_by_range_start(self, offset: int) -> int:
        return self._tokens.pos_by_range_start(offset)


@pytest.fixture
def make_file() -> Callable[[str], FakeFile]:
    """Return a factory building a FakeFile from source text."""
    return FakeFile
