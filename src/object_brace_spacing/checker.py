"""BracketSpacingChecker: requires spaces inside object-literal curly braces.

For every non-empty object literal the token right after ``{`` must be
separated from it, and ``}`` must be separated from the token right before
it.  Empty literals are skipped outright, which also leaves ``{ }`` alone.

Valid for mode ``all``::

    var x = { a: { b: 1 } };

Valid for mode ``allButNested``::

    var x = { a: { b: 1 }};

Invalid in either mode::

    var x = {a: 1};

The per-node decision lives in :func:`check_object_expression`, a pure
function of the node, the token sequence and the mode.  The checker class is
the configure/check shell a linter registers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from object_brace_spacing.config import OPTION_NAME, BracketSpacingMode, parse_mode
from object_brace_spacing.tree.nodes import NodeType, TokenType

if TYPE_CHECKING:
    from object_brace_spacing.protocols import ErrorSink, ParsedFile
    from object_brace_spacing.tree.nodes import Position, SyntaxNode, Token

__all__ = [
    "MISSING_SPACE_AFTER_OPENING",
    "MISSING_SPACE_BEFORE_CLOSING",
    "BracketSpacingChecker",
    "Finding",
    "check_object_expression",
]

logger = logging.getLogger(__name__)

MISSING_SPACE_AFTER_OPENING = "Missing space after opening curly brace"
MISSING_SPACE_BEFORE_CLOSING = "Missing space before closing curly brace"

# (message, location) pair, ready for ErrorSink.add
Finding = tuple[str, "Position"]


def _is_closing_brace(token: Token) -> bool:
    return token.type == TokenType.PUNCTUATOR and token.value == "}"


def check_object_expression(
    node: SyntaxNode,
    tokens: Sequence[Token],
    token_pos: Callable[[int], int],
    mode: BracketSpacingMode,
) -> list[Finding]:
    """Return the spacing findings for a single object literal.

    Args:
        node:      ObjectExpression node; ``range[0]`` is its ``{`` and
                   ``range[1] - 1`` its ``}``.
        tokens:    The file's full token sequence.
        token_pos: Maps a character offset to the index of the token that
                   starts there.
        mode:      Spacing mode.  Under ALL_BUT_NESTED a ``}`` directly
                   preceded by another ``}`` is not reported.

    Returns:
        Zero, one or two findings, opening brace first.
    """
    opening_pos = token_pos(node.range[0])
    opening_bracket = tokens[opening_pos]
    next_token = tokens[opening_pos + 1]

    if _is_closing_brace(next_token):
        return []

    findings: list[Finding] = []

    if opening_bracket.range[1] == next_token.range[0]:
        findings.append((MISSING_SPACE_AFTER_OPENING, next_token.loc))

    closing_pos = token_pos(node.range[1] - 1)
    closing_bracket = tokens[closing_pos]
    prev_token = tokens[closing_pos - 1]

    is_nested = mode is BracketSpacingMode.ALL_BUT_NESTED and _is_closing_brace(
        prev_token
    )

    if closing_bracket.range[0] == prev_token.range[1] and not is_nested:
        findings.append((MISSING_SPACE_BEFORE_CLOSING, closing_bracket.loc))

    return findings


class BracketSpacingChecker:
    """The ``requireSpacesInsideObjectBrackets`` rule.

    Starts unconfigured.  ``configure`` must succeed once before ``check``;
    after that the mode is read-only, so one instance can check many files.

    Example::

        checker = BracketSpacingChecker()
        checker.configure("allButNested")
        errors = Errors(filename="app.js")
        checker.check(EsprimaFile(source), errors)
    """

    def __init__(self) -> None:
        self._mode: BracketSpacingMode | None = None

    @property
    def mode(self) -> BracketSpacingMode | None:
        """The configured mode, or None while unconfigured."""
        return self._mode

    def configure(self, mode: Any) -> None:
        """Validate and store the spacing mode.

        Raises:
            ConfigError: If mode is not ``"all"`` or ``"allButNested"``.
                The previously stored mode, if any, is kept.
        """
        self._mode = parse_mode(mode)

    def get_option_name(self) -> str:
        return OPTION_NAME

    def check(self, file: ParsedFile, errors: ErrorSink) -> None:
        """Report every spacing violation in ``file`` to ``errors``.

        Raises:
            RuntimeError: If called before ``configure``.
        """
        mode = self._mode
        if mode is None:
            msg = f"{OPTION_NAME} must be configured before check()"
            raise RuntimeError(msg)

        tokens = file.get_tokens()
        visited = 0
        reported = 0
        for node in file.iterate_nodes_by_type(NodeType.OBJECT_EXPRESSION):
            visited += 1
            for message, location in check_object_expression(
                node, tokens, file.get_token_pos_by_range_start, mode
            ):
                errors.add(message, location)
                reported += 1

        logger.debug(
            "%s: checked %d object literal(s), %d violation(s)",
            OPTION_NAME,
            visited,
            reported,
        )
