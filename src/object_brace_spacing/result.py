"""Violation dataclass and the Errors collector.

Errors is the concrete ErrorSink: the checker appends to it, reporters read
from it.  Violations keep discovery order.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from object_brace_spacing.config import OPTION_NAME

if TYPE_CHECKING:
    from object_brace_spacing.tree.nodes import Position

__all__ = ["Errors", "Violation"]


@dataclass(frozen=True, slots=True)
class Violation:
    """One reported spacing defect.

    Attributes:
        message:  Human-readable description of the defect.
        line:     1-based line of the offending token.
        column:   0-based column of the offending token.
        rule:     Option name of the rule that reported it.
        filename: Source file name, or None for in-memory input.
    """

    message: str
    line: int
    column: int
    rule: str = OPTION_NAME
    filename: str | None = None

    def format(self) -> str:
        name = self.filename if self.filename is not None else "<input>"
        return f"{name}:{self.line}:{self.column}: [{self.rule}] {self.message}"


class Errors:
    """Ordered, append-only collection of violations for one file."""

    def __init__(self, rule: str = OPTION_NAME, filename: str | None = None) -> None:
        self.rule = rule
        self.filename = filename
        self._violations: list[Violation] = []

    def add(self, message: str, location: Position) -> None:
        self._violations.append(
            Violation(
                message=message,
                line=location.line,
                column=location.column,
                rule=self.rule,
                filename=self.filename,
            )
        )

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    def is_empty(self) -> bool:
        return not self._violations

    def explain(self) -> str:
        """Return every violation formatted on its own line."""
        return "\n".join(violation.format() for violation in self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self._violations)

    def __len__(self) -> int:
        return len(self._violations)
