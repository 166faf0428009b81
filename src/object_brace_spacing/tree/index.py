"""TokenIndex: random-access token sequence with lookup by start offset.

Token start offsets are strictly increasing, so they are kept in a numpy
array and resolved with ``np.searchsorted`` instead of a per-file dict.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

import numpy as np

from object_brace_spacing.tree.nodes import Token

__all__ = ["TokenIndex"]


class TokenIndex(Sequence[Token]):
    """An immutable, indexable sequence of tokens.

    Example::

        index = TokenIndex(tokens)
        pos = index.pos_by_range_start(node.range[0])
        opening, following = index[pos], index[pos + 1]
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._starts: np.ndarray = np.fromiter(
            (token.range[0] for token in self._tokens),
            dtype=np.int64,
            count=len(self._tokens),
        )

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Token]: ...

    def __getitem__(self, index: int | slice) -> Token | Sequence[Token]:
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def pos_by_range_start(self, offset: int) -> int:
        """Return the index of the token whose range starts at ``offset``.

        Raises:
            LookupError: If no token starts exactly at ``offset``.
        """
        pos = int(np.searchsorted(self._starts, offset, side="left"))
        if pos >= len(self._tokens) or int(self._starts[pos]) != offset:
            msg = f"no token starts at offset {offset}"
            raise LookupError(msg)
        return pos
