"""LIFO stack of polynomials owned by one calculator run."""

from __future__ import annotations

from typing import Iterator, List

from ..core.poly import Poly
from ..errors import StackUnderflowError


class PolyStack:
    """Growable stack of polynomials; the last pushed element is the top.

    Commands call require(n) before popping anything, so a command that
    fails for lack of operands leaves the stack as it was.
    """

    def __init__(self) -> None:
        self._items: List[Poly] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Poly]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def require(self, n: int) -> None:
        """Raise StackUnderflowError unless at least n polynomials are present."""
        if len(self._items) < n:
            raise StackUnderflowError()

    def push(self, p: Poly) -> None:
        self._items.append(p)

    def pop(self) -> Poly:
        self.require(1)
        return self._items.pop()

    def top(self) -> Poly:
        return self.peek(0)

    def peek(self, depth: int) -> Poly:
        """Return the element ``depth`` places below the top without removing it."""
        self.require(depth + 1)
        return self._items[-1 - depth]

    def clear(self) -> None:
        self._items.clear()
