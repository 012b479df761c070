"""The two stacks of the push_swap puzzle and the moves allowed on them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its left end.

    Every move that changes the stacks is appended by name to
    ``operations``. A move that cannot apply leaves the stacks alone
    and records nothing.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: Deque[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    def _record(self, name: str) -> None:
        self.operations.append(name)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """Swap the top of both stacks; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the top goes to the bottom."""
        if len(self.a) < 2:
            return
        self.a.rotate(-1)
        self._record("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top goes to the bottom."""
        if len(self.b) < 2:
            return
        self.b.rotate(-1)
        self._record("rb")

    def rr(self) -> None:
        """Rotate both stacks up; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._record("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom comes to the top."""
        if len(self.a) < 2:
            return
        self.a.rotate(1)
        self._record("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom comes to the top."""
        if len(self.b) < 2:
            return
        self.b.rotate(1)
        self._record("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; needs two elements in each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self.a.rotate(1)
        self.b.rotate(1)
        self._record("rrr")