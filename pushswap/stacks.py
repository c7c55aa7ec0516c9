"""Two-stack machine with the push_swap instruction set."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class PushSwap:
    """Stacks ``a`` and ``b`` (top at index 0) and the log of applied instructions.

    Single-stack instructions are logged only when they change something.
    ``sb`` and the combined instructions ``ss``, ``rr`` and ``rrr`` are
    always logged.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def _log_if(self, done: bool, name: str) -> None:
        if done:
            self.ops.append(name)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._log_if(self._swap(self.a), "sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._log_if(self._push(self.b, self.a), "pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._log_if(self._push(self.a, self.b), "pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the first element becomes the last."""
        self._log_if(self._rotate(self.a), "ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards: the first element becomes the last."""
        self._log_if(self._rotate(self.b), "rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.ops.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the last element becomes the first."""
        self._log_if(self._reverse_rotate(self.a), "rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards: the last element becomes the first."""
        self._log_if(self._reverse_rotate(self.b), "rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.ops.append("rrr")