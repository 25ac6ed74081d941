"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections.abc import Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class Stacks:
    """Stacks ``a`` and ``b``, each a list whose top is at index 0.

    Every operation returns its own name, except a push from an empty
    stack, which changes nothing and returns ``None``.
    """

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a = list(a)
        self.b = list(b)

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if stack:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if stack:
            stack.insert(0, stack.pop())

    def sa(self) -> str:
        """Swap the two top elements of a."""
        self._swap(self.a)
        return "sa"

    def sb(self) -> str:
        """Swap the two top elements of b."""
        self._swap(self.b)
        return "sb"

    def ss(self) -> str:
        """Swap the top two of both stacks."""
        self._swap(self.b)
        self._swap(self.a)
        return "ss"

    def pa(self) -> str | None:
        """Move the top of b onto a."""
        if not self.b:
            return None
        self.a.insert(0, self.b.pop(0))
        return "pa"

    def pb(self) -> str | None:
        """Move the top of a onto b."""
        if not self.a:
            return None
        self.b.insert(0, self.a.pop(0))
        return "pb"

    def ra(self) -> str:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        return "ra"

    def rb(self) -> str:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        return "rb"

    def rr(self) -> str:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        return "rr"

    def rra(self) -> str:
        """Move the bottom of a to its top."""
        self._reverse_rotate(self.a)
        return "rra"

    def rrb(self) -> str:
        """Move the bottom of b to its top."""
        self._reverse_rotate(self.b)
        return "rrb"

    def rrr(self) -> str:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        return "rrr"

    def apply(self, name: str) -> str | None:
        """Run the operation called ``name``."""
        if name not in OPERATIONS:
            raise ValueError(f"unknown operation: {name!r}")
        return getattr(self, name)()