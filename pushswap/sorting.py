"""Strategies that turn stack a into the list of operations that sort it."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .operations import Stacks
from .parsing import INT_MAX


class _Run:
    """A pair of stacks together with the operations applied to them so far."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(values)
        self.ops: list[str] = []

    @property
    def a(self) -> list[int]:
        return self.stacks.a

    @property
    def b(self) -> list[int]:
        return self.stacks.b

    def do(self, *names: str) -> None:
        for name in names:
            self.ops.append(self.stacks.apply(name))


def isqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``; 0 for negatives."""
    return math.isqrt(n) if n > 0 else 0


def digit(n: int, power: int) -> int:
    """The decimal digit of ``n`` at ``10 ** power``, signed like ``n``."""
    if power < 0:
        raise ValueError("power must not be negative")
    sign = -1 if n < 0 else 1
    return sign * (abs(n) % 10 ** (power + 1) // 10**power)


def min_position(values: Iterable[int]) -> int:
    """Index of the first smallest value."""
    values = list(values)
    return values.index(min(values))


def max_position(values: Iterable[int]) -> int:
    """Signed rotation count that brings the largest value to the top.

    A negative result means that many forward rotations, a positive one
    that many reverse rotations.
    """
    values = list(values)
    index = values.index(max(values))
    if index > len(values) // 2:
        index -= len(values)
    return -index


def position_of(values: Iterable[int], target: int) -> int:
    """One-based position of ``target``, or 0 when it is absent."""
    for position, value in enumerate(values, start=1):
        if value == target:
            return position
    return 0


def find_q(values: Iterable[int], past_q: int, jump: int) -> int:
    """Step ``jump`` times to the next larger value above ``past_q``."""
    values = list(values)
    q = past_q
    for _ in range(jump):
        above = [value for value in values if q < value < INT_MAX]
        if not above:
            break
        q = min(above)
    return q


def best_move(values: Iterable[int], q_next: int, q_min: int) -> int:
    """Nearest rotation that brings a value in ``[q_min, q_next)`` to the top.

    Returns ``-i`` for ``i`` forward rotations, ``j`` for ``j`` reverse
    rotations, and 0 when the top already qualifies or nothing does.
    """
    values = list(values)

    def inside(value: int) -> bool:
        return q_min <= value < q_next

    for index, (front, back) in enumerate(zip(values, reversed(values))):
        if inside(front):
            return -index
        if inside(back):
            return index + 1
    return 0


def selection_sort(values: Iterable[int]) -> list[str]:
    """Push the minimum of a to b repeatedly, then push everything back."""
    run = _Run(values)
    while len(run.a) > 1:
        position = min_position(run.a)
        if position == 0:
            run.do("pb")
        elif position <= len(run.a) // 2:
            run.do("ra")
        else:
            run.do("rra")
    while run.b:
        run.do("pa")
    return run.ops


def _drain_largest_first(run: _Run) -> None:
    rotation = max_position(run.b) if run.b else 0
    while run.b:
        if rotation == 0:
            run.do("pa")
            rotation = max_position(run.b) if run.b else 0
        elif rotation > 0:
            run.do("rrb")
            rotation -= 1
        else:
            run.do("rb")
            rotation += 1


def block_sort(values: Iterable[int], jump: int, low: int) -> list[str]:
    """Push a to b in chunks of ``jump`` values, then return the largest first."""
    run = _Run(values)
    if run.a and jump < 1:
        raise ValueError("jump must be positive")
    while run.a:
        q_next = find_q(run.a, low, jump)
        pushed = 0
        while pushed < jump and run.a:
            move = best_move(run.a, q_next, low)
            if move == 0:
                run.do("pb")
                pushed += 1
            elif move > 0:
                run.do("rra")
            else:
                run.do("ra")
        low = q_next
    _drain_largest_first(run)
    return run.ops


def _sort_three(run: _Run) -> None:
    position = min_position(run.a)
    if position == 0:
        run.do("ra")
    elif position == 1:
        run.do("rra")
    if run.a[0] > run.a[1]:
        run.do("sa")
    run.do("rra")


def sort_three(values: Iterable[int]) -> list[str]:
    """Operations that sort exactly three values."""
    run = _Run(values)
    if len(run.a) != 3:
        raise ValueError("sort_three needs exactly three values")
    _sort_three(run)
    return run.ops


def _insert_back(run: _Run) -> None:
    while run.b:
        a, top = run.a, run.b[0]
        low, high = min(a), max(a)
        if low > top and low == a[0]:
            run.do("pa")
        elif high > top and a[-1] < top < a[0]:
            run.do("pa")
        elif high > top:
            run.do("ra")
        elif high < top and low == a[0]:
            run.do("pa", "ra")
        elif high < top:
            run.do("ra")
        else:
            raise ValueError("values must be distinct")
    while min(run.a) != run.a[0]:
        run.do("ra")


def sort_five(values: Iterable[int]) -> list[str]:
    """Operations that sort four or five values."""
    run = _Run(values)
    if len(run.a) not in (4, 5):
        raise ValueError("sort_five needs four or five values")
    while len(run.a) > 3:
        run.do("pb")
    _sort_three(run)
    _insert_back(run)
    return run.ops


def _has_digit(values: Sequence[int], power: int, wanted: int) -> bool:
    return any(digit(value, power) == wanted for value in values)


def _bring_to_top(
    run: _Run, stack: list[int], target: int, forward: str, backward: str
) -> None:
    while stack[0] != target:
        if position_of(stack, target) <= len(stack) // 2:
            run.do(forward)
        if position_of(stack, target) > len(stack) // 2:
            run.do(backward)


def _spread_to_b(run: _Run, power: int) -> None:
    mark = run.a[0]
    wanted = -9
    while run.a:
        if digit(run.a[0], power) == wanted:
            run.do("pb")
        elif not _has_digit(run.a, power, wanted):
            _bring_to_top(run, run.a, mark, "ra", "rra")
            wanted += 1
        else:
            run.do("ra")
        if run.b and run.b[0] == mark and run.a:
            mark = run.a[0]


def _spread_to_a(run: _Run, power: int) -> None:
    mark = run.b[0]
    wanted = 9
    while run.b:
        if digit(run.b[0], power) == wanted:
            run.do("pa")
        elif not _has_digit(run.b, power, wanted):
            _bring_to_top(run, run.b, mark, "rb", "rrb")
            wanted -= 1
        else:
            run.do("rb")
        if run.a and run.a[0] == mark and run.b:
            mark = run.b[0]


def radix_sort(indices: Iterable[int]) -> list[str]:
    """Decimal radix sort of the ranks ``0 .. n-1``, moving between the stacks."""
    run = _Run(indices)
    if not run.a:
        return run.ops
    largest = len(run.a) - 1
    power = 0
    while largest // 10**power:
        if power % 2 == 0:
            _spread_to_b(run, power)
        else:
            _spread_to_a(run, power)
        power += 1
    while run.b:
        run.do("pa")
    return run.ops