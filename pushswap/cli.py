"""The ``push_swap`` command: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .bench import bench_report
from .disorder import compute_disorder
from .parsing import ParseError, count_int, identify_flag, parse_numbers, to_indices
from .sorting import block_sort, isqrt, radix_sort, selection_sort, sort_five, sort_three

_BENCH_FLAG = 10


def _simple(values: list[int]) -> list[str]:
    return selection_sort(values)


def _medium(values: list[int]) -> list[str]:
    return block_sort(values, 2 * isqrt(len(values)), min(values))


def _complex(values: list[int]) -> list[str]:
    return radix_sort(to_indices(values))


_BY_FLAG = {
    1: _simple,
    11: _simple,
    2: _medium,
    12: _medium,
    3: _complex,
    13: _complex,
}


def choose_moves(flag: int, values: Iterable[int], disorder: int) -> list[str]:
    """Pick a strategy from the flag code and the disorder, and run it."""
    values = list(values)
    if disorder == 0:
        return []
    if len(values) == 3:
        return sort_three(values)
    if len(values) in (4, 5):
        return sort_five(values)
    if flag in (0, _BENCH_FLAG):
        if disorder < 2000:
            return _simple(values)
        if disorder < 5000:
            return _medium(values)
        return _complex(values)
    strategy = _BY_FLAG.get(flag)
    return strategy(values) if strategy is not None else []


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    flag = 0
    index = 0
    while index < len(args) and args[index].startswith("--"):
        flag += identify_flag(args[index])
        index += 1
    rest = args[index:]
    if not rest:
        return 1
    try:
        values = parse_numbers(rest)
    except ParseError:
        values = None
    if values is None or flag < 0:
        sys.stdout.write("Error\n")
        return 1

    first = rest[0]
    if " " in first:
        # A quoted list of exactly two numbers counts as already sorted.
        disorder = 0 if len(values) == 2 else compute_disorder(values)
        values = values[: count_int(first)]
    else:
        disorder = compute_disorder(values)

    moves = choose_moves(flag, values, disorder)
    for move in moves:
        sys.stdout.write(f"{move}\n")
    if flag >= _BENCH_FLAG:
        sys.stderr.write(bench_report(disorder, moves, flag))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())