"""The statistics report printed by the ``--bench`` option."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_STRATEGIES = {11: "--simple", 12: "--medium", 13: "--complex"}
_COMPLEXITIES = {11: "O(n2)", 12: "O(n√n)", 13: "O(n log n)"}
_ADAPTIVE_FLAGS = (0, 10)


def count_action(ops: Iterable[str] | None, action: str) -> int:
    """Number of times exactly ``action`` occurs in ``ops``."""
    if ops is None:
        return 0
    return sum(1 for op in ops if op == action)


def format_percent(value: int) -> str:
    """Render a disorder in hundredths of a percent, e.g. ``4250`` as ``42,50%``."""
    if value == 0:
        return "0,00%"
    digits = str(value)
    return f"{digits[:-2]},{digits[-2:]}%"


def strategy_name(flag: int) -> str:
    """The option name of the strategy a flag code stands for."""
    return _STRATEGIES.get(flag, "--adaptive")


def _complexity(disorder: int, flag: int) -> str | None:
    if flag in _COMPLEXITIES:
        return _COMPLEXITIES[flag]
    if flag in _ADAPTIVE_FLAGS:
        if disorder < 2000:
            return "O(n2)"
        if disorder < 5000:
            return "O(n√n)"
        if disorder <= 10000:
            return "O(n log n)"
    return None


def bench_report(disorder: int, ops: Iterable[str] | None, flag: int) -> str:
    """The full benchmark text, one ``[bench]`` line after another."""
    ops = list(ops) if ops is not None else []
    counts = Counter(ops)
    lines = [f"[bench] disorder: {format_percent(disorder)}"]
    complexity = _complexity(disorder, flag)
    if complexity is not None:
        lines.append(f"[bench] strategy: {strategy_name(flag)} / {complexity}")
    lines.append(f"[bench] total_ops: {len(ops)}")
    lines.append(
        "[bench] "
        + " ".join(f"{name}: {counts[name]}" for name in ("sa", "sb", "ss", "pa", "pb"))
    )
    lines.append(
        "[bench] "
        + " ".join(
            f"{name}: {counts[name]}"
            for name in ("ra", "rb", "rr", "rra", "rrb", "rrr")
        )
    )
    return "\n".join(lines) + "\n"