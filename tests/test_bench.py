import re

import pytest

from pushswap.bench import bench_report, count_action, format_percent, strategy_name


def _numbers(line):
    return [int(n) for n in re.findall(r": (\d+)", line)]


def test_count_action_matches_whole_names_only():
    ops = ["rra", "rra", "ra", "sa"]
    assert count_action(ops, "ra") == 1
    assert count_action(ops, "rra") == 2


def test_count_action_of_nothing_is_zero():
    assert count_action(None, "sa") == 0
    assert count_action([], "pb") == 0


def test_format_percent_zero():
    assert format_percent(0) == "0,00%"


@pytest.mark.parametrize("value", [100, 1234, 4999, 10000, 250])
def test_format_percent_round_trip(value):
    text = format_percent(value)
    assert text.endswith("%")
    whole, _, cents = text[:-1].partition(",")
    assert len(cents) == 2
    assert int(whole + cents) == value


@pytest.mark.parametrize(
    "flag, name",
    [(11, "--simple"), (12, "--medium"), (13, "--complex"), (10, "--adaptive"), (0, "--adaptive")],
)
def test_strategy_name(flag, name):
    assert strategy_name(flag) == name


@pytest.mark.parametrize(
    "flag, disorder, expected",
    [
        (11, 9000, "[bench] strategy: --simple / O(n2)"),
        (12, 10, "[bench] strategy: --medium / O(n√n)"),
        (13, 10, "[bench] strategy: --complex / O(n log n)"),
        (10, 1999, "[bench] strategy: --adaptive / O(n2)"),
        (10, 2000, "[bench] strategy: --adaptive / O(n√n)"),
        (10, 5000, "[bench] strategy: --adaptive / O(n log n)"),
    ],
)
def test_strategy_line(flag, disorder, expected):
    lines = bench_report(disorder, [], flag).splitlines()
    assert lines[1] == expected


def test_no_strategy_line_for_unknown_combination():
    lines = bench_report(3000, ["sa"], 20).splitlines()
    assert not any("strategy" in line for line in lines)
    assert len(lines) == 4


def test_report_counts_add_up():
    ops = ["sa", "pb", "pb", "ra", "rra", "rrr", "pa", "pa", "ss", "rb"]
    lines = bench_report(4250, ops, 10).splitlines()
    assert all(line.startswith("[bench] ") for line in lines)
    assert lines[0] == "[bench] disorder: 42,50%"
    assert _numbers(lines[2]) == [len(ops)]
    assert sum(_numbers(lines[3])) + sum(_numbers(lines[4])) == len(ops)
    assert _numbers(lines[3])[3] == count_action(ops, "pa")


def test_report_of_no_operations():
    text = bench_report(0, None, 10)
    assert text.endswith("\n")
    lines = text.splitlines()
    assert lines[0] == "[bench] disorder: 0,00%"
    assert _numbers(lines[2]) == [0]
    assert sum(_numbers(lines[3])) + sum(_numbers(lines[4])) == 0