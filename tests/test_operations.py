import pytest

from pushswap.operations import OPERATIONS, Stacks


def test_sa_swaps_top_two():
    stacks = Stacks([5, 7, 9], [])
    assert stacks.sa() == "sa"
    assert stacks.a[:2] == [7, 5]
    assert stacks.a[2] == 9


def test_sb_on_single_element_is_noop():
    stacks = Stacks([], [4])
    assert stacks.sb() == "sb"
    assert stacks.b == [4]


def test_ss_swaps_both():
    stacks = Stacks([1, 2], [3, 4])
    assert stacks.ss() == "ss"
    assert stacks.a == [2, 1]
    assert stacks.b == [4, 3]


def test_pb_from_source_example():
    stacks = Stacks([0, 1, 2, 3, 4], [5, 6])
    assert stacks.pb() == "pb"
    assert stacks.a == [1, 2, 3, 4]
    assert stacks.b == [0, 5, 6]


def test_pa_moves_top_of_b():
    stacks = Stacks([1], [8, 9])
    assert stacks.pa() == "pa"
    assert stacks.a == [8, 1]
    assert stacks.b == [9]


def test_push_from_empty_returns_none():
    stacks = Stacks([1, 2], [])
    assert stacks.pa() is None
    assert stacks.a == [1, 2]
    empty = Stacks([], [3])
    assert empty.pb() is None
    assert empty.b == [3]


def test_ra_moves_top_to_bottom():
    original = [4, 6, 8, 10]
    stacks = Stacks(original, [])
    assert stacks.ra() == "ra"
    assert stacks.a[-1] == original[0]
    assert stacks.a[0] == original[1]
    assert sorted(stacks.a) == sorted(original)


def test_rra_moves_bottom_to_top():
    original = [4, 6, 8, 10]
    stacks = Stacks(original, [])
    assert stacks.rra() == "rra"
    assert stacks.a[0] == original[-1]
    assert stacks.a[1] == original[0]


@pytest.mark.parametrize(
    "forward, backward",
    [("ra", "rra"), ("rb", "rrb"), ("rr", "rrr"), ("sa", "sa"), ("pb", "pa")],
)
def test_operations_undo(forward, backward):
    stacks = Stacks([3, 1, 4, 5], [9, 2, 6])
    stacks.apply(forward)
    stacks.apply(backward)
    assert stacks.a == [3, 1, 4, 5]
    assert stacks.b == [9, 2, 6]


def test_full_rotation_is_identity():
    values = [3, 1, 4, 5, 9]
    stacks = Stacks(values, [])
    for _ in values:
        stacks.ra()
    assert stacks.a == values


@pytest.mark.parametrize("name", OPERATIONS)
def test_apply_returns_name_and_keeps_elements(name):
    stacks = Stacks([3, 1, 4], [7, 5])
    assert stacks.apply(name) == name
    assert sorted(stacks.a + stacks.b) == [1, 3, 4, 5, 7]


def test_apply_rejects_unknown():
    with pytest.raises(ValueError):
        Stacks([1], []).apply("xx")


def test_rotate_empty_stack():
    stacks = Stacks()
    assert stacks.rr() == "rr"
    assert stacks.a == [] and stacks.b == []