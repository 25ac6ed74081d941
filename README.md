# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, then prints the operations it used, one per line.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | push the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate up: the first element becomes the last |
| `rra`, `rrb`, `rrr` | rotate down: the last element becomes the first |

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments or as one space-separated string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same command can also be started with `python -m pushswap.cli`.

The first number is the top of stack `a`. Bad input, such as a token that
holds anything other than digits and signs, a value outside the 32-bit signed
range, a duplicate, or an unknown `--` option, prints `Error` on standard
output and exits with status 1. With no numbers at all the command prints
nothing and exits with status 1.

### Strategy flags

Flags come before the numbers:

- `--simple`: selection sort, O(n²)
- `--medium`: chunked block sort, O(n√n)
- `--complex`: radix sort on ranks, O(n log n)
- `--adaptive`: chooses from how disordered the input is (the default):
  below 20% disorder the simple strategy, below 50% the medium one,
  otherwise the complex one
- `--bench`: after the move list, writes a report to standard error with the
  disorder percentage, the strategy, the total number of operations and a
  count of each operation

Inputs of three, four or five elements always use a dedicated short routine.
Input that is already sorted prints nothing.

```
push-swap --bench --complex 5 1 4 2 3
```

## Library use

```python
from pushswap.operations import Stacks
from pushswap.parsing import parse_numbers
from pushswap.disorder import compute_disorder
from pushswap.cli import choose_moves

values = parse_numbers(["3", "1", "2", "5", "4", "9", "7"])
moves = choose_moves(0, values, compute_disorder(values))

stacks = Stacks(values, [])
for move in moves:
    stacks.apply(move)
assert stacks.a == sorted(values)
```

The modules:

- `pushswap.operations`: `Stacks`, with one method per operation and
  `apply(name)` to run one by name.
- `pushswap.parsing`: `parse_numbers`, `parse_int` (both raise `ParseError`),
  `identify_flag`, `to_indices`, `has_duplicates`, `count_int`.
- `pushswap.disorder`: `compute_disorder`, the share of out-of-order pairs in
  hundredths of a percent (0 to 10000).
- `pushswap.sorting`: `selection_sort`, `block_sort`, `sort_three`,
  `sort_five`, `radix_sort` (on ranks from `to_indices`) and their helpers;
  each returns the list of operation names.
- `pushswap.bench`: `bench_report` and its helpers, which build the
  `--bench` text.
- `pushswap.cli`: `choose_moves` and the `main` entry point.

## Limits

The package only produces move lists; it has no command that reads a list of
operations and checks whether it sorts a given stack. `Stacks.apply` can be
used for that from Python.

## Running the tests

```
pip install ".[test]"
pytest
```