# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions. It prints the instructions it used, one per line.

## Instructions

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the top two elements of `a`              |
| `sb`  | swap the top two elements of `b`              |
| `ss`  | `sa` and `sb`                                 |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top becomes bottom)            |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb`                                 |
| `rra` | rotate `a` down (bottom becomes top)          |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb`                               |

## Command line

```
pip install .
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

Numbers may be given as separate arguments or space-separated inside one
argument. The first number is the top of stack `a`. The program prints the
instructions that leave `a` sorted in ascending order.

With no arguments it prints nothing and exits with status 0. It also prints
nothing when fewer than two numbers are given or when the input is already
sorted. It writes `Error` to standard error and exits with status 1 when an
argument is empty or holds only spaces and tabs, when a token is not an
optional `+` or `-` followed by digits, when a value falls outside the 32-bit
signed range, or when a value is repeated.

## Library use

```python
from pushswap.stacks import PushSwap
from pushswap.sort import choose_algorithm

machine = PushSwap([5, 1, 4, 2, 3])
choose_algorithm(machine)
print(machine.ops)     # the instructions applied, in order
print(list(machine.a)) # [1, 2, 3, 4, 5]
```

`PushSwap` holds the two stacks as `a` and `b` (top at index 0) and the
instruction log as `ops`. Each instruction is a method of the same name. A
single-stack instruction is logged only when it changes something; `sb`,
`ss`, `rr` and `rrr` are always logged.

`pushswap.sort.choose_algorithm` picks a strategy by the size of `a`:

- 2 elements: `sort_2`
- 3 elements: `sort_3`
- 4 to 10 elements: `sort_5`, which pushes the smallest values to `b` until
  three remain, sorts those, and pushes everything back
- more than 10 elements: `ksort`, which replaces the values of `a` by their
  ranks, pushes them to `b` in chunks, then moves them back largest first

`sort_10`, `index_values`, `find_min_index`, `max_position`, `int_sqrt`,
`push_back_to_a` and `is_sorted` are also available from `pushswap.sort`.

`pushswap.parse.parse_arguments` turns command-line strings into a list of
integers, raising `ParseError` (a `ValueError`) on invalid input;
`check_args`, `is_valid_number`, `is_blank` and `parse_int_strict` are the
checks it is built from.

## What it does not do

The package only produces instructions. It does not read a list of
instructions and check whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```