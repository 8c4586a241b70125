# pushswap

Works on a list of distinct integers held in two stacks, `a` and `b`, that
can only be changed by a small fixed set of operations. Each operation is
printed, one per line, as it is performed.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` upwards: the top becomes the bottom   |
| `rb`  | rotate `b` upwards                               |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` downwards: the bottom becomes the top |
| `rrb` | rotate `b` downwards                             |
| `rrr` | `rra` and `rrb` together                         |

Swaps and rotations on a stack with fewer than two elements, and pushes
from an empty stack, change nothing (the operation name is still printed).

## Installing

```
pip install .
```

## Running

Numbers may be given as separate arguments or as one quoted string with
single spaces between them. The first number ends up on top of stack `a`.

```
push-swap 2 1 3
push-swap "3 2 1"
```

Input is rejected, with `Error` written to standard error and exit status
1, if any argument holds anything other than optionally signed integers
separated by single spaces (no leading, trailing or doubled spaces, no lone
signs), if an argument is empty, if a number repeats, or if a number falls
outside the 32-bit signed integer range. With no arguments the command
does nothing and exits with status 0.

Already sorted input prints nothing. Two numbers are sorted with a single
`ra`, and three numbers in at most two operations.

## What it does not do

Inputs of more than three numbers are not sorted. For them the command
finds a longest strictly increasing subsequence of stack `a`, marks it
(adding further numbers above its last element if it is shorter than
three), and prints the marked values from top to bottom followed by a line
`size: N` giving the subsequence's length. No operations are printed and
stack `a` is left in its original order.

## Using it from Python

```python
import io
from pushswap.stack import Machine
from pushswap.sort import sort

out = io.StringIO()
machine = Machine([3, 1, 2], out)
sort(machine, out)
print(out.getvalue())       # "ra\n"
print(machine.a.values())   # [1, 2, 3]
```

- `pushswap.args.parse_args` validates a list of command-line strings and
  returns the numbers, raising `ArgumentError` (a `ValueError`) on bad input.
- `pushswap.stack` has `Node`, `Stack` (a doubly linked stack with `swap`,
  `rotate`, `reverse_rotate` and `push_from`) and `Machine`, which holds
  stacks `a` and `b` and has one method per operation above.
- `pushswap.sort` has `is_sorted`, `sort_three`, `find_lis`, `sort_big` and
  `sort`.
- `pushswap.cli.main(argv=None)` is the command itself and returns the exit
  status.

The package also carries small general helpers: `pushswap.chars` (ASCII
character tests and case mapping), `pushswap.memory` (byte-buffer fill,
copy, search, compare and zeroed allocation), `pushswap.output` (writing
characters, strings, lines and integers to a stream), `pushswap.strings`
(bounded copy and concatenation, searching, `atoi`/`itoa`, trimming,
splitting and per-character mapping) and `pushswap.linked_list` (a singly
linked `LinkedList`).

## Tests

```
pip install .[test]
pytest
```