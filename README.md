# pushswap

Two integer stacks, `a` and `b`, and the push-swap instructions that act on
them (`sa`, `sb`, `pa`, `pb`, `ra`, `rb`, `rra`, `rrb`). The package ranks the
numbers on a stack and can move the lower half of the ranks from `a` to `b`.

## Installation

```
pip install .
```

## Command line

```
pushswap 5 3 9 1 7
pushswap "5 3 9 1 7"
```

The numbers can be given as separate arguments or as one space-separated
string. The command ranks the values (the smallest gets index 0, equal values
share a rank), then looks at the top of stack `a` once per number: a node whose
rank is at most half the count is pushed to `b`, any other is rotated to the
bottom of `a`. It prints each instruction it performed, then both stacks, top
first:

```
pb
pb
ra
pb
ra
stack a 
Stack: 9 | Index: 4
Stack: 7 | Index: 3
------------ 
stack b 
Stack: 1 | Index: 0
Stack: 3 | Index: 1
Stack: 5 | Index: 2
```

With no arguments the command prints nothing and exits with status 0.

## Library use

```python
from pushswap.parsing import build_stack
from pushswap.stack import Stack
from pushswap.indexing import assign_indexes, push_lower_half, biggest_number

stack_a = build_stack(["4", "2", "8"])
stack_b = Stack()

length = assign_indexes(stack_a)                       # 3
instructions = push_lower_half(stack_a, stack_b, length)

print(instructions)                                    # ['pb', 'pb']
print(stack_a.values(), stack_b.values())              # [8] [2, 4]
print(biggest_number(stack_a))                         # 8
```

### Modules

- `pushswap.stack` – `StackName` (`A`, `B`, with `other()`), `Node`
  (`number`, `stack`, `index`, `indexed`) and `Stack`. A `Stack` supports
  `len()`, iteration over its nodes from the top, `values()`, `append()`,
  `push_front()` and `last()`. `swap()`, `rotate()` and `reverse_rotate()`
  return the instruction name, or `None` when the stack holds fewer than two
  nodes. `push(target, source)` moves the top node of `source` onto `target`
  and returns its instruction name; it raises `IndexError` if `source` is
  empty. Operations return their names rather than printing them.
- `pushswap.parsing` – `parse_numbers(args)` and `build_stack(args)`. A single
  argument is split on spaces; text that is not a number reads as 0.
- `pushswap.indexing` – `assign_indexes(stack)`, `push_lower_half(stack_a,
  stack_b, length)` and `biggest_number(stack)` (0 for an empty stack).
- `pushswap.cli` – `main(argv=None)`, `format_stack(stack)` (unindexed nodes
  show index 2147483647) and `push_four(stack_a, stack_b)`.
- `pushswap.textutils` – string helpers: `atoi` (wraps like a 32-bit signed
  integer), `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp` and
  `map_indexed`.
- `pushswap.chars` – ASCII helpers: `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_upper` and `to_lower`, taking a one-character
  string or an integer code.

## What it does not do

- It does not sort the stacks completely; the command only performs the
  lower-half split described above.
- There is no checker that reads instructions and verifies a result.
- Input is not validated: non-numeric arguments become 0, and duplicates or
  out-of-range values are not rejected.