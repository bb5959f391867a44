"""Command-line entry point: index stack A and move its lower half to B."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.indexing import assign_indexes, push_lower_half
from pushswap.parsing import build_stack
from pushswap.stack import Stack, push

_UNINDEXED = 2147483647
_PUSHES = 4


def format_stack(stack: Stack) -> str:
    """One line per node, top first, each showing the number and its rank."""
    return "".join(
        f"Stack: {node.number} | Index: "
        f"{_UNINDEXED if node.index is None else node.index}\n"
        for node in stack
    )


def push_four(stack_a: Stack, stack_b: Stack) -> list[str]:
    """Push the four top nodes of stack A onto stack B."""
    return [push(stack_b, stack_a) for _ in range(_PUSHES)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on the given arguments, excluding the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    stack_a = build_stack(args)
    stack_b = Stack()
    out = sys.stdout
    for instruction in push_lower_half(stack_a, stack_b, assign_indexes(stack_a)):
        out.write(instruction + "\n")
    out.write("stack a \n")
    out.write(format_stack(stack_a))
    out.write("------------ \n")
    out.write("stack b \n")
    out.write(format_stack(stack_b))
    out.flush()
    return 0