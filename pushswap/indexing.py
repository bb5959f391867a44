"""Ranking the numbers of a stack and splitting it around the median rank."""

from __future__ import annotations

from pushswap.stack import Stack, push


def biggest_number(stack: Stack) -> int:
    """The largest number on the stack, or 0 when the stack is empty."""
    return max(stack.values(), default=0)


def assign_indexes(stack: Stack) -> int:
    """Give every node not yet indexed its rank among those nodes.

    The smallest number gets rank 0.  Equal numbers share a rank, so ranks
    stay consecutive.  Returns the number of nodes on the stack.
    """
    pending = [node for node in stack if not node.indexed]
    ranks = {
        number: rank
        for rank, number in enumerate(sorted({node.number for node in pending}))
    }
    for node in pending:
        node.index = ranks[node.number]
    return len(stack)


def push_lower_half(stack_a: Stack, stack_b: Stack, length: int) -> list[str]:
    """Examine the top of stack A ``length`` times, pushing low ranks to B.

    A node whose rank is at most ``length // 2`` is pushed onto stack B; any
    other node is rotated to the bottom of stack A.  Returns the instructions
    performed, in order.
    """
    half = length // 2
    instructions: list[str] = []
    for _ in range(length):
        top = next(iter(stack_a), None)
        if top is None:
            raise IndexError("stack A ran empty")
        if top.index is not None and top.index <= half:
            instructions.append(push(stack_b, stack_a))
        else:
            instruction = stack_a.rotate()
            if instruction is not None:
                instructions.append(instruction)
    return instructions