"""Turn command-line arguments into the initial stack A."""

from __future__ import annotations

from typing import Sequence

from pushswap.stack import Node, Stack, StackName
from pushswap.textutils import atoi, split


def parse_numbers(args: Sequence[str]) -> list[int]:
    """Read the numbers from the arguments that follow the program name.

    A single argument is split on spaces; several arguments give one number
    each.  Text that is not a number reads as 0.
    """
    tokens = split(args[0], " ") if len(args) == 1 else list(args)
    return [atoi(token) for token in tokens]


def build_stack(args: Sequence[str]) -> Stack:
    """Stack A holding the parsed numbers, the first number on top."""
    return Stack(Node(number, StackName.A) for number in parse_numbers(args))