"""The two stacks and the primitive instructions that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class StackName(Enum):
    """Label of the stack a node belongs to."""

    A = "A"
    B = "B"

    def other(self) -> "StackName":
        """The label of the opposite stack."""
        return StackName.B if self is StackName.A else StackName.A

    @property
    def letter(self) -> str:
        return self.value.lower()


@dataclass
class Node:
    """One number on a stack, with its rank once it has been indexed."""

    number: int
    stack: StackName = StackName.A
    index: Optional[int] = None

    @property
    def indexed(self) -> bool:
        return self.index is not None


class Stack:
    """A stack of nodes; the first node is the top."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({list(self._nodes)!r})"

    def values(self) -> list[int]:
        """The numbers from top to bottom."""
        return [node.number for node in self._nodes]

    def append(self, node: Node) -> None:
        """Put a node at the bottom."""
        self._nodes.append(node)

    def push_front(self, node: Node) -> None:
        """Put a node on top."""
        self._nodes.appendleft(node)

    def last(self) -> Optional[Node]:
        """The bottom node, or None when the stack is empty."""
        return self._nodes[-1] if self._nodes else None

    def swap(self) -> Optional[str]:
        """Exchange the two top nodes.

        Returns the instruction name, or None when there are fewer than two nodes.
        """
        if len(self._nodes) < 2:
            return None
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return "s" + second.stack.letter

    def rotate(self) -> Optional[str]:
        """Move the top node to the bottom.

        Returns the instruction name, or None when there are fewer than two nodes.
        """
        if len(self._nodes) < 2:
            return None
        label = self._nodes[0].stack
        self._nodes.rotate(-1)
        return "r" + label.letter

    def reverse_rotate(self) -> Optional[str]:
        """Move the bottom node to the top.

        Returns the instruction name, or None when there are fewer than two nodes.
        """
        if len(self._nodes) < 2:
            return None
        label = self._nodes[0].stack
        self._nodes.rotate(1)
        return "rr" + label.letter

    def _pop_front(self) -> Node:
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()


def push(target: Stack, source: Stack) -> str:
    """Move the top node of ``source`` onto ``target``.

    The instruction is named after the stack the node moves to, judged by the
    node's label.  A node that lands on an empty stack has its label flipped a
    second time, so it keeps its original label.
    """
    node = source._pop_front()
    node.stack = node.stack.other()
    instruction = "p" + node.stack.letter
    if not target:
        node.stack = node.stack.other()
    target.push_front(node)
    return instruction