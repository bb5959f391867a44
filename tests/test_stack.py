import pytest

from pushswap.stack import Node, Stack, StackName, push


def make_stack(numbers, label=StackName.A):
    return Stack(Node(number, label) for number in numbers)


def test_stack_name_other_is_involution():
    assert StackName.A.other() is StackName.B
    assert StackName.B.other() is StackName.A
    for name in StackName:
        assert name.other().other() is name


def test_new_node_is_unindexed():
    node = Node(5)
    assert node.stack is StackName.A
    assert node.index is None
    assert not node.indexed


def test_len_iter_and_values():
    stack = make_stack([3, 1, 2])
    assert len(stack) == 3
    assert [node.number for node in stack] == [3, 1, 2]
    assert stack.values() == [3, 1, 2]


def test_append_and_push_front():
    stack = make_stack([1])
    stack.append(Node(2))
    stack.push_front(Node(0))
    assert stack.values() == [0, 1, 2]


def test_last():
    assert make_stack([]).last() is None
    stack = make_stack([4, 5, 6])
    assert stack.last().number == 6


def test_swap_exchanges_top_two():
    stack = make_stack([1, 2, 3])
    assert stack.swap() == "sa"
    assert stack.values() == [2, 1, 3]


def test_swap_on_b_names_b():
    stack = make_stack([1, 2], StackName.B)
    assert stack.swap() == "sb"
    assert stack.values() == [2, 1]


@pytest.mark.parametrize("numbers", [[], [7]])
def test_operations_need_two_nodes(numbers):
    stack = make_stack(numbers)
    assert stack.swap() is None
    assert stack.rotate() is None
    assert stack.reverse_rotate() is None
    assert stack.values() == numbers


def test_rotate_moves_top_to_bottom():
    stack = make_stack([1, 2, 3])
    assert stack.rotate() == "ra"
    assert stack.values() == [2, 3, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stack = make_stack([1, 2, 3], StackName.B)
    assert stack.reverse_rotate() == "rrb"
    assert stack.values() == [3, 1, 2]


def test_rotate_then_reverse_rotate_restores():
    numbers = [9, -4, 0, 12, 3]
    stack = make_stack(numbers)
    stack.rotate()
    stack.reverse_rotate()
    assert stack.values() == numbers


def test_full_rotation_restores():
    numbers = [5, 6, 7, 8]
    stack = make_stack(numbers)
    for _ in numbers:
        stack.rotate()
    assert stack.values() == numbers


def test_double_swap_restores():
    numbers = [2, 1, 3]
    stack = make_stack(numbers)
    stack.swap()
    stack.swap()
    assert stack.values() == numbers


def test_push_from_a_to_b():
    stack_a = make_stack([1, 2, 3])
    stack_b = Stack()
    assert push(stack_b, stack_a) == "pb"
    assert push(stack_b, stack_a) == "pb"
    assert stack_a.values() == [3]
    assert stack_b.values() == [2, 1]


def test_push_onto_empty_stack_keeps_label():
    stack_a = make_stack([1, 2])
    stack_b = Stack()
    push(stack_b, stack_a)
    assert next(iter(stack_b)).stack is StackName.A


def test_push_onto_non_empty_stack_relabels():
    stack_a = make_stack([1, 2])
    stack_b = Stack()
    push(stack_b, stack_a)
    push(stack_b, stack_a)
    assert next(iter(stack_b)).stack is StackName.B


def test_push_back_from_b_to_a():
    stack_a = make_stack([1, 2, 3])
    stack_b = Stack()
    push(stack_b, stack_a)
    push(stack_b, stack_a)
    assert push(stack_a, stack_b) == "pa"
    assert stack_a.values() == [2, 3]
    assert stack_b.values() == [1]


def test_push_preserves_total_count():
    stack_a = make_stack([4, 8, 15, 16, 23, 42])
    stack_b = Stack()
    for _ in range(3):
        push(stack_b, stack_a)
    assert len(stack_a) + len(stack_b) == 6
    assert sorted(stack_a.values() + stack_b.values()) == [4, 8, 15, 16, 23, 42]


def test_push_from_empty_raises():
    with pytest.raises(IndexError):
        push(make_stack([1]), Stack())