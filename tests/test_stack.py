import io

import pytest

from pushswap.stack import Machine, Node, Stack


def assert_links(stack):
    nodes = list(stack)
    assert len(nodes) == len(stack)
    if not nodes:
        assert stack.head is None
        assert stack.last() is None
        return
    assert stack.head is nodes[0]
    assert stack.last() is nodes[-1]
    assert nodes[0].prev is None
    assert nodes[-1].next is None
    for earlier, later in zip(nodes, nodes[1:]):
        assert earlier.next is later
        assert later.prev is earlier


def test_new_node_defaults():
    node = Node(7)
    assert (node.value, node.index, node.cost, node.lis) == (7, 0, 0, 0)
    assert node.prev is None and node.next is None and node.lis_prev is None


def test_init_keeps_order_top_first():
    stack = Stack([3, 1, 2])
    assert stack.values() == [3, 1, 2]
    assert len(stack) == 3
    assert_links(stack)


def test_empty_stack():
    stack = Stack()
    assert stack.values() == []
    assert len(stack) == 0
    assert stack.last() is None


def test_add_top_and_bottom():
    stack = Stack([2])
    stack.add_top(Node(1))
    stack.add_bottom(Node(3))
    assert stack.values() == [1, 2, 3]
    assert_links(stack)


def test_add_top_to_empty():
    stack = Stack()
    node = Node(5)
    stack.add_top(node)
    assert stack.head is node
    assert stack.last() is node
    assert_links(stack)


def test_last_is_bottom():
    stack = Stack([4, 5, 6])
    assert stack.last().value == 6


def test_clear():
    stack = Stack([1, 2, 3])
    stack.clear()
    assert stack.values() == []
    assert len(stack) == 0
    assert_links(stack)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], [2, 1, 3]), ([1, 2], [2, 1]), ([1], [1]), ([], [])],
)
def test_swap(values, expected):
    stack = Stack(values)
    stack.swap()
    assert stack.values() == expected
    assert_links(stack)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], [2, 3, 1]), ([1, 2], [2, 1]), ([1], [1]), ([], [])],
)
def test_rotate(values, expected):
    stack = Stack(values)
    stack.rotate()
    assert stack.values() == expected
    assert_links(stack)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3], [3, 1, 2]), ([1, 2], [2, 1]), ([1], [1]), ([], [])],
)
def test_reverse_rotate(values, expected):
    stack = Stack(values)
    stack.reverse_rotate()
    assert stack.values() == expected
    assert_links(stack)


def test_rotate_then_reverse_rotate_round_trip():
    values = [5, -2, 9, 0, 4]
    stack = Stack(values)
    for _ in range(3):
        stack.rotate()
    for _ in range(3):
        stack.reverse_rotate()
    assert stack.values() == values
    assert_links(stack)


def test_full_rotation_returns_to_start():
    values = [8, 3, 6, 1]
    stack = Stack(values)
    for _ in range(len(values)):
        stack.rotate()
    assert stack.values() == values


def test_double_swap_is_identity():
    values = [4, 7, 1]
    stack = Stack(values)
    stack.swap()
    stack.swap()
    assert stack.values() == values
    assert_links(stack)


def test_push_from_moves_top():
    a = Stack([1, 2, 3])
    b = Stack([9])
    moved = b.push_from(a)
    assert moved.value == 1
    assert a.values() == [2, 3]
    assert b.values() == [1, 9]
    assert_links(a)
    assert_links(b)


def test_push_from_empty_does_nothing():
    a = Stack()
    b = Stack([1])
    assert b.push_from(a) is None
    assert b.values() == [1]
    assert len(a) == 0


def test_push_last_node_empties_source():
    a = Stack([1])
    b = Stack()
    b.push_from(a)
    assert a.values() == []
    assert a.last() is None
    assert b.values() == [1]
    assert_links(b)


def test_machine_prints_operation_names():
    out = io.StringIO()
    machine = Machine([3, 2, 1], out)
    machine.sa()
    machine.ra()
    machine.rra()
    machine.pb()
    machine.pa()
    assert out.getvalue() == "sa\nra\nrra\npb\npa\n"


def test_machine_push_between_stacks():
    out = io.StringIO()
    machine = Machine([1, 2, 3], out)
    machine.pb()
    machine.pb()
    assert machine.a.values() == [3]
    assert machine.b.values() == [2, 1]
    machine.pa()
    assert machine.a.values() == [2, 3]
    assert machine.b.values() == [1]


def test_machine_combined_operations():
    out = io.StringIO()
    machine = Machine([1, 2, 3, 4], out)
    machine.pb()
    machine.pb()
    machine.ss()
    assert machine.a.values() == [4, 3]
    assert machine.b.values() == [1, 2]
    machine.rr()
    assert machine.a.values() == [3, 4]
    assert machine.b.values() == [2, 1]
    machine.rrr()
    assert machine.a.values() == [4, 3]
    assert machine.b.values() == [1, 2]
    assert out.getvalue() == "pb\npb\nss\nrr\nrrr\n"


def test_machine_single_stack_b_operations():
    out = io.StringIO()
    machine = Machine([1, 2, 3], out)
    machine.pb()
    machine.pb()
    machine.sb()
    machine.rb()
    machine.rrb()
    assert machine.b.values() == [1, 2]
    assert out.getvalue().splitlines() == ["pb", "pb", "sb", "rb", "rrb"]


def test_machine_prints_even_when_no_op():
    out = io.StringIO()
    machine = Machine([], out)
    machine.pa()
    machine.sa()
    assert out.getvalue() == "pa\nsa\n"
    assert machine.a.values() == []


def test_machine_defaults_to_stdout(capsys):
    machine = Machine([2, 1])
    machine.sa()
    assert capsys.readouterr().out == "sa\n"
    assert machine.a.values() == [1, 2]