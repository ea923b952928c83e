import pytest

from dsakit.linked_list import (
    DoubleNode,
    SinglyNode,
    build_double,
    build_singly,
    middle_node,
    remove_elements,
    reverse_list,
)


def test_build_singly_round_trip():
    values = [5, 1, 2, 6]
    assert list(build_singly(values)) == values


def test_build_singly_empty():
    assert build_singly([]) is None


def test_singly_render():
    head = build_singly([5, 1, 2, 6])
    assert head.render() == "Single Linked list\n5->1->2->6->null\n"


def test_singly_str_is_value():
    assert str(SinglyNode(42)) == "42"


def test_singly_search():
    head = build_singly([5, 1, 2, 6])
    assert head.search(4) is False
    assert head.search(6) is True


def test_build_double_links_both_ways():
    values = [5, 7, 8, 10]
    head = build_double(values)
    assert list(head) == values
    tail = head
    while tail.next is not None:
        assert tail.next.prev is tail
        tail = tail.next
    backwards = []
    while tail is not None:
        backwards.append(tail.val)
        tail = tail.prev
    assert backwards == list(reversed(values))


def test_double_render():
    head = build_double([5, 7, 8, 10])
    assert head.render() == "Double Linked list\n5<->7<->8<->10<->null\n"


def test_double_str_is_value():
    assert str(DoubleNode(3)) == "3"


@pytest.mark.parametrize(
    "values, target",
    [([1, 2, 6, 3, 4, 5, 6], 6), ([7, 7, 7, 7], 7), ([], 1), ([1, 2, 3], 9)],
)
def test_remove_elements(values, target):
    head = remove_elements(build_singly(values), target)
    remaining = list(head) if head is not None else []
    assert remaining == [v for v in values if v != target]


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1], [2, 1]])
def test_reverse_list(values):
    assert list(reverse_list(build_singly(values))) == list(reversed(values))


def test_reverse_empty():
    assert reverse_list(None) is None


def test_reverse_twice_is_identity():
    values = [3, 1, 4, 1, 5]
    assert list(reverse_list(reverse_list(build_singly(values)))) == values


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6], [1], [1, 2]])
def test_middle_node_position(values):
    middle = middle_node(build_singly(values))
    assert middle.val == values[len(values) // 2]
    assert list(middle) == values[len(values) // 2:]


def test_middle_node_empty_raises():
    with pytest.raises(ValueError):
        middle_node(None)