import pytest

from estruturas.linked_lists import DoublyLinkedList, SinglyLinkedList, deque_exercise


def test_insert_sorted_at_end_and_diagram():
    items = SinglyLinkedList("BCEF")
    items.insert_sorted("G")
    assert list(items) == sorted("BCEFG")
    assert items.tail() == "G"
    assert items.diagram() == "head--> |B|| -> |C|| -> |E|| -> |F|| -> |G|X|  <--tail"


@pytest.mark.parametrize("item", ["A", "D", "Z"])
def test_insert_sorted_keeps_order(item):
    items = SinglyLinkedList("BCEF")
    items.insert_sorted(item)
    assert list(items) == sorted("BCEF" + item)
    assert len(items) == 5
    assert items.head() == min("BCEF" + item)
    assert items.tail() == max("BCEF" + item)


def test_insert_sorted_into_empty():
    items = SinglyLinkedList()
    items.insert_sorted(3)
    assert items.head() == 3 and items.tail() == 3


def test_swap_nodes_solves_exercise():
    items = SinglyLinkedList("ADCBE")
    items.swap_nodes(1, 3)
    assert list(items) == sorted("ADCBE")
    assert items.tail() == "E"


def test_swap_adjacent_and_head_round_trip():
    items = SinglyLinkedList("ABC")
    items.swap_nodes(0, 1)
    assert list(items)[:2] == ["B", "A"]
    items.swap_nodes(1, 0)
    assert list(items) == list("ABC")
    items.swap_nodes(1, 2)
    assert items.tail() == "B"


def test_swap_out_of_range():
    with pytest.raises(IndexError):
        SinglyLinkedList("AB").swap_nodes(0, 2)


def test_reverse_singly():
    values = [10, 20, 30, 40, 50]
    items = SinglyLinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    assert items.head() == 50 and items.tail() == 10
    items.push_back(5)
    assert items.tail() == 5


def test_insert_positions():
    items = SinglyLinkedList("ac")
    items.insert("b", 1)
    items.insert("z", 99)
    items.insert("_", 0)
    assert list(items) == ["_", "a", "b", "c", "z"]
    assert items.tail() == "z"
    with pytest.raises(ValueError):
        items.insert("x", -1)


def test_pops_and_remove():
    items = SinglyLinkedList("abcd")
    assert items.pop_back() == "d"
    assert items.pop_front() == "a"
    assert items.remove(1) == "c"
    assert items.tail() == "b"
    assert items.remove(0) == "b"
    assert len(items) == 0
    with pytest.raises(IndexError):
        items.pop_front()
    with pytest.raises(IndexError):
        items.pop_back()
    with pytest.raises(IndexError):
        items.remove(0)
    with pytest.raises(IndexError):
        items.head()
    assert str(items) == "|"


def test_doubly_reverse_keeps_both_directions():
    values = [10, 20, 30, 40, 50]
    items = DoublyLinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    assert list(reversed(items)) == values


def test_doubly_diagrams():
    items = DoublyLinkedList([10, 20])
    assert items.diagram() == "head--> |X|10|| <==> ||20|X|  <--tail"
    assert items.reverse_diagram().startswith("tail--> |X|20||")
    assert items.reverse_diagram().endswith("|X|  <--head")


def test_doubly_push_pop():
    items = DoublyLinkedList()
    items.push_front(2)
    items.push_back(3)
    items.push_front(1)
    assert list(items) == [1, 2, 3]
    assert items.pop_back() == 3
    assert items.pop_front() == 1
    assert items.pop_front() == 2
    with pytest.raises(IndexError):
        items.pop_back()


def test_extend_left_prepends_one_by_one():
    items = DoublyLinkedList("CA")
    items.extend_left("XY")
    assert "".join(items) == "YXCA"


def test_drop_errors_leave_list_untouched():
    items = DoublyLinkedList("abc")
    with pytest.raises(IndexError):
        items.drop_left(4)
    with pytest.raises(ValueError):
        items.drop_right(-1)
    assert len(items) == 3
    items.drop_right(2)
    assert list(items) == ["a"]


def test_deque_exercise():
    steps = deque_exercise()
    assert len(steps) == 9
    assert steps[0] == "DESCARTES"
    assert steps[-1] == "EURECA"
    assert steps[1] == steps[0][3:]