import pytest

from estruturas.array_stack import BoundedStack


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_capacity_falls_back_to_ten(size):
    assert BoundedStack(size).max_size() == 10


def test_default_capacity():
    assert BoundedStack().max_size() == 10


def test_lifo_order():
    stack = BoundedStack(5)
    for item in (1, 2, 3):
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_scripted_session_with_capacity_four():
    stack = BoundedStack(4)
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.pop() == 3
    stack.push(4)
    stack.push(5)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(6)
    assert len(stack) == 4
    assert [stack.pop() for _ in range(4)] == [5, 4, 2, 1]
    with pytest.raises(IndexError):
        stack.pop()
    stack.push(7)
    assert stack.top() == 7
    stack.clear()
    assert stack.is_empty()
    assert len(stack) == 0
    assert stack.max_size() == 4


def test_top_does_not_remove():
    stack = BoundedStack(3)
    stack.push("x")
    assert stack.top() == "x"
    assert len(stack) == 1


def test_top_of_empty_raises():
    with pytest.raises(IndexError):
        BoundedStack().top()


def test_str_shows_free_cells():
    stack = BoundedStack(4)
    assert str(stack) == "| | | | |"
    stack.push(1)
    stack.push(2)
    assert str(stack) == "|1|2| | |"


def test_holds_characters():
    stack = BoundedStack(2)
    stack.push("A")
    stack.push("B")
    assert str(stack) == "|A|B|"
    assert stack.pop() == "B"