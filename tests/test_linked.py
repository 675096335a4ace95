import pytest

from estruturas.linked import LinkedDeque, LinkedQueue, LinkedStack


def test_stack_pushes_then_pops_everything():
    stack = LinkedStack()
    for item in range(10):
        stack.push(item)
    assert len(stack) == 10
    assert stack.top() == 9
    popped = [stack.pop() for _ in range(10)]
    assert popped == list(reversed(range(10)))
    with pytest.raises(IndexError):
        stack.pop()
    assert stack.is_empty()


def test_stack_iterates_top_first_and_str():
    stack = LinkedStack()
    for item in (1, 2, 3):
        stack.push(item)
    assert list(stack) == [3, 2, 1]
    assert str(stack) == "|3|2|1|"


def test_stack_top_empty_and_clear():
    stack = LinkedStack()
    with pytest.raises(IndexError):
        stack.top()
    stack.push(5)
    stack.clear()
    assert len(stack) == 0
    assert list(stack) == []


def test_queue_scripted_session():
    queue = LinkedQueue()
    for item in (1, 2, 3):
        queue.enqueue(item)
    assert queue.dequeue() == 1
    for item in (4, 5, 6):
        queue.enqueue(item)
    assert list(queue) == [2, 3, 4, 5, 6]
    assert [queue.dequeue() for _ in range(5)] == [2, 3, 4, 5, 6]
    with pytest.raises(IndexError):
        queue.dequeue()
    queue.enqueue(7)
    assert queue.head() == 7
    assert len(queue) == 1
    queue.clear()
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.head()


def test_queue_str_follows_iteration():
    queue = LinkedQueue()
    assert str(queue) == "|"
    queue.enqueue("a")
    queue.enqueue("b")
    assert str(queue) == "|a|b|"


def test_deque_scripted_session():
    deque = LinkedDeque()
    deque.add_first(6)
    deque.add_last(7)
    deque.add_first(5)
    deque.add_last(8)
    deque.add_first(4)
    deque.add_last(9)
    assert list(deque) == list(range(4, 10))
    assert list(reversed(deque)) == list(reversed(list(deque)))
    assert deque.first() == 4
    assert deque.last() == 9
    removed = [
        deque.remove_first(),
        deque.remove_last(),
        deque.remove_last(),
        deque.remove_first(),
        deque.remove_last(),
        deque.remove_first(),
    ]
    assert sorted(removed) == list(range(4, 10))
    assert deque.is_empty()
    with pytest.raises(IndexError):
        deque.remove_last()
    with pytest.raises(IndexError):
        deque.remove_first()
    deque.add_last(2)
    assert deque.first() == deque.last() == 2
    deque.clear()
    assert len(deque) == 0
    with pytest.raises(IndexError):
        deque.first()


def test_deque_reverse_str_mirrors_str():
    deque = LinkedDeque()
    for item in (1, 2, 3, 4):
        deque.add_last(item)
    mirrored = LinkedDeque()
    for item in deque:
        mirrored.add_first(item)
    assert deque.reverse_str() == str(mirrored)
    assert mirrored.reverse_str() == str(deque)


def test_deque_links_survive_removal_at_both_ends():
    deque = LinkedDeque()
    for item in range(6):
        deque.add_last(item)
    deque.remove_first()
    deque.remove_last()
    assert list(deque) == [1, 2, 3, 4]
    assert list(reversed(deque)) == [4, 3, 2, 1]