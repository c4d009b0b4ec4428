import pytest

from terra_media.structures import BattleQueue, Enemy, PathStack


def test_queue_is_fifo():
    queue = BattleQueue()
    first = Enemy("ORC", 60, 20)
    second = Enemy("ORC", 105, 35)
    queue.push(first)
    queue.push(second)
    assert queue.pop() == first
    assert queue.pop() == second
    assert not queue


def test_queue_len_tracks_pushes():
    queue = BattleQueue()
    queue.push(Enemy("ORC", 60, 20))
    queue.push(Enemy("ORC", 60, 20))
    assert len(queue) == 2


def test_empty_queue_pop_raises():
    with pytest.raises(IndexError):
        BattleQueue().pop()


def test_queue_clear():
    queue = BattleQueue()
    queue.push(Enemy("ORC", 60, 20))
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.pop()


def test_stack_is_lifo():
    stack = PathStack()
    stack.push("Vila dos Hobbits")
    stack.push("Rohan")
    assert stack.pop() == "Rohan"
    assert stack.pop() == "Vila dos Hobbits"
    assert not stack


def test_stack_len_and_bool():
    stack = PathStack()
    assert not stack
    stack.push("Gondor")
    assert stack
    assert len(stack) == 1


def test_empty_stack_pop_raises():
    with pytest.raises(IndexError):
        PathStack().pop()


def test_stack_clear():
    stack = PathStack()
    stack.push("Mordor")
    stack.push("Gondor")
    stack.clear()
    assert len(stack) == 0