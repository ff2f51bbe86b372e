import pytest

from linedit.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_pop_returns_items_last_in_first_out():
    stack = BoundedStack(5)
    for item in ("a", "b", "c"):
        stack.push(item)
    assert [stack.pop(), stack.pop(), stack.pop()] == ["c", "b", "a"]


def test_len_and_bool_follow_contents():
    stack = BoundedStack(3)
    assert not stack
    assert len(stack) == 0
    stack.push(1)
    assert stack
    assert len(stack) == 1


def test_push_beyond_capacity_raises():
    stack = BoundedStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2
    assert stack.peek() == 2


def test_default_capacity_is_one_hundred():
    stack = BoundedStack()
    for item in range(100):
        stack.push(item)
    with pytest.raises(StackOverflowError):
        stack.push(100)


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack(1).pop()


def test_peek_does_not_remove():
    stack = BoundedStack(2)
    stack.push("x")
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_peek_empty_is_none():
    assert BoundedStack(1).peek() is None


def test_clear_empties_the_stack():
    stack = BoundedStack(3)
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)