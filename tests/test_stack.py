'''
Bounded stack tests
'''

from rpncalc.stack import BoundedStack

from pytest import raises


def test_default_capacity(stack):
    assert stack.capacity == BoundedStack.CAPACITY == 1024
    assert len(stack) == 0


def test_push_pop_order(stack):
    for value in 1.0, 2.0, 3.0:
        assert stack.push(value)
    assert list(stack) == [1.0, 2.0, 3.0]
    assert stack.pop() == 3.0
    assert stack.pop() == 2.0
    assert len(stack) == 1


def test_size_is_pushes_minus_pops():
    s = BoundedStack(capacity=5)
    pushes = pops = 0
    for op in 'ppxpppxxpp':
        if op == 'p':
            pushes += s.push(float(pushes))
        elif s.pop() is not None:
            pops += 1
        assert len(s) == pushes - pops


def test_push_full():
    s = BoundedStack(capacity=2)
    assert s.push(1.0)
    assert s.push(2.0)
    assert s.isfull
    assert not s.push(3.0)
    assert len(s) == 2
    assert s.peek() == 2.0


def test_zero_capacity():
    s = BoundedStack(capacity=0)
    assert not s.push(1.0)
    assert len(s) == 0


def test_negative_capacity():
    with raises(ValueError, match='Negative capacity'):
        BoundedStack(capacity=-1)


def test_pop_peek_empty(stack):
    assert stack.pop() is None
    assert stack.peek() is None
    assert len(stack) == 0


def test_peek_does_not_pop(stack):
    stack.push(4.0)
    assert stack.peek() == 4.0
    assert stack.peek() == 4.0
    assert len(stack) == 1


def test_clear(stack):
    stack.clear()
    assert len(stack) == 0
    stack.push(1.0)
    stack.push(2.0)
    stack.clear()
    assert len(stack) == 0
    assert stack.pop() is None


def test_snapshot_pads_deepest_slots(stack):
    stack.push(1.0)
    stack.push(2.0)
    assert stack.snapshot(4) == (0.0, 0.0, 1.0, 2.0)


def test_snapshot_shows_only_topmost(stack):
    for value in range(10):
        stack.push(float(value))
    assert stack.snapshot(3) == (7.0, 8.0, 9.0)
    assert stack.snapshot() == tuple(float(v) for v in range(2, 10))
    assert len(stack) == 10


def test_snapshot_empty(stack):
    assert stack.snapshot() == (0.0,) * 8
    assert stack.snapshot(0) == ()
