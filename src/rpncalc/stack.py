from collections import deque


class BoundedStack:
    '''
    Last-in first-out stack of numbers that refuses to grow past capacity.

    Overflow and underflow are expected, and signalled by return value, not
    exceptions: push returns False, pop and peek return None.
    '''

    CAPACITY = 1024

    def __init__(self, capacity=None):
        '''
        Create empty stack.

        :param capacity: Maximum number of elements, CAPACITY by default.
        '''
        self.capacity = type(self).CAPACITY if capacity is None else capacity
        if self.capacity < 0:
            raise ValueError('Negative capacity {}'.format(self.capacity))
        # Not maxlen: a bounded deque silently drops from the other end.
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        '''
        Iterate bottom to top.
        '''
        return iter(self._items)

    def __repr__(self):
        return '{}({!r}, capacity={})'.format(type(self).__name__,
                                              list(self._items),
                                              self.capacity)

    @property
    def isfull(self):
        return len(self._items) >= self.capacity

    def push(self, value):
        '''
        Push value as the new top. Return False, untouched, if full.
        '''
        if self.isfull:
            return False
        self._items.append(value)
        return True

    def pop(self):
        '''
        Pop and return the top, or None if empty.
        '''
        if not self._items:
            return None
        return self._items.pop()

    def peek(self):
        '''
        Return the top without popping it, or None if empty.
        '''
        if not self._items:
            return None
        return self._items[-1]

    def clear(self):
        self._items.clear()

    def snapshot(self, n=8, fill=0.0):
        '''
        Return the n topmost elements, deepest first, top last.

        Slots deeper than the stack are fill.
        '''
        shown = list(self._items)[-n:] if n > 0 else []
        return (fill,) * (n - len(shown)) + tuple(shown)
