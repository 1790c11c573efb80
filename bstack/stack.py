import logging
from typing import Iterable, Iterator, Optional

from bstack.errors import InvalidCapacity, StackEmpty, StackFull

log = logging.getLogger(__name__)

class BoundedStack:
    """
    Array-backed LIFO of integers with a capacity fixed at construction.

    `head` counts the occupied slots, so the top element always lives at
    `elements[head-1]`. Pushing is batched: once the stack fills, the rest
    of the batch is thrown away rather than rejected value by value.

        >>> s = BoundedStack(2)
        >>> s.push([5, 6, 7])
        Traceback (most recent call last):
        ...
        bstack.errors.StackFull: Stack is full: accepted 2, dropped 1
        >>> list(s.display())
        [6, 5]
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacity(f"capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidCapacity(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._elements: list[int] = []
        self._head = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def head(self) -> int:
        return self._head

    @property
    def elements(self) -> tuple[int, ...]:
        """Snapshot of the stored values, bottom first."""
        return tuple(self._elements)

    def __len__(self) -> int:
        return self._head

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, elements={self._elements})"

    def is_empty(self) -> bool:
        return self._head == 0

    def is_full(self) -> bool:
        return self._head == self._capacity

    def free(self) -> int:
        return self._capacity - self._head

    def push(self, values: Iterable[int]) -> int:
        """
        Push `values` in order. Returns the number pushed, or raises StackFull
        as soon as a value arrives with no room left; whatever was pushed
        before that point stays.
        """
        batch = list(values)
        for accepted, value in enumerate(batch):
            if self._head == self._capacity:
                dropped = len(batch) - accepted
                log.debug('stack full at %d, dropping %d value(s)', self._head, dropped)
                raise StackFull(accepted, dropped)
            self._elements.append(value)
            self._head += 1
        log.debug('pushed %d value(s), head=%d', len(batch), self._head)
        return len(batch)

    def pop(self) -> int:
        if self._head == 0:
            raise StackEmpty('pop from empty stack')
        self._head -= 1
        value = self._elements.pop()
        log.debug('popped %d, head=%d', value, self._head)
        return value

    def top(self) -> Optional[int]:
        if self._head == 0:
            return None
        return self._elements[self._head-1]

    def display(self) -> Iterator[int]:
        """Occupied elements, top first. Raises StackEmpty up front."""
        if self._head == 0:
            raise StackEmpty('nothing to display')
        return self._walk()

    def _walk(self) -> Iterator[int]:
        # Pops during the walk shrink the range; pushes above the cursor are not seen
        i = self._head
        while True:
            i = min(i, self._head) - 1
            if i < 0:
                return
            yield self._elements[i]

    def clear(self) -> None:
        self._elements.clear()
        self._head = 0
