import pytest

from bstack.errors import InvalidCapacity, StackEmpty, StackFull
from bstack.stack import BoundedStack

class TestConstruct:
    @pytest.mark.parametrize('capacity', [0, 1, 5, 1000])
    def test_new_stack_is_empty(self, capacity):
        s = BoundedStack(capacity)
        assert s.head == 0
        assert s.capacity == capacity
        assert s.top() is None
        with pytest.raises(StackEmpty):
            s.display()

    def test_negative_capacity(self):
        with pytest.raises(InvalidCapacity):
            BoundedStack(-1)

    @pytest.mark.parametrize('capacity', ['5', 2.0, None, True])
    def test_non_integer_capacity(self, capacity):
        with pytest.raises(InvalidCapacity):
            BoundedStack(capacity)

class TestPush:
    def test_within_capacity(self):
        s = BoundedStack(5)
        assert s.push([1, 2, 3]) == 3
        assert s.head == 3
        assert s.top() == 3

    def test_exactly_full_does_not_raise(self):
        s = BoundedStack(3)
        s.push([7, 8, 9])
        assert s.is_full()
        assert s.elements == (7, 8, 9)

    def test_overflow_keeps_prefix(self):
        """
        capacity=2, push 5 6 7 keeps [5, 6] only
        """
        s = BoundedStack(2)
        with pytest.raises(StackFull) as excinfo:
            s.push([5, 6, 7])
        assert excinfo.value.accepted == 2
        assert excinfo.value.dropped == 1
        assert s.elements == (5, 6)
        assert s.head == 2

    def test_overflow_drops_whole_remainder(self):
        s = BoundedStack(4)
        s.push([1, 2])
        with pytest.raises(StackFull) as excinfo:
            s.push([3, 4, 5, 6, 7])
        assert excinfo.value.accepted == 2
        assert excinfo.value.dropped == 3
        assert s.elements == (1, 2, 3, 4)

    def test_zero_capacity(self):
        s = BoundedStack(0)
        with pytest.raises(StackFull) as excinfo:
            s.push([1])
        assert excinfo.value.accepted == 0
        assert s.head == 0
        assert s.top() is None

    def test_empty_batch_on_full_stack(self):
        s = BoundedStack(0)
        assert s.push([]) == 0

    def test_push_from_generator(self):
        s = BoundedStack(3)
        s.push(i*i for i in range(3))
        assert s.elements == (0, 1, 4)

    def test_push_is_reentrant_after_pop(self):
        s = BoundedStack(1)
        s.push([1])
        s.pop()
        s.push([2])
        assert s.top() == 2

class TestPop:
    def test_lifo(self):
        s = BoundedStack(5)
        s.push([1, 2, 3])
        assert s.pop() == 3
        assert s.head == 2
        assert s.pop() == 2
        assert s.head == 1
        assert list(s.display()) == [1]

    def test_push_pop_round_trip(self):
        s = BoundedStack(10)
        s.push([4, 5])
        before = s.head
        s.push([-9])
        assert s.pop() == -9
        assert s.head == before

    def test_pop_empty(self):
        s = BoundedStack(3)
        with pytest.raises(StackEmpty):
            s.pop()
        assert s.head == 0

    def test_pop_until_empty(self):
        s = BoundedStack(2)
        s.push([1, 2])
        s.pop()
        s.pop()
        with pytest.raises(StackEmpty):
            s.pop()
        assert s.head == 0
        assert s.elements == ()

class TestTop:
    def test_top_does_not_mutate(self):
        s = BoundedStack(3)
        s.push([1, 2])
        assert s.top() == 2
        assert s.top() == 2
        assert s.head == 2

    def test_zero_on_top_is_not_empty(self):
        s = BoundedStack(3)
        s.push([0])
        assert s.top() == 0
        assert s.top() is not None

class TestDisplay:
    def test_top_to_bottom(self):
        s = BoundedStack(4)
        s.push([1, 2, 3, 4])
        assert list(s.display()) == [4, 3, 2, 1]

    def test_display_is_repeatable(self):
        s = BoundedStack(4)
        s.push([10, 20])
        assert list(s.display()) == list(s.display())

    def test_display_is_lazy(self):
        s = BoundedStack(4)
        s.push([1, 2, 3])
        it = s.display()
        assert next(it) == 3
        assert s.head == 3

    def test_pop_during_display(self):
        s = BoundedStack(4)
        s.push([1, 2, 3])
        it = s.display()
        assert next(it) == 3
        s.pop()
        s.pop()
        assert list(it) == [1]

    def test_clear_during_display(self):
        s = BoundedStack(4)
        s.push([1, 2])
        it = s.display()
        next(it)
        s.clear()
        assert list(it) == []

    def test_display_after_clear(self):
        s = BoundedStack(4)
        s.push([1, 2])
        s.clear()
        assert s.head == 0
        with pytest.raises(StackEmpty):
            s.display()

class TestHelpers:
    def test_len_and_free(self):
        s = BoundedStack(5)
        s.push([1, 2])
        assert len(s) == 2
        assert s.free() == 3
        assert not s.is_empty()
        assert not s.is_full()

    def test_elements_is_a_snapshot(self):
        s = BoundedStack(3)
        s.push([1, 2])
        snapshot = s.elements
        with pytest.raises(AttributeError):
            snapshot.append(3)
        with pytest.raises(AttributeError):
            s.elements = [9]
        s.pop()
        assert snapshot == (1, 2)
        assert s.elements == (1,)
        assert len(s.elements) == s.head

    def test_repr(self):
        s = BoundedStack(3)
        s.push([1])
        assert repr(s) == 'BoundedStack(capacity=3, elements=[1])'
