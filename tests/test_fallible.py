"""Tests for the checked operations that could shrink a List1 to nothing."""

import pytest
from hypothesis import given, strategies as st

from list1 import EmptyError, List1


non_empty_ints = st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=30)


class TestTryPop:
    def test_pop_single_is_refused(self):
        """try_pop on [2] fails and leaves [2]."""
        c = List1(2)
        with pytest.raises(EmptyError):
            c.try_pop()
        assert c == [2]

    def test_pop_returns_last(self):
        c = List1(1, 2, 3)
        assert c.try_pop() == 3
        assert c.try_pop() == 2
        assert c == [1]
        with pytest.raises(EmptyError):
            c.try_pop()


class TestTryRemove:
    def test_remove_keeps_order(self):
        c = List1(1, 2, 3, 4)
        assert c.try_remove(1) == 2
        assert c == [1, 3, 4]

    def test_remove_negative_index(self):
        c = List1(1, 2, 3)
        assert c.try_remove(-1) == 3
        assert c == [1, 2]

    def test_remove_single_is_refused(self):
        c = List1(1)
        with pytest.raises(EmptyError):
            c.try_remove(0)
        assert c == [1]

    def test_length_is_checked_before_index(self):
        """A bad index on a one-element container reports EmptyError."""
        c = List1(1)
        with pytest.raises(EmptyError):
            c.try_remove(99)

    def test_bad_index_is_index_error(self):
        c = List1(1, 2)
        with pytest.raises(IndexError):
            c.try_remove(2)
        assert c == [1, 2]


class TestTrySwapRemove:
    def test_swap_remove_moves_last_into_gap(self):
        c = List1(1, 2, 3, 4)
        assert c.try_swap_remove(0) == 1
        assert c == [4, 2, 3]

    def test_swap_remove_last_position(self):
        c = List1(1, 2, 3)
        assert c.try_swap_remove(2) == 3
        assert c == [1, 2]
        assert c.try_swap_remove(-1) == 2
        assert c == [1]

    def test_swap_remove_negative_index(self):
        c = List1(1, 2, 3, 4)
        assert c.try_swap_remove(-3) == 2
        assert c == [1, 4, 3]

    def test_swap_remove_single_is_refused(self):
        c = List1(1)
        with pytest.raises(EmptyError):
            c.try_swap_remove(0)
        assert c == [1]

    def test_bad_index_is_index_error(self):
        c = List1(1, 2)
        with pytest.raises(IndexError):
            c.try_swap_remove(-3)
        assert c == [1, 2]

    @given(non_empty_ints, st.data())
    def test_swap_remove_matches_model(self, items, data):
        """For any valid index, the removed element and the rest match a list model."""
        if len(items) < 2:
            return
        index = data.draw(st.integers(min_value=-len(items), max_value=len(items) - 1))
        c = List1.try_from_list(items)
        removed = c.try_swap_remove(index)
        assert removed == items[index]
        assert sorted(c.to_list() + [removed]) == sorted(items)
        assert len(c) == len(items) - 1


class TestTryTruncate:
    def test_truncate_scenario(self):
        """try_truncate(0) fails on [1,2,3,4]; try_truncate(3) leaves [1,2,3]."""
        c = List1(1, 2, 3, 4)
        with pytest.raises(EmptyError):
            c.try_truncate(0)
        assert c == [1, 2, 3, 4]
        c.try_truncate(3)
        assert c == [1, 2, 3]

    def test_truncate_longer_is_noop(self):
        c = List1(1, 2)
        c.try_truncate(10)
        assert c == [1, 2]

    def test_truncate_negative_is_refused(self):
        c = List1(1, 2)
        with pytest.raises(EmptyError):
            c.try_truncate(-1)
        assert c == [1, 2]


class TestTryResize:
    def test_resize_grow(self):
        c = List1(1)
        c.try_resize(3, 0)
        assert c == [1, 0, 0]

    def test_resize_shrink(self):
        c = List1(1, 2, 3)
        c.try_resize(1, 0)
        assert c == [1]

    def test_resize_to_zero_is_refused(self):
        c = List1(1, 2, 3)
        with pytest.raises(EmptyError):
            c.try_resize(0, 9)
        assert c == [1, 2, 3]

    def test_resize_copies_fill_value(self):
        """Grown slots get independent copies; the final slot gets the value itself."""
        fill = [0]
        c = List1([1])
        c.try_resize(4, fill)
        assert c == [[1], [0], [0], [0]]
        assert c[1] is not c[2]
        assert c[3] is fill


class TestTrySplitOff:
    def test_split_off_scenario(self):
        """Splitting [1,2,3,4] at 0 or 4 fails; at 3 yields [1,2,3] and [4]."""
        c = List1(1, 2, 3, 4)
        with pytest.raises(EmptyError):
            c.try_split_off(0)
        with pytest.raises(EmptyError):
            c.try_split_off(4)
        assert c == [1, 2, 3, 4]

        right = c.try_split_off(3)
        assert isinstance(right, List1)
        assert c == [1, 2, 3]
        assert right == [4]

    def test_split_off_past_end_is_refused(self):
        c = List1(1, 2)
        with pytest.raises(EmptyError):
            c.try_split_off(7)
        with pytest.raises(EmptyError):
            c.try_split_off(-1)
        assert c == [1, 2]

    @given(non_empty_ints, st.data())
    def test_split_off_halves_concatenate(self, items, data):
        """For any valid split point, the halves concatenate back to the original."""
        if len(items) < 2:
            return
        at = data.draw(st.integers(min_value=1, max_value=len(items) - 1))
        c = List1.try_from_list(items)
        right = c.try_split_off(at)
        assert c.to_list() + right.to_list() == items


class TestDedup:
    def test_dedup(self):
        c = List1(1, 1, 2, 2, 2, 1, 3, 3)
        c.dedup()
        assert c == [1, 2, 1, 3]

    def test_dedup_all_equal_keeps_one(self):
        c = List1(5, 5, 5)
        c.dedup()
        assert c == [5]

    def test_dedup_by_key(self):
        c = List1(10, 11, 20, 21, 22, 30)
        c.dedup_by_key(lambda x: x // 10)
        assert c == [10, 20, 30]

    def test_dedup_by_compares_with_last_kept(self):
        """same_bucket receives the candidate and the last retained element."""
        calls = []

        def same_bucket(current, previous):
            calls.append((current, previous))
            return abs(current - previous) <= 1

        c = List1(1, 2, 3, 5, 6)
        c.dedup_by(same_bucket)
        assert c == [1, 3, 5]
        assert calls == [(2, 1), (3, 1), (5, 3), (6, 5)]

    def test_dedup_by_failure_leaves_content(self):
        def explode(current, previous):
            raise RuntimeError("boom")

        c = List1(1, 2)
        with pytest.raises(RuntimeError):
            c.dedup_by(explode)
        assert c == [1, 2]

    @given(non_empty_ints)
    def test_dedup_never_empties(self, items):
        """For any non-empty content, every dedup flavour leaves at least one element."""
        for dedup in (
            lambda c: c.dedup(),
            lambda c: c.dedup_by_key(lambda x: x % 3),
            lambda c: c.dedup_by(lambda a, b: True),
        ):
            c = List1.try_from_list(items)
            dedup(c)
            assert len(c) >= 1
            assert c.first == items[0]

    @given(non_empty_ints)
    def test_dedup_has_no_adjacent_duplicates(self, items):
        c = List1.try_from_list(items)
        c.dedup()
        assert all(a != b for a, b in zip(c, c[1:]))
