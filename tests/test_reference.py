"""Tests for the CheckedList reference implementation."""

from __future__ import annotations

import pytest

from collect_testing import (
    CheckedList,
    ConcurrentModificationError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)


class TestCheckedListInsert:
    """Tests for CheckedList.insert."""

    @pytest.mark.parametrize(
        "index,expected",
        [(0, ["d", "a", "b", "c"]), (1, ["a", "d", "b", "c"]), (3, ["a", "b", "c", "d"])],
    )
    def test_insert(self, index, expected):
        checked = CheckedList(["a", "b", "c"])
        checked.insert(index, "d")
        assert checked == expected
        assert checked.mod_count == 1

    @pytest.mark.parametrize("index", [-1, 4])
    def test_out_of_range(self, index):
        checked = CheckedList(["a", "b", "c"])
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            checked.insert(index, "d")
        assert exc_info.value.context.extra == {"index": index, "size": 3}
        assert checked == ["a", "b", "c"]
        assert checked.mod_count == 0

    def test_unsupported(self):
        checked = CheckedList(["a"], supports_insert=False)
        with pytest.raises(UnsupportedOperationError):
            checked.insert(0, "d")

    def test_unsupported_checked_before_bounds(self):
        with pytest.raises(NotImplementedError):
            CheckedList([], supports_insert=False).insert(-1, "d")

    def test_none_checked_before_bounds(self):
        with pytest.raises(NotImplementedError):
            CheckedList([], allows_none=False).insert(-1, None)

    def test_none_allowed(self):
        checked = CheckedList(["a"])
        checked.insert(1, None)
        assert checked == ["a", None]

    def test_append_uses_insert(self):
        checked = CheckedList()
        checked.append("a")
        assert checked == ["a"]
        with pytest.raises(NotImplementedError):
            CheckedList(supports_insert=False).append("a")


class TestCheckedListSequence:
    """Tests for the rest of the MutableSequence interface."""

    def test_indexing(self):
        checked = CheckedList(["a", "b", "c"])
        assert checked[0] == "a"
        assert checked[-1] == "c"
        assert checked[1:] == ["b", "c"]
        assert len(checked) == 3

    def test_set_item(self):
        checked = CheckedList(["a", "b"])
        checked[0] = "z"
        assert checked == ["z", "b"]
        assert checked.mod_count == 0

    def test_set_none_rejected(self):
        with pytest.raises(UnsupportedOperationError):
            CheckedList(["a"], allows_none=False)[0] = None

    def test_delete(self):
        checked = CheckedList(["a", "b"])
        del checked[0]
        assert checked == ["b"]
        assert checked.mod_count == 1

    def test_equality(self):
        assert CheckedList(["a"]) == CheckedList(["a"])
        assert CheckedList(["a"]) != CheckedList(["b"])
        assert CheckedList(["a"]) != ("a",)

    def test_repr(self):
        assert repr(CheckedList(["a"])) == "CheckedList(['a'])"


class TestCheckedListIteration:
    """Tests for fail-fast iteration."""

    def test_iterates(self):
        assert list(CheckedList(["a", "b"])) == ["a", "b"]

    def test_fails_fast_after_insert(self):
        checked = CheckedList(["a", "b", "c"])
        iterator = iter(checked)
        checked.insert(0, "d")
        with pytest.raises(ConcurrentModificationError):
            next(iterator)

    def test_fails_fast_on_empty(self):
        checked = CheckedList()
        iterator = iter(checked)
        checked.insert(0, "d")
        with pytest.raises(RuntimeError):
            next(iterator)

    def test_set_does_not_invalidate(self):
        checked = CheckedList(["a", "b"])
        iterator = iter(checked)
        checked[0] = "z"
        assert next(iterator) == "z"

    def test_fail_fast_disabled(self):
        checked = CheckedList(["a", "b"], fail_fast=False)
        iterator = iter(checked)
        checked.insert(0, "d")
        assert next(iterator) == "d"

    def test_exhausted_unmodified_iterator_stops(self):
        iterator = iter(CheckedList())
        with pytest.raises(StopIteration):
            next(iterator)
