"""Tests for the assertion helpers."""

from __future__ import annotations

import pytest

from collect_testing import (
    ContractViolationError,
    ErrorCode,
    assert_iterable_equals,
    assert_raises,
    expect,
)


class TestExpectation:
    """Tests for the fluent expect() API."""

    def test_to_equal_sequence(self):
        expect(iter(["a", "b"])).to_equal_sequence(["a", "b"])
        with pytest.raises(ContractViolationError, match=r"element \[1\]"):
            expect(["a", "c"]).to_equal_sequence(["a", "b"])

    def test_description_in_default_message(self):
        with pytest.raises(ContractViolationError, match="list holds the expected elements"):
            expect([], "list").to_equal_sequence(["a"])

    def test_explicit_message(self):
        with pytest.raises(ContractViolationError, match="Not true that list remained unchanged"):
            expect(["b"], "list").to_equal_sequence(["a"], "Not true that list remained unchanged")

    def test_to_raise(self):
        error = expect(lambda: [].pop()).to_raise(IndexError)
        assert isinstance(error, IndexError)

    def test_to_raise_any_of(self):
        error = expect(lambda: {}["k"]).to_raise(IndexError, KeyError)
        assert isinstance(error, KeyError)

    def test_to_raise_nothing(self):
        with pytest.raises(ContractViolationError, match="nothing was raised"):
            expect(lambda: None, "insert").to_raise(IndexError)

    def test_to_raise_lazy_message(self):
        with pytest.raises(ContractViolationError, match="Not true that insert"):
            expect(lambda: None).to_raise(
                IndexError, message=lambda: "Not true that insert(-1) was rejected"
            )

    def test_to_raise_wraps_other_exceptions(self):
        def raise_value_error():
            raise ValueError("read-only")

        with pytest.raises(ContractViolationError) as exc_info:
            expect(raise_value_error).to_raise(NotImplementedError)
        assert exc_info.value.error_code == ErrorCode.UNEXPECTED_EXCEPTION
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestAssertIterableEquals:
    """Tests for assert_iterable_equals."""

    def test_equal(self):
        assert_iterable_equals(["a", None], ("a", None), "unused")

    def test_first_mismatch_reported(self):
        with pytest.raises(ContractViolationError) as exc_info:
            assert_iterable_equals(["d", "a"], ["a", "d"], "Not true that list was prepended")
        message = exc_info.value.message
        assert message.startswith("Not true that list was prepended")
        assert "element [0] was 'a' but expected 'd'" in message

    def test_length_mismatch(self):
        with pytest.raises(ContractViolationError, match="length was 1 but expected 2"):
            assert_iterable_equals(["a", "b"], ["a"], "short")

    def test_lazy_message(self):
        calls = []

        def message() -> str:
            calls.append(1)
            return "lazy"

        assert_iterable_equals([1], [1], message)
        assert calls == []
        with pytest.raises(ContractViolationError, match="lazy"):
            assert_iterable_equals([1], [2], message)

    def test_default_code(self):
        with pytest.raises(ContractViolationError) as exc_info:
            assert_iterable_equals([1], [2], "m")
        assert exc_info.value.error_code == ErrorCode.CONTRACT_VIOLATED


class TestAssertRaises:
    """Tests for assert_raises."""

    def test_returns_matching_exception(self):
        error = assert_raises((KeyError, IndexError), lambda: [][0], "m")
        assert isinstance(error, IndexError)

    def test_subclass_matches(self):
        def raise_lookup():
            raise ModuleNotFoundError("x")

        assert isinstance(assert_raises((ImportError,), raise_lookup, "m"), ModuleNotFoundError)

    def test_other_exception_wrapped(self):
        def raise_value_error():
            raise ValueError("wrong kind")

        with pytest.raises(ContractViolationError) as exc_info:
            assert_raises((IndexError,), raise_value_error, "m")

        error = exc_info.value
        assert error.error_code == ErrorCode.UNEXPECTED_EXCEPTION
        assert isinstance(error.__cause__, ValueError)
        assert error.expected == "IndexError"
        assert error.actual == "ValueError"

    def test_nothing_raised(self):
        with pytest.raises(ContractViolationError) as exc_info:
            assert_raises((NotImplementedError, IndexError), lambda: None, "insert")
        assert exc_info.value.error_code == ErrorCode.MISSING_EXCEPTION
        assert "expected NotImplementedError or IndexError" in exc_info.value.message
