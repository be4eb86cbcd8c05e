"""Fluent assertion API used inside generated checks.

Every failed assertion raises ContractViolationError, the one error kind a
generated case reports to its runner.

Example:
    >>> expect([1, 2, 3], "list").to_equal_sequence([1, 2, 3])
    >>> error = expect(lambda: [].pop()).to_raise(IndexError)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from collect_testing.errors import ContractViolationError, ErrorCode

T = TypeVar("T")

MessageSupplier = str | Callable[[], str]


def _resolve(message: MessageSupplier) -> str:
    return message if isinstance(message, str) else message()


def _kind_names(kinds: tuple[type[BaseException], ...]) -> str:
    return " or ".join(kind.__name__ for kind in kinds)


class Expectation(Generic[T]):
    """Fluent assertion wrapper for a list under test, or an action on it."""

    def __init__(self, value: T, description: str = "value"):
        self._value = value
        self._description = description

    def to_equal_sequence(
        self, expected: Iterable[Any], message: MessageSupplier | None = None
    ) -> Expectation[T]:
        """Assert the wrapped iterable yields ``expected``, in order, by equality."""
        assert_iterable_equals(
            expected,
            self._value,
            message or f"Not true that {self._description} holds the expected elements",
        )
        return self

    def to_raise(
        self, *kinds: type[BaseException], message: MessageSupplier = ""
    ) -> BaseException:
        """Assert the wrapped callable raises one of ``kinds``.

        Any other exception is converted to ContractViolationError chained to
        the original.

        Returns:
            The exception that was raised.
        """
        return assert_raises(kinds, self._value, message or f"expected {self._description}")


def _first_mismatch(expected: list[Any], actual: list[Any]) -> str | None:
    for i, (e, a) in enumerate(zip(expected, actual)):
        if not (e == a):
            return f"element [{i}] was {a!r} but expected {e!r}"
    if len(expected) != len(actual):
        return f"length was {len(actual)} but expected {len(expected)}"
    return None


def assert_iterable_equals(
    expected: Iterable[Any], actual: Iterable[Any], message: MessageSupplier
) -> None:
    """Assert two iterables hold equal elements in the same order.

    Args:
        expected: Expected elements.
        actual: Elements observed in the collection under test.
        message: Failure message, or a callable producing it lazily.

    Raises:
        ContractViolationError: On the first differing element or length.
    """
    expected = list(expected)
    actual = list(actual)
    mismatch = _first_mismatch(expected, actual)
    if mismatch is not None:
        raise ContractViolationError(
            f"{_resolve(message)}: {mismatch} (expected {expected!r}, actual {actual!r})",
            actual=actual,
            expected=expected,
        )


def assert_raises(
    kinds: tuple[type[BaseException], ...],
    action: Callable[[], Any],
    message: MessageSupplier,
) -> BaseException:
    """Run ``action`` and assert it raises one of ``kinds``.

    Returns:
        The raised exception.

    Raises:
        ContractViolationError: If nothing was raised, or something else was.
    """
    try:
        action()
    except kinds as e:
        return e
    except Exception as e:
        raise ContractViolationError(
            f"{_resolve(message)}: expected {_kind_names(kinds)} "
            f"but {type(e).__name__} was raised: {e}",
            error_code=ErrorCode.UNEXPECTED_EXCEPTION,
            cause=e,
            actual=type(e).__name__,
            expected=_kind_names(kinds),
        ) from e
    raise ContractViolationError(
        f"{_resolve(message)}: expected {_kind_names(kinds)} but nothing was raised",
        error_code=ErrorCode.MISSING_EXCEPTION,
        actual=None,
        expected=_kind_names(kinds),
    )


def expect(value: T, description: str = "value") -> Expectation[T]:
    """Create a fluent assertion for a value.

    Args:
        value: The list or the action to assert on.
        description: Optional description for error messages.

    Returns:
        Expectation wrapper for chainable assertions.
    """
    return Expectation(value, description)
