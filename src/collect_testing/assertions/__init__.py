"""Assertion helpers for generated contract checks."""

from collect_testing.assertions.expect import (
    Expectation,
    assert_iterable_equals,
    assert_raises,
    expect,
)

__all__ = [
    "Expectation",
    "expect",
    "assert_iterable_equals",
    "assert_raises",
]
