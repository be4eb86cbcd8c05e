"""Pytest fixtures for collect-testing tests."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import pytest

from collect_testing import (
    CheckedList,
    CheckedListGenerator,
    IndexOutOfRangeError,
    SampleElements,
)


class BuiltinListGenerator:
    """Creates plain Python lists, which accept index -1 and never fail fast."""

    def __init__(self, samples: SampleElements[Any] | None = None) -> None:
        self.samples = samples or SampleElements.strings()

    def create(self, *elements: Any) -> list[Any]:
        return list(elements)


class AppendingList(CheckedList):
    """Honours the index bounds but always inserts at the end."""

    def insert(self, index: int, value: Any) -> None:
        if not 0 <= index <= len(self):
            raise IndexOutOfRangeError(index=index, size=len(self))
        super().insert(len(self), value)


class LeakyRejectingList(CheckedList):
    """Refuses every insertion, but drops its first element before refusing."""

    def insert(self, index: int, value: Any) -> None:
        if len(self):
            del self[0]
        raise NotImplementedError("insert(int, E)")


class WrongErrorList(CheckedList):
    """Refuses every insertion with ValueError."""

    def insert(self, index: int, value: Any) -> None:
        raise ValueError("read-only")


class CorruptingList(CheckedList):
    """Inserts correctly, but can no longer be iterated once modified."""

    def __iter__(self) -> Iterator[Any]:
        if self.mod_count:
            raise TypeError("internal state corrupted")
        return super().__iter__()


class RuntimeErrorList(CheckedList):
    """Fails fast with a plain RuntimeError, as the builtin dict and set do."""

    def __iter__(self) -> Iterator[Any]:
        expected_mod_count = self.mod_count
        index = 0
        while True:
            if self.mod_count != expected_mod_count:
                raise RuntimeError("list changed size during iteration")
            if index >= len(self):
                return
            yield self[index]
            index += 1


class ListTypeGenerator:
    """Creates instances of a CheckedList subclass."""

    def __init__(
        self,
        list_type: type[CheckedList],
        samples: SampleElements[Any] | None = None,
        **flags: bool,
    ) -> None:
        self.list_type = list_type
        self.samples = samples or SampleElements.strings()
        self.flags = flags

    def create(self, *elements: Any) -> CheckedList:
        return self.list_type(elements, **self.flags)


class NotAGenerator:
    """Has samples but no create method."""

    samples = SampleElements.strings()


def failures(cases: Iterable[Any]) -> list[str]:
    """Names of the cases whose check raises AssertionError."""
    failed = []
    for case in cases:
        try:
            case.run()
        except AssertionError:
            failed.append(case.name)
    return failed


@pytest.fixture
def samples() -> SampleElements[str]:
    return SampleElements.strings()


@pytest.fixture
def general_purpose_generator() -> CheckedListGenerator[str]:
    """Supports insertion and None, and fails fast."""
    return CheckedListGenerator()


@pytest.fixture
def null_hostile_generator() -> CheckedListGenerator[str]:
    return CheckedListGenerator(allows_none=False)


@pytest.fixture
def read_only_generator() -> CheckedListGenerator[str]:
    return CheckedListGenerator(supports_insert=False, allows_none=False, fail_fast=False)


@pytest.fixture
def builtin_generator() -> BuiltinListGenerator:
    return BuiltinListGenerator()


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("COLLECT_TESTING_FEATURES", "COLLECT_TESTING_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
