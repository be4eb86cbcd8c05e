"""A configurable list that honours the indexed-insertion contract.

``CheckedList`` can be told to reject insertion, reject None, and fail fast
when modified during iteration, so every branch of the generated suite has
a conforming implementation to run against.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any, Generic, TypeVar, overload

from collect_testing.config import SuiteSettings
from collect_testing.errors import (
    ConcurrentModificationError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)
from collect_testing.features import CollectionFeature, Feature, ListFeature
from collect_testing.samples import SampleElements
from collect_testing.sizes import CollectionSize

E = TypeVar("E")


class CheckedList(MutableSequence, Generic[E]):
    """A list with strict index bounds and optional restrictions.

    Unlike the builtin list, ``insert`` accepts only ``0 <= index <= len``.

    Attributes:
        mod_count: Number of structural changes so far.
    """

    def __init__(
        self,
        elements: Iterable[E] = (),
        *,
        supports_insert: bool = True,
        allows_none: bool = True,
        fail_fast: bool = True,
    ) -> None:
        self.supports_insert = supports_insert
        self.allows_none = allows_none
        self.fail_fast = fail_fast
        self.mod_count = 0
        self._elements: list[E] = list(elements)

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> list[E]: ...

    def __getitem__(self, index):
        return self._elements[index]

    def __setitem__(self, index, value) -> None:
        if value is None and not self.allows_none:
            raise UnsupportedOperationError("CheckedList does not allow None")
        self._elements[index] = value

    def __delitem__(self, index) -> None:
        del self._elements[index]
        self.mod_count += 1

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[E]:
        return _CheckedIterator(self)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CheckedList):
            return self._elements == other._elements
        if isinstance(other, list):
            return self._elements == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CheckedList({self._elements!r})"

    def insert(self, index: int, value: E) -> None:
        if not self.supports_insert:
            raise UnsupportedOperationError(
                "CheckedList does not support insert(int, E)",
                operation="insert",
            )
        if value is None and not self.allows_none:
            raise UnsupportedOperationError(
                "CheckedList does not allow None",
                operation="insert",
            )
        if not 0 <= index <= len(self._elements):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for size {len(self._elements)}",
                index=index,
                size=len(self._elements),
            )
        self._elements.insert(index, value)
        self.mod_count += 1


class _CheckedIterator(Iterator, Generic[E]):
    def __init__(self, owner: CheckedList[E]) -> None:
        self._owner = owner
        self._expected_mod_count = owner.mod_count
        self._position = 0

    def __next__(self) -> E:
        if self._owner.fail_fast and self._owner.mod_count != self._expected_mod_count:
            raise ConcurrentModificationError(
                "CheckedList was modified during iteration",
                expected_mod_count=self._expected_mod_count,
                mod_count=self._owner.mod_count,
            )
        if self._position >= len(self._owner):
            raise StopIteration
        element = self._owner[self._position]
        self._position += 1
        return element


class CheckedListGenerator(Generic[E]):
    """Creates CheckedLists over fixed sample elements."""

    def __init__(
        self,
        samples: SampleElements[E] | None = None,
        *,
        supports_insert: bool = True,
        allows_none: bool = True,
        fail_fast: bool = True,
    ) -> None:
        self.samples = samples if samples is not None else SampleElements.strings()
        self.supports_insert = supports_insert
        self.allows_none = allows_none
        self.fail_fast = fail_fast

    @classmethod
    def from_settings(cls, settings: SuiteSettings) -> CheckedListGenerator[Any]:
        """A generator whose lists have exactly the features named in ``settings``."""
        features = set(settings.resolved_features())
        return cls(
            settings.samples(),
            supports_insert=ListFeature.SUPPORTS_ADD_WITH_INDEX in features,
            allows_none=CollectionFeature.ALLOWS_NULL_VALUES in features,
            fail_fast=CollectionFeature.FAILS_FAST_ON_CONCURRENT_MODIFICATION in features,
        )

    def create(self, *elements: E) -> CheckedList[E]:
        return CheckedList(
            elements,
            supports_insert=self.supports_insert,
            allows_none=self.allows_none,
            fail_fast=self.fail_fast,
        )

    def features(self) -> tuple[Feature, ...]:
        """The features the created lists actually have, sizes included."""
        features: list[Feature] = [CollectionFeature.SUPPORTS_REMOVE, ListFeature.SUPPORTS_SET]
        if self.supports_insert:
            features.append(ListFeature.SUPPORTS_ADD_WITH_INDEX)
        if self.allows_none:
            features.append(CollectionFeature.ALLOWS_NULL_VALUES)
        if self.fail_fast:
            features.append(CollectionFeature.FAILS_FAST_ON_CONCURRENT_MODIFICATION)
        features.append(CollectionSize.ANY)
        return tuple(features)

    def __repr__(self) -> str:
        return (
            f"CheckedListGenerator(supports_insert={self.supports_insert}, "
            f"allows_none={self.allows_none}, fail_fast={self.fail_fast})"
        )
