"""Small sequence helpers used to build fixtures and expected results.

Every helper returns a new list and never mutates its input, so expected
sequences can be derived from the same sample pool that built a fixture
without sharing state with it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from collect_testing.samples import SampleElements
from collect_testing.sizes import CollectionSize

T = TypeVar("T")


def copy_to_insertion_ordered_set(elements: Iterable[T]) -> list[T]:
    """Drop duplicates, keeping the first occurrence of each element."""
    return list(dict.fromkeys(elements))


def prepend(element: T, iterable: Iterable[T]) -> list[T]:
    return [element, *iterable]


def append(iterable: Iterable[T], element: T) -> list[T]:
    return [*iterable, element]


def insert(iterable: Iterable[T], index: int, element: T) -> list[T]:
    """Return the elements of ``iterable`` with ``element`` placed at ``index``.

    Everything before ``index`` keeps its position and everything from
    ``index`` onward shifts right by one.

    Raises:
        TypeError: If ``iterable`` is None.
    """
    if iterable is None:
        raise TypeError("iterable must not be None")
    result = list(iterable)
    if not 0 <= index <= len(result):
        raise IndexError(f"index {index} out of range for {len(result)} elements")
    return [*result[:index], element, *result[index:]]


def minus(items: Iterable[T], excluded: T) -> tuple[T, ...]:
    """Ordered copy of ``items`` without ``excluded``."""
    return tuple(item for item in items if item != excluded)


def middle_index(sequence: Sequence[Any]) -> int:
    return len(sequence) // 2


def stringify(value: Any) -> str:
    """Render a single element for display names.

    >>> stringify(-524288)
    '"-524288"'
    >>> stringify(None)
    'None'
    """
    if value is None:
        return "None"
    return f'"{value}"'


def stringify_elements(elements: Iterable[Any]) -> str:
    return "[" + ", ".join(stringify(e) for e in elements) + "]"


def new_collection_of_size(size: CollectionSize, samples: SampleElements[T]) -> list[T]:
    """The first ``size.count`` samples, in order."""
    if not size.is_concrete:
        raise ValueError(f"{size} has no concrete element count")
    return list(samples.as_tuple()[: size.count])


def new_collection_with_null_in_middle_of_size(
    size: CollectionSize, samples: SampleElements[T]
) -> list[T | None]:
    """Same as ``new_collection_of_size`` with the middle element replaced by None.

    The size is preserved: ``[a, None, c]`` for SEVERAL, ``[None]`` for ONE.
    """
    elements: list[T | None] = list(new_collection_of_size(size, samples))
    if not elements:
        raise ValueError("An empty collection has no middle element to replace")
    elements[middle_index(elements)] = None
    return elements
