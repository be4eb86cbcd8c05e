"""Axes of the indexed-insertion matrix and the policy that decides outcomes.

A matrix cell is one combination of fixture size, insertion position and
element kind, evaluated against a resolved feature set. ``derive_outcome``
is the single place that decides what the contract expects for a cell:

- without ``SUPPORTS_ADD_WITH_INDEX`` every insertion is unsupported, at
  any index, valid or not;
- inserting None without ``ALLOWS_NULL_VALUES`` is unsupported, at any index;
- otherwise index -1 is out of range and every other position succeeds.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from collect_testing.features import CollectionFeature, ListFeature
from collect_testing.helpers import copy_to_insertion_ordered_set, middle_index
from collect_testing.samples import SampleElements
from collect_testing.sizes import CollectionSize


class Position(Enum):
    """Where an element is inserted, rendered as the index expression."""

    START = "0"
    END = "len()"
    MIDDLE = "len() // 2"
    MINUS_ONE = "-1"

    @property
    def is_valid(self) -> bool:
        return self is not Position.MINUS_ONE

    def index_for(self, sequence: Sequence[Any]) -> int:
        """The concrete index this position denotes for ``sequence``."""
        if self is Position.START:
            return 0
        if self is Position.END:
            return len(sequence)
        if self is Position.MIDDLE:
            return middle_index(sequence)
        return -1

    def applies_to(self, size: CollectionSize) -> bool:
        # On an empty list len() and len() // 2 are both 0, already covered by START.
        if self in (Position.END, Position.MIDDLE):
            return not size.is_empty
        return True


class ElementKind(Enum):
    """What is inserted, and into which kind of fixture."""

    NEW = "new"
    EXISTING = "existing"
    NULL = "new null"
    EXISTING_NULL = "existing null"

    @property
    def is_null(self) -> bool:
        return self in (ElementKind.NULL, ElementKind.EXISTING_NULL)

    @property
    def null_in_fixture(self) -> bool:
        """Whether the fixture already holds None at its middle index."""
        return self is ElementKind.EXISTING_NULL

    def element(self, samples: SampleElements[Any]) -> Any:
        if self is ElementKind.NEW:
            return samples.new
        if self is ElementKind.EXISTING:
            return samples.existing
        return None

    def applies_to(self, size: CollectionSize) -> bool:
        # An empty list holds no existing element, null or otherwise.
        if self in (ElementKind.EXISTING, ElementKind.EXISTING_NULL):
            return not size.is_empty
        return True


class Outcome(Enum):
    """The single expected result of one cell."""

    INSERTED = "inserted"
    UNSUPPORTED = "unsupported"
    OUT_OF_BOUNDS = "out of bounds"

    @property
    def is_rejection(self) -> bool:
        return self is not Outcome.INSERTED


def derive_outcome(
    position: Position, kind: ElementKind, features: Collection[Any]
) -> Outcome:
    """Decide what the contract expects when inserting ``kind`` at ``position``."""
    if ListFeature.SUPPORTS_ADD_WITH_INDEX not in features:
        return Outcome.UNSUPPORTED
    if kind.is_null and CollectionFeature.ALLOWS_NULL_VALUES not in features:
        return Outcome.UNSUPPORTED
    if not position.is_valid:
        return Outcome.OUT_OF_BOUNDS
    return Outcome.INSERTED


@dataclass(frozen=True)
class MatrixCell:
    """One combination of the insertion matrix with its expected outcome."""

    size: CollectionSize
    position: Position
    kind: ElementKind
    outcome: Outcome


def matrix_cells(
    sizes: Iterable[CollectionSize],
    kinds: Iterable[ElementKind],
    features: Collection[Any],
    positions: Iterable[Position] = tuple(Position),
) -> list[MatrixCell]:
    """Enumerate cells position-major, then by element kind, then by size.

    Repeated sizes, kinds or positions are enumerated once. Cells whose
    position or element kind cannot apply to a size are skipped.
    """
    sizes = copy_to_insertion_ordered_set(sizes)
    kinds = copy_to_insertion_ordered_set(kinds)
    positions = copy_to_insertion_ordered_set(positions)
    return [
        MatrixCell(size, position, kind, derive_outcome(position, kind, features))
        for position in positions
        for kind in kinds
        for size in sizes
        if position.applies_to(size) and kind.applies_to(size)
    ]
