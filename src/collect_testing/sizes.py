"""Collection size classes.

Every generated check runs against fixtures of a few representative sizes.
Sizes are themselves features: a collection declares which sizes it can be
built with, and ``ANY`` implies all of the concrete ones.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any


class CollectionSize(Enum):
    """A size class with its concrete element count.

    ``ANY`` carries no count of its own; it only implies the concrete
    sizes.
    """

    EMPTY = (0, True)
    ONE = (1, False)
    SEVERAL = (3, False)
    ANY = (None, False)

    def __init__(self, count: int | None, is_empty: bool) -> None:
        self.count = count
        self.is_empty = is_empty

    @property
    def implied_features(self) -> tuple[CollectionSize, ...]:
        if self is CollectionSize.ANY:
            return (CollectionSize.EMPTY, CollectionSize.ONE, CollectionSize.SEVERAL)
        return ()

    @property
    def is_concrete(self) -> bool:
        return self.count is not None


def concrete_sizes(features: Iterable[Any]) -> tuple[CollectionSize, ...]:
    """Extract the concrete sizes from a resolved feature set, smallest first."""
    sizes = {f for f in features if isinstance(f, CollectionSize) and f.is_concrete}
    return tuple(sorted(sizes, key=lambda s: s.count))
