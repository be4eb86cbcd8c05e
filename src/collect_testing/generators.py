"""The collection factory contract and the fixture builder on top of it."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

from collect_testing.helpers import (
    new_collection_of_size,
    new_collection_with_null_in_middle_of_size,
)
from collect_testing.samples import SampleElements
from collect_testing.sizes import CollectionSize

logger = logging.getLogger(__name__)

E = TypeVar("E")


@runtime_checkable
class ListGenerator(Protocol[E]):
    """Factory for instances of the list implementation under test.

    ``create`` must return a new, independent list holding exactly the
    given elements in order, ``None`` included. The returned object only
    needs ``insert``, ``len`` and iteration.

    Example::

        class MyListGenerator:
            samples = SampleElements.strings()

            def create(self, *elements):
                return MyList(elements)
    """

    @property
    def samples(self) -> SampleElements[E]:
        """The pool every fixture is built from."""
        ...

    def create(self, *elements: E | None) -> MutableSequence[E | None]:
        """Create a new list holding ``elements``."""
        ...


class FixtureBuilder(Generic[E]):
    """Builds fresh fixtures, and their expected contents, by size class.

    Each call to ``new_list`` asks the generator for a brand new list, so
    fixtures are never shared between checks.
    """

    def __init__(self, generator: ListGenerator[E]) -> None:
        self.generator = generator
        self.samples = generator.samples

    def expected(
        self, size: CollectionSize, null_in_middle: bool = False
    ) -> list[E | None]:
        """The element sequence a fixture of ``size`` starts with."""
        if null_in_middle:
            return new_collection_with_null_in_middle_of_size(size, self.samples)
        return list(new_collection_of_size(size, self.samples))

    def new_list(
        self, size: CollectionSize, null_in_middle: bool = False
    ) -> MutableSequence[E | None]:
        """Create a new list under test holding ``expected(size, null_in_middle)``."""
        elements = self.expected(size, null_in_middle)
        logger.debug(f"Creating fixture of size {size.name}: {elements!r}")
        return self.generator.create(*elements)
