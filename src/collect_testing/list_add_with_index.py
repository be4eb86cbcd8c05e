"""Contract tests for inserting into a list at an index.

``ListAddWithIndexTester`` turns a list generator and a resolved feature
set into scenarios of independent cases that check ``insert(index, element)``
on fixtures of every declared size:

    supports insert(int, E)
        new and existing elements at the start, end and middle succeed;
        index -1 is out of range
    supports insert(int, E) with null element
        the same for None, into fixtures with and without a None already
        in the middle
    supports insert(int, E) but not with null element
        inserting None is unsupported at every position
    does not support insert(int, E)
    does not support insert(int, E) with null element
        every insertion is unsupported, including at index -1

Every rejected insertion must leave the list equal to what it was. When
the features include ``FAILS_FAST_ON_CONCURRENT_MODIFICATION``, the
supporting scenarios also check that an iterator obtained before an
insertion raises on its next step.

Example:
    >>> scenarios = list_add_with_index_tests(
    ...     CheckedListGenerator(SampleElements.strings()),
    ...     ListFeature.GENERAL_PURPOSE,
    ...     CollectionFeature.ALLOWS_NULL_VALUES,
    ...     CollectionSize.ANY,
    ... )
    >>> [s.name for s in scenarios]
    ['supports insert(int, E)', 'supports insert(int, E) with null element']
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterator
from functools import partial
from typing import Any, Generic, TypeVar

from collect_testing.assertions import expect
from collect_testing.config import ListTesterConfig, SuiteSettings, load_settings
from collect_testing.dynamic import ContractCase, Scenario, flatten
from collect_testing.errors import ConfigurationError, ContractViolationError, ErrorCode
from collect_testing.features import (
    CollectionFeature,
    Feature,
    ListFeature,
    all_features,
)
from collect_testing.generators import FixtureBuilder, ListGenerator
from collect_testing.helpers import insert, minus, stringify, stringify_elements
from collect_testing.insertion import (
    ElementKind,
    MatrixCell,
    Outcome,
    Position,
    matrix_cells,
)
from collect_testing.sizes import CollectionSize, concrete_sizes

logger = logging.getLogger(__name__)

E = TypeVar("E")

SUPPORTS_INSERT = "supports insert(int, E)"
SUPPORTS_INSERT_WITH_NULL = "supports insert(int, E) with null element"
SUPPORTS_INSERT_BUT_NOT_NULL = "supports insert(int, E) but not with null element"
DOES_NOT_SUPPORT_INSERT = "does not support insert(int, E)"
DOES_NOT_SUPPORT_INSERT_WITH_NULL = "does not support insert(int, E) with null element"

NOT_TRUE_THAT_LIST_REMAINED_UNCHANGED = "Not true that list remained unchanged"


class ListAddWithIndexTester(Generic[E]):
    """Generates the indexed-insertion contract cases for one list implementation.

    Construction validates every input; generation itself cannot fail.
    ``scenarios()`` may be called repeatedly and returns new cases each
    time, and every case builds a new fixture whenever it runs.

    Attributes:
        config: The validated configuration.
        sizes: Concrete sizes to build fixtures with, smallest first.
    """

    def __init__(
        self,
        generator: ListGenerator[E],
        features: Collection[Feature],
        **error_kinds: tuple[type[BaseException], ...],
    ) -> None:
        self.config = ListTesterConfig.build(
            generator=generator, features=features, **error_kinds
        )
        self.generator: ListGenerator[E] = self.config.generator
        self.samples = self.generator.samples
        self.features = frozenset(self.config.features)
        self.fixtures = FixtureBuilder(self.generator)
        self.sizes = concrete_sizes(self.config.features)

        if not self.sizes:
            raise ConfigurationError(
                message="Features must include at least one CollectionSize",
                field="features",
                value=self.config.features,
            )

        self.supports_insert = ListFeature.SUPPORTS_ADD_WITH_INDEX in self.features
        self.allows_nulls = CollectionFeature.ALLOWS_NULL_VALUES in self.features
        self.fails_fast = (
            CollectionFeature.FAILS_FAST_ON_CONCURRENT_MODIFICATION in self.features
        )

    def scenarios(self) -> list[Scenario]:
        """Generate every applicable scenario, in a fixed order."""
        scenarios: list[Scenario] = []

        if self.supports_insert:
            scenarios.append(
                self._scenario(
                    SUPPORTS_INSERT,
                    (ElementKind.NEW, ElementKind.EXISTING),
                    fail_fast=True,
                    fail_fast_element=self.samples.new,
                )
            )
            if self.allows_nulls:
                scenarios.append(
                    self._scenario(
                        SUPPORTS_INSERT_WITH_NULL,
                        (ElementKind.NULL, ElementKind.EXISTING_NULL),
                        fail_fast=True,
                        fail_fast_element=None,
                    )
                )
            else:
                scenarios.append(
                    self._scenario(SUPPORTS_INSERT_BUT_NOT_NULL, (ElementKind.NULL,))
                )
        else:
            scenarios.append(
                self._scenario(
                    DOES_NOT_SUPPORT_INSERT, (ElementKind.NEW, ElementKind.EXISTING)
                )
            )
            # A list that rejects None cannot be built holding one.
            null_kinds = (ElementKind.NULL, ElementKind.EXISTING_NULL)
            if not self.allows_nulls:
                null_kinds = minus(null_kinds, ElementKind.EXISTING_NULL)
            scenarios.append(self._scenario(DOES_NOT_SUPPORT_INSERT_WITH_NULL, null_kinds))

        scenarios = [s for s in scenarios if s.cases]
        logger.info(
            f"Generated {sum(len(s) for s in scenarios)} insert(int, E) cases "
            f"in {len(scenarios)} scenarios for sizes {[s.name for s in self.sizes]}"
        )
        return scenarios

    def cases(self) -> Iterator[ContractCase]:
        """Every case of every scenario, in order."""
        return flatten(self.scenarios())

    def cells(self, kinds: tuple[ElementKind, ...]) -> list[MatrixCell]:
        return matrix_cells(self.sizes, kinds, self.features)

    def _scenario(
        self,
        name: str,
        kinds: tuple[ElementKind, ...],
        fail_fast: bool = False,
        fail_fast_element: Any = None,
    ) -> Scenario:
        cases = [self._case(name, cell) for cell in self.cells(kinds)]

        if fail_fast and self.fails_fast:
            cases.extend(
                self._fail_fast_case(name, size, fail_fast_element) for size in self.sizes
            )

        logger.debug(f"Scenario '{name}': {len(cases)} cases")
        return Scenario(name, tuple(cases))

    def _case(self, scenario: str, cell: MatrixCell) -> ContractCase:
        element = cell.kind.element(self.samples)
        display_name = partial(self._case_name, cell, element)

        if cell.outcome is Outcome.INSERTED:
            check = partial(self._check_inserted, cell, element)
        else:
            check = partial(
                self._check_rejected, cell, element, self._error_kinds(cell.outcome)
            )

        return ContractCase(
            display_name, self._in_context(scenario, display_name, cell.size, check)
        )

    def _fail_fast_case(
        self, scenario: str, size: CollectionSize, element: Any
    ) -> ContractCase:
        def display_name() -> str:
            return (
                f"{stringify_elements(self.fixtures.expected(size))}"
                f".insert(0, {stringify(element)}) fails fast on concurrent modification"
            )

        check = partial(self._check_fails_fast, size, element)
        return ContractCase(display_name, self._in_context(scenario, display_name, size, check))

    def _case_name(self, cell: MatrixCell, element: Any) -> str:
        elements = stringify_elements(
            self.fixtures.expected(cell.size, cell.kind.null_in_fixture)
        )
        call = f"{elements}.insert({cell.position.value}, {stringify(element)})"
        if cell.outcome is Outcome.INSERTED:
            return f"supports {call}"
        if cell.outcome is Outcome.OUT_OF_BOUNDS:
            return f"rejects {call} as out of range"
        return f"does not support {call}"

    def _error_kinds(self, outcome: Outcome) -> tuple[type[BaseException], ...]:
        if outcome is Outcome.OUT_OF_BOUNDS:
            return self.config.index_errors
        return self.config.unsupported_errors

    def _check_inserted(self, cell: MatrixCell, element: Any) -> None:
        null_in_middle = cell.kind.null_in_fixture
        fixture = self.fixtures.new_list(cell.size, null_in_middle)
        original = self.fixtures.expected(cell.size, null_in_middle)
        index = cell.position.index_for(fixture)

        try:
            fixture.insert(index, element)
        except Exception as e:
            raise ContractViolationError(
                f"{stringify_elements(original)}.insert({index}, {stringify(element)}) "
                f"should succeed but raised {type(e).__name__}: {e}",
                error_code=ErrorCode.UNEXPECTED_EXCEPTION,
                cause=e,
                actual=type(e).__name__,
                expected=insert(original, index, element),
            ) from e

        expect(fixture, "list").to_equal_sequence(
            insert(original, index, element),
            partial(_not_inserted_message, cell.position, element, index),
        )

    def _check_rejected(
        self,
        cell: MatrixCell,
        element: Any,
        kinds: tuple[type[BaseException], ...],
    ) -> None:
        null_in_middle = cell.kind.null_in_fixture
        fixture = self.fixtures.new_list(cell.size, null_in_middle)
        original = self.fixtures.expected(cell.size, null_in_middle)
        index = cell.position.index_for(fixture)

        expect(partial(fixture.insert, index, element)).to_raise(
            *kinds,
            message=lambda: f"Not true that insert({index}, {stringify(element)}) was rejected",
        )
        expect(fixture, "list").to_equal_sequence(
            original, NOT_TRUE_THAT_LIST_REMAINED_UNCHANGED
        )

    def _check_fails_fast(self, size: CollectionSize, element: Any) -> None:
        fixture = self.fixtures.new_list(size)
        iterator = iter(fixture)

        def insert_then_advance() -> None:
            fixture.insert(0, element)
            next(iterator)

        expect(insert_then_advance).to_raise(
            *self.config.concurrent_modification_errors,
            message=lambda: (
                f"Not true that the iterator failed fast after "
                f"insert(0, {stringify(element)})"
            ),
        )

    @staticmethod
    def _in_context(
        scenario: str,
        display_name: Callable[[], str],
        size: CollectionSize,
        check: Callable[[], None],
    ) -> Callable[[], None]:
        """Wrap ``check`` so every failure is a located ContractViolationError."""

        def locate(error: ContractViolationError) -> ContractViolationError:
            error.context.scenario = scenario
            error.context.case = display_name()
            error.context.collection_size = size.name
            return error

        def run() -> None:
            try:
                check()
            except ContractViolationError as e:
                locate(e)
                raise
            except Exception as e:
                raise locate(
                    ContractViolationError(
                        f"{display_name()} raised {type(e).__name__}: {e}",
                        error_code=ErrorCode.UNEXPECTED_EXCEPTION,
                        cause=e,
                        actual=type(e).__name__,
                    )
                ) from e

        return run


def _not_inserted_message(position: Position, element: Any, index: int) -> str:
    if position is Position.START:
        return f"Not true that list was prepended with {stringify(element)}"
    if position is Position.END:
        return f"Not true that list was appended with {stringify(element)}"
    return (
        f"Not true that {stringify(element)} was inserted at index {index}, "
        "or that the elements are in the expected order"
    )


def list_add_with_index_tests(
    generator: ListGenerator[E],
    *features: Feature,
    **error_kinds: tuple[type[BaseException], ...],
) -> list[Scenario]:
    """Resolve ``features`` and generate the indexed-insertion scenarios.

    Args:
        generator: Factory for the list implementation under test.
        *features: Declared features; implied features are added.
        **error_kinds: Optional overrides of the accepted exception types,
            see ListTesterConfig.

    Returns:
        The scenarios in generation order.
    """
    return ListAddWithIndexTester(generator, all_features(*features), **error_kinds).scenarios()


def list_add_with_index_tests_from_settings(
    generator: ListGenerator[E], settings: SuiteSettings | None = None
) -> list[Scenario]:
    """Generate scenarios for the features named in suite settings."""
    settings = settings or load_settings()
    settings.apply_logging()
    return ListAddWithIndexTester(generator, settings.resolved_features()).scenarios()
