"""Generated test cases and the named scenarios that group them.

A ``ContractCase`` pairs a display name with a zero-argument check. The
check builds its own fixture when it runs and either returns quietly or
raises ``ContractViolationError``. Display names may be given as callables
and are only formatted when first read.

Scenarios are plain ordered buckets of cases; the runner that executes
them is external. ``as_pytest_params`` is the handoff for pytest::

    SCENARIOS = list_add_with_index_tests(MyListGenerator(), ListFeature.GENERAL_PURPOSE,
                                          CollectionSize.ANY)

    @pytest.mark.parametrize("case", as_pytest_params(SCENARIOS))
    def test_list_contract(case):
        case.run()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

DisplayName = str | Callable[[], str]


class ContractCase:
    """One independently runnable, independently named check.

    Attributes:
        check: Zero-argument callable performing the check.
    """

    __slots__ = ("_display_name", "_name", "check")

    def __init__(self, display_name: DisplayName, check: Callable[[], None]) -> None:
        self._display_name = display_name
        self._name: str | None = None
        self.check = check

    @property
    def name(self) -> str:
        """The display name, formatted on first access."""
        if self._name is None:
            display_name = self._display_name
            self._name = display_name if isinstance(display_name, str) else display_name()
        return self._name

    def run(self) -> None:
        """Execute the check. Raises ContractViolationError on failure."""
        self.check()

    def __call__(self) -> None:
        self.run()

    def __repr__(self) -> str:
        return f"ContractCase({self.name!r})"


@dataclass(frozen=True)
class Scenario:
    """A named, ordered group of cases sharing one top-level expectation.

    Attributes:
        name: Human-readable scenario name, e.g. ``"supports insert(int, E)"``.
        cases: The cases in generation order.
    """

    name: str
    cases: tuple[ContractCase, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[ContractCase]:
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self.cases)

    def names(self) -> list[str]:
        return [case.name for case in self.cases]


def flatten(scenarios: Iterable[Scenario]) -> Iterator[ContractCase]:
    """Yield every case of every scenario, in order."""
    for scenario in scenarios:
        yield from scenario.cases


def as_pytest_params(scenarios: Sequence[Scenario]) -> list[Any]:
    """Wrap every case in ``pytest.param`` with a ``scenario / case`` id."""
    import pytest

    return [
        pytest.param(case, id=f"{scenario.name} / {case.name}")
        for scenario in scenarios
        for case in scenario.cases
    ]
