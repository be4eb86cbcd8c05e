"""Tests for generated cases and scenarios."""

from __future__ import annotations

import pytest

from collect_testing import ContractCase, Scenario, as_pytest_params, flatten


class TestContractCase:
    """Tests for ContractCase."""

    def test_static_name(self):
        case = ContractCase("name", lambda: None)
        assert case.name == "name"
        assert repr(case) == "ContractCase('name')"

    def test_lazy_name_formatted_once(self):
        calls = []

        def display_name() -> str:
            calls.append(1)
            return "lazy"

        case = ContractCase(display_name, lambda: None)
        assert calls == []
        assert case.name == "lazy"
        assert case.name == "lazy"
        assert calls == [1]

    def test_run_and_call(self):
        runs = []
        case = ContractCase("c", lambda: runs.append(1))
        case.run()
        case()
        assert runs == [1, 1]

    def test_failure_propagates(self):
        def check() -> None:
            raise AssertionError("broken")

        with pytest.raises(AssertionError, match="broken"):
            ContractCase("c", check).run()


class TestScenario:
    """Tests for Scenario, flatten and as_pytest_params."""

    def test_iteration_and_names(self):
        first, second = ContractCase("a", lambda: None), ContractCase("b", lambda: None)
        scenario = Scenario("s", (first, second))
        assert list(scenario) == [first, second]
        assert len(scenario) == 2
        assert scenario.names() == ["a", "b"]

    def test_empty_scenario_is_falsy(self):
        assert not Scenario("s")

    def test_flatten_keeps_order(self):
        cases = [ContractCase(name, lambda: None) for name in "abc"]
        scenarios = [Scenario("one", tuple(cases[:2])), Scenario("two", tuple(cases[2:]))]
        assert list(flatten(scenarios)) == cases

    def test_pytest_params(self):
        case = ContractCase("c", lambda: None)
        params = as_pytest_params([Scenario("s", (case,))])
        assert len(params) == 1
        assert params[0].id == "s / c"
        assert params[0].values == (case,)
