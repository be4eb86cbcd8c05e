"""collect-testing - Contract test generation for list implementations.

Declare what your list supports. collect-testing resolves the implied
features and generates one independent, named check per combination of
fixture size, insertion position and element kind.

Quick Start:
    import pytest
    from collect_testing import (
        CollectionSize, ListFeature, as_pytest_params, list_add_with_index_tests,
    )

    SCENARIOS = list_add_with_index_tests(
        MyListGenerator(), ListFeature.GENERAL_PURPOSE, CollectionSize.ANY
    )

    @pytest.mark.parametrize("case", as_pytest_params(SCENARIOS))
    def test_insert_contract(case):
        case.run()
"""

from __future__ import annotations

# Assertions
from collect_testing.assertions import (
    Expectation,
    assert_iterable_equals,
    assert_raises,
    expect,
)

# Configuration
from collect_testing.config import ListTesterConfig, SuiteSettings, load_settings

# Generated cases
from collect_testing.dynamic import ContractCase, Scenario, as_pytest_params, flatten

# Errors
from collect_testing.errors import (
    CollectTestingError,
    ConcurrentModificationError,
    ConfigurationError,
    ContractViolationError,
    ErrorCode,
    ErrorContext,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)

# Features
from collect_testing.features import (
    CollectionFeature,
    Feature,
    ListFeature,
    all_features,
    parse_feature,
    resolve_closure,
)
from collect_testing.generators import FixtureBuilder, ListGenerator

# Insertion matrix
from collect_testing.insertion import (
    ElementKind,
    MatrixCell,
    Outcome,
    Position,
    derive_outcome,
    matrix_cells,
)
from collect_testing.list_add_with_index import (
    ListAddWithIndexTester,
    list_add_with_index_tests,
    list_add_with_index_tests_from_settings,
)
from collect_testing.reference import CheckedList, CheckedListGenerator
from collect_testing.samples import SampleElements
from collect_testing.sizes import CollectionSize, concrete_sizes

__version__ = "0.1.0"

__all__ = [
    # Features
    "Feature",
    "CollectionFeature",
    "ListFeature",
    "CollectionSize",
    "resolve_closure",
    "all_features",
    "parse_feature",
    "concrete_sizes",
    # Fixtures
    "SampleElements",
    "ListGenerator",
    "FixtureBuilder",
    # Insertion matrix
    "Position",
    "ElementKind",
    "Outcome",
    "MatrixCell",
    "derive_outcome",
    "matrix_cells",
    # Generation
    "ListAddWithIndexTester",
    "list_add_with_index_tests",
    "list_add_with_index_tests_from_settings",
    "ContractCase",
    "Scenario",
    "flatten",
    "as_pytest_params",
    # Assertions
    "Expectation",
    "expect",
    "assert_iterable_equals",
    "assert_raises",
    # Configuration
    "ListTesterConfig",
    "SuiteSettings",
    "load_settings",
    # Errors
    "CollectTestingError",
    "ErrorCode",
    "ErrorContext",
    "ConfigurationError",
    "ContractViolationError",
    "UnsupportedOperationError",
    "IndexOutOfRangeError",
    "ConcurrentModificationError",
    # Reference implementation
    "CheckedList",
    "CheckedListGenerator",
]
