"""Error hierarchy for collect-testing.

- Engine errors: configuration problems and contract violations
- Rejection errors a collection under test may raise
- Error codes and structured context for reporting
"""

from collect_testing.errors.base import (
    CollectTestingError,
    ConcurrentModificationError,
    ConfigurationError,
    ContractViolationError,
    ErrorCode,
    ErrorContext,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)

__all__ = [
    "CollectTestingError",
    "ErrorCode",
    "ErrorContext",
    # Engine errors
    "ConfigurationError",
    "ContractViolationError",
    # Collection rejections
    "UnsupportedOperationError",
    "IndexOutOfRangeError",
    "ConcurrentModificationError",
]
