"""Custom exception hierarchy for collect-testing.

Two families of errors live here:

- Errors raised by the engine itself: ``ConfigurationError`` when a tester
  is built from malformed inputs, and ``ContractViolationError`` when a
  generated check observes behaviour that does not match the contract.
- Errors a collection under test may raise to signal a documented
  rejection: ``UnsupportedOperationError``, ``IndexOutOfRangeError`` and
  ``ConcurrentModificationError``. Each also derives from the matching
  Python built-in (``NotImplementedError``, ``IndexError``,
  ``RuntimeError``), so collections that never import this package are
  still recognised by the checks.

All errors inherit from CollectTestingError and include:
- error_code: A unique ErrorCode enum for categorization
- context: ErrorContext with scenario/case details
- suggestions: List of actionable steps to resolve the issue

Example:
    try:
        case.run()
    except ContractViolationError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for collect-testing.

    Error codes are organized by category:
    - E1xx: Configuration errors
    - E2xx: Contract violations observed by generated checks
    - E3xx: Rejections raised by a collection under test
    - E9xx: Unknown/internal errors
    """

    # Configuration errors (E1xx)
    INVALID_CONFIG = "E101"
    UNKNOWN_FEATURE = "E102"
    INVALID_SAMPLES = "E103"

    # Contract violations (E2xx)
    CONTRACT_VIOLATED = "E201"
    UNEXPECTED_EXCEPTION = "E202"
    MISSING_EXCEPTION = "E203"

    # Collection rejections (E3xx)
    UNSUPPORTED_OPERATION = "E301"
    INDEX_OUT_OF_RANGE = "E302"
    CONCURRENT_MODIFICATION = "E303"

    # Unknown/internal errors (E9xx)
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "configuration"
        elif code_num < 300:
            return "contract"
        elif code_num < 400:
            return "collection"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context for error reporting.

    Attributes:
        scenario: Name of the scenario bucket the failing case belongs to
        case: Display name of the failing case
        collection_size: Name of the size class the fixture was built with
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    scenario: str | None = None
    case: str | None = None
    collection_size: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "scenario": self.scenario,
            "case": self.case,
            "collection_size": self.collection_size,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.scenario:
            parts.append(f"scenario={self.scenario}")
        if self.case:
            parts.append(f"case={self.case}")
        if self.collection_size:
            parts.append(f"size={self.collection_size}")
        return " > ".join(parts) if parts else "unknown location"


class CollectTestingError(Exception):
    """Base exception for all collect-testing errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with execution details
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
            "",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.cause is not None:
            lines.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(CollectTestingError, ValueError):
    """A tester or suite was configured with missing or malformed inputs.

    Raised synchronously while a tester is being constructed, never while
    a generated case runs. Check the 'field' and 'value' attributes for
    what failed validation.
    """

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check the field name and value mentioned in the error",
        "Pass a list generator that exposes a SampleElements pool",
        "Declare at least one CollectionSize in the feature set",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["field"] = self.field
        result["value"] = repr(self.value)
        return result


class ContractViolationError(CollectTestingError, AssertionError):
    """A generated check observed behaviour that breaks the contract.

    This is the only error a generated case surfaces to its runner. It
    derives from AssertionError so that pytest reports it as a test
    failure rather than an error.
    """

    error_code = ErrorCode.CONTRACT_VIOLATED
    default_message = "Collection does not honour its contract"
    default_suggestions = [
        "Compare the expected and actual sequences in the message",
        "Check that the declared features match what the collection supports",
    ]

    def __init__(
        self,
        message: str | None = None,
        actual: Any = None,
        expected: Any = None,
        **kwargs: Any,
    ) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(message=message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["actual"] = repr(self.actual)
        result["expected"] = repr(self.expected)
        return result


class UnsupportedOperationError(CollectTestingError, NotImplementedError):
    """Raised by a collection for an operation it does not support."""

    error_code = ErrorCode.UNSUPPORTED_OPERATION
    default_message = "Operation is not supported by this collection"


class IndexOutOfRangeError(CollectTestingError, IndexError):
    """Raised by a collection for an index outside ``[0, len]``."""

    error_code = ErrorCode.INDEX_OUT_OF_RANGE
    default_message = "Index out of range"


class ConcurrentModificationError(CollectTestingError, RuntimeError):
    """Raised by an iterator whose collection changed structurally."""

    error_code = ErrorCode.CONCURRENT_MODIFICATION
    default_message = "Collection was modified during iteration"
