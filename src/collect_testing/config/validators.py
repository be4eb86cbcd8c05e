"""Conversion of pydantic validation failures into ConfigurationError."""

from __future__ import annotations

from pydantic import ValidationError

from collect_testing.errors import ConfigurationError


def to_configuration_error(error: ValidationError, subject: str) -> ConfigurationError:
    """Describe the first problem of a pydantic ValidationError.

    Args:
        error: The pydantic error.
        subject: What was being validated, e.g. ``"tester configuration"``.
    """
    details = error.errors()[0]
    field = ".".join(str(part) for part in details["loc"]) or None
    message = str(details["msg"]).removeprefix("Value error, ")
    return ConfigurationError(
        message=f"Invalid {subject}: {field}: {message}",
        field=field,
        value=details.get("input"),
        cause=error,
        error_count=error.error_count(),
    )
