"""Validated, immutable configuration for a contract tester.

All inputs of a tester are checked here, once, when the tester is built.
Problems surface as ConfigurationError before any case is generated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from collect_testing.config.validators import to_configuration_error
from collect_testing.features import Feature
from collect_testing.generators import ListGenerator
from collect_testing.samples import SampleElements


class ListTesterConfig(BaseModel):
    """Inputs of a list contract tester.

    Attributes:
        generator: Required. Factory for lists under test.
        features: Required. The resolved feature closure.
        unsupported_errors: Exception types accepted as "operation not supported".
        index_errors: Exception types accepted as "index out of range".
        concurrent_modification_errors: Exception types accepted from an
            iterator whose list changed under it. RuntimeError by default,
            which the builtin dict and set iterators raise as well.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    generator: Any
    features: tuple[Any, ...]
    unsupported_errors: tuple[type[BaseException], ...] = Field(
        default=(NotImplementedError,)
    )
    index_errors: tuple[type[BaseException], ...] = Field(default=(IndexError,))
    concurrent_modification_errors: tuple[type[BaseException], ...] = Field(
        default=(RuntimeError,)
    )

    @field_validator("generator", mode="before")
    @classmethod
    def validate_generator(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("generator is required")
        if not isinstance(v, ListGenerator):
            raise ValueError(
                f"{type(v).__name__} is not a list generator "
                "(it needs a 'samples' attribute and a 'create' method)"
            )
        if not isinstance(v.samples, SampleElements):
            raise ValueError(
                f"generator samples must be SampleElements, got {type(v.samples).__name__}"
            )
        return v

    @field_validator("features", mode="before")
    @classmethod
    def validate_features(cls, v: Any) -> tuple[Any, ...]:
        if v is None:
            raise ValueError("features is required")
        features = tuple(v)
        invalid = [f for f in features if not isinstance(f, Feature)]
        if invalid:
            raise ValueError(f"not features: {invalid!r}")
        return features

    @field_validator(
        "unsupported_errors", "index_errors", "concurrent_modification_errors"
    )
    @classmethod
    def validate_error_kinds(
        cls, v: tuple[type[BaseException], ...]
    ) -> tuple[type[BaseException], ...]:
        if not v:
            raise ValueError("at least one exception type is required")
        return v

    @classmethod
    def build(cls, **kwargs: Any) -> ListTesterConfig:
        """Validate ``kwargs``, raising ConfigurationError on the first problem."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise to_configuration_error(e, "tester configuration") from e
