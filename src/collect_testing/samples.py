"""Sample element pools used to populate fixtures."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from collect_testing.errors import ConfigurationError, ErrorCode

E = TypeVar("E")


@dataclass(frozen=True)
class SampleElements(Generic[E]):
    """An ordered pool of distinct, non-None sample values.

    Fixtures of size ``n`` hold the first ``n`` samples. ``e0`` is always
    present in a non-empty fixture and serves as the "existing" element;
    ``e3`` is never placed in a fixture and serves as the "new" element.

    Attributes:
        e0: First sample, the existing-element representative.
        e1: Second sample.
        e2: Third sample.
        e3: Fourth sample, the new-element representative.
        e4: Optional fifth sample.

    Example:
        >>> samples = SampleElements("a", "b", "c", "d", "e")
        >>> samples.existing, samples.new
        ('a', 'd')
    """

    e0: E
    e1: E
    e2: E
    e3: E
    e4: E | None = None

    def __post_init__(self) -> None:
        values = [self.e0, self.e1, self.e2, self.e3]
        if self.e4 is not None:
            values.append(self.e4)

        if any(v is None for v in values[:4]):
            raise ConfigurationError(
                message="Sample elements e0..e3 must not be None",
                error_code=ErrorCode.INVALID_SAMPLES,
                field="samples",
                value=values,
            )
        for i, value in enumerate(values):
            if value in values[:i]:
                raise ConfigurationError(
                    message=f"Sample elements must be distinct, {value!r} appears twice",
                    error_code=ErrorCode.INVALID_SAMPLES,
                    field="samples",
                    value=values,
                )

    @property
    def existing(self) -> E:
        return self.e0

    @property
    def new(self) -> E:
        return self.e3

    def as_tuple(self) -> tuple[E, ...]:
        """All samples in order, without the optional fifth one when unset."""
        values = (self.e0, self.e1, self.e2, self.e3, self.e4)
        return values if self.e4 is not None else values[:4]

    def __iter__(self) -> Iterator[E]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(self.as_tuple())

    @classmethod
    def of(cls, values: Iterable[E]) -> SampleElements[E]:
        """Build a pool from four or five values."""
        values = list(values)
        if not 4 <= len(values) <= 5:
            raise ConfigurationError(
                message=f"Expected 4 or 5 sample elements, got {len(values)}",
                error_code=ErrorCode.INVALID_SAMPLES,
                field="samples",
                value=values,
            )
        return cls(*values)

    @classmethod
    def strings(cls) -> SampleElements[str]:
        return cls("a", "b", "c", "d", "e")

    @classmethod
    def integers(cls) -> SampleElements[int]:
        return cls(0, 1, 2, 3, 4)
