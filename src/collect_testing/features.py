"""Capability features and their transitive closure.

A feature is a named capability a collection claims to support. Features
imply other features (a general-purpose list supports indexed insertion,
which in turn supports plain ``add``), so before any contract test is
generated the declared features are expanded to their full closure.

Feature families are closed enums. Each member carries a fixed tuple of
directly implied members, possibly from another family, and
``resolve_closure`` walks those edges breadth first.

Example:
    >>> from collect_testing.features import ListFeature, all_features
    >>> all_features(ListFeature.SUPPORTS_ADD_WITH_INDEX)
    (<ListFeature.SUPPORTS_ADD_WITH_INDEX: ...>, <CollectionFeature.SUPPORTS_ADD: ...>)
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from enum import Enum
from typing import Protocol, runtime_checkable

from collect_testing.errors import ConfigurationError, ErrorCode
from collect_testing.sizes import CollectionSize

logger = logging.getLogger(__name__)


@runtime_checkable
class Feature(Protocol):
    """Anything that names a capability and the capabilities it implies.

    All built-in families (``CollectionFeature``, ``ListFeature`` and
    ``CollectionSize``) implement this protocol, so custom families can be
    mixed into a declared feature set as long as their members are
    hashable and expose ``implied_features``.
    """

    @property
    def implied_features(self) -> tuple[Feature, ...]:
        """Features directly implied by this one."""
        ...


class CollectionFeature(Enum):
    """Capabilities shared by every kind of collection."""

    SUPPORTS_ADD = "supports_add"
    SUPPORTS_REMOVE = "supports_remove"
    SUPPORTS_ITERATOR_REMOVE = "supports_iterator_remove"
    ALLOWS_NULL_VALUES = "allows_null_values"
    FAILS_FAST_ON_CONCURRENT_MODIFICATION = "fails_fast_on_concurrent_modification"
    REMOVE_OPERATIONS = "remove_operations"
    GENERAL_PURPOSE = "general_purpose"

    @property
    def implied_features(self) -> tuple[Feature, ...]:
        return _IMPLIED_FEATURES.get(self, ())


class ListFeature(Enum):
    """Capabilities specific to index-addressable lists."""

    SUPPORTS_SET = "supports_set"
    SUPPORTS_ADD_WITH_INDEX = "supports_add_with_index"
    SUPPORTS_REMOVE_WITH_INDEX = "supports_remove_with_index"
    REMOVE_OPERATIONS = "remove_operations"
    GENERAL_PURPOSE = "general_purpose"

    @property
    def implied_features(self) -> tuple[Feature, ...]:
        return _IMPLIED_FEATURES.get(self, ())


_IMPLIED_FEATURES: dict[Enum, tuple[Feature, ...]] = {
    CollectionFeature.REMOVE_OPERATIONS: (
        CollectionFeature.SUPPORTS_REMOVE,
        CollectionFeature.SUPPORTS_ITERATOR_REMOVE,
    ),
    CollectionFeature.GENERAL_PURPOSE: (
        CollectionFeature.SUPPORTS_ADD,
        CollectionFeature.SUPPORTS_REMOVE,
        CollectionFeature.SUPPORTS_ITERATOR_REMOVE,
    ),
    ListFeature.SUPPORTS_ADD_WITH_INDEX: (CollectionFeature.SUPPORTS_ADD,),
    ListFeature.SUPPORTS_REMOVE_WITH_INDEX: (CollectionFeature.SUPPORTS_REMOVE,),
    ListFeature.REMOVE_OPERATIONS: (
        CollectionFeature.REMOVE_OPERATIONS,
        ListFeature.SUPPORTS_REMOVE_WITH_INDEX,
    ),
    ListFeature.GENERAL_PURPOSE: (
        CollectionFeature.GENERAL_PURPOSE,
        ListFeature.SUPPORTS_SET,
        ListFeature.SUPPORTS_ADD_WITH_INDEX,
        ListFeature.SUPPORTS_REMOVE_WITH_INDEX,
    ),
}

FEATURE_FAMILIES: tuple[type[Enum], ...] = (CollectionFeature, ListFeature, CollectionSize)


def resolve_closure(declared: Iterable[Feature]) -> tuple[Feature, ...]:
    """Expand declared features to everything they transitively imply.

    The result keeps first-seen order: declared features first, in the
    order given, followed by implied features in breadth-first order.
    Membership in the result gates enqueueing, so every feature is
    expanded once and cyclic implications terminate.

    Args:
        declared: The features a collection claims to support.

    Returns:
        Tuple of distinct features containing ``declared``.
    """
    expanded: dict[Feature, None] = dict.fromkeys(declared)
    queue: deque[Feature] = deque(expanded)

    while queue:
        feature = queue.popleft()
        for implied in feature.implied_features:
            if implied not in expanded:
                expanded[implied] = None
                queue.append(implied)

    closure = tuple(expanded)
    logger.debug(f"Resolved {len(closure)} features from declared set")
    return closure


def all_features(*features: Feature) -> tuple[Feature, ...]:
    """Varargs form of ``resolve_closure``."""
    return resolve_closure(features)


def parse_feature(name: str) -> Feature:
    """Look up a feature by name.

    Accepts a qualified name such as ``"ListFeature.GENERAL_PURPOSE"`` or
    a bare member name that is unambiguous across families, such as
    ``"ALLOWS_NULL_VALUES"``. ``GENERAL_PURPOSE`` exists in two families and
    must be qualified.

    Raises:
        ConfigurationError: If the name matches no feature or more than one.
    """
    family_name, _, member_name = name.strip().rpartition(".")
    member_name = member_name.upper()

    candidates = [
        family[member_name]
        for family in FEATURE_FAMILIES
        if (not family_name or family.__name__ == family_name)
        and member_name in family.__members__
    ]

    if len(candidates) == 1:
        return candidates[0]

    if not candidates:
        message = f"Unknown feature {name!r}"
    else:
        choices = ", ".join(f"{type(c).__name__}.{c.name}" for c in candidates)
        message = f"Ambiguous feature {name!r}; qualify it as one of: {choices}"
    raise ConfigurationError(
        message=message,
        error_code=ErrorCode.UNKNOWN_FEATURE,
        field="features",
        value=name,
    )
