"""
Naming and structure rules for events and event collections.

Validation never raises on bad input. :func:`validate` returns a
:class:`ValidationResult` and callers decide whether to raise, which is what
:meth:`hatari.client.HatariClient.add_event` does before anything is queued.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from hatari.constants import (
    MAX_NAME_LENGTH,
    MAX_STRING_VALUE_LENGTH,
    RESERVED_METADATA_KEY,
)
from hatari.errors import InvalidCollectionError, InvalidEventError

from .types import SCALAR_TYPES, is_sequence


class ValidationFailure(Enum):
    INVALID_COLLECTION_NAME = "invalid_collection_name"
    INVALID_EVENT = "invalid_event"


@dataclass(frozen=True)
class ValidationResult:
    failure: Optional[ValidationFailure] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> None:
        """
        Raise the exception matching the failure, if any.

        Raises:
            InvalidCollectionError: If the collection name was rejected.
            InvalidEventError: If the event was rejected.
        """
        if self.failure is ValidationFailure.INVALID_COLLECTION_NAME:
            raise InvalidCollectionError(self.reason)
        if self.failure is ValidationFailure.INVALID_EVENT:
            raise InvalidEventError(self.reason)


VALID = ValidationResult()


def _invalid_collection(reason: str) -> ValidationResult:
    return ValidationResult(ValidationFailure.INVALID_COLLECTION_NAME, reason)


def _invalid_event(reason: str) -> ValidationResult:
    return ValidationResult(ValidationFailure.INVALID_EVENT, reason)


def validate_collection(collection: Any) -> ValidationResult:
    if not isinstance(collection, str) or not collection:
        return _invalid_collection(
            f"You must specify a non-null, non-empty event collection: {collection!r}"
        )
    if collection.startswith("$"):
        return _invalid_collection(
            "An event collection name cannot start with the dollar sign ($) character."
        )
    if len(collection) > MAX_NAME_LENGTH:
        return _invalid_collection(
            f"An event collection name cannot be longer than {MAX_NAME_LENGTH} characters."
        )
    return VALID


def _check_key(key: Any) -> Optional[str]:
    if not isinstance(key, str):
        return f"An event property name must be a string, got {key!r}."
    if "." in key:
        return "An event cannot contain a property with the period (.) character in it."
    if key.startswith("$"):
        return "An event cannot contain a property that starts with the dollar sign ($) character in it."
    if len(key) > MAX_NAME_LENGTH:
        return f"An event cannot contain a property name longer than {MAX_NAME_LENGTH} characters."
    return None


def _check_value(value: Any) -> Optional[str]:
    if isinstance(value, str):
        if len(value) >= MAX_STRING_VALUE_LENGTH:
            return "An event cannot contain a string property value longer than 10,000 characters."
        return None
    if isinstance(value, Mapping):
        return _check_mapping(value)
    if is_sequence(value):
        for item in value:
            reason = _check_value(item)
            if reason:
                return reason
        return None
    if not isinstance(value, SCALAR_TYPES):
        return f"An event cannot contain a property value of type {type(value).__name__}."
    if isinstance(value, float) and not math.isfinite(value):
        return f"An event cannot contain a non-finite number ({value!r})."
    return None


def _check_mapping(mapping: Mapping) -> Optional[str]:
    for key, value in mapping.items():
        reason = _check_key(key) or _check_value(value)
        if reason:
            return reason
    return None


def validate_event(event: Any) -> ValidationResult:
    if not isinstance(event, Mapping) or len(event) == 0:
        return _invalid_event("You must specify a non-null, non-empty event.")
    if RESERVED_METADATA_KEY in event:
        return _invalid_event(
            f"An event cannot contain a root-level property named '{RESERVED_METADATA_KEY}'."
        )

    reason = _check_mapping(event)
    if reason:
        return _invalid_event(reason)

    return VALID


def validate(collection: Any, event: Any) -> ValidationResult:
    """
    Check a collection name and an event against the Hatari naming rules.

    The collection is checked first and the first violation found wins.

    Args:
        collection: Name of the event collection.
        event: The event mapping, possibly nested.

    Returns:
        ValidationResult: ``VALID`` or the classified failure with a reason.
    """
    result = validate_collection(collection)
    if not result.ok:
        return result
    return validate_event(event)
