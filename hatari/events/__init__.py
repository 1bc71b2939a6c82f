from .composition import compose
from .encoding import encode_payload
from .types import Event, EventValue, GlobalPropertiesEvaluator
from .validation import ValidationFailure, ValidationResult, validate

__all__ = [
    "compose",
    "encode_payload",
    "Event",
    "EventValue",
    "GlobalPropertiesEvaluator",
    "ValidationFailure",
    "ValidationResult",
    "validate",
]
