from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Mapping, Optional, Sequence, Union

# Scalar leaves of an event tree. ``bool`` is listed for readability even
# though it is an ``int`` subclass.
Scalar = Union[str, bool, int, float, datetime, date]
SCALAR_TYPES = (str, bool, int, float, datetime, date)

EventValue = Union[Scalar, Mapping[str, "EventValue"], Sequence["EventValue"]]
Event = Mapping[str, EventValue]

GlobalProperties = Mapping[str, EventValue]
GlobalPropertiesEvaluator = Callable[[str], Optional[GlobalProperties]]


def is_sequence(value: object) -> bool:
    """
    True for list-like event values. Text and binary types are not sequences
    in an event tree.
    """
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )
