from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Mapping


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat(timespec="milliseconds")
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_payload(payload: Mapping[str, Any]) -> bytes:
    """
    Encode a composed payload as UTF-8 JSON. Dates and datetimes are rendered
    as ISO-8601 strings, never as numeric timestamps.

    Raises:
        TypeError: If a value has no JSON representation.
        ValueError: If a float is NaN or infinite.
    """
    return json.dumps(
        payload, default=_default, allow_nan=False, separators=(",", ":")
    ).encode("utf-8")
