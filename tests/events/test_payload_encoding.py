import json
from datetime import date, datetime, timezone

import pytest

from hatari.events.encoding import encode_payload


@pytest.mark.unit
def test_dates_rendered_as_strings() -> None:
    payload = {
        "hatari": {"timestamp": datetime(2024, 2, 29, 13, 45, 7, 123456, tzinfo=timezone.utc)},
        "ship_on": date(2024, 3, 2),
    }

    decoded = json.loads(encode_payload(payload))

    assert decoded["hatari"]["timestamp"] == "2024-02-29T13:45:07.123+00:00"
    assert decoded["ship_on"] == "2024-03-02"


@pytest.mark.unit
def test_nested_values() -> None:
    payload = {"items": [{"sku": "w-1", "qty": 2}], "gift": True, "note": "héllo"}

    body = encode_payload(payload)

    assert isinstance(body, bytes)
    assert json.loads(body.decode("utf-8")) == payload


@pytest.mark.unit
def test_unknown_type_rejected() -> None:
    with pytest.raises(TypeError):
        encode_payload({"value": object()})


@pytest.mark.unit
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_rejected(value: float) -> None:
    with pytest.raises(ValueError):
        encode_payload({"price": value})
