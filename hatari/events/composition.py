from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from hatari.constants import RESERVED_METADATA_KEY, TIMESTAMP_KEY

from .types import Event

if TYPE_CHECKING:
    from hatari.client import HatariClient

logger = logging.getLogger(__name__)


def now() -> datetime:
    return datetime.now(timezone.utc)


def build_metadata(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Build the reserved metadata block, stamping it unless the caller already
    provided a timestamp. The caller's mapping is left untouched.
    """
    metadata = copy.deepcopy(dict(overrides)) if overrides else {}
    if TIMESTAMP_KEY not in metadata:
        metadata[TIMESTAMP_KEY] = now()
    return metadata


def compose(
    client: "HatariClient",
    collection: str,
    event: Event,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge metadata, global properties and the event into an outbound payload.

    Precedence, lowest first: static global properties, evaluator output, the
    event itself. The metadata block is written before any of them.

    Args:
        client: Client holding the global properties configuration.
        collection: Event collection the payload is headed for.
        event: The already validated event.
        overrides: Values for the metadata block, e.g. ``{"timestamp": ...}``.

    Returns:
        Dict[str, Any]: A new payload sharing no mutable state with the inputs.
    """
    if client is None:
        raise TypeError("compose() requires a client, got None")

    payload: Dict[str, Any] = {RESERVED_METADATA_KEY: build_metadata(overrides)}

    global_properties = client.global_properties
    if global_properties:
        payload.update(copy.deepcopy(dict(global_properties)))

    evaluator = client.global_properties_evaluator
    if evaluator is not None:
        evaluated = evaluator(collection)
        if evaluated is not None:
            payload.update(copy.deepcopy(dict(evaluated)))

    payload.update(copy.deepcopy(dict(event)))

    logger.debug("Composed event for collection %s with %d properties", collection, len(payload))
    return payload
