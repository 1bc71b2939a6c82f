"""
Hatari client: collects events and ships them to the Hatari API.

Example usage::

    client = HatariClient("project_key", "api_key")
    client.add_event("transactions", {"property name": "property value"})
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from hatari.dispatch.callbacks import UploadEventCallback
from hatari.dispatch.pool import DispatchPool, DispatchTask, get_default_pool
from hatari.errors import InvalidEventError
from hatari.events.composition import compose
from hatari.events.encoding import encode_payload
from hatari.events.types import Event, GlobalProperties, GlobalPropertiesEvaluator
from hatari.events.validation import validate
from hatari.logs_helpers import log_call
from hatari.models import ClientIdentity

logger = logging.getLogger(__name__)


class HatariClient:
    """
    Holds a project identity and its global properties configuration.

    Args:
        project_key (str): The key of your Hatari project.
        api_key (str): The API key for your project.
        pool (Optional[DispatchPool]): Pool running the uploads, the shared
            process-wide pool when omitted.

    Raises:
        ConfigurationError: If either key is missing or empty.
    """

    def __init__(
        self,
        project_key: str,
        api_key: str,
        pool: Optional[DispatchPool] = None,
    ):
        self._identity = ClientIdentity.create(project_key, api_key)
        self._pool = pool
        self._global_properties: Optional[GlobalProperties] = None
        self._global_properties_evaluator: Optional[GlobalPropertiesEvaluator] = None

    def __repr__(self) -> str:
        return f"HatariClient(project_key={self.project_key!r})"

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    @property
    def project_key(self) -> str:
        return self._identity.project_key

    @property
    def api_key(self) -> str:
        return self._identity.api_key

    @property
    def pool(self) -> DispatchPool:
        if self._pool is None:
            self._pool = get_default_pool()
        return self._pool

    @property
    def global_properties(self) -> Optional[GlobalProperties]:
        """
        Properties sent with every event, e.g. app version or user id.

        Evaluator output and the event's own properties take precedence over
        these. Assigning replaces the previous mapping; ``None`` clears it.
        """
        return self._global_properties

    @global_properties.setter
    def global_properties(self, value: Optional[GlobalProperties]) -> None:
        self._global_properties = value

    @property
    def global_properties_evaluator(self) -> Optional[GlobalPropertiesEvaluator]:
        """
        Callable invoked with the collection name every time an event is
        added. Its mapping is merged over :attr:`global_properties`, which
        makes dynamic or per-collection properties possible.
        """
        return self._global_properties_evaluator

    @global_properties_evaluator.setter
    def global_properties_evaluator(
        self, value: Optional[GlobalPropertiesEvaluator]
    ) -> None:
        self._global_properties_evaluator = value

    def validate_and_build_event(
        self,
        collection: str,
        event: Event,
        hatari_properties: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Validate an event and compose the payload that would be uploaded.

        Raises:
            InvalidCollectionError: If the collection name is invalid.
            InvalidEventError: If the event is invalid.
        """
        validate(collection, event).raise_for_failure()

        logger.debug("Adding event to collection: %s", collection)
        return compose(self, collection, event, hatari_properties)

    @log_call(show_args=False)
    def add_event(
        self,
        collection: str,
        event: Event,
        hatari_properties: Optional[Mapping[str, Any]] = None,
        callback: Optional[UploadEventCallback] = None,
    ) -> None:
        """
        Add an event to a collection. Returns as soon as the upload is queued.

        Args:
            collection: The event collection to add the event to.
            event: Key/value pairs, nested mappings and lists are accepted.
            hatari_properties: Overrides for Hatari-defaulted properties,
                e.g. ``{"timestamp": datetime(...)}``.
            callback: Notified from a worker thread once the upload finishes.

        Raises:
            InvalidCollectionError: If the collection name is invalid.
            InvalidEventError: If the event is invalid or the composed payload
                cannot be encoded as JSON. Nothing is queued.
        """
        payload = self.validate_and_build_event(collection, event, hatari_properties)

        # Global properties and overrides skip validation
        try:
            body = encode_payload(payload)
        except (TypeError, ValueError) as e:
            raise InvalidEventError(f"The event cannot be encoded as JSON: {e}") from e

        self.pool.submit(
            DispatchTask(
                identity=self._identity,
                collection=collection,
                body=body,
                callback=callback,
            )
        )
