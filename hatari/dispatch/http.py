from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional
from urllib.parse import quote

import httpx

from hatari.constants import (
    API_VERSION,
    EVENT_ACCEPTED_STATUS,
    REQUEST_TIMEOUT,
    SERVER_ADDRESS,
)
from hatari.meta import get_meta_http_headers
from hatari.models import ClientIdentity

from .outcomes import (
    Accepted,
    Rejected,
    SubmissionOutcome,
    TransportFailure,
    describe_exception,
)

if TYPE_CHECKING:
    from .pool import DispatchTask

logger = logging.getLogger(__name__)

TRANSPORT_EXCEPTIONS = (
    httpx.TransportError,
    httpx.InvalidURL,
    OSError,
)


def create_http_client(timeout: float = REQUEST_TIMEOUT) -> httpx.Client:
    return httpx.Client(timeout=timeout)


class EventSender:
    """
    Low-level sync HTTP sender. One request per event, no retries.
    """

    def __init__(
        self,
        base_url: str = SERVER_ADDRESS,
        api_version: str = API_VERSION,
        http_client: Optional[httpx.Client] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.timeout = timeout
        self._owns_client = http_client is None
        self.client = http_client if http_client is not None else create_http_client(timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        # An injected client belongs to the caller
        if self._owns_client:
            self.client.close()

    def build_url(self, project_key: str, collection: str) -> str:
        return (
            f"{self.base_url}/{self.api_version}/projects/"
            f"{quote(project_key, safe='')}/events/{quote(collection, safe='')}"
        )

    def build_headers(self, identity: ClientIdentity) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": identity.api_key,
            "Content-Type": "application/json",
        }
        headers.update(get_meta_http_headers())
        return headers

    def submit_one(self, task: "DispatchTask") -> SubmissionOutcome:
        """
        Send one composed event and classify the result.

        Args:
            task: The queued submission.

        Returns:
            SubmissionOutcome: ``Accepted`` on 201, ``Rejected`` on any other
            status, ``TransportFailure`` when no response was received.
        """
        url = self.build_url(task.identity.project_key, task.collection)

        # Only the status line is awaited here, the body is read on demand
        try:
            request = self.client.build_request(
                "POST",
                url,
                headers=self.build_headers(task.identity),
                content=task.body,
            )
            response = self.client.send(request, stream=True)
        except TRANSPORT_EXCEPTIONS as e:
            logger.debug("POST %s failed", url, exc_info=True)
            return TransportFailure(describe_exception(e))

        logger.debug("POST %s -> %d", url, response.status_code)

        try:
            if response.status_code == EVENT_ACCEPTED_STATUS:
                return Accepted()
            return Rejected(
                response_body=_read_body(response), status_code=response.status_code
            )
        finally:
            _close_response(response)


def _read_body(response: httpx.Response) -> str:
    try:
        response.read()
        return response.text
    except (*TRANSPORT_EXCEPTIONS, httpx.StreamError, UnicodeDecodeError, LookupError):
        logger.debug("Unable to read response body", exc_info=True)
        return ""


def _close_response(response: httpx.Response) -> None:
    try:
        response.close()
    except TRANSPORT_EXCEPTIONS:
        logger.debug("Unable to close response", exc_info=True)
