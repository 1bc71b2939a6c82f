from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .outcomes import Accepted, Rejected, SubmissionOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadEventCallback:
    """
    Pair of handlers notified once an event upload finishes.

    Both run on a dispatch worker thread, never on the thread that called
    ``add_event``.

    Args:
        on_success: Called with no arguments when the API accepted the event.
        on_error: Called with the response body, or a transport diagnostic,
            when the upload failed.
    """

    on_success: Optional[Callable[[], None]] = None
    on_error: Optional[Callable[[str], None]] = None


def route(outcome: SubmissionOutcome, callback: Optional[UploadEventCallback] = None) -> None:
    """
    Deliver a submission outcome to the caller's handlers and the diagnostic log.
    """
    if isinstance(outcome, Accepted):
        logger.debug("Event accepted by the Hatari API")
        if callback is not None and callback.on_success is not None:
            callback.on_success()
        return

    if isinstance(outcome, Rejected):
        logger.warning("Response code was NOT 201. It was: %d", outcome.status_code)
        logger.warning("Response body was: %s", outcome.response_body)
    else:
        logger.error(
            "There was an error while sending an event to the Hatari API: %s",
            outcome.message,
        )

    if callback is not None and callback.on_error is not None:
        callback.on_error(outcome.message)
