from .callbacks import UploadEventCallback, route
from .http import EventSender
from .outcomes import Accepted, Rejected, SubmissionOutcome, TransportFailure
from .pool import DispatchPool, DispatchTask, get_default_pool

__all__ = [
    "UploadEventCallback",
    "route",
    "EventSender",
    "Accepted",
    "Rejected",
    "SubmissionOutcome",
    "TransportFailure",
    "DispatchPool",
    "DispatchTask",
    "get_default_pool",
]
