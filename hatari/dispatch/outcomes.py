"""Results of submitting a single event to the collection API."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Accepted:
    """The API confirmed the event was persisted."""

    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class Rejected:
    """The API answered with anything other than 201."""

    response_body: str
    status_code: int

    @property
    def message(self) -> str:
        return self.response_body


@dataclass(frozen=True)
class TransportFailure:
    """The request never produced a response."""

    diagnostic: str

    @property
    def message(self) -> str:
        return self.diagnostic


SubmissionOutcome = Union[Accepted, Rejected, TransportFailure]


def describe_exception(exc: BaseException) -> str:
    """
    Render an exception as a one line diagnostic, without the traceback.
    """
    detail = str(exc)
    name = type(exc).__name__
    return f"{name}: {detail}" if detail else name
