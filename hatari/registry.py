"""
Optional shared client for applications that only use a single project.

The core never reads from here; it is a convenience for callers who prefer
``hatari.registry.client()`` over passing a :class:`HatariClient` around.
"""
import threading
from typing import Optional

from hatari.client import HatariClient
from hatari.errors import ClientNotInitializedError

_client: Optional[HatariClient] = None
_lock = threading.Lock()


def initialize(project_key: str, api_key: str) -> HatariClient:
    """
    Create the shared client, replacing any previous one.
    """
    global _client

    new_client = HatariClient(project_key, api_key)
    with _lock:
        _client = new_client
    return new_client


def client() -> HatariClient:
    """
    Raises:
        ClientNotInitializedError: If :func:`initialize` was never called.
    """
    with _lock:
        if _client is None:
            raise ClientNotInitializedError()
        return _client


def reset() -> None:
    global _client

    with _lock:
        _client = None
