import threading
from typing import Callable, List
from unittest.mock import Mock

import httpx
import pytest

from hatari.client import HatariClient
from hatari.dispatch.callbacks import UploadEventCallback
from hatari.dispatch.pool import DispatchPool
from hatari.models import ClientIdentity


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")
    config.addinivalue_line("markers", "integration: tests spanning several components")


@pytest.fixture
def identity() -> ClientIdentity:
    """
    Identity with valid keys.
    """
    return ClientIdentity.create("project-123", "secret-key")


@pytest.fixture
def mock_pool() -> Mock:
    """
    Pool that records submissions without running them.
    """
    return Mock(spec=DispatchPool)


@pytest.fixture
def client(mock_pool: Mock) -> HatariClient:
    """
    Client wired to the recording pool.
    """
    return HatariClient("project-123", "secret-key", pool=mock_pool)


@pytest.fixture
def mock_transport_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """
    Factory for httpx clients answering through a handler instead of the network.
    """
    clients: List[httpx.Client] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return http_client

    yield factory

    for http_client in clients:
        http_client.close()


class RecordingCallback:
    """
    Upload callback remembering every invocation.
    """

    def __init__(self):
        self.successes = 0
        self.errors: List[str] = []
        self.done = threading.Event()
        self._lock = threading.Lock()

    def on_success(self) -> None:
        with self._lock:
            self.successes += 1
        self.done.set()

    def on_error(self, message: str) -> None:
        with self._lock:
            self.errors.append(message)
        self.done.set()

    def as_callback(self) -> UploadEventCallback:
        return UploadEventCallback(on_success=self.on_success, on_error=self.on_error)


@pytest.fixture
def recording_callback() -> RecordingCallback:
    return RecordingCallback()
