import pytest

from hatari import registry
from hatari.client import HatariClient
from hatari.errors import ClientNotInitializedError, ConfigurationError


@pytest.fixture(autouse=True)
def reset_registry():
    registry.reset()
    yield
    registry.reset()


@pytest.mark.unit
def test_client_before_initialize() -> None:
    with pytest.raises(ClientNotInitializedError):
        registry.client()


@pytest.mark.unit
def test_initialize_and_get() -> None:
    created = registry.initialize("project-123", "secret-key")

    assert isinstance(created, HatariClient)
    assert registry.client() is created


@pytest.mark.unit
def test_initialize_replaces_client() -> None:
    first = registry.initialize("project-1", "key-1")
    second = registry.initialize("project-2", "key-2")

    assert registry.client() is second
    assert registry.client() is not first


@pytest.mark.unit
def test_failed_initialize_keeps_previous() -> None:
    first = registry.initialize("project-1", "key-1")

    with pytest.raises(ConfigurationError):
        registry.initialize("", "key-2")

    assert registry.client() is first
