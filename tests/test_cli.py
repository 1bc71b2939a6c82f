import json
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from hatari.cli import cli_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Resolve settings from defaults only.
    """
    monkeypatch.setenv("HATARI_CONFIG_PATH", str(tmp_path / "missing.ini"))
    for name in (
        "HATARI_BASE_URL",
        "HATARI_API_VERSION",
        "HATARI_WORKERS",
        "HATARI_TIMEOUT",
        "HATARI_PROJECT_KEY",
        "HATARI_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


def fake_api(status_code: int, text: str = "", requests=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, text=text)

    return lambda timeout: httpx.Client(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestValidateCommand:
    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_app, ["validate", "purchases", '{"x": "y"}'])

        assert result.exit_code == 0
        assert "Event is valid." in result.output

    def test_invalid_property(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_app, ["validate", "purchases", '{"x.y": 1}'])

        assert result.exit_code == 2
        assert "period" in result.output

    def test_invalid_collection(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_app, ["validate", "$purchases", '{"x": 1}'])

        assert result.exit_code == 2
        assert "dollar sign" in result.output

    @pytest.mark.parametrize("raw", ["not json", "[1, 2]"])
    def test_not_an_object(self, runner: CliRunner, raw: str) -> None:
        result = runner.invoke(cli_app, ["validate", "purchases", raw])

        assert result.exit_code == 2


@pytest.mark.unit
class TestSendCommand:
    def test_accepted(self, runner: CliRunner) -> None:
        requests = []

        with patch("hatari.cli.create_http_client", fake_api(201, requests=requests)):
            result = runner.invoke(
                cli_app,
                [
                    "send",
                    "purchases",
                    '{"item": "golden widget"}',
                    "--project-key",
                    "project-123",
                    "--api-key",
                    "secret-key",
                    "--timestamp",
                    "2024-01-01T10:00:00",
                ],
            )

        assert result.exit_code == 0, result.output
        assert "Event added to collection purchases." in result.output
        body = json.loads(requests[0].content)
        assert body["item"] == "golden widget"
        assert body["hatari"]["timestamp"] == "2024-01-01T10:00:00.000"
        assert requests[0].headers["Authorization"] == "secret-key"

    def test_rejected(self, runner: CliRunner) -> None:
        with patch("hatari.cli.create_http_client", fake_api(400, "bad request")):
            result = runner.invoke(
                cli_app,
                ["send", "purchases", '{"x": "y"}', "--project-key", "p", "--api-key", "k"],
            )

        assert result.exit_code == 1
        assert "bad request" in result.output

    def test_keys_from_environment(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HATARI_PROJECT_KEY", "project-123")
        monkeypatch.setenv("HATARI_API_KEY", "secret-key")
        requests = []

        with patch("hatari.cli.create_http_client", fake_api(201, requests=requests)):
            result = runner.invoke(cli_app, ["send", "purchases", '{"x": "y"}'])

        assert result.exit_code == 0, result.output
        assert requests[0].url.path == "/1/projects/project-123/events/purchases"

    def test_invalid_event_not_sent(self, runner: CliRunner) -> None:
        requests = []

        with patch("hatari.cli.create_http_client", fake_api(201, requests=requests)):
            result = runner.invoke(
                cli_app,
                ["send", "purchases", '{"hatari": 1}', "--project-key", "p", "--api-key", "k"],
            )

        assert result.exit_code == 2
        assert requests == []

    def test_empty_project_key(self, runner: CliRunner) -> None:
        with patch("hatari.cli.create_http_client", fake_api(201)):
            result = runner.invoke(
                cli_app,
                ["send", "purchases", '{"x": "y"}', "--project-key", "", "--api-key", "k"],
            )

        assert result.exit_code == 1
        assert "Invalid project key" in result.output
