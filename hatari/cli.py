import json
import logging
import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console

from hatari.client import HatariClient
from hatari.config import get_settings
from hatari.constants import (
    ENV_API_KEY,
    ENV_PROJECT_KEY,
    EXIT_CODE_FAILURE,
    EXIT_CODE_INVALID_EVENT,
    TIMESTAMP_KEY,
)
from hatari.dispatch.callbacks import UploadEventCallback
from hatari.dispatch.http import EventSender, create_http_client
from hatari.dispatch.pool import DispatchPool
from hatari.errors import ConfigurationError, HatariException
from hatari.events.validation import validate
from hatari.logs import enable_logging
from hatari.meta import get_version

LOG = logging.getLogger(__name__)

console = Console()
cli_app = typer.Typer(
    rich_markup_mode="rich",
    name="hatari",
    help="Send events to the Hatari collection API from the command line.",
    no_args_is_help=True,
)

CLI_DEBUG_HELP = "Enable debug logging of the Hatari SDK."
CLI_EVENT_HELP = "The event, as a JSON object. Example: '{\"item\": \"golden widget\"}'"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"hatari {get_version() or 'unknown'}")
        raise typer.Exit()


@cli_app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help=CLI_DEBUG_HELP),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    if debug:
        enable_logging(logging.DEBUG)
        LOG.debug("Debug logging enabled")


def parse_event(raw: str) -> Dict[str, Any]:
    """
    Parse the event argument, exiting with a usage error when it is not a
    JSON object.
    """
    try:
        event = json.loads(raw)
    except json.JSONDecodeError as e:
        console.print(f"[red]The event is not valid JSON: {e}[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_EVENT)

    if not isinstance(event, dict):
        console.print("[red]The event must be a JSON object.[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_EVENT)

    return event


@cli_app.command("validate")
def validate_event(
    collection: str = typer.Argument(..., help="Event collection name."),
    event: str = typer.Argument(..., help=CLI_EVENT_HELP),
) -> None:
    """
    Check an event against the naming rules without sending it.
    """
    result = validate(collection, parse_event(event))

    if not result.ok:
        console.print(f"[red]{result.reason}[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_EVENT)

    console.print("[green]Event is valid.[/green]")


@cli_app.command("send")
def send_event(
    collection: str = typer.Argument(..., help="Event collection name."),
    event: str = typer.Argument(..., help=CLI_EVENT_HELP),
    project_key: str = typer.Option(
        ..., "--project-key", envvar=ENV_PROJECT_KEY, help="Hatari project key."
    ),
    api_key: str = typer.Option(
        ..., "--api-key", envvar=ENV_API_KEY, help="Hatari API key."
    ),
    timestamp: Optional[datetime] = typer.Option(
        None, "--timestamp", help="Override the event timestamp (ISO-8601)."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Address of the collection API.", hidden=True
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="HTTP timeout in seconds."
    ),
) -> None:
    """
    Send a single event and wait for the API to acknowledge it.
    """
    event_data = parse_event(event)
    overrides = {TIMESTAMP_KEY: timestamp} if timestamp else None

    try:
        settings = get_settings(base_url=base_url, timeout=timeout)
    except HatariException as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=EXIT_CODE_FAILURE)

    errors: List[str] = []
    done = threading.Event()

    def on_success() -> None:
        done.set()

    def on_error(message: str) -> None:
        errors.append(message)
        done.set()

    http_client = create_http_client(settings.timeout)
    sender = EventSender(
        base_url=settings.base_url,
        api_version=settings.api_version,
        http_client=http_client,
        timeout=settings.timeout,
    )
    pool = DispatchPool(sender.submit_one, workers=1)

    try:
        client = HatariClient(project_key, api_key, pool=pool)
        client.add_event(
            collection,
            event_data,
            hatari_properties=overrides,
            callback=UploadEventCallback(on_success=on_success, on_error=on_error),
        )
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=EXIT_CODE_FAILURE)
    except HatariException as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=EXIT_CODE_INVALID_EVENT)
    finally:
        # Waits for the queued upload before the client goes away
        pool.close()
        http_client.close()

    if not done.is_set() or errors:
        detail = errors[0] if errors else "no response"
        console.print(f"[red]Event was not accepted: {detail}[/red]")
        raise typer.Exit(code=EXIT_CODE_FAILURE)

    console.print(f"[green]Event added to collection {collection}.[/green]")
