import configparser
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple, Union

from hatari.constants import (
    API_VERSION,
    CONFIG_FILE_USER,
    CONFIG_SECTION_NAME,
    ENV_API_VERSION,
    ENV_BASE_URL,
    ENV_CONFIG_PATH,
    ENV_TIMEOUT,
    ENV_WORKERS,
    NUM_THREADS_FOR_HTTP_REQUESTS,
    REQUEST_TIMEOUT,
    SERVER_ADDRESS,
)
from hatari.errors import ConfigurationError
from hatari.log_codes import (
    SETTINGS_CONFIG_MISSING_SECTION,
    SETTINGS_INVALID_VALUE,
    SETTINGS_RESOLVED,
)

logger = logging.getLogger(__name__)

BASE_URL_KEY = "base_url"
API_VERSION_KEY = "api_version"
WORKERS_KEY = "workers"
TIMEOUT_KEY = "timeout"


class HatariSettings(NamedTuple):
    """
    Settings shared by every client in the process.

    Args:
        base_url (str): Address of the collection API.
        api_version (str): API version path segment.
        workers (int): Number of dispatch worker threads.
        timeout (float): HTTP timeout in seconds.
    """

    base_url: str = SERVER_ADDRESS
    api_version: str = API_VERSION
    workers: int = NUM_THREADS_FOR_HTTP_REQUESTS
    timeout: float = REQUEST_TIMEOUT

    def as_dict(self) -> Dict[str, Union[str, int, float]]:
        return {
            BASE_URL_KEY: self.base_url,
            API_VERSION_KEY: self.api_version,
            WORKERS_KEY: self.workers,
            TIMEOUT_KEY: self.timeout,
        }


def get_config_path() -> Path:
    raw_path = os.getenv(ENV_CONFIG_PATH)
    return Path(raw_path).expanduser() if raw_path else CONFIG_FILE_USER


def _settings_from_config_ini(config_path: Path) -> Dict[str, str]:
    """
    Read the raw ``[hatari]`` section of the config.ini file.

    Args:
        config_path (Path): The path to the config.ini file.

    Returns:
        Dict[str, str]: The values found, empty if the file or section is missing.
    """
    config = configparser.ConfigParser()
    config_files = config.read(filenames=[config_path])

    if not config_files or not config.has_section(CONFIG_SECTION_NAME):
        if config_files:
            logger.debug(
                SETTINGS_CONFIG_MISSING_SECTION, extra={"config_path": str(config_path)}
            )
        return {}

    return dict(config[CONFIG_SECTION_NAME])


def _positive(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    def parser(raw: str) -> Any:
        value = parse(raw)
        if value <= 0:
            raise ValueError(f"{raw!r} is not a positive number")
        return value

    return parser


def _resolve(
    key: str,
    explicit: Any,
    env_name: str,
    ini_values: Dict[str, str],
    default: Any,
    parse: Callable[[str], Any] = str,
) -> Tuple[Any, str]:
    sources = [
        ("argument", explicit),
        ("env", os.getenv(env_name)),
        ("config", ini_values.get(key)),
    ]

    for source, raw in sources:
        if raw is None or raw == "":
            continue
        try:
            return parse(str(raw)), source
        except ValueError as e:
            logger.error(
                SETTINGS_INVALID_VALUE,
                extra={"setting": key, "value": raw, "source": source},
            )
            raise ConfigurationError(setting=key, value=str(raw)) from e

    return default, "default"


def get_settings(
    base_url: Optional[str] = None,
    api_version: Optional[str] = None,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
    config_path: Optional[Path] = None,
) -> HatariSettings:
    """
    Resolve the effective settings.

    Resolution order for each setting (first defined wins):
      1. Explicit argument
      2. Environment variable (``HATARI_BASE_URL``, ``HATARI_API_VERSION``,
         ``HATARI_WORKERS``, ``HATARI_TIMEOUT``)
      3. ``[hatari]`` section of config.ini
      4. Built-in default

    Args:
        base_url (Optional[str]): Address of the collection API.
        api_version (Optional[str]): API version path segment.
        workers (Optional[int]): Number of dispatch worker threads.
        timeout (Optional[float]): HTTP timeout in seconds.
        config_path (Optional[Path]): The config.ini file, defaults to
            ``HATARI_CONFIG_PATH`` or ``~/.hatari/config.ini``.

    Returns:
        HatariSettings: The resolved settings.

    Raises:
        ConfigurationError: If a numeric setting is not a positive number.
    """
    config_path = config_path or get_config_path()
    ini_values = _settings_from_config_ini(config_path)

    resolved = {
        BASE_URL_KEY: _resolve(
            BASE_URL_KEY, base_url, ENV_BASE_URL, ini_values, SERVER_ADDRESS
        ),
        API_VERSION_KEY: _resolve(
            API_VERSION_KEY, api_version, ENV_API_VERSION, ini_values, API_VERSION
        ),
        WORKERS_KEY: _resolve(
            WORKERS_KEY,
            workers,
            ENV_WORKERS,
            ini_values,
            NUM_THREADS_FOR_HTTP_REQUESTS,
            parse=_positive(int),
        ),
        TIMEOUT_KEY: _resolve(
            TIMEOUT_KEY,
            timeout,
            ENV_TIMEOUT,
            ini_values,
            REQUEST_TIMEOUT,
            parse=_positive(float),
        ),
    }

    settings = HatariSettings(**{key: value for key, (value, _) in resolved.items()})

    logger.info(
        SETTINGS_RESOLVED,
        extra={
            "config_path": str(config_path),
            "sources": {key: source for key, (_, source) in resolved.items()},
            **settings.as_dict(),
        },
    )
    return settings
