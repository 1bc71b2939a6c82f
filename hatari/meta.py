from importlib.metadata import PackageNotFoundError, version
import logging
import platform
from typing import Dict, Optional


LOG = logging.getLogger(__name__)


def get_version() -> Optional[str]:
    """
    Get the version of the Hatari package.

    Returns:
      Optional[str]: The Hatari version if found, otherwise None.
    """
    try:
        return version("hatari")
    except PackageNotFoundError:
        LOG.debug("Unable to get Hatari version from the installed metadata.")
        return None


def get_user_agent() -> str:
    """
    Get the user agent string for HTTP requests.

    Returns:
      str: The user agent string in the format: hatari-python/{version} ({os} {arch}; Python/{python_version})
    """
    hatari_version = get_version() or "unknown"
    os_name = platform.system()

    machine = platform.machine()
    if machine in ("x86_64", "AMD64"):
        arch = "x86_64"
    elif machine in ("arm64", "aarch64"):
        arch = "arm_64"
    else:
        arch = machine or "unknown"

    python_version = platform.python_version()

    return f"hatari-python/{hatari_version} ({os_name} {arch}; Python/{python_version})"


def get_meta_http_headers() -> Dict[str, str]:
    return {"User-Agent": get_user_agent()}
