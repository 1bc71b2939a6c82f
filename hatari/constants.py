# -*- coding: utf-8 -*-
from pathlib import Path

DIR_NAME = ".hatari"

USER_CONFIG_DIR = Path("~", DIR_NAME).expanduser()
CONFIG_FILE_USER = USER_CONFIG_DIR / "config.ini"

# Environment overrides
ENV_CONFIG_PATH = "HATARI_CONFIG_PATH"
ENV_BASE_URL = "HATARI_BASE_URL"
ENV_API_VERSION = "HATARI_API_VERSION"
ENV_WORKERS = "HATARI_WORKERS"
ENV_TIMEOUT = "HATARI_TIMEOUT"
ENV_PROJECT_KEY = "HATARI_PROJECT_KEY"
ENV_API_KEY = "HATARI_API_KEY"

CONFIG_SECTION_NAME = "hatari"

# API
SERVER_ADDRESS = "https://api.hatario.io"
API_VERSION = "1"
REQUEST_TIMEOUT = 30.0
NUM_THREADS_FOR_HTTP_REQUESTS = 4
EVENT_ACCEPTED_STATUS = 201

# Event naming rules
RESERVED_METADATA_KEY = "hatari"
TIMESTAMP_KEY = "timestamp"
MAX_NAME_LENGTH = 256
MAX_STRING_VALUE_LENGTH = 10000

# Exit codes
EXIT_CODE_FAILURE = 1
EXIT_CODE_INVALID_EVENT = 2
