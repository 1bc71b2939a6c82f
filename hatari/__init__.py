# -*- coding: utf-8 -*-

__author__ = """hatario.io"""
__email__ = 'support@hatario.io'

import logging
import os

from hatari.client import HatariClient
from hatari.dispatch.callbacks import UploadEventCallback
from hatari.errors import (
    ConfigurationError,
    HatariException,
    InvalidCollectionError,
    InvalidEventError,
)
from hatari.logs import disable_logging, enable_logging

ROOT = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(ROOT, 'VERSION')) as version_file:
    VERSION = version_file.read().strip()

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HatariClient",
    "UploadEventCallback",
    "ConfigurationError",
    "HatariException",
    "InvalidCollectionError",
    "InvalidEventError",
    "disable_logging",
    "enable_logging",
    "VERSION",
]
