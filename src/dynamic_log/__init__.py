__all__ = [
    "Logger",
    "LoggerConfig",
    "WriteMode",
    "Destination",
    "TypeRegistry",
    "DynamicDispatcher",
    "DispatchTable",
    "EntryFormatter",
    "CallerInfo",
    "DynamicLogError",
    "ConfigError",
    "DestinationError",
    "DestinationClosedError",
    "InvalidTypeError",
    "open",
]
__version__ = "0.1.0"

import logging

from .caller_info import CallerInfo
from .config import LoggerConfig, WriteMode
from .destination import Destination
from .dispatcher import DispatchTable, DynamicDispatcher
from .entry_formatter import EntryFormatter
from .exceptions import (
    ConfigError,
    DestinationClosedError,
    DestinationError,
    DynamicLogError,
    InvalidTypeError,
)
from .logger import Logger, open
from .type_registry import TypeRegistry

logging.getLogger(__name__).addHandler(logging.NullHandler())
