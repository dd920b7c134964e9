"""
logger.py

The Logger facade.

    log = Logger.open(file="logs/my.log", types=["info", "cache_hit"])
    log.log("info", "starting")
    log.cache_hit(f"Got hit on key {key}")
    log.close()

Any attribute that is not a Logger method is treated as a log type, so
`log.cache_hit(msg)` is the same as `log.log("cache_hit", msg)`. The names
in RESERVED_NAMES, and names starting with an underscore, are not log types.
"""

from __future__ import annotations

import pprint
import types
from typing import Any, Optional

from dynamic_log.config import LoggerConfig, WriteMode
from dynamic_log.destination import Destination
from dynamic_log.dispatcher import DynamicDispatcher, is_dynamic_name
from dynamic_log.entry_formatter import EntryFormatter
from dynamic_log.type_registry import TypeRegistry


RESERVED_NAMES = frozenset({"open", "from_config", "log", "dump", "destination", "close"})


class Logger:
    """
    Writes typed, timestamped entries to one destination.

    Each Logger owns its destination, its permitted types and its table of
    dynamic entry points; two loggers in one process never share state.
    """

    def __init__(
        self,
        file: Any = None,
        mode: Any = WriteMode.APPEND,
        types: Any = None,
        invalid_type: Any = None,
    ):
        self._init_from_config(
            LoggerConfig.from_options(file=file, mode=mode, types=types, invalid_type=invalid_type)
        )

    def _init_from_config(self, config: LoggerConfig) -> None:
        registry = TypeRegistry(config.types, config.invalid_type)
        destination = Destination.open(config.file, config.mode)

        self._destination = destination
        self._dispatcher = DynamicDispatcher(registry, EntryFormatter(), destination)

    @classmethod
    def open(cls, **options: Any) -> "Logger":
        """
        Open a logger. Options: file (required), mode, types, invalid_type.
        """
        return cls(**options)

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "Logger":
        logger = cls.__new__(cls)
        logger._init_from_config(config)
        return logger

    # ----------------------------
    # Logging
    # ----------------------------

    def log(self, log_type: Any = None, message: Any = None) -> bool:
        """
        Write one entry of the given type.

        A missing type or message makes the call a no-op. Returns True when
        a line was written.
        """
        return self._dispatcher.dispatch(log_type, message, stacklevel=2)

    def __getattr__(self, name: str):
        # Only reached for names not found through normal lookup.
        if not is_dynamic_name(name):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        dispatcher = self.__dict__.get("_dispatcher")
        if dispatcher is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        entry = dispatcher.table.get(name)
        if entry is None:
            entry = dispatcher.intercept(name)
        return types.MethodType(entry, self)

    def dump(self, obj: Any, header: Optional[str] = "Object dump:") -> None:
        """
        Write a pretty-printed dump of obj straight to the destination,
        without timestamp, type or caller.
        """
        text = pprint.pformat(obj)
        if header:
            text = f"{header}\n{text}"
        self._destination.write(text + "\n")

    # ----------------------------
    # Accessors
    # ----------------------------

    @property
    def destination(self) -> Destination:
        """Raw sink for unformatted writes."""
        return self._destination

    # ----------------------------
    # Teardown
    # ----------------------------

    def close(self) -> None:
        self._destination.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        destination = self.__dict__.get("_destination")
        if destination is not None:
            destination.close()

    def __repr__(self) -> str:
        destination = self.__dict__.get("_destination")
        return f"<Logger {destination!r}>"


def open(**options: Any) -> Logger:
    """Module-level shortcut for Logger.open()."""
    return Logger.open(**options)
