"""
Module: config.py
Location: src/dynamic_log/

Construction arguments for a Logger, validated once up front so a logger
is never built from a partially valid configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from dynamic_log.exceptions import ConfigError


STREAM_TARGETS = ("STDOUT", "STDERR")

_LABEL_COLLECTIONS = (list, tuple, set, frozenset)


class WriteMode(str, Enum):
    APPEND = "append"     # keep existing entries (default)
    CLOBBER = "clobber"   # truncate on open


def is_stream_target(target: Any) -> bool:
    """True when target names standard output or standard error."""
    return isinstance(target, str) and target.strip().upper() in STREAM_TARGETS


def _parse_mode(mode: Any) -> WriteMode:
    if mode is None:
        return WriteMode.APPEND
    if isinstance(mode, WriteMode):
        return mode
    try:
        return WriteMode(str(mode).strip().lower())
    except ValueError:
        raise ConfigError(
            f"Value for the 'mode' param must be 'append' or 'clobber', got {mode!r}",
            option="mode",
        ) from None


def _parse_types(types: Any) -> Optional[frozenset[str]]:
    if types is None:
        return None
    if not isinstance(types, _LABEL_COLLECTIONS):
        raise ConfigError("Value for the 'types' param must be a list", option="types")
    if not types:
        raise ConfigError("Value for the 'types' param must not be an empty list", option="types")

    bad = [t for t in types if not isinstance(t, str) or not t]
    if bad:
        raise ConfigError(
            f"Value for the 'types' param must contain non-empty strings, got {bad!r}",
            option="types",
        )
    return frozenset(types)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Validated configuration for a single Logger.

    file         -- file path, or "STDOUT"/"STDERR" (case-insensitive)
    mode         -- append (default) or clobber
    types        -- permitted type labels; None means every label is valid
    invalid_type -- handler called with the offending label
    """

    file: str
    mode: WriteMode = WriteMode.APPEND
    types: Optional[frozenset[str]] = None
    invalid_type: Optional[Callable[[str], Any]] = None

    @property
    def is_stream(self) -> bool:
        return is_stream_target(self.file)

    @classmethod
    def from_options(
        cls,
        *,
        file: Any = None,
        mode: Any = WriteMode.APPEND,
        types: Any = None,
        invalid_type: Any = None,
    ) -> "LoggerConfig":
        """
        Factory method that validates raw keyword options.

        Raises ConfigError on the first malformed option.
        """

        if isinstance(file, os.PathLike):
            file = os.fspath(file)
        if not file or not isinstance(file, str):
            raise ConfigError("Must supply file: Logger.open(file='foo')", option="file")

        if invalid_type is not None and not callable(invalid_type):
            raise ConfigError(
                "Value for the 'invalid_type' param must be callable",
                option="invalid_type",
            )

        return cls(
            file=file,
            mode=_parse_mode(mode),
            types=_parse_types(types),
            invalid_type=invalid_type,
        )
