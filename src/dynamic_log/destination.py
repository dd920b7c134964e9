from __future__ import annotations

import logging
import sys
import threading
from typing import Optional, TextIO

from dynamic_log.config import WriteMode, is_stream_target
from dynamic_log.exceptions import DestinationClosedError, DestinationError

_log = logging.getLogger(__name__)

_FILE_MODES = {
    WriteMode.APPEND: "a",
    WriteMode.CLOBBER: "w",
}


class Destination:
    """
    Writable sink behind a Logger: a file path, or standard output/error.

    Every write is flushed straight away so `tail -f` style readers see
    entries as they are written.
    """

    def __init__(self, target: str, mode: WriteMode, stream_name: Optional[str], file: Optional[TextIO]):
        self._target = target
        self._mode = mode
        self._stream_name = stream_name
        self._file = file
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def open(cls, target: str, mode: WriteMode = WriteMode.APPEND) -> "Destination":
        """
        Open target for writing.

        Standard streams never fail. A file that cannot be opened for the
        requested mode raises DestinationError carrying the system error.
        """

        mode = WriteMode(mode)
        if is_stream_target(target):
            # Resolved from sys on every write so redirection is honoured.
            stream_name = target.strip().lower()
            _log.debug("Destination bound to sys.%s", stream_name)
            return cls(target, mode, stream_name, None)

        try:
            file = open(target, _FILE_MODES[mode], encoding="utf-8")
        except OSError as e:
            raise DestinationError(
                target,
                f"Failed to open file '{target}': {e.strerror or e}",
                errno=e.errno,
            ) from e

        _log.debug("Destination opened %s (mode=%s)", target, mode.value)
        return cls(target, mode, None, file)

    @property
    def target(self) -> str:
        return self._target

    @property
    def mode(self) -> WriteMode:
        return self._mode

    @property
    def is_stream(self) -> bool:
        return self._stream_name is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def _sink(self) -> TextIO:
        if self._stream_name is not None:
            return getattr(sys, self._stream_name)
        if self._closed:
            raise DestinationClosedError(self._target, f"Write to closed file '{self._target}'")
        return self._file

    def write(self, text: str) -> None:
        """
        Write text verbatim. Log entries arrive already newline-terminated.
        """
        with self._lock:
            sink = self._sink()
            sink.write(text)
            sink.flush()

    def close(self) -> None:
        """
        Release the sink. Standard streams are left open; repeated calls
        are ignored.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._file is not None:
                self._file.close()
                _log.debug("Destination closed %s", self._target)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Destination {self._target!r} mode={self._mode.value} {state}>"
