"""
dispatcher.py

Maps type labels to log writes.

A label used as a method name (`logger.cache_hit("...")`) is first routed
through `DynamicDispatcher.intercept`. Once a call under that label has
gone through, a dedicated entry point is stored in the DispatchTable and
later calls use it directly. Both paths validate, format and write the same
way; the table only saves the interception step.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional

from dynamic_log.caller_info import capture_caller
from dynamic_log.destination import Destination
from dynamic_log.entry_formatter import EntryFormatter
from dynamic_log.log_entry import LogEntry
from dynamic_log.type_registry import TypeRegistry

_log = logging.getLogger(__name__)

EntryPoint = Callable[..., bool]


def is_dynamic_name(name: str) -> bool:
    """
    Whether an attribute name may be used as a log type.

    Dunder names (teardown included) and private names belong to Python
    and its tooling, never to log types.
    """
    return bool(name) and not name.startswith("_")


class DispatchTable:
    """
    Label -> entry point cache. Entries are added on first use and never
    removed.
    """

    def __init__(self):
        self._entries: Dict[str, EntryPoint] = {}
        self._lock = threading.Lock()

    def get(self, label: str) -> Optional[EntryPoint]:
        return self._entries.get(label)

    def insert(self, label: str, entry: EntryPoint) -> EntryPoint:
        # Entry points for one label behave identically; last writer wins.
        with self._lock:
            self._entries[label] = entry
        return entry

    def labels(self) -> list[str]:
        return list(self._entries.keys())

    def __contains__(self, label: str) -> bool:
        return label in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class DynamicDispatcher:
    """
    Validates, formats and writes log entries for one Logger.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        formatter: EntryFormatter,
        destination: Destination,
        table: Optional[DispatchTable] = None,
    ):
        self._registry = registry
        self._formatter = formatter
        self._destination = destination
        self._table = table if table is not None else DispatchTable()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def table(self) -> DispatchTable:
        return self._table

    def dispatch(self, log_type: Any, message: Any, *, stacklevel: int = 1) -> bool:
        """
        Write one entry.

        stacklevel=1 records the function calling dispatch as the caller;
        each extra level moves one frame up. Returns False when nothing
        was written: a missing type or message, or an entry dropped by the
        invalid-type handler.
        """

        if not log_type or not message:
            return False

        log_type = str(log_type)
        if not self._registry.validate(log_type):
            return False

        entry = LogEntry(
            log_type=log_type,
            message=message,
            caller=capture_caller(stacklevel + 1),
        )
        self._destination.write(self._formatter.format(entry))
        return True

    def entry_point(self, label: str) -> EntryPoint:
        """
        Build the fast entry point for label.

        Entry points take the owning object first so they can be bound to
        it; the binding keeps the owner alive while the entry is in use.
        """

        def entry(owner: Any, message: Any = None, *args: Any) -> bool:
            return self.dispatch(label, message, stacklevel=2)

        entry.__name__ = label
        entry.__qualname__ = f"{type(self).__name__}.entry_point.<{label}>"
        return entry

    def intercept(self, label: str) -> EntryPoint:
        """
        First-use path for a dynamic label.

        The entry point is registered once a call has returned normally, so
        a label rejected by the default handler is intercepted again next
        time.
        """

        def interceptor(owner: Any, message: Any = None, *args: Any) -> bool:
            written = self.dispatch(label, message, stacklevel=2)
            if label not in self._table:
                self._table.insert(label, self.entry_point(label))
                _log.debug("Registered entry point for log type %r", label)
            return written

        interceptor.__name__ = label
        return interceptor
