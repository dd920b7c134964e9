from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from dynamic_log.exceptions import ConfigError, InvalidTypeError


InvalidTypeHandler = Callable[[str], Any]


def default_invalid_type_handler(log_type: str) -> None:
    raise InvalidTypeError(log_type)


class TypeRegistry:
    """
    Permitted log types for one Logger.

    An open registry (no labels) accepts every type. A closed registry
    accepts only its labels and hands anything else to the invalid-type
    handler. Labels are matched case-sensitively even though they are
    shown uppercased in the log.

    The label set and handler never change after construction, so one
    registry can be shared between loggers without locking.
    """

    def __init__(
        self,
        labels: Optional[Iterable[str]] = None,
        invalid_handler: Optional[InvalidTypeHandler] = None,
    ):
        if invalid_handler is not None and not callable(invalid_handler):
            raise ConfigError(
                "Value for the 'invalid_type' param must be callable",
                option="invalid_type",
            )

        if labels is None:
            self._permitted = None
            self._handler = invalid_handler
            return

        permitted = frozenset(labels)
        if not permitted:
            raise ConfigError("Value for the 'types' param must not be an empty list", option="types")

        self._permitted = permitted
        self._handler = invalid_handler or default_invalid_type_handler

    @property
    def is_open(self) -> bool:
        return self._permitted is None

    @property
    def permitted(self) -> Optional[frozenset[str]]:
        return self._permitted

    @property
    def handler(self) -> Optional[InvalidTypeHandler]:
        return self._handler

    def __contains__(self, log_type: str) -> bool:
        return self._permitted is None or log_type in self._permitted

    def validate(self, log_type: str) -> bool:
        """
        Decide whether an entry of this type may be written.

        For an unknown type the handler runs exactly once. An exception from
        the handler propagates and aborts the call; a handler returning False
        drops the entry; any other return lets the call proceed.
        """

        if log_type in self:
            return True
        return self._handler(log_type) is not False

    def __repr__(self) -> str:
        if self._permitted is None:
            return "<TypeRegistry open>"
        return f"<TypeRegistry {sorted(self._permitted)!r}>"
