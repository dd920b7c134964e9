PACKAGE = "dynamic_log"


class DynamicLogError(Exception):
    """Base class for every error raised by dynamic_log."""


class ConfigError(DynamicLogError, ValueError):
    """Malformed construction arguments. No logger is returned."""

    def __init__(self, reason, option=None):
        self.option = option
        self.reason = reason
        super().__init__(f"{PACKAGE}: {reason}")


class DestinationError(DynamicLogError, OSError):
    """The sink could not be opened, or was written after being closed."""

    def __init__(self, target, reason, errno=None):
        self.target = target
        self.reason = reason
        if errno is None:
            super().__init__(f"{PACKAGE}: {reason}")
        else:
            super().__init__(errno, f"{PACKAGE}: {reason}")


class DestinationClosedError(DestinationError):
    pass


class InvalidTypeError(DynamicLogError, ValueError):
    """A log type outside the permitted set was used."""

    def __init__(self, log_type, reason=None):
        self.log_type = log_type
        self.reason = reason or (
            f"Type '{log_type}' was not specified as a valid type "
            f"(add it to types=[...] when opening the logger)"
        )
        super().__init__(f"{PACKAGE}: {self.reason}")
