from dataclasses import dataclass, field
import time

from dynamic_log.caller_info import CallerInfo, UNKNOWN_CALLER


@dataclass
class LogEntry:
    """
    A single log event, built and rendered on the spot.

    Entries are never retained: the dispatcher formats and writes them
    immediately.
    """

    log_type: str = ""
    # Type label as supplied by the caller.
    # Rendered uppercased; matched against the registry as-is.

    message: str = ""
    # Message body, written without escaping.

    caller: CallerInfo = UNKNOWN_CALLER
    # Call site that asked for the entry.

    timestamp: float = field(default_factory=time.time)
    # Wall-clock time, rendered at second resolution.
