from __future__ import annotations

import time

from dynamic_log.caller_info import CallerInfo
from dynamic_log.log_entry import LogEntry


class EntryFormatter:
    """
    Renders the one line format:

        Thu Nov  8 21:14:12 2007 [ALARM] OONTZ! (techno.py main 42)
    """

    def format_timestamp(self, timestamp: float) -> str:
        return time.asctime(time.localtime(timestamp))

    def format_fields(self, timestamp: float, log_type: str, message: str, caller: CallerInfo) -> str:
        return f"{self.format_timestamp(timestamp)} [{log_type.upper()}] {message} ({caller})\n"

    def format(self, entry: LogEntry) -> str:
        return self.format_fields(entry.timestamp, entry.log_type, entry.message, entry.caller)
