"""Log entry model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from quicklog.timefmt import format_exact, format_relative

MAX_MESSAGE_LENGTH = 1000


class Severity(str, Enum):
    INFO = "INFO"
    WARN = "WARN"


@dataclass(frozen=True)
class LogEntry:
    """One deduplicated message within a group.

    Entries are never mutated; a recurrence replaces the stored entry with
    a copy carrying the bumped count and the new last_seen time.
    """

    group: str
    message: str
    severity: Severity
    last_seen: datetime
    count: int = 1

    def time_ago(self, timezone: str | None = None, now: datetime | None = None) -> str:
        return format_relative(self.last_seen, timezone, now=now)

    def formatted_message(self, timezone: str | None, with_exact_time: bool = False,
                          now: datetime | None = None) -> str:
        """Return "<time> - [SEVERITY] message", suffixed with [xN] for repeats."""
        if with_exact_time:
            when = format_exact(self.last_seen, timezone)
        else:
            when = self.time_ago(timezone, now=now)
        out = f"{when} - [{self.severity.value}] {self.message}"
        if self.count > 1:
            return f"{out} [x{self.count}]"
        return out
