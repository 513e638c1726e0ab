"""Quicklog — in-memory at-a-glance logs grouped by component."""

from typing import Protocol, runtime_checkable

from quicklog.config import QuicklogConfig
from quicklog.models import LogEntry, Severity
from quicklog.noop import NoopQuicklog
from quicklog.store import DEFAULT_CAPACITY, GroupStore


@runtime_checkable
class Quicklog(Protocol):
    def info(self, group: str, message: str, *args) -> None: ...

    def warn(self, group: str, message: str, *args) -> None: ...

    def groups(self) -> set[str]: ...

    def entries(self, group: str) -> list[LogEntry]: ...

    def export_snapshot(self, timezone: str | None, with_exact_time: bool = False,
                        group_prefix: str | None = None) -> dict[str, list[str]]: ...

    def reset(self, group: str | None = None) -> None: ...


class ActiveQuicklog:
    """Quicklog backed by a GroupStore."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, clock=None):
        self._store = GroupStore(capacity, clock=clock)

    @property
    def capacity(self) -> int:
        return self._store.capacity

    def info(self, group: str, message: str, *args) -> None:
        self._store.record(Severity.INFO, group, message, *args)

    def warn(self, group: str, message: str, *args) -> None:
        self._store.record(Severity.WARN, group, message, *args)

    def groups(self) -> set[str]:
        return self._store.groups()

    def entries(self, group: str) -> list[LogEntry]:
        return self._store.entries(group)

    def export_snapshot(self, timezone: str | None, with_exact_time: bool = False,
                        group_prefix: str | None = None) -> dict[str, list[str]]:
        return self._store.export_snapshot(timezone, with_exact_time, group_prefix)

    def reset(self, group: str | None = None) -> None:
        self._store.reset(group)


def new_quicklog(config: QuicklogConfig | None = None) -> Quicklog:
    """Factory: a no-op instance when disabled, otherwise an active one."""
    if config is None:
        config = QuicklogConfig()
    if not config.enabled:
        return NoopQuicklog()
    return ActiveQuicklog(capacity=config.capacity)
