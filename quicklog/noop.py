"""Quicklog that discards everything, for when logging is disabled."""

from quicklog.models import LogEntry


class NoopQuicklog:
    def info(self, group: str, message: str, *args) -> None:
        pass

    def warn(self, group: str, message: str, *args) -> None:
        pass

    def groups(self) -> set[str]:
        return set()

    def entries(self, group: str) -> list[LogEntry]:
        return []

    def export_snapshot(self, timezone: str | None, with_exact_time: bool = False,
                        group_prefix: str | None = None) -> dict[str, list[str]]:
        return {}

    def reset(self, group: str | None = None) -> None:
        pass
