"""Bounded, deduplicating per-group store of recent log entries."""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from quicklog.models import MAX_MESSAGE_LENGTH, LogEntry, Severity
from quicklog.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 40
MAX_CAPACITY = 500


def clamp_capacity(capacity: int) -> int:
    return min(max(capacity, 1), MAX_CAPACITY)


def render_message(template: str, args: tuple) -> str:
    """Apply printf-style args to template; a mismatch keeps the raw text.

    With no args the template is returned untouched, so "%%" is only
    collapsed to "%" when args are passed.
    """
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError, KeyError) as e:
        logger.warning("Could not format %r with %r: %s", template, args, e)
        return f"{template} {args!r}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GroupStore:
    """Newest-first lists of LogEntry keyed by group name.

    A repeat of an existing (message, severity) pair bumps that entry in
    place; only a new distinct message takes the head slot, evicting the
    tail once the group holds `capacity` entries. All mutation happens
    under one exclusive lock, reads share it and get copies back.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, clock=None):
        self._capacity = clamp_capacity(capacity)
        self._clock = clock or _utcnow
        self._groups: dict[str, list[LogEntry]] = {}
        self._lock = ReadWriteLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, severity: Severity, group: str, template: str, *args):
        if not group:
            logger.debug("Dropping entry with empty group")
            return
        message = render_message(template, args)
        if not message:
            logger.debug("Dropping empty message for group %s", group)
            return
        if len(message) > MAX_MESSAGE_LENGTH:
            message = message[:MAX_MESSAGE_LENGTH]

        with self._lock.write_locked():
            entries = self._groups.get(group, [])
            now = self._clock()

            for i, entry in enumerate(entries):
                if entry.message == message and entry.severity == severity:
                    entries[i] = replace(entry, count=entry.count + 1, last_seen=now)
                    return

            evicted = entries[-1] if len(entries) >= self._capacity else None
            new_entry = LogEntry(group=group, message=message, severity=severity, last_seen=now)
            self._groups[group] = [new_entry] + entries[:self._capacity - 1]

        # log only after releasing the lock, a handler may write back into this store
        if evicted is not None:
            logger.debug("Group %s full, evicted %r", group, evicted.message)

    def groups(self) -> set[str]:
        with self._lock.read_locked():
            return set(self._groups)

    def entries(self, group: str) -> list[LogEntry]:
        """Return a copy of the group's entries, newest first."""
        with self._lock.read_locked():
            return list(self._groups.get(group, []))

    def export_snapshot(self, timezone: str | None, with_exact_time: bool = False,
                        group_prefix: str | None = None) -> dict[str, list[str]]:
        """Format every entry, optionally only for groups starting with group_prefix."""
        with self._lock.read_locked():
            selected = {
                name: list(entries)
                for name, entries in self._groups.items()
                if group_prefix is None or name.startswith(group_prefix)
            }

        now = self._clock()
        return {
            name: [e.formatted_message(timezone, with_exact_time, now=now) for e in entries]
            for name, entries in selected.items()
            if entries
        }

    def reset(self, group: str | None = None):
        with self._lock.write_locked():
            if group is None:
                self._groups = {}
                cleared = False
            else:
                cleared = self._groups.pop(group, None) is not None

        if group is None:
            logger.info("Cleared all quicklog groups")
        elif cleared:
            logger.info("Cleared quicklog group %s", group)
