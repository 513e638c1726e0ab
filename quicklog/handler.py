"""logging.Handler that forwards standard library records into a Quicklog."""

import logging

_OWN_LOGGER = "quicklog"


def _not_from_quicklog(record: logging.LogRecord) -> bool:
    return record.name != _OWN_LOGGER and not record.name.startswith(_OWN_LOGGER + ".")


class QuicklogHandler(logging.Handler):
    """Record log calls as quicklog entries.

    The group is the logger name unless a fixed group is given. WARNING and
    above become WARN entries; everything else is INFO. Records from the
    quicklog package itself are skipped so the store never logs into itself.
    """

    def __init__(self, quicklog, group: str | None = None, level: int = logging.INFO):
        super().__init__(level)
        self._quicklog = quicklog
        self._group = group
        self.addFilter(_not_from_quicklog)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record) if self.formatter else record.getMessage()
            group = self._group or record.name
            # pass the rendered text as an argument so stray % signs survive
            if record.levelno >= logging.WARNING:
                self._quicklog.warn(group, "%s", message)
            else:
                self._quicklog.info(group, "%s", message)
        except Exception:
            self.handleError(record)
