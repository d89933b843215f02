import logging
import sys
import threading
from collections import deque
from typing import Any, Deque, Dict, List, MutableMapping, Optional

MACHINE_LOGGER_NAME = "cafemachine.machine"

logging.getLogger("cafemachine").addHandler(logging.NullHandler())


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200, level: int | str = logging.NOTSET):
        super().__init__(level)
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "machine": getattr(record, "machine_id", None),
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class MachineLogger(logging.LoggerAdapter):
    """
    Per-machine view over the shared ``cafemachine.machine`` logger.

    Records are tagged with the machine id and handed to the handlers this
    adapter owns (always its ring buffer, plus anything added through
    :meth:`add_handler`) before they propagate through the shared logger.
    Nothing is registered with the logging manager, so discarding the
    machine releases its buffer.
    """

    def __init__(
        self,
        machine_id: int,
        ring_size: int = 200,
        level: int | str = logging.INFO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(logger or logging.getLogger(MACHINE_LOGGER_NAME), {"machine_id": machine_id})
        self.buffer = RingBufferHandler(max_entries=ring_size, level=level)
        self.handlers: List[logging.Handler] = [self.buffer]

    @property
    def machine_id(self) -> int:
        return self.extra["machine_id"]

    def add_handler(self, handler: logging.Handler) -> None:
        self.handlers.append(handler)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]):
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("machine_id", self.machine_id)
        kwargs["extra"] = extra
        return msg, kwargs

    def log(self, level, msg, *args, **kwargs) -> None:
        msg, kwargs = self.process(msg, kwargs)
        record = self.logger.makeRecord(
            self.logger.name, level, "(unknown file)", 0, msg, args, None, extra=kwargs["extra"]
        )
        for handler in self.handlers:
            if record.levelno >= handler.level:
                handler.handle(record)
        if self.logger.isEnabledFor(level):
            self.logger.handle(record)


class ConsoleFormatter(logging.Formatter):
    """Render an event with its details, e.g. ``coffee_ground coffee_level=90``."""

    def format(self, record: logging.LogRecord) -> str:
        details = getattr(record, "details", {}) or {}
        line = record.getMessage()
        if details:
            line += " " + " ".join(f"{key}={value}" for key, value in details.items())
        if record.levelno >= logging.ERROR:
            line = f"{record.levelname}: {line}"
        return line


def attach_console(logger: MachineLogger, stream=None, level: int | str = logging.NOTSET) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ConsoleFormatter())
    logger.add_handler(handler)
    return handler
