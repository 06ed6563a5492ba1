"""Call recording: one line per tool invocation in an append-only log."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallEvent:
    """A single invocation of a gateway operation."""

    operation: str
    argument: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def message(self) -> str:
        return f"Called {self.operation}({self.argument or ''})"

    def to_log_line(self) -> str:
        return f"[{self.timestamp:%Y-%m-%d %H:%M:%S}] {self.message}"


class CallRecorder(Protocol):
    """Anything that can record call events."""

    def record(self, event: CallEvent) -> None: ...


class FileCallRecorder:
    """
    Appends each event as a timestamped line to a text file.

    The parent directory is created on first write. Write failures are
    reported through logging and never raised to the caller.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def record(self, event: CallEvent) -> None:
        line = event.to_log_line() + "\n"
        try:
            with self._lock:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("a", encoding="utf-8") as handle:
                    handle.write(line)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to write log: {e}")


class MemoryCallRecorder:
    """Keeps events in memory, for tests and embedding."""

    def __init__(self) -> None:
        self.events: list[CallEvent] = []
        self._lock = threading.Lock()

    def record(self, event: CallEvent) -> None:
        with self._lock:
            self.events.append(event)

    @property
    def messages(self) -> list[str]:
        return [event.message for event in self.events]


class NullCallRecorder:
    """Discards every event."""

    def record(self, event: CallEvent) -> None:
        pass
