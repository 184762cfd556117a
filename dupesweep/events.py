"""
Progress and log notifications for dupesweep.

The scanner reports through an ``EventChannel`` passed in by the caller.
Subscribers (console, GUI state, tests) register a callback and receive every
``ProgressEvent`` and ``LogEvent`` emitted on that channel. There is no global
channel; each scan gets its own.

Callbacks run on the emitting thread, which for progress events is a
fingerprinting worker. Keep them short.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Union

from .models import LogEvent, ProgressEvent

Event = Union[ProgressEvent, LogEvent]
Subscriber = Callable[[Event], None]

_logger = logging.getLogger(__name__)


class EventChannel:
    """Fan-out of scanner events to any number of subscribers."""

    def __init__(self):
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for every event.

        Returns:
            A function that removes the subscription again
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """
        Deliver an event to all current subscribers.

        A subscriber that raises is logged and skipped; the emitter and the
        remaining subscribers carry on.
        """
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                _logger.exception(f"Event subscriber {callback!r} failed on {event!r}")

    def progress(self, completed: int, total: int) -> None:
        self.emit(ProgressEvent(completed=completed, total=total))

    def log(self, message: str, level: int = logging.INFO) -> None:
        self.emit(LogEvent(message=message, level=level))


def emit_log(events: Optional[EventChannel], message: str, level: int = logging.INFO) -> None:
    """Log through a channel if one was given, otherwise to this module's logger."""
    if events is not None:
        events.log(message, level)
    else:
        _logger.log(level, message)


def forward_to_logger(logger: logging.Logger) -> Subscriber:
    """
    Build a subscriber that writes LogEvents to a logger.

    Progress events are ignored.

    Examples:
        >>> channel = EventChannel()
        >>> unsubscribe = channel.subscribe(forward_to_logger(logging.getLogger('scan')))
    """
    def handle(event: Event) -> None:
        if isinstance(event, LogEvent):
            logger.log(event.level, event.message)

    return handle


__all__ = ['Event', 'EventChannel', 'Subscriber', 'emit_log', 'forward_to_logger']
