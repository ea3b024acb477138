from collections import defaultdict, deque
import logging
from typing import Callable, DefaultDict, Deque, List, Optional, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous publish/subscribe for domain events.

    Handlers run in (priority, subscription order). A failing handler is
    logged and skipped so the turn that raised the event still completes.
    """

    _HISTORY_MAX = 50

    def __init__(self) -> None:
        self._handlers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._sequence = 0
        self._history: Deque[object] = deque(maxlen=self._HISTORY_MAX)
        self._errors: List[Exception] = []
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        rows = self._handlers[event_type]
        rows.append((int(priority), self._sequence, handler))
        rows.sort(key=lambda row: row[:2])
        self._sequence += 1

    def unsubscribe(self, event_type: Type[object], handler: Handler) -> bool:
        rows = self._handlers.get(event_type, [])
        kept = [row for row in rows if row[2] is not handler]
        self._handlers[event_type] = kept
        return len(kept) != len(rows)

    def publish(self, event: object) -> None:
        self._errors = []
        self._history.append(event)
        for priority, _, handler in list(self._handlers.get(type(event), [])):
            try:
                handler(event)
            except Exception as exc:
                self._errors.append(exc)
                self._logger.exception(
                    "Event handler failed and was isolated",
                    extra={
                        "event_type": type(event).__name__,
                        "handler": getattr(handler, "__qualname__", repr(handler)),
                        "priority": priority,
                    },
                )

    def recent_events(self, event_type: Optional[Type[object]] = None) -> List[object]:
        if event_type is None:
            return list(self._history)
        return [event for event in self._history if isinstance(event, event_type)]

    def last_publish_errors(self) -> List[Exception]:
        return list(self._errors)
