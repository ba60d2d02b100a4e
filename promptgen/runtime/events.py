"""
Typed event bus for observing dialogue sessions.

Uses Enums for event types to prevent magic strings.

Usage:
    bus = EventBus()
    bus.subscribe(DialogueEvent.PROMPT_ENTERED, on_prompt)
    bus.publish(DialogueEvent.PROMPT_ENTERED, prompt=prompt, index=3)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class DialogueEvent(Enum):
    """Events published by a dialogue session."""
    STARTED = auto()
    PROMPT_ENTERED = auto()
    RESPONSE_CHOSEN = auto()
    ENDED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Event-specific data
        consumed: Whether a handler stopped propagation
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    def consume(self) -> None:
        """Mark event as consumed (stops propagation)."""
        self.consumed = True

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe messaging.

    - Higher priority handlers run first
    - One-shot handlers are removed after their first call
    - A consumed event is not passed to later handlers
    - Events published from inside a handler are queued
    """

    def __init__(self):
        # event type -> list of (priority, handler, one_shot), highest priority first
        self._handlers: dict[Enum, list[tuple[int, EventHandler, bool]]] = {}
        self._event_queue: list[Event] = []
        self._is_publishing = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            priority: Higher priority handlers are called first (default 0)
            one_shot: If True, handler is removed after first call
        """
        handlers = self._handlers.setdefault(event_type, [])

        # Insert after every handler of equal or higher priority
        insert_idx = len(handlers)
        for i, (p, _, _) in enumerate(handlers):
            if priority > p:
                insert_idx = i
                break

        handlers.insert(insert_idx, (priority, handler, one_shot))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        if event_type not in self._handlers:
            return

        self._handlers[event_type] = [
            entry for entry in self._handlers[event_type]
            if entry[1] != handler
        ]

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Returns:
            The Event object (check .consumed to see if it was handled)
        """
        event = Event(type=event_type, data=data)

        if self._is_publishing:
            self._event_queue.append(event)
        else:
            self._dispatch(event)

        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """Clear handlers for one event type, or all of them."""
        if event_type is None:
            self._handlers.clear()
        elif event_type in self._handlers:
            del self._handlers[event_type]

    def _dispatch(self, event: Event) -> None:
        handlers = self._handlers.get(event.type)
        if handlers:
            self._is_publishing = True
            finished = []

            try:
                for entry in list(handlers):
                    _, handler, one_shot = entry
                    try:
                        handler(event)
                    except Exception:
                        logger.exception(f"Error in event handler for {event.type}")

                    if one_shot:
                        finished.append(entry)

                    if event.consumed:
                        break
            finally:
                for entry in finished:
                    if entry in handlers:
                        handlers.remove(entry)
                self._is_publishing = False

        while self._event_queue and not self._is_publishing:
            self._dispatch(self._event_queue.pop(0))
