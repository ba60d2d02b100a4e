"""
Runtime - navigating parsed scripts.
"""

from promptgen.runtime.navigator import Navigator, index_labels
from promptgen.runtime.events import DialogueEvent, Event, EventBus
from promptgen.runtime.session import DialogueSession

__all__ = [
    "Navigator",
    "index_labels",
    "DialogueEvent",
    "Event",
    "EventBus",
    "DialogueSession",
]
