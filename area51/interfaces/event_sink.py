"""
Event Sink Interface

Every component reports what it does through a sink instead of writing
to the console directly, so narration can be recorded and checked.
"""

from abc import ABC, abstractmethod


class IEventSink(ABC):
    """
    Interface for recording simulation events

    A single operation: put(topic, message). Topics are slash-separated
    ("elevator/Elevator/door", "agent/Alice/moved") and messages are dicts
    carrying at least 'event' and a human-readable 'text'.
    """

    @abstractmethod
    def put(self, topic: str, message: dict, narrate: bool = True):
        """
        Record one event

        Args:
            topic: Topic the event belongs to
            message: Event payload
            narrate: False for diagnostic events that are recorded but not
                shown as a narration line
        """
        pass
