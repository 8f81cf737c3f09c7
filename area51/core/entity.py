import itertools
from typing import Optional

import simpy

from ..interfaces.event_sink import IEventSink


class Entity:
    """
    Base class for named participants in the simulation.

    Provides a unique ID, a display name, and a state value whose
    transitions are reported to the event sink on "<kind>/<name>/state".
    Unlike passive data holders, an entity's concrete class decides which
    of its methods run as SimPy processes.
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    # Topic prefix for this kind of entity (e.g. "elevator", "agent")
    topic_kind = "entity"

    def __init__(self, env: simpy.Environment, broker: IEventSink, name: Optional[str] = None):
        """
        Initialize the entity.

        Args:
            env: The SimPy simulation environment this entity belongs to.
            broker: Sink that receives this entity's events.
            name: Entity name. If not specified, generated from class name and ID.
        """
        self.env = env
        self.broker = broker
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.state: str = "initial_state"

    @property
    def topic_root(self) -> str:
        return f"{self.topic_kind}/{self.name}"

    def publish(self, event: str, text: str, channel: Optional[str] = None, narrate: bool = True, **data):
        """
        Report one event to the sink.

        Args:
            event: Event type (e.g. 'moving', 'door_open')
            text: Human-readable narration line
            channel: Last topic segment; defaults to the event type
            narrate: Show the event as a console line (state changes are recorded only)
            **data: Extra payload fields
        """
        message = {"timestamp": self.env.now, "event": event, "source": self.name, "text": text}
        message.update(data)
        self.broker.put(f"{self.topic_root}/{channel or event}", message, narrate=narrate)

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: Target state.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def _on_state_changed(self, old_state: str, new_state: str):
        """Hook called after each transition; records it without narrating."""
        self.publish(
            "state",
            f'{self.__class__.__name__} "{self.name}" state transition: {old_state} -> {new_state}',
            narrate=False,
            old_state=old_state,
            new_state=new_state,
        )
