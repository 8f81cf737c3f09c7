from typing import List

import simpy

from .agent import Agent
from .elevator import Elevator
from .levels import Floor
from ..interfaces.event_sink import IEventSink


class CallButton:
    """
    Elevator button for one destination floor

    Pressing it announces the request and hands it to the elevator.
    """
    def __init__(self, env: simpy.Environment, floor: Floor, broker: IEventSink):
        """
        Args:
            env (simpy.Environment): SimPy environment
            floor (Floor): Floor this button sends the elevator to
            broker (IEventSink): Sink for button events
        """
        self.env = env
        self.floor = Floor.parse(floor)
        self.broker = broker

    def press(self, elevator: Elevator, agent: Agent):
        """Press the button (SimPy process); returns the elevator's CallResult."""
        self.broker.put(f"button/{self.floor.display_name}/press", {
            "timestamp": self.env.now,
            "event": "button_press",
            "source": f"Button_{self.floor.display_name}",
            "agent": agent.name,
            "origin": int(agent.current_floor),
            "destination": int(self.floor),
            "text": f"Agent {agent.name} on floor {agent.current_floor} presses the elevator button to go to {self.floor}.",
        })
        result = yield from elevator.call(self.floor, agent)
        return result

    def __repr__(self) -> str:
        return f"CallButton({self.floor!s})"


def create_call_buttons(env: simpy.Environment, broker: IEventSink) -> List[CallButton]:
    """One button per floor, indexed by floor value."""
    return [CallButton(env, floor, broker) for floor in Floor]
