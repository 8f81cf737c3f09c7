"""
Simulation harness

Builds the environment, elevator, buttons and agents from a
SimulationConfig and runs one request process per agent.
"""

import random
from typing import Dict, List, Optional

import simpy

from .analyzer.event_recorder import EventRecorder
from .config.simulation import SimulationConfig
from .core.agent import Agent
from .core.call_button import create_call_buttons
from .core.elevator import CallResult, Elevator
from .core.levels import Floor
from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment
from .interfaces.access_policy import IAccessPolicy


class SecureElevatorSimulation:
    """
    One elevator, one button per floor, and the configured agents.

    Usage:
        sim = SecureElevatorSimulation(SimulationConfig.default())
        sim.spawn_random_requests()
        results = sim.run()
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 access_policy: Optional[IAccessPolicy] = None):
        self.config = config or SimulationConfig.default()
        self.config.validate()

        if self.config.realtime_factor > 0:
            self.env = RealtimeEnvironment(realtime_factor=self.config.realtime_factor)
        else:
            self.env = simpy.Environment()

        self.random = random.Random(self.config.random_seed)
        self.broker = MessageBroker(self.env, quiet=self.config.quiet)
        self.recorder = EventRecorder(self.env, self.broker.get_broadcast_pipe())
        self.env.process(self.recorder.start_listening())

        elevator_cfg = self.config.elevator
        self.elevator = Elevator(
            self.env, self.broker,
            name=elevator_cfg.name,
            start_floor=elevator_cfg.start_floor,
            travel_time=elevator_cfg.travel_time,
            access_policy=access_policy,
            max_attempts=elevator_cfg.max_attempts
        )
        self.buttons = create_call_buttons(self.env, self.broker)
        self.agents: Dict[str, Agent] = {
            a.name: Agent(self.env, self.broker, a.security, a.start_floor, name=a.name)
            for a in self.config.agents
        }
        self._processes: List[simpy.Process] = []

        self.recorder.set_simulation_metadata(self.config.to_dict())

    def spawn_request(self, agent: Agent, target: Floor) -> simpy.Process:
        """Start one process in which the agent presses the button for target."""
        button = self.buttons[int(Floor.parse(target))]
        process = self.env.process(button.press(self.elevator, agent))
        self._processes.append(process)
        return process

    def spawn_random_requests(self) -> Dict[str, Floor]:
        """
        Start one request per agent with a uniformly random target floor.

        Returns:
            Chosen target per agent name
        """
        targets = {}
        for agent in self.agents.values():
            target = Floor(self.random.randrange(len(Floor)))
            targets[agent.name] = target
            self.spawn_request(agent, target)
        return targets

    def run(self) -> List[CallResult]:
        """Run until every spawned request has been served."""
        print("\n--- Simulation Start ---")
        if self._processes:
            self.env.run(until=simpy.AllOf(self.env, self._processes))
        # Drain events still queued for the recorder
        self.env.run()
        print("Simulation complete.")
        return [process.value for process in self._processes]
