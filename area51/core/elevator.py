from dataclasses import dataclass
from typing import Optional

import simpy

from .entity import Entity
from .agent import Agent
from .levels import Floor
from .access_policy import ClearanceAccessPolicy
from ..interfaces.access_policy import IAccessPolicy
from ..interfaces.event_sink import IEventSink


class RetryLimitExceeded(RuntimeError):
    """Raised when an agent is still refused after max_attempts calls."""


@dataclass
class CallResult:
    """Outcome of one Elevator.call() process."""
    agent: Agent
    requested_floor: Floor
    final_floor: Floor
    attempts: int

    @property
    def granted_first(self) -> bool:
        """True if the door opened on the first attempt."""
        return self.attempts == 1


class Elevator(Entity):
    """
    Single access-controlled elevator shared by all agents

    A capacity-1 SimPy Resource is the exclusive-access guard: a call holds
    it for the whole call -> move -> door sequence, so the car's floor is
    only touched by one sequence at a time. Waiting callers block on the
    guard request.

    When the door stays closed the agent is sent to Ground and the call is
    repeated for Ground. The guard is released in between, so another
    waiting request may be served before the retry.
    """
    topic_kind = "elevator"

    # Travel time per floor in seconds
    DEFAULT_TRAVEL_TIME = 1.0

    # Ground is always reachable, so two attempts suffice with the default policy
    DEFAULT_MAX_ATTEMPTS = 8

    def __init__(self, env: simpy.Environment, broker: IEventSink, name: str = "Elevator",
                 start_floor: Floor = Floor.GROUND, travel_time: float = DEFAULT_TRAVEL_TIME,
                 access_policy: Optional[IAccessPolicy] = None,
                 max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        super().__init__(env, broker, name)
        if travel_time <= 0:
            raise ValueError("travel_time must be positive")
        if max_attempts < 2:
            raise ValueError("max_attempts must allow at least one retry")
        self.travel_time = travel_time
        self.access_policy = access_policy or ClearanceAccessPolicy()
        self.max_attempts = max_attempts

        self._guard = simpy.Resource(env, capacity=1)
        self._current_floor = Floor.parse(start_floor)

        # Diagnostic only; never consulted for decisions
        self.buttons_enabled = {floor: True for floor in Floor}

        self.set_state("IDLE")

    @property
    def current_floor(self) -> Floor:
        return self._current_floor

    @property
    def is_busy(self) -> bool:
        """True while some call sequence holds the guard."""
        return self._guard.count > 0

    @property
    def waiting_calls(self) -> int:
        return len(self._guard.queue)

    def call(self, destination: Floor, agent: Agent):
        """
        Request the elevator to take an agent to a floor (SimPy process)

        Blocks until the guard is free, then moves and evaluates the door.
        A refused agent is retried from Ground until the door opens.

        Args:
            destination: Floor the agent asked for
            agent: Requesting agent

        Returns:
            CallResult once the door has opened for the agent

        Raises:
            RetryLimitExceeded: If the policy keeps refusing (never for Ground
                under the default policy)
        """
        requested = destination
        target = destination
        attempts = 0
        while True:
            attempts += 1
            self.publish(
                "call",
                f"Elevator called by agent {agent.name} from {agent.current_floor} to {target}.",
                agent=agent.name,
                origin=int(agent.current_floor),
                destination=int(target),
                attempt=attempts,
            )

            with self._guard.request() as request:
                yield request
                self.set_state("CALLED")
                self._disable_all_buttons()
                granted = yield from self._move_to(target, agent)
                self.set_state("IDLE")

            if granted:
                return CallResult(agent=agent, requested_floor=requested,
                                  final_floor=agent.current_floor, attempts=attempts)
            if attempts >= self.max_attempts:
                raise RetryLimitExceeded(
                    f"{agent.name} was refused {attempts} times by {self.name}"
                )
            target = Floor.GROUND

    def _move_to(self, destination: Floor, agent: Agent):
        """Travel one floor per step until the destination, then open the door."""
        self.set_state("MOVING")
        self.publish(
            "moving",
            f"Elevator is moving to {destination}...",
            agent=agent.name,
            origin=int(self._current_floor),
            destination=int(destination),
        )

        while self._current_floor != destination:
            yield self.env.timeout(self.travel_time)
            self._current_floor = self._current_floor.successor()
            self.publish(
                "floor_reached",
                f"Elevator is now at {self._current_floor}",
                channel="floor",
                agent=agent.name,
                floor=int(self._current_floor),
            )

        return self.open_door(agent, destination)

    def open_door(self, agent: Agent, requested_floor: Floor) -> bool:
        """
        Decide at the door whether the agent may exit

        Granted: the agent moves to the requested floor.
        Denied: the agent is moved to Ground and a retry is announced.

        Returns:
            True if the door opened
        """
        self.set_state("DOOR_EVALUATION")
        granted = self.access_policy.can_access(agent.security, requested_floor)

        if granted:
            self.publish(
                "door_open",
                f"Elevator door opens at {requested_floor} for agent {agent.name} with {agent.security} access.",
                channel="door",
                agent=agent.name,
                floor=int(requested_floor),
                granted=True,
            )
            agent.move_to_floor(requested_floor)
        else:
            self.publish(
                "door_closed",
                f"Agent {agent.name} with {agent.security} cannot access floor {requested_floor}. Door stays closed.",
                channel="door",
                agent=agent.name,
                floor=int(requested_floor),
                granted=False,
            )
            agent.move_to_floor(Floor.GROUND)
            self.publish(
                "retry",
                f"Agent {agent.name} is moved back to the ground floor and will try again.",
                agent=agent.name,
            )

        self._enable_all_buttons()
        return granted

    def _disable_all_buttons(self):
        for floor in self.buttons_enabled:
            self.buttons_enabled[floor] = False

    def _enable_all_buttons(self):
        for floor in self.buttons_enabled:
            self.buttons_enabled[floor] = True
