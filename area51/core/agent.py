import simpy

from .entity import Entity
from .levels import Floor, SecurityLevel
from ..interfaces.event_sink import IEventSink


class Agent(Entity):
    """
    Agent who rides the elevator

    Clearance is fixed at creation. The current floor changes only when the
    elevator decides at the door: the requested floor if access is granted,
    Ground if it is denied. No validation happens here.
    """
    topic_kind = "agent"

    def __init__(self, env: simpy.Environment, broker: IEventSink, security: SecurityLevel,
                 start_floor: Floor = Floor.GROUND, name: str = None):
        """
        Args:
            env: SimPy environment
            broker: Event sink
            security: Clearance of this agent
            start_floor: Floor the agent is standing on at creation
            name: Agent name (defaults to Agent_<id>)
        """
        super().__init__(env, broker, name)
        self._security = SecurityLevel.parse(security)
        self.current_floor = Floor.parse(start_floor)

    @property
    def security(self) -> SecurityLevel:
        return self._security

    def move_to_floor(self, new_floor: Floor):
        """Set the agent's floor unconditionally and report the move."""
        old_floor = self.current_floor
        self.publish(
            "agent_moved",
            f"Agent {self.name} with {self.security} access is moving from {old_floor} to {new_floor}.",
            channel="moved",
            from_floor=int(old_floor),
            to_floor=int(new_floor),
            security=int(self.security),
        )
        self.current_floor = new_floor

    def __repr__(self) -> str:
        return f"Agent(name={self.name!r}, security={self.security!s}, floor={self.current_floor!s})"
