"""
Simulation Configuration

Describes the elevator, the agents riding it, and run control.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.levels import Floor, SecurityLevel


def _number(value, field_name: str, cast=float):
    """Coerce a numeric config value, raising ValueError on anything else"""
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None


@dataclass
class ElevatorConfig:
    """Elevator specifications"""
    name: str = "Elevator"
    start_floor: Floor = Floor.GROUND
    travel_time: float = 1.0  # seconds per floor
    max_attempts: int = 8

    def __post_init__(self):
        self.start_floor = Floor.parse(self.start_floor)
        if not self.name:
            raise ValueError("elevator name cannot be empty")
        self.travel_time = _number(self.travel_time, "travel_time")
        self.max_attempts = _number(self.max_attempts, "max_attempts", int)
        if self.travel_time <= 0:
            raise ValueError("travel_time must be positive")
        if self.max_attempts < 2:
            raise ValueError("max_attempts must be at least 2")


@dataclass
class AgentConfig:
    """A single agent and where it starts"""
    name: str
    security: SecurityLevel
    start_floor: Floor = Floor.GROUND

    def __post_init__(self):
        if not self.name:
            raise ValueError("agent name cannot be empty")
        self.security = SecurityLevel.parse(self.security)
        self.start_floor = Floor.parse(self.start_floor)


def _default_agents() -> List[AgentConfig]:
    return [
        AgentConfig("Agent_Confidential", SecurityLevel.CONFIDENTIAL, Floor.GROUND),
        AgentConfig("Agent_Secret", SecurityLevel.SECRET, Floor.SECURE),
        AgentConfig("Agent_TopSecret", SecurityLevel.TOP_SECRET, Floor.TOP_SECRET_1),
    ]


def _agent_from_dict(index: int, data) -> AgentConfig:
    if not isinstance(data, dict):
        raise ValueError(f"agents[{index}] must be a mapping, got {data!r}")
    for key in ('name', 'security'):
        if data.get(key) is None:
            raise ValueError(f"agents[{index}] is missing required field '{key}'")
    return AgentConfig(
        name=data['name'],
        security=data['security'],
        start_floor=data.get('start_floor', Floor.GROUND)
    )


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines elevator and agent settings with run control.
    """
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    agents: List[AgentConfig] = field(default_factory=_default_agents)

    # Simulation control
    random_seed: Optional[int] = None
    realtime_factor: float = 0.0  # 1.0 = realtime, 0.0 = as fast as possible
    quiet: bool = False

    def __post_init__(self):
        self.realtime_factor = _number(self.realtime_factor, "realtime_factor")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def default(cls) -> 'SimulationConfig':
        """Three agents, one per clearance, elevator waiting at Ground"""
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        if not isinstance(data, dict):
            raise ValueError("simulation config must be a mapping")
        sim_data = data.get('simulation', data) or {}
        if not isinstance(sim_data, dict):
            raise ValueError("'simulation' section must be a mapping")

        elevator_data = sim_data.get('elevator', {}) or {}
        if not isinstance(elevator_data, dict):
            raise ValueError("'elevator' section must be a mapping")
        elevator = ElevatorConfig(
            name=elevator_data.get('name', 'Elevator'),
            start_floor=elevator_data.get('start_floor', Floor.GROUND),
            travel_time=elevator_data.get('travel_time', 1.0),
            max_attempts=elevator_data.get('max_attempts', 8)
        )

        if 'agents' in sim_data:
            agents_data = sim_data['agents']
            if not isinstance(agents_data, list):
                raise ValueError("'agents' must be a list of agent entries")
            agents = [_agent_from_dict(index, a) for index, a in enumerate(agents_data)]
        else:
            agents = _default_agents()

        return cls(
            elevator=elevator,
            agents=agents,
            random_seed=sim_data.get('random_seed'),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            quiet=sim_data.get('quiet', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'elevator': {
                    'name': self.elevator.name,
                    'start_floor': self.elevator.start_floor.display_name,
                    'travel_time': self.elevator.travel_time,
                    'max_attempts': self.elevator.max_attempts
                },
                'agents': [
                    {
                        'name': a.name,
                        'security': a.security.name,
                        'start_floor': a.start_floor.display_name
                    }
                    for a in self.agents
                ],
                'realtime_factor': self.realtime_factor,
                'quiet': self.quiet
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")
        if self.elevator.travel_time <= 0:
            raise ValueError("travel_time must be positive")

        if not self.agents:
            raise ValueError("at least one agent is required")

        names = [a.name for a in self.agents]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"agent names must be unique, duplicated: {', '.join(duplicates)}")
