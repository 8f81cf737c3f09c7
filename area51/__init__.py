"""
Area 51 Elevator - access-controlled elevator simulation

One elevator, four floors, agents with different clearances requesting
it concurrently. Built on SimPy processes.
"""

__version__ = "0.1.0"

from .core.levels import Floor, SecurityLevel
from .core.access_policy import ClearanceAccessPolicy, can_access
from .core.agent import Agent
from .core.elevator import Elevator, CallResult, RetryLimitExceeded
from .core.call_button import CallButton, create_call_buttons

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment

from .simulation import SecureElevatorSimulation

__all__ = [
    'Floor',
    'SecurityLevel',
    'ClearanceAccessPolicy',
    'can_access',
    'Agent',
    'Elevator',
    'CallResult',
    'RetryLimitExceeded',
    'CallButton',
    'create_call_buttons',
    'MessageBroker',
    'RealtimeEnvironment',
    'SecureElevatorSimulation',
]
