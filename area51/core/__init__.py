"""Core simulation entities"""

from .levels import Floor, SecurityLevel
from .access_policy import ClearanceAccessPolicy, can_access, FLOOR_CLEARANCE
from .entity import Entity
from .agent import Agent
from .elevator import Elevator, CallResult, RetryLimitExceeded
from .call_button import CallButton, create_call_buttons

__all__ = [
    'Floor',
    'SecurityLevel',
    'ClearanceAccessPolicy',
    'can_access',
    'FLOOR_CLEARANCE',
    'Entity',
    'Agent',
    'Elevator',
    'CallResult',
    'RetryLimitExceeded',
    'CallButton',
    'create_call_buttons',
]
