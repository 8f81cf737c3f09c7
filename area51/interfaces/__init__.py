"""Interface definitions for simulator components"""

from .access_policy import IAccessPolicy
from .event_sink import IEventSink

__all__ = [
    'IAccessPolicy',
    'IEventSink',
]
