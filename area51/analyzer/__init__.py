"""
Event analysis for the elevator simulation

Components:
- EventRecorder: records every broadcast, checks mutual exclusion,
  exports JSON Lines, plots the floor trace
"""

from .event_recorder import EventRecorder

__all__ = ['EventRecorder']
