"""
realtime_env.py

SimPy environment that paces simulation time against the wall clock, so a
run can be watched floor by floor the way the facility's elevator would
actually travel.
"""

import time

import simpy
from simpy.core import Infinity


class RealtimeEnvironment(simpy.Environment):
    """
    SimPy environment that holds each event back until its wall-clock moment.

    The event is delayed *before* it is processed, so narration printed by
    a process appears when the corresponding floor is actually reached.

    Args:
        realtime_factor (float): Simulation seconds per real second
            - 1.0 = real-time (one floor of travel takes travel_time seconds)
            - 2.0 = double speed
        clock: Monotonic wall-clock source
        sleep: Blocking sleep used to wait for the wall clock

    Example:
        >>> env = RealtimeEnvironment(realtime_factor=2.0)
    """

    def __init__(self, realtime_factor=1.0, clock=time.monotonic, sleep=time.sleep):
        super().__init__()
        if realtime_factor <= 0:
            raise ValueError("realtime_factor must be positive for a paced run")
        self.realtime_factor = realtime_factor
        self._clock = clock
        self._sleep = sleep
        self._anchor = None  # (wall time, sim time) of the first step
        self.waited = 0.0

    def step(self):
        """
        Wait until the wall clock reaches the next event, then process it.
        """
        due = self.peek()
        if due != Infinity:
            if self._anchor is None:
                self._anchor = (self._clock(), self.now)
            wall_start, sim_start = self._anchor
            delay = wall_start + (due - sim_start) / self.realtime_factor - self._clock()
            if delay > 0:
                self._sleep(delay)
                self.waited += delay
        return super().step()
