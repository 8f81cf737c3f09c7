import time

import pytest
import simpy

from area51.config import AgentConfig, ElevatorConfig, SimulationConfig
from area51.core.levels import Floor, SecurityLevel
from area51.infrastructure.realtime_env import RealtimeEnvironment
from area51.simulation import SecureElevatorSimulation


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


def test_waits_for_each_event_at_the_pacing_factor():
    clock = FakeClock()
    env = RealtimeEnvironment(realtime_factor=2.0, clock=clock, sleep=clock.sleep)

    def travel():
        for _ in range(3):
            yield env.timeout(1.0)

    env.process(travel())
    env.run()

    assert env.now == 3.0
    assert env.waited == pytest.approx(1.5)
    assert clock.now == pytest.approx(101.5)


def test_rejects_non_positive_factor():
    with pytest.raises(ValueError):
        RealtimeEnvironment(realtime_factor=0)
    with pytest.raises(ValueError):
        RealtimeEnvironment(realtime_factor=-1.0)


def _top_secret_to_t2(realtime_factor):
    config = SimulationConfig(
        elevator=ElevatorConfig(travel_time=0.05),
        agents=[AgentConfig("Agent_TopSecret", SecurityLevel.TOP_SECRET, Floor.GROUND)],
        realtime_factor=realtime_factor,
        quiet=True,
    )
    sim = SecureElevatorSimulation(config)
    sim.spawn_request(sim.agents["Agent_TopSecret"], Floor.TOP_SECRET_2)
    return sim


def test_paced_run_matches_unpaced_run():
    paced = _top_secret_to_t2(realtime_factor=1.0)
    assert isinstance(paced.env, RealtimeEnvironment)

    started = time.monotonic()
    paced_results = paced.run()
    elapsed = time.monotonic() - started

    unpaced = _top_secret_to_t2(realtime_factor=0.0)
    assert type(unpaced.env) is simpy.Environment
    unpaced_results = unpaced.run()

    # three floors at 0.05 s each
    assert paced.env.now == pytest.approx(0.15)
    assert elapsed >= 0.14
    assert paced_results[0].final_floor is unpaced_results[0].final_floor is Floor.TOP_SECRET_2
    assert [e['type'] for e in paced.recorder.events()] == [e['type'] for e in unpaced.recorder.events()]
