"""
Broker tests

The broker narrates on the console and forwards every event to the
broadcast pipe; it keeps nothing else.
"""

import simpy

from area51.analyzer.event_recorder import EventRecorder
from area51.core.agent import Agent
from area51.core.call_button import create_call_buttons
from area51.core.elevator import Elevator
from area51.core.levels import Floor, SecurityLevel
from area51.infrastructure.message_broker import MessageBroker


def _run_one_request(quiet):
    env = simpy.Environment()
    broker = MessageBroker(env, quiet=quiet)
    recorder = EventRecorder(env, broker.get_broadcast_pipe())
    env.process(recorder.start_listening())
    elevator = Elevator(env, broker)
    buttons = create_call_buttons(env, broker)
    agent = Agent(env, broker, SecurityLevel.CONFIDENTIAL, name="C")
    env.process(buttons[int(Floor.SECURE)].press(elevator, agent))
    env.run()
    return broker, recorder


def test_every_event_reaches_the_recorder_and_nothing_is_left_behind():
    broker, recorder = _run_one_request(quiet=True)

    assert len(broker.get_broadcast_pipe().items) == 0
    assert not hasattr(broker, 'topics')
    assert recorder.count_by_type()['call'] == 2
    assert recorder.count_by_type()['state'] > 0


def test_state_transitions_are_recorded_but_not_narrated(capsys):
    _, recorder = _run_one_request(quiet=False)
    out = capsys.readouterr().out

    assert "state transition" not in out
    assert out.count("[elevator/Elevator/moving]") == len(recorder.events('moving')) == 2
    assert out.count("[elevator/Elevator/door]") == 2
    assert recorder.events('state')


def test_put_can_skip_narration(capsys):
    env = simpy.Environment()
    broker = MessageBroker(env)
    broker.put("elevator/Elevator/state", {'event': 'state', 'text': 'hidden'}, narrate=False)
    broker.put("elevator/Elevator/moving", {'event': 'moving', 'text': 'shown'})

    assert capsys.readouterr().out == "0.00 [elevator/Elevator/moving] shown\n"
    assert len(broker.get_broadcast_pipe().items) == 2
