"""Shared fixtures: a fresh SimPy environment, a quiet broker and a recorder."""

import pytest
import simpy

from area51.analyzer.event_recorder import EventRecorder
from area51.infrastructure.message_broker import MessageBroker


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def broker(env):
    return MessageBroker(env, quiet=True)


@pytest.fixture
def recorder(env, broker):
    recorder = EventRecorder(env, broker.get_broadcast_pipe())
    env.process(recorder.start_listening())
    return recorder
