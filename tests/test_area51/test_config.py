from pathlib import Path

import pytest
import yaml

from area51.config import (
    AgentConfig,
    ElevatorConfig,
    SimulationConfig,
    load_simulation_config,
    save_simulation_config,
)
from area51.core.levels import Floor, SecurityLevel

SCENARIO = Path(__file__).parent.parent.parent / "scenarios" / "area51.yaml"


def test_default_config_matches_three_agent_scenario():
    config = SimulationConfig.default()
    config.validate()
    assert [(a.security, a.start_floor) for a in config.agents] == [
        (SecurityLevel.CONFIDENTIAL, Floor.GROUND),
        (SecurityLevel.SECRET, Floor.SECURE),
        (SecurityLevel.TOP_SECRET, Floor.TOP_SECRET_1),
    ]
    assert config.elevator.start_floor is Floor.GROUND
    assert config.elevator.travel_time == 1.0


def test_from_dict_parses_names():
    config = SimulationConfig.from_dict({
        'simulation': {
            'elevator': {'start_floor': 'T2', 'travel_time': 0.5},
            'agents': [{'name': 'Mulder', 'security': 'top_secret', 'start_floor': 'S'}],
            'random_seed': 7,
        }
    })
    assert config.elevator.start_floor is Floor.TOP_SECRET_2
    assert config.elevator.travel_time == 0.5
    assert config.agents == [AgentConfig('Mulder', SecurityLevel.TOP_SECRET, Floor.SECURE)]
    assert config.random_seed == 7


def test_yaml_round_trip(tmp_path):
    config = SimulationConfig(
        elevator=ElevatorConfig(name="Lift", start_floor=Floor.SECURE, travel_time=2.0),
        agents=[AgentConfig("Scully", SecurityLevel.SECRET, Floor.GROUND)],
        random_seed=42,
    )
    path = tmp_path / "nested" / "sim.yaml"
    save_simulation_config(config, path)

    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    assert data['simulation']['agents'][0]['security'] == 'SECRET'
    assert data['simulation']['elevator']['start_floor'] == 'S'

    assert load_simulation_config(path) == config


def test_bundled_scenario_loads():
    config = load_simulation_config(SCENARIO)
    assert len(config.agents) == 3
    assert config.random_seed == 51


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_simulation_config("does/not/exist.yaml")


@pytest.mark.parametrize("kwargs", [
    {'travel_time': 0},
    {'travel_time': -1.0},
    {'max_attempts': 1},
    {'name': ''},
    {'start_floor': 'roof'},
])
def test_invalid_elevator_config(kwargs):
    with pytest.raises(ValueError):
        ElevatorConfig(**kwargs)


def test_invalid_agent_config():
    with pytest.raises(ValueError):
        AgentConfig('X', 'cosmic')
    with pytest.raises(ValueError):
        AgentConfig('', SecurityLevel.SECRET)


def test_validate_rejects_duplicates_and_empty():
    dupes = SimulationConfig(agents=[
        AgentConfig('A', SecurityLevel.SECRET),
        AgentConfig('A', SecurityLevel.CONFIDENTIAL),
    ])
    with pytest.raises(ValueError, match="unique"):
        dupes.validate()

    with pytest.raises(ValueError):
        SimulationConfig(agents=[]).validate()


def test_negative_realtime_factor():
    with pytest.raises(ValueError):
        SimulationConfig(realtime_factor=-0.1)


@pytest.mark.parametrize("agent,missing", [
    ({'name': 'Mulder'}, 'security'),
    ({'security': 'SECRET'}, 'name'),
    ({'name': 'Mulder', 'security': None}, 'security'),
])
def test_from_dict_names_missing_agent_field(agent, missing):
    with pytest.raises(ValueError, match=f"agents\\[0\\] is missing required field '{missing}'"):
        SimulationConfig.from_dict({'simulation': {'agents': [agent]}})


@pytest.mark.parametrize("section", [
    {'agents': None},
    {'agents': 'Mulder'},
    {'agents': ['Mulder']},
    {'elevator': ['Lift']},
])
def test_from_dict_rejects_malformed_sections(section):
    with pytest.raises(ValueError):
        SimulationConfig.from_dict({'simulation': section})


@pytest.mark.parametrize("kwargs", [
    {'travel_time': 'fast'},
    {'travel_time': None},
    {'max_attempts': 'many'},
    {'max_attempts': True},
])
def test_non_numeric_elevator_settings(kwargs):
    with pytest.raises(ValueError, match="must be a number"):
        ElevatorConfig(**kwargs)


def test_numeric_strings_are_coerced():
    config = ElevatorConfig(travel_time="0.5", max_attempts="3")
    assert config.travel_time == 0.5
    assert config.max_attempts == 3


def test_non_numeric_realtime_factor():
    with pytest.raises(ValueError, match="realtime_factor"):
        SimulationConfig.from_dict({'simulation': {'realtime_factor': 'slow'}})


def test_validate_rechecks_fields_changed_after_construction():
    config = SimulationConfig.default()
    config.realtime_factor = -1.0
    with pytest.raises(ValueError, match="realtime_factor"):
        config.validate()
