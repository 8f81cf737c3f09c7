"""
Configuration management package

Provides configuration classes for the elevator simulation.
"""

from .simulation import (
    SimulationConfig,
    ElevatorConfig,
    AgentConfig
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'ElevatorConfig',
    'AgentConfig',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
