"""CLI for running the Area 51 elevator simulation."""

import argparse
import sys

from area51.config import SimulationConfig, load_simulation_config
from area51.simulation import SecureElevatorSimulation


def run_simulation(sim_config_path=None, seed=None, realtime=None, log_path=None, plot=False):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file (None = built-in scenario)
        seed: Overrides random_seed from the config
        realtime: Overrides realtime_factor from the config
        log_path: If given, the event log is written there as JSON Lines
        plot: Draw the elevator floor trace after the run
    """
    print("--- Loading Configuration ---")
    if sim_config_path:
        sim_config = load_simulation_config(sim_config_path)
        print(f"Simulation Config: {sim_config_path}")
    else:
        sim_config = SimulationConfig.default()
        print("Simulation Config: built-in (one agent per clearance)")

    if seed is not None:
        sim_config.random_seed = seed
    if realtime is not None:
        sim_config.realtime_factor = realtime
    sim_config.validate()

    if sim_config.random_seed is not None:
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    print("\n--- Simulation Setup ---")
    sim = SecureElevatorSimulation(sim_config)
    for agent in sim.agents.values():
        print(f"  {agent!r}")

    targets = sim.spawn_random_requests()
    for name, target in targets.items():
        print(f"  {name} wants to go to {target}")

    results = sim.run()

    if log_path:
        sim.recorder.save_event_log(log_path)

    sim.recorder.print_summary()

    if plot:
        sim.recorder.plot_floor_trace()

    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the access-controlled elevator simulation.")
    parser.add_argument("config", nargs="?", default=None, help="Simulation YAML config")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for target floors")
    parser.add_argument("--realtime", type=float, default=None,
                        help="Real-time pacing factor (0 = as fast as possible)")
    parser.add_argument("--log", dest="log_path", default=None, help="Write event log (JSON Lines)")
    parser.add_argument("--plot", action="store_true", help="Plot the elevator floor trace")
    args = parser.parse_args(argv)

    try:
        run_simulation(args.config, seed=args.seed, realtime=args.realtime,
                       log_path=args.log_path, plot=args.plot)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
