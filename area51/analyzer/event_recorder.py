import json
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional

import matplotlib.pyplot as plt

from ..core.levels import Floor

# Events emitted while an elevator holds its guard
GUARDED_EVENTS = ('moving', 'floor_reached', 'door_open', 'door_closed')
DOOR_EVENTS = ('door_open', 'door_closed')


class EventRecorder:
    """
    Receives every broadcast and records it as an independent "recorder".

    Keeps the ordered event log (JSON Lines format for offline review), can
    check that no two call sequences overlapped, and can plot the elevator's
    floor over time.
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.event_log = []  # List of events in standardized format
        self.simulation_metadata = {}
        self.floor_trace = {}  # {elevator_name: [(time, floor), ...]}

    def _add_event_log(self, event_type, topic, event_data):
        event = {
            "time": self.env.now,
            "type": event_type,
            "topic": topic,
            "data": event_data
        }
        self.event_log.append(event)

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration (agents, elevator, etc.)
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """
        Main process to start intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()

            topic = data.get('topic', '')
            message = data.get('message', {})
            event_type = message.get('event', 'unknown')

            self._add_event_log(event_type, topic, message)

            if event_type in ('moving', 'floor_reached'):
                trace = self.floor_trace.setdefault(message.get('source'), [])
                floor = message.get('origin') if event_type == 'moving' else message.get('floor')
                trace.append((message.get('timestamp', self.env.now), floor))

    # --- Queries ---

    def events(self, event_type: Optional[str] = None) -> List[dict]:
        """All recorded events, optionally filtered by type."""
        if event_type is None:
            return list(self.event_log)
        return [e for e in self.event_log if e['type'] == event_type]

    def journey(self, agent_name: str) -> List[dict]:
        """Events concerning one agent, in order."""
        return [
            e for e in self.event_log
            if e['data'].get('agent') == agent_name or e['data'].get('source') == agent_name
        ]

    def count_by_type(self) -> Dict[str, int]:
        return dict(Counter(e['type'] for e in self.event_log))

    def find_interleavings(self) -> List[str]:
        """
        Check the trace for overlapping call sequences.

        Between a 'moving' event and its door decision, every guarded event
        of the same elevator must belong to the same agent.

        Returns:
            Descriptions of violations; empty if sequences never overlapped
        """
        violations = []
        active = {}  # elevator -> agent currently being served

        for index, event in enumerate(self.event_log):
            if event['type'] not in GUARDED_EVENTS:
                continue
            elevator = event['data'].get('source')
            agent = event['data'].get('agent')
            current = active.get(elevator)

            if event['type'] == 'moving':
                if current is not None:
                    violations.append(
                        f"#{index} t={event['time']:.2f}: {elevator} started moving for {agent} "
                        f"while serving {current}"
                    )
                active[elevator] = agent
                continue

            if current != agent:
                violations.append(
                    f"#{index} t={event['time']:.2f}: {event['type']} for {agent} "
                    f"outside its sequence (serving {current})"
                )
            if event['type'] in DOOR_EVENTS:
                active[elevator] = None

        for elevator, agent in active.items():
            if agent is not None:
                violations.append(f"{elevator} never finished the sequence for {agent}")

        return violations

    # --- Output ---

    def print_summary(self):
        """Print a per-agent outcome summary."""
        print("\n" + "=" * 60)
        print("   ELEVATOR ACCESS SUMMARY")
        print("=" * 60)

        counts = self.count_by_type()
        print(f"Calls placed:      {counts.get('call', 0):>4}")
        print(f"Doors opened:      {counts.get('door_open', 0):>4}")
        print(f"Doors kept closed: {counts.get('door_closed', 0):>4}")
        print(f"Retries to Ground: {counts.get('retry', 0):>4}")

        agents = []
        for event in self.event_log:
            name = event['data'].get('agent')
            if event['type'] == 'call' and name not in agents:
                agents.append(name)

        for name in agents:
            moves = [e for e in self.journey(name) if e['type'] == 'agent_moved']
            final = Floor(moves[-1]['data']['to_floor']) if moves else None
            denied = sum(1 for e in self.journey(name) if e['type'] == 'door_closed')
            print(f"  {name:<24} final floor: {final!s:<3} denied: {denied}")

        violations = self.find_interleavings()
        print(f"Mutual exclusion:  {'OK' if not violations else f'{len(violations)} violation(s)'}")
        print("=" * 60)

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file (default: 'simulation_log.jsonl')
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            # Write metadata as first line
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

    def plot_floor_trace(self, output_filename='elevator_floor_trace.png', show=False):
        """Draw the elevator's floor over time and mark door decisions."""
        print("\n--- Plotting: Elevator Floor Trace ---")
        plt.figure(figsize=(12, 6))

        colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728']
        for idx, name in enumerate(sorted(self.floor_trace)):
            trace = sorted(self.floor_trace[name], key=lambda x: x[0])
            if not trace:
                continue
            times, floors = zip(*trace)
            plt.step(times, floors, where='post', label=name, linewidth=2.5,
                     color=colors[idx % len(colors)], alpha=0.8)

        for event in self.events():
            if event['type'] not in DOOR_EVENTS:
                continue
            granted = event['type'] == 'door_open'
            plt.scatter(event['time'], event['data']['floor'],
                        marker='o' if granted else 'x', s=80,
                        color='green' if granted else 'red', zorder=3)
            plt.annotate(event['data'].get('agent', ''), (event['time'], event['data']['floor']),
                         textcoords='offset points', xytext=(4, 6), fontsize=8)

        plt.title("Elevator Floor Trace (o = door opens, x = door stays closed)")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.yticks([int(f) for f in Floor], [f.display_name for f in Floor])
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        if self.floor_trace:
            plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Floor trace saved to: {output_filename}")

        if show:
            plt.show()
        plt.close()
        return output_filename
