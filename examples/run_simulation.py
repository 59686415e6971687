#!/usr/bin/env python3
"""
Example: Running Orrery Simulations

Demonstrates how to run the orrery programmatically without visualization.
Useful for:
- Checking planet positions for a given date
- Producing camera targets for scripted fly-throughs
- Exporting time series for plotting
"""

import math
import sys
import os
import tempfile

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simulation import (
    Simulation,
    SimulationConfig,
    create_solar_system,
    compose_positions,
    observer_distance,
)


def example_basic_simulation():
    """
    Basic example using the Simulation class.
    """
    print("=" * 70)
    print("Example 1: Basic Simulation")
    print("=" * 70)

    config = SimulationConfig(speed=10.0)

    sim = Simulation(config)
    sim.initialize()

    print(f"\nLoaded {sim.num_bodies} bodies, starting {sim.clock.calendar}")

    print("\nRunning simulation (one real minute at 10 days/s)...")
    for step in range(60):
        sim.step(1.0)

        if (step + 1) % 20 == 0:
            x, _, z = sim.state.position_of("Earth")
            print(f"  Step {step+1}: {sim.clock.calendar}  Earth at ({x:+.2f}, {z:+.2f})")

    summary = sim.get_summary()
    print(f"\nFinal state:")
    print(f"  Elapsed: {summary['elapsed_days']:.1f} days")
    print(f"  Date: {summary['calendar']}")


def example_epoch_positions():
    """
    Example comparing planet longitudes for different reference years.
    """
    print("\n" + "=" * 70)
    print("Example 2: Planet Longitudes by Year")
    print("=" * 70)

    for year in (2000, 2025, 2050):
        catalog = create_solar_system(reference_year=year)
        positions = compose_positions(catalog, 0.0)

        print(f"\n1 January {year}:")
        for index in catalog.children_of(catalog.root_index):
            body = catalog[index]
            x, _, z = positions[index]
            longitude = math.degrees(math.atan2(z, x) + math.pi / 2) % 360
            print(f"  {body.name:8s} {longitude:6.1f}°")


def example_navigation():
    """
    Example resolving camera targets for bodies and point targets.
    """
    print("\n" + "=" * 70)
    print("Example 3: Navigation Targets")
    print("=" * 70)

    sim = Simulation()
    sim.initialize()

    for name in ("Sun", "Earth", "Titan", "TOI 700 d", "Planet X"):
        result = sim.navigate(name)
        if not result.found:
            print(f"\n  {name}: not found")
            continue

        eye = ", ".join(f"{v:+.2f}" for v in result.target.eye)
        look_at = ", ".join(f"{v:+.2f}" for v in result.target.look_at)
        readout = observer_distance(result.target.eye, result.target.look_at)
        print(f"\n  {name} ({result.kind}):")
        print(f"    eye     = ({eye})")
        print(f"    look_at = ({look_at})")
        print(f"    viewing distance {readout.au:.3f} AU")


def example_run_log():
    """
    Example exporting a time series as JSON.
    """
    print("\n" + "=" * 70)
    print("Example 4: Run Log Export")
    print("=" * 70)

    sim = Simulation(SimulationConfig(speed=30.0), enable_logging=True)
    sim.run(duration=10.0, timestep=0.5)

    path = os.path.join(tempfile.gettempdir(), "orrery_run.json")
    sim.save_log(path)
    print(f"\n  Wrote {sim.state.step_count} steps to {path}")


if __name__ == "__main__":
    example_basic_simulation()
    example_epoch_positions()
    example_navigation()
    example_run_log()

    print("\n" + "=" * 70)
    print("All examples complete!")
    print("=" * 70)
