#!/usr/bin/env python3
"""
Orrery - Solar System Simulator

Command-line entry point for running the orrery with optional
visualization.

Usage:
    python main.py                                  # Interactive view
    python main.py --navigate Saturn                # Start looking at Saturn
    python main.py --year 2030 --speed 10           # Different epoch and speed
    python main.py --headless --duration 60         # Headless simulation
    python main.py --help                           # Show all options
"""

import argparse
import logging
import sys


def main():
    parser = argparse.ArgumentParser(
        description="Solar System Orrery Simulator and Visualizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                    # Default view of the Sun
  %(prog)s --navigate Jupiter                 # Fly to Jupiter on start
  %(prog)s --navigate "TOI 700 d"             # Look toward a point target
  %(prog)s --look-ra 6.75 --look-dec -16.7    # Look toward RA (hours) / Dec
  %(prog)s --headless --duration 120 --speed 30
  %(prog)s --headless --log-file run.json     # Save a JSON time series

Controls (visualization mode):
  Arrow keys  : Rotate camera
  +/-         : Zoom in/out
  [ ]         : Decrease/increase speed
  PgUp/PgDn   : Jump one year
  TAB / 0-9   : Fly to bodies
  T           : Fly to next point target
  SPACE       : Pause/Resume
  R           : Reset
  ESC         : Quit
        """,
    )

    # -------------------------------------------------------------------------
    # Clock
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--year",
        "-y",
        type=int,
        default=2025,
        help="Reference year at elapsed time zero (default: 2025)",
    )
    parser.add_argument(
        "--start-day",
        type=float,
        default=277.0,
        help="Day of the reference year to start at (default: 277)",
    )
    parser.add_argument(
        "--day-offset",
        type=float,
        default=0.0,
        help="Day at which the displayed year rolls over (default: 0)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=0.5,
        help="Simulated days per real second, clamped to [0.01, 100] (default: 0.5)",
    )
    parser.add_argument(
        "--paused",
        action="store_true",
        help="Start with simulation paused",
    )
    parser.add_argument(
        "--literal-angles",
        action="store_true",
        help="Use fixed start angles instead of J2000 mean longitudes",
    )

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--navigate",
        type=str,
        default=None,
        help="Body or point target to look at on start",
    )
    parser.add_argument(
        "--look-ra",
        type=float,
        default=None,
        help="Right ascension (hours) of a sky direction to look toward",
    )
    parser.add_argument(
        "--look-dec",
        type=float,
        default=0.0,
        help="Declination (degrees) used with --look-ra (default: 0)",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="List bodies and point targets matching a name, then exit",
    )

    # -------------------------------------------------------------------------
    # Headless mode
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run simulation without visualization",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=60.0,
        help="Real seconds to simulate in headless mode (default: 60)",
    )
    parser.add_argument(
        "--timestep",
        type=float,
        default=1.0 / 60.0,
        help="Frame interval in seconds for headless mode (default: 1/60)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write the headless time series to a JSON file",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    # -------------------------------------------------------------------------
    # Window settings
    # -------------------------------------------------------------------------
    parser.add_argument(
        "--width",
        type=int,
        default=1200,
        help="Window width in pixels (default: 1200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=800,
        help="Window height in pixels (default: 800)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # -------------------------------------------------------------------------
    # Import simulation components
    # -------------------------------------------------------------------------
    from simulation import (
        CatalogError,
        Simulation,
        SimulationConfig,
        ra_dec_to_direction,
        ra_hours_to_degrees,
        resolve_direction_target,
    )

    config = SimulationConfig(
        reference_year=args.year,
        start_day_of_year=args.start_day,
        start_day_offset=args.day_offset,
        speed=args.speed,
        paused=args.paused,
        resolve_epoch=not args.literal_angles,
    )

    # -------------------------------------------------------------------------
    # Create and initialize simulation
    # -------------------------------------------------------------------------
    sim = Simulation(config, enable_logging=args.log_file is not None)
    try:
        sim.initialize()
    except CatalogError as e:
        print(f"\nError: Could not load body catalog: {e}")
        sys.exit(1)

    if args.search is not None:
        bodies, targets = sim.search(args.search)
        print(f"Matches for '{args.search}':")
        for body in bodies:
            print(f"  [{body.kind}] {body.name}")
        for target in targets:
            status = "confirmed" if target.confirmed else "candidate"
            print(f"  [{target.kind}] {target.name} ({target.target_id}, {status})")
        if not bodies and not targets:
            print("  (none)")
        return

    # -------------------------------------------------------------------------
    # Resolve the starting camera target
    # -------------------------------------------------------------------------
    start_target = None
    if args.look_ra is not None:
        direction = ra_dec_to_direction(ra_hours_to_degrees(args.look_ra), args.look_dec)
        start_target = resolve_direction_target(direction)
    elif args.navigate is not None:
        result = sim.navigate(args.navigate)
        if result.found:
            start_target = result.target
        else:
            print(f"Warning: '{args.navigate}' not found, keeping the default view")

    # -------------------------------------------------------------------------
    # Print configuration summary
    # -------------------------------------------------------------------------
    summary = sim.get_summary()
    print("=" * 60)
    print("Orrery - Solar System Simulator")
    print("=" * 60)
    print(f"\nBodies: {summary['num_bodies']}")
    print(f"Point targets: {summary['num_point_targets']}")
    print(f"Longest period: {summary['longest_period_days'] / 365.25:.1f} years")
    print(f"Start: {summary['calendar']}")
    print(f"Speed: {summary['speed']} days/s" + (" [PAUSED]" if summary["paused"] else ""))

    if start_target is not None:
        eye = ", ".join(f"{v:.2f}" for v in start_target.eye)
        look_at = ", ".join(f"{v:.2f}" for v in start_target.look_at)
        print(f"Camera: eye=({eye}) look_at=({look_at})")

    # -------------------------------------------------------------------------
    # Run simulation
    # -------------------------------------------------------------------------
    if args.headless:
        print(f"\n{'=' * 60}")
        print(f"Running headless simulation for {args.duration:.0f} seconds...")
        print(f"Timestep: {args.timestep:.4f} seconds")
        print(f"{'=' * 60}")

        elapsed = 0.0
        report_interval = max(1.0, args.duration / 10)
        next_report = report_interval

        while elapsed < args.duration:
            sim.step(args.timestep)
            elapsed += args.timestep

            if elapsed >= next_report:
                print(f"\n{sim.clock.calendar}")
                for name in ("Mercury", "Earth", "Moon", "Jupiter"):
                    state = sim.state.bodies.get(name)
                    if state is None:
                        continue
                    x, _, z = state.position
                    print(f"  {name:8s} x={x:+9.3f} z={z:+9.3f}")
                next_report += report_interval

        print(f"\n{'=' * 60}")
        print("Simulation Complete!")
        print(f"{'=' * 60}")
        print(f"Final date: {sim.clock.calendar}")
        print(f"Elapsed: {sim.simulation_time:.3f} days")
        print(f"Steps executed: {sim.state.step_count}")

        if args.log_file is not None:
            path = sim.save_log(args.log_file)
            print(f"Time series written to {path}")

    else:
        # Run with visualization
        try:
            from visualization import Visualizer
        except ImportError as e:
            print(f"\nError: Could not import visualization module: {e}")
            print("Try running with --headless flag for simulation without graphics.")
            sys.exit(1)

        print(f"\n{'=' * 60}")
        print("Starting Visualization")
        print(f"{'=' * 60}")
        print("\nControls:")
        print("  Arrow keys  : Rotate camera")
        print("  +/-         : Zoom in/out")
        print("  [ ]         : Decrease/increase speed")
        print("  PgUp/PgDn   : Jump one year")
        print("  TAB / 0-9   : Fly to bodies")
        print("  T           : Fly to next point target")
        print("  SPACE       : Pause/Resume")
        print("  R           : Reset")
        print("  ESC         : Quit")
        print()

        visualizer = Visualizer(width=args.width, height=args.height)
        visualizer.set_simulation(sim)

        if start_target is not None:
            visualizer.camera.set_look_at(start_target, smooth=False)
            visualizer.selected = args.navigate if args.look_ra is None else None

        visualizer.run()


if __name__ == "__main__":
    main()
