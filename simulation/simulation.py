#!/usr/bin/env python3
"""
Simulation Module

Main simulation class for the orrery. Owns the body catalog, the point
target catalog and the clock, and produces an immutable snapshot of every
body's position once per tick.

The simulation can run independently of visualization for batch
processing, testing, or analysis.
"""

import json
import math
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .body import BodyCatalog, BodySpec, OrbitalBody
from .clock import CalendarLabel, SimulationClock, calendar_label
from .composition import compose_positions
from .navigation import NavigationResult, resolve_camera_target
from .solar_system import solar_system_specs
from .targets import PointTarget, PointTargetCatalog, demo_targets

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass
class SimulationConfig:
    """
    Configuration for a simulation.

    Attributes
    ----------
    reference_year : int
        Calendar year at elapsed time zero (1 January).
    start_day_of_year : float
        Elapsed days at start (default 277, 4 October).
    start_day_offset : float
        Anchor day for the displayed year rollover.
    speed : float
        Simulated days per real second.
    paused : bool
        Start paused.
    resolve_epoch : bool
        Seed planet base angles from their J2000 mean longitudes for the
        reference year. If False, literal start angles are used.
    bodies : list, optional
        Body definitions. Uses the solar system if None.
    targets : list, optional
        Point targets. Uses the demo targets if None.
    """

    reference_year: int = 2025
    start_day_of_year: float = 277.0
    start_day_offset: float = 0.0
    speed: float = 0.5
    paused: bool = False
    resolve_epoch: bool = True
    bodies: Optional[List[BodySpec]] = None
    targets: Optional[List[PointTarget]] = None


@dataclass(frozen=True)
class BodyState:
    """
    Position and spin of one body at one instant.

    Attributes
    ----------
    name : str
        Body name.
    orbital_angle : float
        Orbital angle around the parent, wrapped to [0, 2π).
    rotation_angle : float
        Self-rotation angle (radians), negative for retrograde spin.
    relative : tuple
        (x, z) position relative to the parent.
    position : tuple
        (x, y, z) world-space position.
    """

    name: str
    orbital_angle: float
    rotation_angle: float
    relative: Tuple[float, float]
    position: Tuple[float, float, float]


@dataclass(frozen=True)
class SystemSnapshot:
    """
    Immutable state of the whole system at one instant.

    Attributes
    ----------
    elapsed_days : float
        Simulated time (days).
    step_count : int
        Number of simulation steps executed.
    calendar : CalendarLabel
        Display-only calendar label.
    bodies : mapping
        Body name -> BodyState, in catalog order.
    """

    elapsed_days: float
    step_count: int
    calendar: CalendarLabel
    bodies: Mapping[str, BodyState] = field(default_factory=lambda: MappingProxyType({}))

    def position_of(self, name: str) -> Optional[Tuple[float, float, float]]:
        """World-space position of a body, or None if unknown."""
        state = self.bodies.get(name)
        return None if state is None else state.position


def snapshot_at(catalog: BodyCatalog, elapsed_days: float, calendar: CalendarLabel, step_count: int = 0) -> SystemSnapshot:
    """
    Compute every body's state at ``elapsed_days``.

    Pure: depends only on the catalog and the arguments.
    """
    positions = compose_positions(catalog, elapsed_days)
    states: Dict[str, BodyState] = {}

    for body, position in zip(catalog, positions):
        orbit = body.orbit
        x, z = orbit.position_at(elapsed_days)
        states[body.name] = BodyState(
            name=body.name,
            orbital_angle=orbit.reduced_angle(elapsed_days) % TWO_PI,
            rotation_angle=orbit.rotation_angle_at(elapsed_days),
            relative=(x, z),
            position=(float(position[0]), float(position[1]), float(position[2])),
        )

    return SystemSnapshot(
        elapsed_days=elapsed_days,
        step_count=step_count,
        calendar=calendar,
        bodies=MappingProxyType(states),
    )


class Simulation:
    """
    Orrery simulation.

    Parameters
    ----------
    config : SimulationConfig, optional
        Simulation configuration.
    enable_logging : bool
        Record a time series of snapshots for ``save_log``.

    Attributes
    ----------
    config : SimulationConfig
        Current configuration.
    catalog : BodyCatalog
        Loaded bodies.
    point_targets : PointTargetCatalog
        External targets.
    clock : SimulationClock
        The simulation clock.
    state : SystemSnapshot
        Latest snapshot.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, enable_logging: bool = False):
        self.config = config or SimulationConfig()
        self.enable_logging = enable_logging

        self.catalog: Optional[BodyCatalog] = None
        self.point_targets = PointTargetCatalog([])
        self.clock = self._create_clock()
        self.state = SystemSnapshot(
            elapsed_days=self.clock.elapsed_days,
            step_count=0,
            calendar=self.clock.calendar,
        )

        self._time_series: List[Dict[str, Any]] = []
        self._initialized = False

    def _create_clock(self) -> SimulationClock:
        config = self.config
        return SimulationClock(
            reference_year=config.reference_year,
            start_day_of_year=config.start_day_of_year,
            speed_multiplier=config.speed,
            paused=config.paused,
            start_day_offset=config.start_day_offset,
        )

    def _create_catalog(self) -> None:
        """Load bodies and point targets. Raises CatalogError on bad constants."""
        config = self.config
        specs = config.bodies if config.bodies is not None else solar_system_specs()
        reference_year = config.reference_year if config.resolve_epoch else None

        self.catalog = BodyCatalog.from_specs(specs, reference_year, day_of_year=0.0)

        targets = config.targets if config.targets is not None else demo_targets()
        self.point_targets = PointTargetCatalog(targets)

    def initialize(self) -> None:
        """
        Build the catalogs, the clock and the first snapshot.

        Must be called before stepping the simulation.
        """
        self._create_catalog()
        self.clock = self._create_clock()
        self._time_series = []
        self._update_state()
        self._initialized = True
        logger.info(
            "Simulation initialized: %d bodies, %d point targets, start %s",
            len(self.catalog),
            len(self.point_targets),
            self.clock.calendar,
        )

    def _update_state(self) -> None:
        self.state = snapshot_at(
            self.catalog,
            self.clock.elapsed_days,
            self.clock.calendar,
            step_count=self.clock.tick_count,
        )
        if self.enable_logging:
            self._record_state()

    def _record_state(self) -> None:
        state = self.state
        self._time_series.append({
            "step": state.step_count,
            "elapsed_days": state.elapsed_days,
            "calendar": str(state.calendar),
            "bodies": {
                name: {
                    "x": body.position[0],
                    "y": body.position[1],
                    "z": body.position[2],
                    "orbital_angle": body.orbital_angle,
                    "rotation_angle": body.rotation_angle,
                }
                for name, body in state.bodies.items()
            },
        })

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("Simulation not initialized. Call initialize() first.")

    def step(self, delta_seconds: float) -> SystemSnapshot:
        """
        Advance simulation by one frame.

        Parameters
        ----------
        delta_seconds : float
            Real seconds since the previous frame.

        Returns
        -------
        SystemSnapshot
            Updated snapshot. Unchanged positions if the clock is paused.

        Raises
        ------
        RuntimeError
            If simulation not initialized.
        """
        self._require_initialized()

        before = self.clock.elapsed_days
        self.clock.tick(delta_seconds)
        if self.clock.elapsed_days != before or self.state.elapsed_days != before:
            self._update_state()

        return self.state

    def run(self, duration: float, timestep: float) -> List[SystemSnapshot]:
        """
        Run simulation for a span of real time.

        Parameters
        ----------
        duration : float
            Total real time (seconds).
        timestep : float
            Frame interval (seconds).

        Returns
        -------
        list
            Snapshot after each frame.
        """
        if timestep <= 0:
            raise ValueError("Timestep must be positive")
        if not self._initialized:
            self.initialize()

        snapshots = []
        elapsed = 0.0
        while elapsed < duration:
            snapshots.append(self.step(timestep))
            elapsed += timestep

        return snapshots

    def snapshot_at(self, elapsed_days: float) -> SystemSnapshot:
        """Snapshot at an arbitrary time without touching the clock."""
        self._require_initialized()
        calendar = calendar_label(elapsed_days, self.config.reference_year, self.config.start_day_offset)
        return snapshot_at(self.catalog, elapsed_days, calendar, step_count=self.clock.tick_count)

    def navigate(self, name: str) -> NavigationResult:
        """
        Camera target for a body or point target at the current time.

        Unknown names return ``found=False``; nothing is mutated.
        """
        self._require_initialized()
        return resolve_camera_target(
            self.catalog,
            name,
            self.clock.elapsed_days,
            point_targets=self.point_targets,
        )

    def search(self, query: str) -> Tuple[List[OrbitalBody], List[PointTarget]]:
        """Bodies and point targets matching ``query``."""
        self._require_initialized()
        return self.catalog.search(query), self.point_targets.search(query)

    def get_body(self, name: str) -> Optional[OrbitalBody]:
        """Get body by name."""
        self._require_initialized()
        return self.catalog.get(name)

    def reset(self) -> None:
        """Reset clock and state to the configured start."""
        self._require_initialized()
        self.clock.reset()
        self._time_series = []
        self._update_state()

    @property
    def num_bodies(self) -> int:
        """Number of bodies."""
        return len(self.catalog) if self.catalog is not None else 0

    @property
    def simulation_time(self) -> float:
        """Current simulation time (days)."""
        return self.clock.elapsed_days

    def get_summary(self) -> Dict[str, Any]:
        """Get simulation summary."""
        return {
            "reference_year": self.config.reference_year,
            "num_bodies": self.num_bodies,
            "num_point_targets": len(self.point_targets),
            "longest_period_days": self.catalog.longest_period_days if self.catalog is not None else 0.0,
            "elapsed_days": self.clock.elapsed_days,
            "calendar": str(self.clock.calendar),
            "speed": self.clock.speed_multiplier,
            "paused": self.clock.paused,
            "step_count": self.clock.tick_count,
            "initialized": self._initialized,
        }

    def save_log(self, path: Union[str, Path]) -> Path:
        """
        Write the recorded time series as JSON.

        Parameters
        ----------
        path : str or Path
            Output file.

        Returns
        -------
        Path
            The written file.

        Raises
        ------
        RuntimeError
            If logging was not enabled.
        """
        if not self.enable_logging:
            raise RuntimeError("Logging not enabled. Create the simulation with enable_logging=True.")

        path = Path(path)
        log = {
            "header": {
                "created": datetime.now(timezone.utc).isoformat(),
                "reference_year": self.config.reference_year,
                "start_day_of_year": self.config.start_day_of_year,
                "start_day_offset": self.config.start_day_offset,
                "speed": self.clock.speed_multiplier,
                "bodies": self.catalog.names if self.catalog is not None else [],
            },
            "time_series": self._time_series,
        }
        with open(path, "w") as f:
            json.dump(log, f, indent=2)

        logger.info("Saved %d records to %s", len(self._time_series), path)
        return path

    def __repr__(self) -> str:
        return (
            f"Simulation(\n"
            f"  bodies={self.num_bodies},\n"
            f"  point_targets={len(self.point_targets)},\n"
            f"  time={self.clock.elapsed_days:.3f} d,\n"
            f"  date='{self.clock.calendar}',\n"
            f"  speed={self.clock.speed_multiplier}x,\n"
            f"  paused={self.clock.paused}\n"
            f")"
        )


def create_simulation(**kwargs) -> Simulation:
    """
    Create simulation with configuration overrides.

    Parameters
    ----------
    **kwargs
        SimulationConfig fields.

    Returns
    -------
    Simulation
        Configured simulation (not yet initialized).
    """
    config = SimulationConfig()

    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise ValueError(f"Unknown configuration option: {key}")
        setattr(config, key, value)

    return Simulation(config)


if __name__ == "__main__":
    print("Orrery Simulation Demo")
    print("=" * 60)

    sim = Simulation(SimulationConfig(speed=5.0))
    sim.initialize()

    print(f"\nCreated simulation: {sim}")

    print("\nRunning for 10 seconds of real time...")
    for _ in range(10):
        sim.step(1.0)

    print(f"\nAfter 10 seconds ({sim.clock.calendar}):")
    for name in ("Mercury", "Earth", "Moon"):
        x, y, z = sim.state.bodies[name].position
        print(f"  {name:8s} x={x:+8.3f} z={z:+8.3f}")
