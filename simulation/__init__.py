#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Orrery Simulation Package

This package provides all the numerical components of the orrery:
the simulation clock, circular orbital motion, the body catalog,
hierarchical position composition and camera navigation targets.

The simulation can be run independently of any visualization.
"""

from .epoch import (
    DAYS_PER_YEAR,
    MeanLongitude,
    PLANET_MEAN_LONGITUDES,
    base_angle_from_elements,
    resolve_base_angle,
    resolve_base_angles,
)

from .clock import (
    CalendarLabel,
    SimulationClock,
    calendar_label,
)

from .orbit import (
    CircularOrbit,
    BASE_ORBIT_SPEED,
    body_position,
    orbital_period_days,
    rotation_angle,
    spin_period_days,
)

from .body import (
    BodyCatalog,
    BodySpec,
    CatalogError,
    OrbitalBody,
)

from .solar_system import (
    SCALE_FACTOR,
    create_solar_system,
    solar_system_specs,
)

from .composition import (
    absolute_position,
    compose_positions,
    relative_position,
)

from .targets import (
    PointTarget,
    PointTargetCatalog,
    demo_targets,
    ra_dec_to_direction,
    ra_hours_to_degrees,
)

from .navigation import (
    CameraTarget,
    DistanceReadout,
    NavigationResult,
    camera_target_for_body,
    observer_distance,
    resolve_camera_target,
    resolve_direction_target,
    root_camera_target,
)

from .simulation import (
    BodyState,
    Simulation,
    SimulationConfig,
    SystemSnapshot,
    create_simulation,
    snapshot_at,
)


__all__ = [
    # Epoch
    "DAYS_PER_YEAR",
    "MeanLongitude",
    "PLANET_MEAN_LONGITUDES",
    "base_angle_from_elements",
    "resolve_base_angle",
    "resolve_base_angles",

    # Clock
    "CalendarLabel",
    "SimulationClock",
    "calendar_label",

    # Orbit
    "CircularOrbit",
    "BASE_ORBIT_SPEED",
    "body_position",
    "orbital_period_days",
    "rotation_angle",
    "spin_period_days",

    # Bodies
    "BodyCatalog",
    "BodySpec",
    "CatalogError",
    "OrbitalBody",
    "SCALE_FACTOR",
    "create_solar_system",
    "solar_system_specs",

    # Composition
    "absolute_position",
    "compose_positions",
    "relative_position",

    # Point targets
    "PointTarget",
    "PointTargetCatalog",
    "demo_targets",
    "ra_dec_to_direction",
    "ra_hours_to_degrees",

    # Navigation
    "CameraTarget",
    "DistanceReadout",
    "NavigationResult",
    "camera_target_for_body",
    "observer_distance",
    "resolve_camera_target",
    "resolve_direction_target",
    "root_camera_target",

    # Simulation
    "BodyState",
    "Simulation",
    "SimulationConfig",
    "SystemSnapshot",
    "create_simulation",
    "snapshot_at",
]

__version__ = "1.0.0"
