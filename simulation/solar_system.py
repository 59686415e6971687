#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Solar System Catalog

Factory for the default body catalog: the Sun, the eight planets and
their major moons.

Planet distances keep the real AU ratios (1 AU = SCALE_FACTOR scene
units). Orbital periods are real sidereal periods in years. Moon
distances are compressed so moons stay clear of their planet.
"""

from typing import List, Optional

from .body import BodyCatalog, BodySpec
from .epoch import DAYS_PER_YEAR, PLANET_MEAN_LONGITUDES

# Scene units per astronomical unit
SCALE_FACTOR = 10.0

# Sidereal orbital periods (years), NASA JPL
ORBITAL_PERIODS_YEARS = {
    "Mercury": 0.240846,
    "Venus": 0.615198,
    "Earth": 1.0,
    "Mars": 1.880848,
    "Jupiter": 11.862615,
    "Saturn": 29.457491,
    "Uranus": 84.016846,
    "Neptune": 164.79132,
}

# Mean distance from the Sun (AU)
DISTANCES_AU = {
    "Mercury": 0.387,
    "Venus": 0.723,
    "Earth": 1.000,
    "Mars": 1.524,
    "Jupiter": 5.203,
    "Saturn": 9.537,
    "Uranus": 19.191,
    "Neptune": 30.069,
}


def scale_distance(au: float) -> float:
    """Convert AU to scene units."""
    return au * SCALE_FACTOR


def _moon(
    name: str,
    distance: float,
    radius: float,
    period_days: float,
    start_angle: float,
    color: str,
    rotation_period_days: Optional[float] = None,
    retrograde_orbit: bool = False,
) -> BodySpec:
    """Moon definition; moons are tidally locked unless a rotation is given."""
    if rotation_period_days is None:
        rotation_period_days = -period_days if retrograde_orbit else period_days
    return BodySpec(
        name=name,
        distance=distance,
        radius=radius,
        orbital_period_years=period_days / DAYS_PER_YEAR,
        rotation_period_days=rotation_period_days,
        start_angle=start_angle,
        retrograde_orbit=retrograde_orbit,
        color=color,
        kind="moon",
    )


def _planet(
    name: str,
    radius: float,
    rotation_period_days: float,
    start_angle: float,
    color: str,
    has_rings: bool = False,
    moons: Optional[List[BodySpec]] = None,
) -> BodySpec:
    return BodySpec(
        name=name,
        distance=scale_distance(DISTANCES_AU[name]),
        radius=radius,
        orbital_period_years=ORBITAL_PERIODS_YEARS[name],
        rotation_period_days=rotation_period_days,
        start_angle=start_angle,
        mean_longitude=PLANET_MEAN_LONGITUDES.get(name),
        has_rings=has_rings,
        color=color,
        kind="planet",
        moons=moons or [],
    )


def solar_system_specs() -> List[BodySpec]:
    """
    Body definitions of the solar system.

    Returns
    -------
    list
        Fresh BodySpec list; the Sun first, then planets outward
    """
    return [
        BodySpec(
            name="Sun",
            distance=0.0,
            radius=2.5,
            orbital_period_years=0.0,
            rotation_period_days=25.0,
            color="#FDB813",
            kind="star",
        ),
        _planet("Mercury", radius=0.3, rotation_period_days=58.6, start_angle=0.5, color="#8C7853"),
        # Venus spins retrograde
        _planet("Venus", radius=0.5, rotation_period_days=-243.0, start_angle=1.2, color="#FFC649"),
        _planet(
            "Earth", radius=0.6, rotation_period_days=1.0, start_angle=2.1, color="#4A90E2",
            moons=[
                _moon("Moon", 1.5, 0.15, 27.3, 0.0, "#C0C0C0"),
            ],
        ),
        _planet(
            "Mars", radius=0.4, rotation_period_days=1.03, start_angle=3.5, color="#E27B58",
            moons=[
                _moon("Phobos", 0.6, 0.06, 0.319, 0.0, "#8B7355", rotation_period_days=0.32),
                _moon("Deimos", 0.9, 0.05, 1.263, 3.0, "#A0826D", rotation_period_days=1.26),
            ],
        ),
        _planet(
            "Jupiter", radius=1.4, rotation_period_days=0.41, start_angle=4.8, color="#C88B3A",
            moons=[
                _moon("Io", 2.2, 0.2, 1.77, 0.0, "#FFD700"),
                _moon("Europa", 2.8, 0.18, 3.55, 1.5, "#D4AF37"),
                _moon("Ganymede", 3.5, 0.25, 7.15, 3.0, "#8B8B7A"),
                _moon("Callisto", 4.3, 0.22, 16.7, 4.5, "#6B6B5A"),
            ],
        ),
        _planet(
            "Saturn", radius=1.2, rotation_period_days=0.45, start_angle=0.3, color="#FAD5A5",
            has_rings=True,
            moons=[
                _moon("Titan", 3.5, 0.24, 15.95, 0.0, "#FFA500"),
                _moon("Rhea", 2.7, 0.12, 4.52, 2.0, "#D3D3D3"),
                _moon("Enceladus", 2.1, 0.1, 1.37, 4.0, "#F0F8FF"),
            ],
        ),
        # Uranus spins retrograde
        _planet(
            "Uranus", radius=0.9, rotation_period_days=-0.72, start_angle=5.5, color="#4FD0E7",
            moons=[
                _moon("Titania", 2.1, 0.15, 8.71, 0.0, "#B0C4DE"),
                _moon("Oberon", 2.6, 0.14, 13.46, 3.0, "#A0B0C0"),
            ],
        ),
        _planet(
            "Neptune", radius=0.85, rotation_period_days=0.67, start_angle=2.8, color="#4166F5",
            moons=[
                # Triton orbits retrograde
                _moon("Triton", 2.3, 0.17, 5.88, 0.0, "#ADD8E6", retrograde_orbit=True),
            ],
        ),
    ]


def create_solar_system(
    reference_year: Optional[int] = 2025,
    day_of_year: float = 0.0,
) -> BodyCatalog:
    """
    Build the default catalog.

    Parameters
    ----------
    reference_year : int, optional
        Year whose 1 January (plus ``day_of_year``) matches elapsed time
        zero. Planet base angles are resolved from their J2000 mean
        longitudes for that date. None keeps the literal start angles.
    day_of_year : float
        Day of the reference year at elapsed time zero

    Returns
    -------
    BodyCatalog
        The loaded catalog
    """
    return BodyCatalog.from_specs(solar_system_specs(), reference_year, day_of_year)
