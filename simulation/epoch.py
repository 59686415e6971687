#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Reference Epoch Module

Resolves the starting orbital angle of each planet for a calendar date
from J2000 mean-longitude constants. Runs once when the body catalog is
built; the result is stored as the body's base angle and never recomputed.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

DAYS_PER_YEAR = 365.25
J2000_YEAR = 2000


@dataclass(frozen=True)
class MeanLongitude:
    """
    Mean-longitude constants of a planet at the J2000 epoch.

    Attributes
    ----------
    l0_deg : float
        Mean longitude at J2000 (degrees)
    rate_deg_per_year : float
        Rate of change of mean longitude (degrees per Julian year)
    """
    l0_deg: float
    rate_deg_per_year: float

    @classmethod
    def from_per_century(cls, l0_deg: float, rate_deg_per_century: float) -> "MeanLongitude":
        """Create from rates published per Julian century."""
        return cls(l0_deg=l0_deg, rate_deg_per_year=rate_deg_per_century / 100.0)


# Standish (JPL) mean elements, rates per Julian century
PLANET_MEAN_LONGITUDES: Dict[str, MeanLongitude] = {
    "Mercury": MeanLongitude.from_per_century(252.25084, 149472.6746),
    "Venus": MeanLongitude.from_per_century(181.97973, 58517.8156),
    "Earth": MeanLongitude.from_per_century(100.46435, 35999.3720),
    "Mars": MeanLongitude.from_per_century(355.45332, 19140.2993),
    "Jupiter": MeanLongitude.from_per_century(34.40438, 3034.9057),
    "Saturn": MeanLongitude.from_per_century(49.94432, 1222.1138),
    "Uranus": MeanLongitude.from_per_century(313.23218, 428.4677),
    "Neptune": MeanLongitude.from_per_century(304.88003, 218.4862),
}


def years_since_j2000(year: int, day_of_year: float = 0.0) -> float:
    """Fractional years between J2000 and (year, day_of_year)."""
    return (year - J2000_YEAR) + day_of_year / DAYS_PER_YEAR


def mean_longitude_deg(elements: MeanLongitude, year: int, day_of_year: float = 0.0) -> float:
    """
    Mean longitude at a calendar date, wrapped to [0, 360).

    Parameters
    ----------
    elements : MeanLongitude
        J2000 constants of the body
    year : int
        Calendar year
    day_of_year : float
        Day of year, 0-based

    Returns
    -------
    float
        Mean longitude in degrees
    """
    longitude = elements.l0_deg + elements.rate_deg_per_year * years_since_j2000(year, day_of_year)
    return longitude % 360.0


def base_angle_from_elements(elements: MeanLongitude, year: int, day_of_year: float = 0.0) -> float:
    """
    Base angle (radians) for a body at a calendar date.

    The -π/2 term aligns zero mean longitude with the renderer's
    zero azimuth.
    """
    return math.radians(mean_longitude_deg(elements, year, day_of_year)) - math.pi / 2


def resolve_base_angle(
    name: str,
    year: int,
    day_of_year: float = 0.0,
    fallback: float = 0.0,
    elements: Optional[MeanLongitude] = None,
) -> float:
    """
    Resolve the base angle of a named body.

    Uses explicit ``elements`` if given, otherwise the built-in planet
    table. Bodies without published constants (moons, the Sun) get the
    literal ``fallback`` angle.
    """
    if elements is None:
        elements = PLANET_MEAN_LONGITUDES.get(name)
    if elements is None:
        return fallback
    return base_angle_from_elements(elements, year, day_of_year)


def resolve_base_angles(
    names: Iterable[str],
    year: int,
    day_of_year: float = 0.0,
    table: Mapping[str, MeanLongitude] = PLANET_MEAN_LONGITUDES,
) -> Dict[str, float]:
    """Base angles for every name that has constants in ``table``."""
    return {
        name: base_angle_from_elements(table[name], year, day_of_year)
        for name in names
        if name in table
    }


def days_between(year1: int, day1: float, year2: int, day2: float) -> float:
    """Days from (year1, day1) to (year2, day2) on the 365.25-day calendar."""
    return (year2 - year1) * DAYS_PER_YEAR + (day2 - day1)
