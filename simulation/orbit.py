#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Circular Orbit Class for the Orrery

Defines the orbital and spin motion of a body using circular, coplanar
orbits. Distances are in scene units, angles in radians, time in
simulated days.
"""

import math
import numpy as np
from typing import Tuple

from .epoch import DAYS_PER_YEAR

# Orbit speed of the reference body (period = 1 year); every other body's
# speed is normalised against it
BASE_ORBIT_SPEED = 0.01

# Visual acceleration of self-rotation so spin is perceptible
ROTATION_SCALE = 0.05

TWO_PI = 2 * math.pi


def orbit_speed_for_period(orbital_period_years: float) -> float:
    """Orbital angular coefficient for a period given in years."""
    return BASE_ORBIT_SPEED / orbital_period_years


def orbital_period_days(orbital_period_years: float) -> float:
    """
    Orbital period in simulated days.

    Parameters
    ----------
    orbital_period_years : float
        Period in years (must be positive)

    Returns
    -------
    float
        Period in days; exactly 365.25 for a one-year period
    """
    speed = orbit_speed_for_period(orbital_period_years)
    return DAYS_PER_YEAR / (speed / BASE_ORBIT_SPEED)


def spin_period_days(rotation_period_days: float) -> float:
    """Simulated days per full visual turn: |P| / ROTATION_SCALE."""
    return abs(rotation_period_days) / ROTATION_SCALE


def rotation_angle(elapsed_days: float, rotation_period_days: float) -> float:
    """
    Self-rotation angle at a given time: 2π * t * ROTATION_SCALE / |P|.

    Elapsed time is reduced modulo the spin period with ``math.fmod``
    first, so the angle keeps full precision over long runs. A negative
    period marks retrograde spin: the angle is negated and its magnitude
    is unchanged.
    """
    period = spin_period_days(rotation_period_days)
    angle = TWO_PI * (math.fmod(elapsed_days, period) / period)
    return -angle if rotation_period_days < 0 else angle


def body_position(
    distance: float,
    orbital_period_years: float,
    rotation_period_days: float,
    base_angle: float,
    elapsed_days: float,
) -> Tuple[float, float, float]:
    """
    Planar position and spin of a body relative to its parent.

    Parameters
    ----------
    distance : float
        Orbit radius (0 for the central star)
    orbital_period_years : float
        Orbital period in years (ignored for the central star)
    rotation_period_days : float
        Rotation period in days, negative for retrograde spin
    base_angle : float
        Orbital angle at elapsed_days = 0 (radians)
    elapsed_days : float
        Simulated time in days

    Returns
    -------
    tuple
        (x, z, rotation_angle)
    """
    orbit = CircularOrbit(
        distance=distance,
        orbital_period_years=orbital_period_years,
        rotation_period_days=rotation_period_days,
        base_angle=base_angle,
    )
    x, z = orbit.position_at(elapsed_days)
    return x, z, orbit.rotation_angle_at(elapsed_days)


class CircularOrbit:
    """
    Circular orbit in the x-z plane around a parent body.

    Parameters
    ----------
    distance : float
        Orbit radius in scene units. Zero marks the central star, whose
        position is always the origin.
    orbital_period_years : float
        Time for one revolution in years. Must be positive unless
        distance is zero.
    rotation_period_days : float
        Time for one self-rotation in days; a negative value means
        retrograde spin.
    base_angle : float
        Orbital angle at elapsed time zero (radians)
    retrograde : bool
        Revolve clockwise (decreasing angle) instead of counter-clockwise

    Attributes
    ----------
    orbital_period_days : float
        Revolution period in simulated days (0 for the central star)
    orbit_speed : float
        Orbital angular coefficient relative to BASE_ORBIT_SPEED
    """

    def __init__(
        self,
        distance: float,
        orbital_period_years: float,
        rotation_period_days: float,
        base_angle: float = 0.0,
        retrograde: bool = False,
    ):
        # Validate inputs
        for label, value in (
            ("Distance", distance),
            ("Orbital period", orbital_period_years),
            ("Rotation period", rotation_period_days),
            ("Base angle", base_angle),
        ):
            if not math.isfinite(value):
                raise ValueError(f"{label} must be finite, got {value}")
        if distance < 0:
            raise ValueError("Distance cannot be negative")
        if distance > 0 and orbital_period_years <= 0:
            raise ValueError("Orbital period must be positive for an orbiting body")
        if rotation_period_days == 0:
            raise ValueError("Rotation period cannot be zero")

        self.distance = distance
        self.orbital_period_years = orbital_period_years
        self.rotation_period_days = rotation_period_days
        self.base_angle = base_angle
        self.retrograde = retrograde

        if self.is_root:
            self.orbit_speed = 0.0
            self.orbital_period_days = 0.0
        else:
            self.orbit_speed = orbit_speed_for_period(orbital_period_years)
            self.orbital_period_days = orbital_period_days(orbital_period_years)

    @property
    def is_root(self) -> bool:
        """True for the central star."""
        return self.distance == 0

    @property
    def direction(self) -> int:
        """+1 for prograde revolution, -1 for retrograde."""
        return -1 if self.retrograde else 1

    @property
    def mean_motion(self) -> float:
        """Angular velocity (radians/day)."""
        if self.is_root:
            return 0.0
        return self.direction * TWO_PI / self.orbital_period_days

    def orbital_angle(self, elapsed_days: float) -> float:
        """
        Orbital angle at time t: base + (t / period) * 2π.

        Parameters
        ----------
        elapsed_days : float
            Simulated time (days)

        Returns
        -------
        float
            Unwrapped angle (radians)
        """
        if self.is_root:
            return self.base_angle
        return self.base_angle + self.direction * (elapsed_days / self.orbital_period_days) * TWO_PI

    def orbital_phase(self, elapsed_days: float) -> float:
        """
        Fraction of the current revolution completed, in (-1, 1).

        ``math.fmod`` is exact, so reducing a large elapsed time to its
        phase loses no precision and does not change the angle.
        """
        if self.is_root:
            return 0.0
        return math.fmod(elapsed_days, self.orbital_period_days) / self.orbital_period_days

    def reduced_angle(self, elapsed_days: float) -> float:
        """Orbital angle computed from the reduced phase (same angle mod 2π)."""
        return self.base_angle + self.direction * self.orbital_phase(elapsed_days) * TWO_PI

    def position_at(self, elapsed_days: float) -> Tuple[float, float]:
        """
        Position in the orbital plane relative to the parent.

        Returns
        -------
        tuple
            (x, z) in scene units; (0, 0) for the central star
        """
        if self.is_root:
            return 0.0, 0.0
        angle = self.reduced_angle(elapsed_days)
        return self.distance * math.cos(angle), self.distance * math.sin(angle)

    def position_3d(self, elapsed_days: float) -> np.ndarray:
        """Relative position as a world-space vector [x, 0, z]."""
        x, z = self.position_at(elapsed_days)
        return np.array([x, 0.0, z])

    def rotation_angle_at(self, elapsed_days: float) -> float:
        """Self-rotation angle (radians), negative for retrograde spin."""
        return rotation_angle(elapsed_days, self.rotation_period_days)

    def __repr__(self) -> str:
        return (
            f"CircularOrbit(\n"
            f"  distance={self.distance:.3f},\n"
            f"  period={self.orbital_period_years:.6f} yr ({self.orbital_period_days:.2f} d),\n"
            f"  rotation={self.rotation_period_days:.2f} d,\n"
            f"  base_angle={self.base_angle:.4f} rad,\n"
            f"  retrograde={self.retrograde}\n"
            f")"
        )
