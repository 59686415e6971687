#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Point Target Module

External targets (exoplanet host stars) placed on the sky sphere from
their right ascension and declination. They do not move with simulated
time.
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

import numpy as np

# Distance of target markers from the origin (scene units)
DEFAULT_MARKER_DISTANCE = 1500.0


def ra_hours_to_degrees(ra_hours: float) -> float:
    """Convert right ascension from hours (0-24) to degrees (0-360)."""
    return ra_hours * 15.0


def ra_dec_to_direction(ra_deg: float, dec_deg: float) -> np.ndarray:
    """
    Unit direction vector for a sky position.

    The scene is y-up, so declination maps to the y component.

    Parameters
    ----------
    ra_deg : float
        Right ascension (degrees)
    dec_deg : float
        Declination (degrees, -90 to 90)

    Returns
    -------
    np.ndarray
        Unit vector [x, y, z]
    """
    ra = math.radians(ra_deg)
    dec = math.radians(dec_deg)
    return np.array([
        math.cos(dec) * math.cos(ra),
        math.sin(dec),
        math.cos(dec) * math.sin(ra),
    ])


@dataclass(frozen=True)
class PointTarget:
    """
    A fixed target on the sky.

    Attributes
    ----------
    target_id : str
        Catalog identifier (TIC / EPIC / KOI / TOI)
    name : str
        Common name
    ra_deg : float
        Right ascension (degrees)
    dec_deg : float
        Declination (degrees)
    kind : str
        Identifier family: "TIC", "EPIC", "KOI" or "TOI"
    confirmed : bool
        Whether the planet is confirmed
    """
    target_id: str
    name: str
    ra_deg: float
    dec_deg: float
    kind: str = "TIC"
    confirmed: bool = False

    def __post_init__(self):
        if not (math.isfinite(self.ra_deg) and math.isfinite(self.dec_deg)):
            raise ValueError(f"{self.target_id}: RA/Dec must be finite")
        if not -90.0 <= self.dec_deg <= 90.0:
            raise ValueError(f"{self.target_id}: declination must be within [-90, 90]")

    @property
    def direction(self) -> np.ndarray:
        """Unit vector toward the target."""
        return ra_dec_to_direction(self.ra_deg, self.dec_deg)

    def position(self, distance: float = DEFAULT_MARKER_DISTANCE) -> np.ndarray:
        """Marker position at ``distance`` scene units from the origin."""
        return self.direction * distance


class PointTargetCatalog:
    """
    Lookup over a fixed list of point targets.

    Parameters
    ----------
    targets : sequence of PointTarget
        Targets with unique identifiers
    """

    def __init__(self, targets: Sequence[PointTarget]):
        self._targets = tuple(targets)
        ids = [t.target_id.casefold() for t in self._targets]
        if len(ids) != len(set(ids)):
            raise ValueError("Point target identifiers must be unique")

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[PointTarget]:
        return iter(self._targets)

    def find(self, key: str) -> Optional[PointTarget]:
        """Target whose id or name equals ``key`` (case-insensitive)."""
        needle = key.strip().casefold()
        for target in self._targets:
            if needle in (target.target_id.casefold(), target.name.casefold()):
                return target
        return None

    def search(self, query: str) -> List[PointTarget]:
        """Targets whose id or name contains ``query`` (case-insensitive)."""
        needle = query.strip().casefold()
        return [
            t for t in self._targets
            if needle in t.target_id.casefold() or needle in t.name.casefold()
        ]


def demo_targets() -> List[PointTarget]:
    """Well-known exoplanet hosts used as quick-navigation targets."""
    return [
        PointTarget("TIC307210830", "TOI 700 d", 103.087, -65.574, "TIC", True),
        PointTarget("TIC441462736", "AU Mic b", 312.958, -31.341, "TIC", True),
        PointTarget("KOI-7016", "KOI-7016.01", 291.561, 48.141, "KOI", False),
        PointTarget("EPIC212521166", "K2-18 b", 165.483, 7.588, "EPIC", True),
        PointTarget("TIC259168516", "TOI 178", 29.421, -34.986, "TIC", True),
    ]
