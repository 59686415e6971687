#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Body Catalog Module

Bodies of the simulated system are stored as a flat, immutable list.
Each body refers to its parent by index; the central star is the only
body without a parent. Nested definitions (a planet with a list of
moons) are flattened when the catalog is built.
"""

import math
import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .epoch import MeanLongitude, base_angle_from_elements
from .orbit import CircularOrbit

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a body definition cannot be loaded."""


@dataclass
class BodySpec:
    """
    Definition of a body as written in a catalog.

    Attributes
    ----------
    name : str
        Unique display name
    distance : float
        Orbit radius around the parent (scene units), 0 for the star
    radius : float
        Body radius (scene units)
    orbital_period_years : float
        Revolution period (years)
    rotation_period_days : float
        Spin period (days), negative for retrograde spin
    start_angle : float
        Literal orbital angle at elapsed time zero (radians), used when
        no mean-longitude constants are given
    mean_longitude : MeanLongitude, optional
        J2000 constants; when present the start angle is resolved from
        the reference date instead
    has_rings : bool
        Draw rings around the body
    retrograde_orbit : bool
        Revolve opposite to the prevailing direction
    color : str
        Hex display color
    kind : str
        "star", "planet" or "moon"
    moons : list
        Bodies orbiting this one
    """
    name: str
    distance: float
    radius: float
    orbital_period_years: float
    rotation_period_days: float
    start_angle: float = 0.0
    mean_longitude: Optional[MeanLongitude] = None
    has_rings: bool = False
    retrograde_orbit: bool = False
    color: str = "#FFFFFF"
    kind: str = "planet"
    moons: List["BodySpec"] = field(default_factory=list)


@dataclass(frozen=True)
class OrbitalBody:
    """
    A loaded, immutable body.

    Attributes
    ----------
    name : str
        Unique display name
    distance : float
        Orbit radius around the parent (scene units)
    radius : float
        Body radius (scene units)
    orbital_period_years : float
        Revolution period (years)
    rotation_period_days : float
        Spin period (days), negative for retrograde spin
    base_angle : float
        Orbital angle at elapsed time zero (radians)
    parent : int, optional
        Index of the parent body in the catalog; None for the star
    has_rings : bool
        Draw rings around the body
    retrograde_orbit : bool
        Revolve opposite to the prevailing direction
    color : str
        Hex display color
    kind : str
        "star", "planet" or "moon"
    """
    name: str
    distance: float
    radius: float
    orbital_period_years: float
    rotation_period_days: float
    base_angle: float
    parent: Optional[int] = None
    has_rings: bool = False
    retrograde_orbit: bool = False
    color: str = "#FFFFFF"
    kind: str = "planet"

    @property
    def is_root(self) -> bool:
        """True for the central star."""
        return self.distance == 0

    @cached_property
    def orbit(self) -> CircularOrbit:
        """Orbital motion of this body relative to its parent."""
        return CircularOrbit(
            distance=self.distance,
            orbital_period_years=self.orbital_period_years,
            rotation_period_days=self.rotation_period_days,
            base_angle=self.base_angle,
            retrograde=self.retrograde_orbit,
        )


def _check_finite(name: str, label: str, value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise CatalogError(f"{name}: {label} must be a finite number, got {value!r}")


def validate_body(body: OrbitalBody, index: int, count: int) -> None:
    """
    Check a single body's constants.

    Raises
    ------
    CatalogError
        If any constant is NaN/infinite or out of range
    """
    name = body.name or f"body #{index}"
    if not body.name:
        raise CatalogError(f"{name}: name must not be empty")

    _check_finite(name, "distance", body.distance)
    _check_finite(name, "radius", body.radius)
    _check_finite(name, "orbital period", body.orbital_period_years)
    _check_finite(name, "rotation period", body.rotation_period_days)
    _check_finite(name, "base angle", body.base_angle)

    if body.radius <= 0:
        raise CatalogError(f"{name}: radius must be positive")
    if body.rotation_period_days == 0:
        raise CatalogError(f"{name}: rotation period cannot be zero")

    if body.parent is None:
        if body.distance != 0:
            raise CatalogError(f"{name}: only the central star may lack a parent")
        return

    if not 0 <= body.parent < index:
        raise CatalogError(
            f"{name}: parent index {body.parent} must refer to an earlier body "
            f"(catalog has {count} bodies)"
        )
    if body.distance <= 0:
        raise CatalogError(f"{name}: distance from parent must be positive")
    if body.orbital_period_years <= 0:
        raise CatalogError(f"{name}: orbital period must be positive")


class BodyCatalog:
    """
    Flat arena of bodies with parent back-references.

    Parameters
    ----------
    bodies : sequence of OrbitalBody
        Bodies ordered so that every parent precedes its children

    Raises
    ------
    CatalogError
        If any body is malformed, there is not exactly one root, or two
        bodies share a name
    """

    def __init__(self, bodies: Sequence[OrbitalBody]):
        self._bodies: Tuple[OrbitalBody, ...] = tuple(bodies)
        count = len(self._bodies)

        for index, body in enumerate(self._bodies):
            validate_body(body, index, count)

        roots = [i for i, body in enumerate(self._bodies) if body.parent is None]
        if len(roots) != 1:
            raise CatalogError(f"Catalog must have exactly one root body, found {len(roots)}")
        self._root_index = roots[0]

        self._index_by_name: Dict[str, int] = {}
        for index, body in enumerate(self._bodies):
            key = body.name.casefold()
            if key in self._index_by_name:
                raise CatalogError(f"Duplicate body name: {body.name}")
            self._index_by_name[key] = index

        children: Dict[int, List[int]] = {i: [] for i in range(count)}
        for index, body in enumerate(self._bodies):
            if body.parent is not None:
                children[body.parent].append(index)
        self._children = {i: tuple(c) for i, c in children.items()}

    @classmethod
    def from_specs(
        cls,
        specs: Sequence[BodySpec],
        reference_year: Optional[int] = None,
        day_of_year: float = 0.0,
    ) -> "BodyCatalog":
        """
        Flatten nested body definitions into a catalog.

        Parameters
        ----------
        specs : sequence of BodySpec
            Top-level bodies; moons are nested in ``BodySpec.moons``
        reference_year : int, optional
            Calendar year used to resolve base angles from mean-longitude
            constants. If None, literal start angles are used for all bodies.
        day_of_year : float
            Day of the reference year matching elapsed time zero

        Returns
        -------
        BodyCatalog
            The validated catalog
        """
        bodies: List[OrbitalBody] = []

        def add(spec: BodySpec, parent: Optional[int]) -> None:
            _check_finite(spec.name, "start angle", spec.start_angle)
            if reference_year is not None and spec.mean_longitude is not None:
                base_angle = base_angle_from_elements(spec.mean_longitude, reference_year, day_of_year)
            else:
                base_angle = spec.start_angle

            index = len(bodies)
            bodies.append(
                OrbitalBody(
                    name=spec.name,
                    distance=spec.distance,
                    radius=spec.radius,
                    orbital_period_years=spec.orbital_period_years,
                    rotation_period_days=spec.rotation_period_days,
                    base_angle=base_angle,
                    parent=parent,
                    has_rings=spec.has_rings,
                    retrograde_orbit=spec.retrograde_orbit,
                    color=spec.color,
                    kind=spec.kind,
                )
            )
            for moon in spec.moons:
                add(moon, index)

        # The star is the parent of every other top-level body
        root_specs = [s for s in specs if s.distance == 0]
        if len(root_specs) != 1:
            raise CatalogError(f"Catalog must have exactly one root body, found {len(root_specs)}")

        add(root_specs[0], None)
        for spec in specs:
            if spec is not root_specs[0]:
                add(spec, 0)

        catalog = cls(bodies)
        logger.info(
            "Loaded body catalog: %d bodies (reference year %s)",
            len(catalog),
            reference_year if reference_year is not None else "literal angles",
        )
        return catalog

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[OrbitalBody]:
        return iter(self._bodies)

    def __getitem__(self, index: int) -> OrbitalBody:
        return self._bodies[index]

    @property
    def bodies(self) -> Tuple[OrbitalBody, ...]:
        """All bodies, parents before children."""
        return self._bodies

    @property
    def root_index(self) -> int:
        """Index of the central star."""
        return self._root_index

    @property
    def root(self) -> OrbitalBody:
        """The central star."""
        return self._bodies[self._root_index]

    @property
    def names(self) -> List[str]:
        """Body names in catalog order."""
        return [body.name for body in self._bodies]

    def index_of(self, name: str) -> Optional[int]:
        """Index of a body by case-insensitive name, or None."""
        return self._index_by_name.get(name.strip().casefold())

    def get(self, name: str) -> Optional[OrbitalBody]:
        """Body by case-insensitive name, or None."""
        index = self.index_of(name)
        return None if index is None else self._bodies[index]

    def children_of(self, index: int) -> Tuple[int, ...]:
        """Indices of the bodies orbiting ``index``, in catalog order."""
        return self._children[index]

    def depth(self, index: int) -> int:
        """Number of parent links between ``index`` and the root."""
        depth = 0
        parent = self._bodies[index].parent
        while parent is not None:
            depth += 1
            parent = self._bodies[parent].parent
        return depth

    def search(self, query: str) -> List[OrbitalBody]:
        """Bodies whose name contains ``query`` (case-insensitive)."""
        needle = query.strip().casefold()
        return [body for body in self._bodies if needle in body.name.casefold()]

    @property
    def longest_period_days(self) -> float:
        """Longest orbital period in the catalog (days)."""
        return max((body.orbit.orbital_period_days for body in self._bodies), default=0.0)

    def __repr__(self) -> str:
        return f"BodyCatalog({len(self)} bodies, root={self.root.name})"
