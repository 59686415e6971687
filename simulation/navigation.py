#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Navigation Module

Derives camera eye / look-at pairs for navigation requests. The result is
a one-shot target; animating the camera toward it is the camera's job.

All functions here are pure: they read the catalog and a time value and
never touch the simulation clock.
"""

import math
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .body import BodyCatalog
from .composition import absolute_position
from .targets import PointTarget, PointTargetCatalog

logger = logging.getLogger(__name__)

# Framing of the central star
ROOT_VIEW_DISTANCE = 8.0
ROOT_VIEW_AZIMUTH = math.pi / 4
ROOT_VIEW_HEIGHT_RATIO = 0.3

# Framing of orbiting bodies
BODY_DISTANCE_FACTOR = 4.0
BODY_DISTANCE_PADDING = 2.0
BODY_AZIMUTH_OFFSET = math.pi / 6
BODY_HEIGHT_FACTOR = 0.8

# Distance used when flying toward a sky direction
DIRECTION_VIEW_DISTANCE = 10.0

# Scene unit conversions for the distance readout
SCENE_UNITS_TO_AU = 0.1
AU_TO_LIGHT_YEARS = 0.0000158125

Vector3 = Tuple[float, float, float]


def _as_tuple(vector: Sequence[float]) -> Vector3:
    return (float(vector[0]), float(vector[1]), float(vector[2]))


@dataclass(frozen=True)
class CameraTarget:
    """
    Where the camera should end up.

    Attributes
    ----------
    eye : tuple
        Camera position (x, y, z)
    look_at : tuple
        Point the camera faces (x, y, z)
    """
    eye: Vector3
    look_at: Vector3

    @property
    def eye_array(self) -> np.ndarray:
        return np.array(self.eye)

    @property
    def look_at_array(self) -> np.ndarray:
        return np.array(self.look_at)

    @property
    def view_distance(self) -> float:
        """Distance between eye and look-at point."""
        return float(np.linalg.norm(self.eye_array - self.look_at_array))


@dataclass(frozen=True)
class NavigationResult:
    """
    Outcome of a navigation request.

    Attributes
    ----------
    name : str
        The requested name
    found : bool
        Whether the name resolved to a body or point target
    target : CameraTarget, optional
        Camera target when found
    kind : str, optional
        "body" or "point" when found
    """
    name: str
    found: bool
    target: Optional[CameraTarget] = None
    kind: Optional[str] = None


@dataclass(frozen=True)
class DistanceReadout:
    """Distance from the observer expressed in several units."""
    scene_units: float
    au: float
    light_years: float


def root_camera_target() -> CameraTarget:
    """Fixed oblique view of the central star."""
    d = ROOT_VIEW_DISTANCE
    eye = (
        d * math.cos(ROOT_VIEW_AZIMUTH),
        d * ROOT_VIEW_HEIGHT_RATIO,
        d * math.sin(ROOT_VIEW_AZIMUTH),
    )
    return CameraTarget(eye=eye, look_at=(0.0, 0.0, 0.0))


def camera_target_for_body(catalog: BodyCatalog, index: int, elapsed_days: float) -> CameraTarget:
    """
    Camera target framing a body at its current position.

    The eye sits slightly ahead of the body along its orbit, above the
    orbital plane, at a distance that grows with the body's radius.

    Parameters
    ----------
    catalog : BodyCatalog
        The body catalog
    index : int
        Index of the body to frame
    elapsed_days : float
        Simulated time (days)

    Returns
    -------
    CameraTarget
        Eye and look-at pair
    """
    body = catalog[index]
    if body.is_root:
        return root_camera_target()

    body_pos = absolute_position(catalog, index, elapsed_days)
    camera_distance = body.radius * BODY_DISTANCE_FACTOR + BODY_DISTANCE_PADDING
    azimuth = body.orbit.orbital_angle(elapsed_days) + BODY_AZIMUTH_OFFSET
    height = body.radius * BODY_HEIGHT_FACTOR

    eye = body_pos + np.array([
        camera_distance * math.cos(azimuth),
        height,
        camera_distance * math.sin(azimuth),
    ])
    return CameraTarget(eye=_as_tuple(eye), look_at=_as_tuple(body_pos))


def resolve_direction_target(
    direction: Sequence[float],
    distance: float = DIRECTION_VIEW_DISTANCE,
) -> CameraTarget:
    """
    Place the camera ``distance`` units along ``direction``, facing the origin.

    A zero vector is treated as unit length so the result stays finite.
    """
    vector = np.asarray(direction, dtype=float)
    length = float(np.linalg.norm(vector)) or 1.0
    eye = vector / length * distance
    return CameraTarget(eye=_as_tuple(eye), look_at=(0.0, 0.0, 0.0))


def camera_target_for_point(target: PointTarget, distance: float = DIRECTION_VIEW_DISTANCE) -> CameraTarget:
    """Camera target toward a point target's sky direction."""
    return resolve_direction_target(target.direction, distance)


def resolve_camera_target(
    catalog: BodyCatalog,
    name: str,
    elapsed_days: float,
    point_targets: Optional[PointTargetCatalog] = None,
) -> NavigationResult:
    """
    Resolve a navigation request by name.

    Bodies are matched first, then point targets by id or name. An
    unknown name is not an error: the result has ``found=False`` and the
    caller keeps its current camera.
    """
    index = catalog.index_of(name)
    if index is not None:
        return NavigationResult(
            name=name,
            found=True,
            target=camera_target_for_body(catalog, index, elapsed_days),
            kind="body",
        )

    if point_targets is not None:
        point = point_targets.find(name)
        if point is not None:
            return NavigationResult(
                name=name,
                found=True,
                target=camera_target_for_point(point),
                kind="point",
            )

    logger.warning("Navigation target not found: %r", name)
    return NavigationResult(name=name, found=False)


def observer_distance(eye: Sequence[float], point: Sequence[float]) -> DistanceReadout:
    """
    Distance from the camera to a point.

    Parameters
    ----------
    eye : sequence of float
        Camera position
    point : sequence of float
        Observed point, e.g. a body's current position

    Returns
    -------
    DistanceReadout
        Distance in scene units, AU and light years
    """
    scene_units = float(np.linalg.norm(np.asarray(eye, dtype=float) - np.asarray(point, dtype=float)))
    au = scene_units * SCENE_UNITS_TO_AU
    return DistanceReadout(scene_units=scene_units, au=au, light_years=au * AU_TO_LIGHT_YEARS)
