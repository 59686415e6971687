#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Camera Module for the Orrery

Provides a 3D orbit camera with spherical coordinates around a focus
point. The scene is y-up with orbits in the x-z plane.
"""

import math
import numpy as np
from typing import Optional, Tuple

from simulation.navigation import CameraTarget

# Keep the camera off the poles so the up vector stays defined
PHI_LIMIT = math.pi / 2 - 0.01


class Camera:
    """
    3D camera with spherical coordinate controls.

    The camera orbits a focus point and always looks toward it.
    Position relative to the focus is controlled by:
    - theta: azimuth in the orbital (x-z) plane
    - phi: elevation above the orbital plane
    - distance: distance from the focus

    Navigation sets a goal (focus and spherical coordinates) that
    ``update`` approaches a little every frame.

    Parameters
    ----------
    theta : float
        Initial azimuth in radians (default π/4)
    phi : float
        Initial elevation in radians (default 0.29)
    distance : float
        Initial distance from the focus (default 8.35)
    min_distance : float
        Minimum zoom distance (default 0.3)
    max_distance : float
        Maximum zoom distance (default 600.0)
    rotation_speed : float
        Speed of rotation in radians per input (default 0.03)
    zoom_factor : float
        Relative zoom change per input (default 0.05)
    smoothing : float
        Fraction of the remaining way covered per second (default 3.0)

    Attributes
    ----------
    focus : np.ndarray
        Point the camera looks at
    theta : float
        Current azimuth (radians)
    phi : float
        Current elevation (radians)
    distance : float
        Current distance from the focus
    """

    def __init__(
        self,
        theta: float = math.pi / 4,
        phi: float = math.atan2(2.4, 8.0),
        distance: float = math.hypot(8.0, 2.4),
        min_distance: float = 0.3,
        max_distance: float = 600.0,
        rotation_speed: float = 0.03,
        zoom_factor: float = 0.05,
        smoothing: float = 3.0
    ):
        self.focus = np.zeros(3)
        self.theta = theta
        self.phi = phi
        self.distance = distance
        self.min_distance = min_distance
        self.max_distance = max_distance
        self.rotation_speed = rotation_speed
        self.zoom_factor = zoom_factor
        self.smoothing = smoothing

        self._goal: Optional[Tuple[np.ndarray, float, float, float]] = None

    def get_position(self) -> np.ndarray:
        """
        Get camera position in Cartesian coordinates.

        Returns
        -------
        np.ndarray
            Position vector [x, y, z]
        """
        offset = np.array([
            self.distance * math.cos(self.phi) * math.cos(self.theta),
            self.distance * math.sin(self.phi),
            self.distance * math.cos(self.phi) * math.sin(self.theta),
        ])
        return self.focus + offset

    def get_view_matrix(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Get the view direction and up/right vectors.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            (forward, up, right) unit vectors
        """
        forward = self.focus - self.get_position()
        forward = forward / np.linalg.norm(forward)

        world_up = np.array([0.0, 1.0, 0.0])
        right = np.cross(forward, world_up)

        if np.linalg.norm(right) < 0.001:
            # Camera is looking straight up or down
            right = np.array([1.0, 0.0, 0.0])
        else:
            right = right / np.linalg.norm(right)

        up = np.cross(right, forward)
        up = up / np.linalg.norm(up)

        return forward, up, right

    def rotate_left(self) -> None:
        """Rotate camera left (decrease theta)."""
        self._goal = None
        self.theta = (self.theta - self.rotation_speed) % (2 * math.pi)

    def rotate_right(self) -> None:
        """Rotate camera right (increase theta)."""
        self._goal = None
        self.theta = (self.theta + self.rotation_speed) % (2 * math.pi)

    def rotate_up(self) -> None:
        """Rotate camera up (increase phi)."""
        self._goal = None
        self.phi = min(PHI_LIMIT, self.phi + self.rotation_speed)

    def rotate_down(self) -> None:
        """Rotate camera down (decrease phi)."""
        self._goal = None
        self.phi = max(-PHI_LIMIT, self.phi - self.rotation_speed)

    def zoom_in(self) -> None:
        """Zoom camera in (decrease distance)."""
        self._goal = None
        self.distance = max(self.min_distance, self.distance * (1 - self.zoom_factor))

    def zoom_out(self) -> None:
        """Zoom camera out (increase distance)."""
        self._goal = None
        self.distance = min(self.max_distance, self.distance * (1 + self.zoom_factor))

    def _spherical_from(self, eye: np.ndarray, look_at: np.ndarray) -> Tuple[float, float, float]:
        offset = eye - look_at
        horizontal = math.hypot(offset[0], offset[2])
        distance = float(np.linalg.norm(offset))
        theta = math.atan2(offset[2], offset[0]) % (2 * math.pi)
        phi = max(-PHI_LIMIT, min(PHI_LIMIT, math.atan2(offset[1], horizontal)))
        distance = max(self.min_distance, min(self.max_distance, distance))
        return theta, phi, distance

    def set_look_at(self, target: CameraTarget, smooth: bool = True) -> None:
        """
        Move the camera to a navigation target.

        Parameters
        ----------
        target : CameraTarget
            Eye and look-at pair
        smooth : bool
            Animate toward the target with ``update`` instead of jumping
        """
        look_at = target.look_at_array
        theta, phi, distance = self._spherical_from(target.eye_array, look_at)

        if smooth:
            self._goal = (look_at, theta, phi, distance)
            return

        self._goal = None
        self.focus = look_at
        self.theta = theta
        self.phi = phi
        self.distance = distance

    @property
    def is_moving(self) -> bool:
        """True while approaching a navigation target."""
        return self._goal is not None

    def update(self, dt: float) -> None:
        """
        Advance a pending navigation animation.

        Parameters
        ----------
        dt : float
            Real seconds since the previous frame
        """
        if self._goal is None:
            return

        focus, theta, phi, distance = self._goal
        alpha = min(1.0, dt * self.smoothing)

        # Shortest way around the azimuth
        dtheta = (theta - self.theta + math.pi) % (2 * math.pi) - math.pi

        self.focus = self.focus + (focus - self.focus) * alpha
        self.theta = (self.theta + dtheta * alpha) % (2 * math.pi)
        self.phi += (phi - self.phi) * alpha
        self.distance += (distance - self.distance) * alpha

        if np.linalg.norm(focus - self.focus) < 1e-3 and abs(distance - self.distance) < 1e-3:
            self.focus = focus
            self.theta = theta
            self.phi = phi
            self.distance = distance
            self._goal = None

    def set_position_spherical(
        self,
        theta: float,
        phi: float,
        distance: float
    ) -> None:
        """
        Set camera position using spherical coordinates.

        Parameters
        ----------
        theta : float
            Azimuth in radians
        phi : float
            Elevation in radians
        distance : float
            Distance from the focus
        """
        self._goal = None
        self.theta = theta % (2 * math.pi)
        self.phi = max(-PHI_LIMIT, min(PHI_LIMIT, phi))
        self.distance = max(self.min_distance, min(self.max_distance, distance))

    @property
    def theta_degrees(self) -> float:
        """Current azimuth in degrees."""
        return math.degrees(self.theta) % 360

    @property
    def phi_degrees(self) -> float:
        """Current elevation in degrees."""
        return math.degrees(self.phi)

    def __repr__(self) -> str:
        return (
            f"Camera(θ={self.theta_degrees:.1f}°, "
            f"φ={self.phi_degrees:.1f}°, "
            f"dist={self.distance:.2f})"
        )
