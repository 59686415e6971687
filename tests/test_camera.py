#!/usr/bin/env python3
"""
Tests for the orbit camera.

These tests verify:
1. Spherical coordinates map to a y-up world position around the focus
2. Navigation targets are reproduced exactly after a jump
3. Smooth navigation converges on the target
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

# The visualization package imports pygame on load
pytest.importorskip("pygame")

from simulation.navigation import CameraTarget, root_camera_target
from visualization.camera import Camera


pytestmark = pytest.mark.requires_pygame


class TestCameraGeometry:
    """Tests for camera position and orientation."""

    def test_default_matches_root_view(self):
        camera = Camera()
        np.testing.assert_allclose(camera.get_position(), root_camera_target().eye, atol=1e-9)

    def test_position_relative_to_focus(self):
        camera = Camera(theta=0.0, phi=0.0, distance=5.0)
        camera.focus = np.array([1.0, 2.0, 3.0])
        np.testing.assert_allclose(camera.get_position(), [6.0, 2.0, 3.0])

    def test_view_vectors_orthonormal(self):
        camera = Camera(theta=1.0, phi=0.4, distance=10.0)
        forward, up, right = camera.get_view_matrix()
        for v in (forward, up, right):
            assert np.linalg.norm(v) == pytest.approx(1.0)
        assert np.dot(forward, up) == pytest.approx(0.0, abs=1e-12)
        assert np.dot(forward, right) == pytest.approx(0.0, abs=1e-12)
        assert up[1] > 0

    def test_forward_points_at_focus(self):
        camera = Camera(theta=2.0, phi=-0.3, distance=4.0)
        forward, _, _ = camera.get_view_matrix()
        expected = camera.focus - camera.get_position()
        np.testing.assert_allclose(forward, expected / np.linalg.norm(expected))


class TestCameraControls:
    """Tests for manual controls."""

    def test_rotation_wraps(self):
        camera = Camera(theta=0.01, rotation_speed=0.03)
        camera.rotate_left()
        assert 0.0 <= camera.theta < 2 * math.pi

    def test_elevation_clamped(self):
        camera = Camera(rotation_speed=1.0)
        for _ in range(5):
            camera.rotate_up()
        assert camera.phi < math.pi / 2
        for _ in range(10):
            camera.rotate_down()
        assert camera.phi > -math.pi / 2

    def test_zoom_limits(self):
        camera = Camera(distance=1.0, min_distance=0.5, max_distance=2.0)
        for _ in range(100):
            camera.zoom_in()
        assert camera.distance == pytest.approx(0.5)
        for _ in range(100):
            camera.zoom_out()
        assert camera.distance == pytest.approx(2.0)


class TestCameraNavigation:
    """Tests for moving to a CameraTarget."""

    def test_jump_reproduces_target(self):
        camera = Camera()
        target = CameraTarget(eye=(12.0, 1.0, -3.0), look_at=(10.0, 0.0, -2.0))
        camera.set_look_at(target, smooth=False)
        np.testing.assert_allclose(camera.focus, target.look_at)
        np.testing.assert_allclose(camera.get_position(), target.eye, atol=1e-9)
        assert not camera.is_moving

    def test_smooth_converges(self):
        camera = Camera()
        target = CameraTarget(eye=(55.0, 2.0, 5.0), look_at=(52.0, 0.0, 4.0))
        camera.set_look_at(target, smooth=True)
        assert camera.is_moving

        for _ in range(600):
            camera.update(1 / 60)

        assert not camera.is_moving
        np.testing.assert_allclose(camera.get_position(), target.eye, atol=1e-6)

    def test_update_without_target_is_noop(self):
        camera = Camera()
        before = camera.get_position()
        camera.update(0.5)
        np.testing.assert_array_equal(camera.get_position(), before)

    def test_manual_control_cancels_animation(self):
        camera = Camera()
        camera.set_look_at(CameraTarget(eye=(0.0, 0.0, 20.0), look_at=(0.0, 0.0, 0.0)))
        camera.rotate_right()
        assert not camera.is_moving
