#!/usr/bin/env python3
"""
Renderer Module

Pygame-based rendering for the orrery.
Draws the sun, planets, moons, orbit paths, rings, point target markers
and the information panel.
"""

import math
import numpy as np
from typing import List, Tuple, Optional, Sequence
import pygame

from simulation.body import OrbitalBody
from simulation.navigation import DistanceReadout
from simulation.simulation import SystemSnapshot
from simulation.targets import PointTarget

from .camera import Camera


class Colors:
    """Default color palette."""

    BACKGROUND = (5, 5, 15)
    TEXT = (220, 220, 220)
    TEXT_DIM = (160, 160, 160)
    TEXT_HIGHLIGHT = (255, 210, 90)

    # Orbit colors
    PLANET_ORBIT = (70, 70, 90)
    MOON_ORBIT = (45, 45, 60)

    RING = (200, 180, 140)
    SPIN_MARKER = (255, 255, 255)

    # Point targets
    TARGET_CONFIRMED = (80, 220, 120)
    TARGET_CANDIDATE = (230, 160, 60)


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Convert '#RRGGBB' to an (r, g, b) tuple."""
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {value!r}")
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


def interpolate_color(
    color1: Tuple[int, int, int], color2: Tuple[int, int, int], t: float
) -> Tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


class Renderer:
    """
    Handles all rendering operations.

    Parameters
    ----------
    screen : pygame.Surface
        Target surface.
    orbit_points : int
        Points to sample when drawing orbits.
    min_body_pixels : int
        Smallest on-screen radius of a body (pixels).
    marker_size : int
        Point target marker size (pixels).
    """

    def __init__(
        self,
        screen: pygame.Surface,
        orbit_points: int = 180,
        min_body_pixels: int = 2,
        marker_size: int = 6,
    ):
        self.screen = screen
        self.screen_width = screen.get_width()
        self.screen_height = screen.get_height()

        self.orbit_points = orbit_points
        self.min_body_pixels = min_body_pixels
        self.marker_size = marker_size

    def clear(self, color: Tuple[int, int, int] = Colors.BACKGROUND) -> None:
        """Clear screen with background color."""
        self.screen.fill(color)

    def project_point(
        self, point_3d: np.ndarray, camera: Camera
    ) -> Tuple[Optional[Tuple[float, float]], float]:
        """
        Project 3D point to 2D screen coordinates.

        Returns
        -------
        tuple
            ((screen_x, screen_y), depth) or (None, depth) if behind camera.
        """
        cam_pos = camera.get_position()
        forward, up, right = camera.get_view_matrix()

        to_point = np.asarray(point_3d, dtype=float) - cam_pos
        depth = np.dot(to_point, forward)

        if depth <= 0.05:
            return None, depth

        fov_scale = self.screen_height / 2
        x_proj = np.dot(to_point, right) / depth * fov_scale
        y_proj = -np.dot(to_point, up) / depth * fov_scale

        screen_x = self.screen_width / 2 + x_proj
        screen_y = self.screen_height / 2 + y_proj

        return (screen_x, screen_y), depth

    def projected_radius(self, radius: float, depth: float) -> float:
        """Apparent radius of a sphere on screen."""
        fov_scale = self.screen_height / 2
        return max(self.min_body_pixels, radius / depth * fov_scale)

    def _on_screen(self, point: Tuple[float, float], margin: float = 0.0) -> bool:
        return (
            -margin <= point[0] <= self.screen_width + margin
            and -margin <= point[1] <= self.screen_height + margin
        )

    def draw_orbit(
        self,
        camera: Camera,
        center: Sequence[float],
        radius: float,
        color: Tuple[int, int, int] = Colors.PLANET_ORBIT,
    ) -> None:
        """Draw a circular orbit in the x-z plane around ``center``."""
        center = np.asarray(center, dtype=float)
        points = []
        for i in range(self.orbit_points + 1):
            angle = 2 * math.pi * i / self.orbit_points
            points.append(center + np.array([radius * math.cos(angle), 0.0, radius * math.sin(angle)]))

        self._draw_space_line(camera, points, color, 1)

    def _draw_space_line(
        self,
        camera: Camera,
        points: List[np.ndarray],
        color: Tuple[int, int, int],
        width: int,
    ) -> None:
        """Draw a polyline in space, skipping segments behind the camera."""
        projected = [self.project_point(p, camera)[0] for p in points]

        for proj1, proj2 in zip(projected, projected[1:]):
            if proj1 is None or proj2 is None:
                continue
            if not (self._on_screen(proj1, 2000) and self._on_screen(proj2, 2000)):
                continue

            pygame.draw.line(
                self.screen,
                color,
                (int(proj1[0]), int(proj1[1])),
                (int(proj2[0]), int(proj2[1])),
                width,
            )

    def draw_orbits(self, camera: Camera, bodies: Sequence[OrbitalBody], snapshot: SystemSnapshot) -> None:
        """Draw the orbit path of every orbiting body around its parent's current position."""
        for body in bodies:
            if body.parent is None:
                continue
            parent = bodies[body.parent]
            center = snapshot.bodies[parent.name].position
            color = Colors.MOON_ORBIT if parent.parent is not None else Colors.PLANET_ORBIT
            self.draw_orbit(camera, center, body.distance, color)

    def draw_body(
        self,
        camera: Camera,
        body: OrbitalBody,
        position: Sequence[float],
        rotation_angle: float,
    ) -> Optional[Tuple[float, float]]:
        """
        Draw a body as a shaded disc with a spin marker.

        Returns
        -------
        tuple or None
            Screen position, or None if not visible.
        """
        proj, depth = self.project_point(position, camera)
        if proj is None:
            return None

        radius = self.projected_radius(body.radius, depth)
        if not self._on_screen(proj, radius):
            return None

        base = hex_to_rgb(body.color)
        highlight = interpolate_color(base, (255, 255, 255), 0.4)

        if radius < 4:
            pygame.draw.circle(self.screen, base, (int(proj[0]), int(proj[1])), int(radius))
            return proj

        # Concentric gradient toward a lighter center
        size = int(radius * 2) + 4
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        center = (int(radius) + 2, int(radius) + 2)
        for i in range(int(radius), 0, -2):
            factor = i / radius
            r, g, b = interpolate_color(base, highlight, 1 - factor)
            pygame.draw.circle(surface, (r, g, b, 255), center, i)
        self.screen.blit(surface, (int(proj[0] - radius - 2), int(proj[1] - radius - 2)))

        # Spin marker: a meridian dot rotating with the body
        marker = np.asarray(position, dtype=float) + body.radius * np.array(
            [math.cos(rotation_angle), 0.0, math.sin(rotation_angle)]
        )
        marker_proj, _ = self.project_point(marker, camera)
        if marker_proj is not None:
            pygame.draw.line(
                self.screen,
                Colors.SPIN_MARKER,
                (int(proj[0]), int(proj[1])),
                (int(marker_proj[0]), int(marker_proj[1])),
                1,
            )

        return proj

    def draw_rings(self, camera: Camera, body: OrbitalBody, position: Sequence[float]) -> None:
        """Draw a flat ring system around a body."""
        center = np.asarray(position, dtype=float)
        for scale in (1.4, 1.7, 2.0):
            points = []
            for i in range(73):
                angle = 2 * math.pi * i / 72
                points.append(center + body.radius * scale * np.array([math.cos(angle), 0.0, math.sin(angle)]))
            self._draw_space_line(camera, points, Colors.RING, 1)

    def draw_system(
        self,
        camera: Camera,
        bodies: Sequence[OrbitalBody],
        snapshot: SystemSnapshot,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        """Draw every body, far to near, with optional labels."""
        cam_pos = camera.get_position()
        order = sorted(
            bodies,
            key=lambda b: -np.linalg.norm(np.asarray(snapshot.bodies[b.name].position) - cam_pos),
        )

        for body in order:
            state = snapshot.bodies[body.name]
            if body.has_rings:
                self.draw_rings(camera, body, state.position)
            proj = self.draw_body(camera, body, state.position, state.rotation_angle)

            if proj is not None and font is not None and body.kind != "moon":
                self.draw_text(body.name, (int(proj[0]) + 8, int(proj[1]) - 8), font, Colors.TEXT_DIM)

    def draw_point_targets(
        self,
        camera: Camera,
        targets: Sequence[PointTarget],
        font: Optional[pygame.font.Font] = None,
        distance: float = 1500.0,
    ) -> None:
        """Draw sky markers for point targets."""
        for target in targets:
            proj, _ = self.project_point(target.position(distance), camera)
            if proj is None or not self._on_screen(proj):
                continue

            color = Colors.TARGET_CONFIRMED if target.confirmed else Colors.TARGET_CANDIDATE
            x, y = int(proj[0]), int(proj[1])
            s = self.marker_size
            pygame.draw.line(self.screen, color, (x - s, y), (x + s, y), 1)
            pygame.draw.line(self.screen, color, (x, y - s), (x, y + s), 1)

            if font is not None:
                self.draw_text(target.name, (x + s + 2, y - s), font, color)

    def draw_text(
        self,
        text: str,
        position: Tuple[int, int],
        font: pygame.font.Font,
        color: Tuple[int, int, int] = Colors.TEXT,
    ) -> int:
        """Draw text and return height."""
        surface = font.render(text, True, color)
        self.screen.blit(surface, position)
        return surface.get_height()

    def draw_info_panel(
        self,
        camera: Camera,
        simulation,
        font: pygame.font.Font,
        selected: Optional[str] = None,
        readout: Optional[DistanceReadout] = None,
        message: Optional[str] = None,
    ) -> None:
        """Draw information panel."""
        clock = simulation.clock

        info_lines = [
            f"{clock.calendar}",
            f"Speed: {clock.speed_multiplier:.2f} days/s" + (" [PAUSED]" if clock.paused else ""),
            "",
            f"Camera Azimuth: {camera.theta_degrees:.1f}°",
            f"Camera Elevation: {camera.phi_degrees:.1f}°",
            f"Zoom: {camera.distance:.2f}",
        ]

        if selected is not None:
            info_lines += ["", f"Target: {selected}"]
        if readout is not None:
            info_lines += [
                f"  Distance: {readout.au:.3f} AU",
                f"  ({readout.light_years:.3e} ly)",
            ]

        info_lines += [
            "",
            "Controls:",
            "← → : Rotate azimuth",
            "↑ ↓ : Rotate elevation",
            "+/- : Zoom in/out",
            "[ ] : Speed",
            "PgUp/PgDn : ±1 year",
            "TAB : Next body",
            "0-9 : Sun / planets",
            "T : Next point target",
            "SPACE : Pause/Resume",
            "R : Reset",
            "ESC : Quit",
        ]

        y = 10
        for i, line in enumerate(info_lines):
            color = Colors.TEXT_HIGHLIGHT if i == 0 else Colors.TEXT
            y += self.draw_text(line, (10, y), font, color) + 2

        if message:
            self.draw_text(message, (10, self.screen_height - 30), font, Colors.TEXT_HIGHLIGHT)
