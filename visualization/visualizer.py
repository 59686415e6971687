#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Visualizer Module for the Orrery

Provides a Pygame-based interactive view of the solar system.
The visualizer owns the frame loop: every frame it advances the
simulation clock by the real frame time, then draws the new snapshot.
"""

import logging
from typing import Optional

import pygame

from simulation import (
    Simulation,
    SimulationConfig,
    observer_distance,
)
from simulation.navigation import DistanceReadout
from .camera import Camera
from .renderer import Renderer

logger = logging.getLogger(__name__)

# Keys 0-9 jump to the first ten top-level bodies (Sun, Mercury, ...)
NUMBER_KEYS = [getattr(pygame, f"K_{i}") for i in range(10)]


class Visualizer:
    """
    Interactive visualization of the orrery.

    The visualizer creates a Pygame window and renders a 3D view of the
    system. Users can control the camera with keyboard inputs, fly to
    bodies and point targets, and control simulation playback.

    Parameters
    ----------
    width : int
        Window width in pixels (default 1200)
    height : int
        Window height in pixels (default 800)
    title : str
        Window title

    Attributes
    ----------
    screen : pygame.Surface
        The Pygame display surface
    camera : Camera
        The 3D camera
    renderer : Renderer
        The rendering engine
    simulation : Simulation
        The orrery simulation
    selected : str, optional
        Name of the last navigation target
    running : bool
        Whether the visualizer is running
    """

    def __init__(
        self,
        width: int = 1200,
        height: int = 800,
        title: str = "Orrery"
    ):
        # Initialize Pygame
        pygame.init()

        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        # Create camera and renderer
        self.camera = Camera()
        self.renderer = Renderer(self.screen)

        # Simulation state
        self.simulation: Optional[Simulation] = None
        self.selected: Optional[str] = None
        self.message: Optional[str] = None
        self.running = False

        self._body_cursor = 0
        self._target_cursor = -1

        # Pygame resources
        self.frame_clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('Arial', 16)

    def set_simulation(self, simulation: Simulation) -> None:
        """
        Set the simulation to visualize.

        Parameters
        ----------
        simulation : Simulation
            An initialized simulation
        """
        self.simulation = simulation

    def create_simulation(self, **kwargs) -> Simulation:
        """
        Create and set a new simulation.

        Parameters
        ----------
        **kwargs
            SimulationConfig fields

        Returns
        -------
        Simulation
            The created, initialized simulation
        """
        config = SimulationConfig()

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)

        self.simulation = Simulation(config)
        self.simulation.initialize()

        return self.simulation

    def navigate(self, name: str, smooth: bool = True) -> bool:
        """
        Fly the camera to a body or point target.

        Unknown names leave the camera where it is.

        Returns
        -------
        bool
            Whether the target was found
        """
        if self.simulation is None:
            return False

        result = self.simulation.navigate(name)
        if not result.found:
            self.message = f"Not found: {name}"
            return False

        self.camera.set_look_at(result.target, smooth=smooth)
        self.selected = name
        self.message = None
        logger.debug("Navigating to %s (%s)", name, result.kind)
        return True

    def _handle_events(self) -> None:
        """Handle Pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        """Handle key press events."""
        if key == pygame.K_ESCAPE:
            self.running = False
            return

        if self.simulation is None:
            return

        clock = self.simulation.clock

        if key == pygame.K_SPACE:
            clock.toggle_pause()

        elif key == pygame.K_r:
            self.simulation.reset()
            self.navigate(self.simulation.catalog.root.name)

        elif key == pygame.K_LEFTBRACKET:
            clock.set_speed(clock.speed_multiplier / 2)
            print(f"Speed: {clock.speed_multiplier} days/s")

        elif key == pygame.K_RIGHTBRACKET:
            clock.set_speed(clock.speed_multiplier * 2)
            print(f"Speed: {clock.speed_multiplier} days/s")

        elif key == pygame.K_PAGEUP:
            clock.shift_years(1)

        elif key == pygame.K_PAGEDOWN:
            clock.shift_years(-1)

        elif key == pygame.K_TAB:
            catalog = self.simulation.catalog
            self._body_cursor = (self._body_cursor + 1) % len(catalog)
            self.navigate(catalog[self._body_cursor].name)

        elif key == pygame.K_t:
            targets = list(self.simulation.point_targets)
            if targets:
                self._target_cursor = (self._target_cursor + 1) % len(targets)
                self.navigate(targets[self._target_cursor].name)

        elif key in NUMBER_KEYS:
            catalog = self.simulation.catalog
            top_level = [catalog.root_index] + list(catalog.children_of(catalog.root_index))
            slot = NUMBER_KEYS.index(key)
            if slot < len(top_level):
                self._body_cursor = top_level[slot]
                self.navigate(catalog[self._body_cursor].name)

    def _handle_continuous_keys(self) -> None:
        """Handle continuous key presses for camera control."""
        keys = pygame.key.get_pressed()

        if keys[pygame.K_LEFT]:
            self.camera.rotate_left()
        if keys[pygame.K_RIGHT]:
            self.camera.rotate_right()
        if keys[pygame.K_UP]:
            self.camera.rotate_up()
        if keys[pygame.K_DOWN]:
            self.camera.rotate_down()

        if keys[pygame.K_PLUS] or keys[pygame.K_EQUALS] or keys[pygame.K_KP_PLUS]:
            self.camera.zoom_in()
        if keys[pygame.K_MINUS] or keys[pygame.K_KP_MINUS]:
            self.camera.zoom_out()

    def _update(self, dt: float) -> None:
        """
        Advance the simulation clock and the camera animation.

        Parameters
        ----------
        dt : float
            Real time delta in seconds
        """
        self.camera.update(dt)

        if self.simulation is not None:
            self.simulation.step(dt)

    def _selected_readout(self) -> Optional[DistanceReadout]:
        if self.selected is None:
            return None

        body = self.simulation.get_body(self.selected)
        if body is not None:
            position = self.simulation.state.position_of(body.name)
        else:
            target = self.simulation.point_targets.find(self.selected)
            if target is None:
                return None
            position = target.position()
        return observer_distance(self.camera.get_position(), position)

    def _render(self) -> None:
        """Render the current frame."""
        self.renderer.clear()

        if self.simulation is None:
            # Draw message if no simulation
            self.renderer.draw_text(
                "No simulation loaded. Call create_simulation() first.",
                (self.width // 2 - 200, self.height // 2),
                self.font
            )
            pygame.display.flip()
            return

        bodies = self.simulation.catalog.bodies
        snapshot = self.simulation.state

        self.renderer.draw_point_targets(self.camera, self.simulation.point_targets, self.font)
        self.renderer.draw_orbits(self.camera, bodies, snapshot)
        self.renderer.draw_system(self.camera, bodies, snapshot, self.font)

        self.renderer.draw_info_panel(
            self.camera,
            self.simulation,
            self.font,
            selected=self.selected,
            readout=self._selected_readout(),
            message=self.message,
        )

        pygame.display.flip()

    def run(self) -> None:
        """
        Run the visualization main loop.

        This blocks until the user closes the window or presses ESC.
        """
        self.running = True

        while self.running:
            if not self.step():
                break

        pygame.quit()

    def step(self) -> bool:
        """
        Perform a single visualization step.

        This is useful for external control of the visualization loop.

        Returns
        -------
        bool
            False if the visualizer should stop, True otherwise
        """
        dt = self.frame_clock.tick(60) / 1000.0

        self._handle_events()

        if not self.running:
            return False

        self._handle_continuous_keys()
        self._update(dt)
        self._render()

        return True

    def close(self) -> None:
        """Close the visualizer and clean up resources."""
        pygame.quit()


def run_visualizer(
    simulation: Optional[Simulation] = None,
    navigate_to: Optional[str] = None,
    width: int = 1200,
    height: int = 800,
    **config
) -> None:
    """
    Convenience function to launch the visualizer.

    Parameters
    ----------
    simulation : Simulation, optional
        An initialized simulation; a new one is created from ``config``
        if None
    navigate_to : str, optional
        Body or point target to fly to on start
    width : int
        Window width
    height : int
        Window height
    **config
        SimulationConfig fields
    """
    visualizer = Visualizer(width=width, height=height)

    if simulation is None:
        visualizer.create_simulation(**config)
    else:
        visualizer.set_simulation(simulation)

    if navigate_to:
        visualizer.navigate(navigate_to, smooth=False)

    print(f"Loaded {visualizer.simulation.num_bodies} bodies")
    print(f"Start: {visualizer.simulation.clock.calendar}")

    visualizer.run()


if __name__ == "__main__":
    print("Starting Orrery")
    print("=" * 50)
    print("\nControls:")
    print("  Arrow keys: Rotate camera")
    print("  +/- : Zoom in/out")
    print("  [ ] : Decrease/increase speed")
    print("  PgUp/PgDn : Jump one year")
    print("  TAB / 0-9 : Fly to bodies")
    print("  T : Fly to next point target")
    print("  SPACE : Pause/Resume")
    print("  R : Reset")
    print("  ESC : Quit")
    print()

    run_visualizer()
