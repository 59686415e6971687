#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Orrery Visualization Package

This package provides Pygame-based visualization components for the
orrery simulation.

The visualization package depends on the simulation package but can be
optionally omitted if only running headless simulations.

Usage:
    from visualization import Visualizer

    visualizer = Visualizer()
    visualizer.create_simulation(speed=2.0)
    visualizer.navigate("Saturn")
    visualizer.run()
"""

from .camera import Camera
from .renderer import Renderer, Colors
from .visualizer import Visualizer, run_visualizer


__all__ = [
    "Camera",
    "Renderer",
    "Colors",
    "Visualizer",
    "run_visualizer",
]

__version__ = "1.0.0"
