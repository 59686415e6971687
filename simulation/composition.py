#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Hierarchical Composition Module

Absolute positions of bodies: a moon's position is its parent's absolute
position plus its own orbit around the parent. Every call starts from
scratch; nothing is carried between calls.
"""

from typing import List

import numpy as np

from .body import BodyCatalog


def relative_position(catalog: BodyCatalog, index: int, elapsed_days: float) -> np.ndarray:
    """
    Position of a body relative to its parent.

    Parameters
    ----------
    catalog : BodyCatalog
        The body catalog
    index : int
        Body index
    elapsed_days : float
        Simulated time (days)

    Returns
    -------
    np.ndarray
        [x, 0, z] in scene units
    """
    return catalog[index].orbit.position_3d(elapsed_days)


def absolute_position(catalog: BodyCatalog, index: int, elapsed_days: float) -> np.ndarray:
    """
    World-space position of a body, composed through all its ancestors.

    Defined recursively, so any hierarchy depth is supported.
    """
    position = relative_position(catalog, index, elapsed_days)
    parent = catalog[index].parent
    if parent is None:
        return position
    return absolute_position(catalog, parent, elapsed_days) + position


def compose_positions(catalog: BodyCatalog, elapsed_days: float) -> List[np.ndarray]:
    """
    World-space positions of every body at one instant.

    Bodies are evaluated in catalog order, which places parents first, so
    each body needs only one addition to its parent's result.

    Returns
    -------
    list
        Positions indexed like the catalog
    """
    positions: List[np.ndarray] = []
    for index, body in enumerate(catalog):
        position = relative_position(catalog, index, elapsed_days)
        if body.parent is not None:
            position = positions[body.parent] + position
        positions.append(position)
    return positions
