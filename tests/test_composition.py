#!/usr/bin/env python3
"""
Tests for hierarchical position composition.

These tests verify:
1. A moon's absolute position is its parent's position plus its own orbit
2. Batch composition matches independent recomputation
3. Nothing is carried between calls
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from simulation.composition import absolute_position, compose_positions, relative_position


TIMES = [0.0, 0.37, 91.3125, 277.0, 365.25, 4021.9, 60000.0]


class TestAbsolutePosition:
    """Tests for recursive composition."""

    def test_root_at_origin(self, small_catalog):
        for t in TIMES:
            np.testing.assert_array_equal(absolute_position(small_catalog, 0, t), np.zeros(3))

    def test_planet_is_relative_position(self, small_catalog):
        for t in TIMES:
            np.testing.assert_allclose(
                absolute_position(small_catalog, 1, t),
                relative_position(small_catalog, 1, t),
                atol=1e-12,
            )

    @pytest.mark.parametrize("t", TIMES)
    def test_moon_consistency(self, small_catalog, t):
        planet = small_catalog[1].orbit.position_3d(t)
        moon = small_catalog[2].orbit.position_3d(t)
        np.testing.assert_allclose(
            absolute_position(small_catalog, 2, t), planet + moon, atol=1e-9
        )

    @pytest.mark.parametrize("t", TIMES)
    def test_arbitrary_depth(self, small_catalog, t):
        expected = sum(small_catalog[i].orbit.position_3d(t) for i in (1, 2, 3))
        np.testing.assert_allclose(absolute_position(small_catalog, 3, t), expected, atol=1e-9)

    def test_moon_distance_from_parent(self, small_catalog):
        t = 123.4
        offset = absolute_position(small_catalog, 2, t) - absolute_position(small_catalog, 1, t)
        assert np.linalg.norm(offset) == pytest.approx(1.5)

    def test_positions_in_orbital_plane(self, solar_catalog):
        for index in range(len(solar_catalog)):
            assert absolute_position(solar_catalog, index, 500.0)[1] == 0.0


class TestComposePositions:
    """Tests for whole-catalog composition."""

    @pytest.mark.parametrize("t", TIMES)
    def test_matches_independent_computation(self, solar_catalog, t):
        positions = compose_positions(solar_catalog, t)
        assert len(positions) == len(solar_catalog)
        for index, position in enumerate(positions):
            np.testing.assert_allclose(
                position, absolute_position(solar_catalog, index, t), atol=1e-9
            )

    def test_moons_follow_their_planet(self, solar_catalog):
        t = 2000.0
        positions = compose_positions(solar_catalog, t)
        jupiter = solar_catalog.index_of("Jupiter")
        for moon in solar_catalog.children_of(jupiter):
            offset = positions[moon] - positions[jupiter]
            assert np.linalg.norm(offset) == pytest.approx(solar_catalog[moon].distance)

    def test_no_state_between_calls(self, solar_catalog):
        first = compose_positions(solar_catalog, 42.0)
        compose_positions(solar_catalog, 9999.0)
        again = compose_positions(solar_catalog, 42.0)
        for a, b in zip(first, again):
            np.testing.assert_array_equal(a, b)
