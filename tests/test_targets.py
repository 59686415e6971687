#!/usr/bin/env python3
"""
Tests for the point target catalog.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from simulation.targets import (
    DEFAULT_MARKER_DISTANCE,
    PointTarget,
    PointTargetCatalog,
    demo_targets,
    ra_dec_to_direction,
    ra_hours_to_degrees,
)


class TestDirections:
    """Tests for RA/Dec conversion."""

    def test_ra_hours(self):
        assert ra_hours_to_degrees(0.0) == 0.0
        assert ra_hours_to_degrees(6.0) == 90.0
        assert ra_hours_to_degrees(24.0) == 360.0

    @pytest.mark.parametrize("ra, dec, expected", [
        (0.0, 0.0, [1.0, 0.0, 0.0]),
        (90.0, 0.0, [0.0, 0.0, 1.0]),
        (0.0, 90.0, [0.0, 1.0, 0.0]),
        (180.0, -90.0, [0.0, -1.0, 0.0]),
    ])
    def test_cardinal_directions(self, ra, dec, expected):
        np.testing.assert_allclose(ra_dec_to_direction(ra, dec), expected, atol=1e-12)

    def test_unit_vectors(self):
        for target in demo_targets():
            assert np.linalg.norm(target.direction) == pytest.approx(1.0)

    def test_marker_position(self):
        target = PointTarget("X-1", "Test", 45.0, 30.0)
        position = target.position()
        assert np.linalg.norm(position) == pytest.approx(DEFAULT_MARKER_DISTANCE)
        np.testing.assert_allclose(position / DEFAULT_MARKER_DISTANCE, target.direction)
        assert position[1] == pytest.approx(DEFAULT_MARKER_DISTANCE * math.sin(math.radians(30.0)))


class TestPointTarget:
    """Tests for target validation."""

    @pytest.mark.parametrize("ra, dec", [
        (float("nan"), 0.0),
        (0.0, float("inf")),
        (10.0, 91.0),
        (10.0, -90.5),
    ])
    def test_invalid_coordinates(self, ra, dec):
        with pytest.raises(ValueError):
            PointTarget("BAD", "Bad", ra, dec)

    def test_defaults(self):
        target = PointTarget("TIC1", "Host", 1.0, 2.0)
        assert target.kind == "TIC"
        assert target.confirmed is False


class TestCatalog:
    """Tests for lookup and search."""

    @pytest.fixture
    def catalog(self):
        return PointTargetCatalog(demo_targets())

    def test_demo_targets(self, catalog):
        assert len(catalog) == 5
        assert [t.name for t in catalog] == [
            "TOI 700 d", "AU Mic b", "KOI-7016.01", "K2-18 b", "TOI 178",
        ]

    def test_find_by_name(self, catalog):
        assert catalog.find("k2-18 b").target_id == "EPIC212521166"

    def test_find_by_id(self, catalog):
        assert catalog.find("TIC441462736").name == "AU Mic b"

    def test_find_missing(self, catalog):
        assert catalog.find("Kepler-22 b") is None

    def test_search(self, catalog):
        names = [t.name for t in catalog.search("toi")]
        assert names == ["TOI 700 d", "TOI 178"]

    def test_search_by_id_fragment(self, catalog):
        assert [t.name for t in catalog.search("EPIC")] == ["K2-18 b"]

    def test_unique_ids(self):
        target = PointTarget("TIC1", "A", 0.0, 0.0)
        with pytest.raises(ValueError):
            PointTargetCatalog([target, PointTarget("tic1", "B", 1.0, 1.0)])
