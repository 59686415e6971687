#!/usr/bin/env python3
"""
Tests for the reference epoch resolver.

These tests verify:
1. Mean longitudes follow L0 + rate * years since J2000
2. Base angles carry the -π/2 alignment
3. Bodies without constants keep their literal angle
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from simulation.epoch import (
    DAYS_PER_YEAR,
    MeanLongitude,
    PLANET_MEAN_LONGITUDES,
    base_angle_from_elements,
    days_between,
    mean_longitude_deg,
    resolve_base_angle,
    resolve_base_angles,
    years_since_j2000,
)


class TestMeanLongitude:
    """Tests for the mean-longitude formula."""

    def test_rates_converted_from_per_century(self):
        elements = MeanLongitude.from_per_century(100.0, 36000.0)
        assert elements.rate_deg_per_year == pytest.approx(360.0)

    def test_years_since_j2000(self):
        assert years_since_j2000(2000) == 0.0
        assert years_since_j2000(2025) == 25.0
        assert years_since_j2000(2001, DAYS_PER_YEAR / 2) == pytest.approx(1.5)

    def test_value_at_j2000_is_l0(self):
        elements = PLANET_MEAN_LONGITUDES["Earth"]
        assert mean_longitude_deg(elements, 2000) == pytest.approx(100.46435)

    def test_wrapped_to_360(self):
        for elements in PLANET_MEAN_LONGITUDES.values():
            for year in (1900, 2000, 2025, 2200):
                value = mean_longitude_deg(elements, year, 123.0)
                assert 0.0 <= value < 360.0

    def test_earth_advances_about_one_turn_per_year(self):
        elements = PLANET_MEAN_LONGITUDES["Earth"]
        start = mean_longitude_deg(elements, 2025)
        end = mean_longitude_deg(elements, 2026)
        # 35999.372 deg per century ~ 359.99 deg per year
        assert (end - start) % 360.0 == pytest.approx(359.99372, abs=1e-6)

    def test_all_eight_planets_present(self):
        assert set(PLANET_MEAN_LONGITUDES) == {
            "Mercury", "Venus", "Earth", "Mars",
            "Jupiter", "Saturn", "Uranus", "Neptune",
        }


class TestBaseAngle:
    """Tests for base-angle resolution."""

    def test_quarter_turn_alignment(self):
        elements = MeanLongitude(l0_deg=90.0, rate_deg_per_year=0.0)
        assert base_angle_from_elements(elements, 2025) == pytest.approx(0.0)

    def test_deterministic(self):
        elements = PLANET_MEAN_LONGITUDES["Mars"]
        assert base_angle_from_elements(elements, 2025, 10.0) == base_angle_from_elements(elements, 2025, 10.0)

    def test_resolve_known_planet(self):
        expected = base_angle_from_elements(PLANET_MEAN_LONGITUDES["Jupiter"], 2030, 0.0)
        assert resolve_base_angle("Jupiter", 2030) == expected

    def test_resolve_unknown_body_uses_fallback(self):
        assert resolve_base_angle("Titan", 2025, fallback=1.25) == 1.25

    def test_resolve_with_explicit_elements(self):
        elements = MeanLongitude(l0_deg=180.0, rate_deg_per_year=0.0)
        assert resolve_base_angle("Anything", 2025, elements=elements) == pytest.approx(math.pi / 2)

    def test_resolve_all(self):
        angles = resolve_base_angles(["Sun", "Earth", "Moon", "Neptune"], 2025)
        assert set(angles) == {"Earth", "Neptune"}
        assert angles["Earth"] == resolve_base_angle("Earth", 2025)


class TestDaysBetween:
    """Tests for calendar differences."""

    def test_same_year(self):
        assert days_between(2025, 10.0, 2025, 277.0) == 267.0

    def test_across_years(self):
        assert days_between(2024, 0.0, 2026, 1.0) == pytest.approx(2 * DAYS_PER_YEAR + 1.0)

    def test_backwards_is_negative(self):
        assert days_between(2026, 0.0, 2025, 0.0) == -DAYS_PER_YEAR
