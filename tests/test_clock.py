#!/usr/bin/env python3
"""
Tests for the simulation clock and calendar label.

These tests verify:
1. Ticking accumulates delta * speed and respects pause
2. Speed is clamped and invalid input is rejected
3. The calendar label is a stateless projection of elapsed days
4. Year shifts and day seeks keep elapsed time consistent
"""

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from simulation.clock import CalendarLabel, SimulationClock, calendar_label
from simulation.epoch import DAYS_PER_YEAR


class TestTick:
    """Tests for time accumulation."""

    def test_defaults(self):
        clock = SimulationClock()
        assert clock.elapsed_days == 277.0
        assert clock.speed_multiplier == 0.5
        assert clock.paused is False
        assert clock.reference_year == 2025

    def test_tick_accumulates(self):
        clock = SimulationClock(start_day_of_year=0.0, speed_multiplier=2.0)
        clock.tick(1.5)
        clock.tick(0.5)
        assert clock.elapsed_days == pytest.approx(4.0)
        assert clock.tick_count == 2

    def test_tick_returns_elapsed(self):
        clock = SimulationClock(start_day_of_year=10.0, speed_multiplier=1.0)
        assert clock.tick(2.0) == pytest.approx(12.0)

    def test_paused_tick_is_noop(self):
        clock = SimulationClock(start_day_of_year=5.0, paused=True)
        clock.tick(100.0)
        assert clock.elapsed_days == 5.0
        assert clock.tick_count == 0

    def test_zero_delta(self):
        clock = SimulationClock(start_day_of_year=5.0)
        clock.tick(0.0)
        assert clock.elapsed_days == 5.0

    @pytest.mark.parametrize("delta", [-1.0, float("nan"), float("inf")])
    def test_invalid_delta_rejected(self, delta):
        clock = SimulationClock()
        with pytest.raises(ValueError):
            clock.tick(delta)

    def test_invalid_start_rejected(self):
        with pytest.raises(ValueError):
            SimulationClock(start_day_of_year=float("nan"))


class TestControls:
    """Tests for pause, speed and navigation controls."""

    def test_pause_resume_toggle(self):
        clock = SimulationClock()
        clock.pause()
        assert clock.paused
        clock.resume()
        assert not clock.paused
        assert clock.toggle_pause() is True
        assert clock.toggle_pause() is False

    def test_set_speed(self):
        clock = SimulationClock()
        assert clock.set_speed(7.5) == 7.5
        assert clock.speed_multiplier == 7.5

    def test_speed_clamped(self):
        clock = SimulationClock()
        assert clock.set_speed(1000.0) == SimulationClock.MAX_SPEED
        assert clock.set_speed(0.0) == SimulationClock.MIN_SPEED
        assert clock.set_speed(-3.0) == SimulationClock.MIN_SPEED

    def test_initial_speed_clamped(self):
        assert SimulationClock(speed_multiplier=500.0).speed_multiplier == 100.0

    def test_non_finite_speed_rejected(self):
        clock = SimulationClock()
        with pytest.raises(ValueError):
            clock.set_speed(float("nan"))

    def test_shift_years_preserves_day(self):
        clock = SimulationClock(start_day_of_year=277.0)
        before = clock.calendar
        clock.shift_years(3)
        after = clock.calendar
        assert after.year == before.year + 3
        assert after.day_of_year == before.day_of_year
        assert clock.elapsed_days == pytest.approx(277.0 + 3 * DAYS_PER_YEAR)

    def test_shift_years_backwards(self):
        clock = SimulationClock(reference_year=2025, start_day_of_year=277.0)
        clock.shift_years(-1)
        assert clock.display_year == 2024

    @pytest.mark.parametrize("years", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_year_shift_rejected(self, years):
        clock = SimulationClock(start_day_of_year=277.0)
        with pytest.raises(ValueError):
            clock.shift_years(years)
        assert clock.elapsed_days == 277.0
        assert str(clock.calendar) == "2025 - 277 days 0 hours"

    def test_seek_day_of_year(self):
        clock = SimulationClock(start_day_of_year=277.0)
        clock.shift_years(2)
        clock.seek_day_of_year(10.5)
        label = clock.calendar
        assert label.year == 2027
        assert label.day_of_year == 10
        assert label.hour_of_day == 12

    @pytest.mark.parametrize("day", [-1.0, DAYS_PER_YEAR, 400.0])
    def test_seek_out_of_range(self, day):
        clock = SimulationClock()
        with pytest.raises(ValueError):
            clock.seek_day_of_year(day)

    def test_reset(self):
        clock = SimulationClock(start_day_of_year=100.0, speed_multiplier=3.0)
        clock.tick(10.0)
        clock.set_speed(50.0)
        clock.pause()
        clock.reset()
        assert clock.elapsed_days == 100.0
        assert clock.speed_multiplier == 3.0
        assert clock.paused is False
        assert clock.tick_count == 0


class TestCalendarLabel:
    """Tests for the display projection."""

    def test_start_label(self):
        label = calendar_label(277.0, 2025)
        assert label == CalendarLabel(2025, 277, 0)
        assert str(label) == "2025 - 277 days 0 hours"

    def test_singular_units(self):
        assert str(CalendarLabel(2025, 1, 1)) == "2025 - 1 day 1 hour"

    def test_hours(self):
        label = calendar_label(10.25, 2025)
        assert label.day_of_year == 10
        assert label.hour_of_day == 6

    def test_year_rollover(self):
        assert calendar_label(DAYS_PER_YEAR - 0.001, 2025).year == 2025
        assert calendar_label(DAYS_PER_YEAR, 2025).year == 2026
        assert calendar_label(DAYS_PER_YEAR, 2025).day_of_year == 0

    def test_negative_elapsed(self):
        label = calendar_label(-1.0, 2025)
        assert label.year == 2024
        assert label.day_of_year == 364

    def test_offset_moves_rollover(self):
        # Anchored at day 277 the display year changes one year after day 277
        assert calendar_label(277.0 + DAYS_PER_YEAR - 1.0, 2025, start_day_offset=277.0).year == 2025
        assert calendar_label(277.0 + DAYS_PER_YEAR, 2025, start_day_offset=277.0).year == 2026

    def test_label_does_not_modify_clock(self):
        clock = SimulationClock(start_day_of_year=364.0, speed_multiplier=1.0)
        clock.tick(2.0)
        _ = clock.calendar
        _ = clock.display_year
        assert clock.elapsed_days == pytest.approx(366.0)
        assert clock.display_year == 2026

    def test_label_monotonic_over_time(self):
        labels = [calendar_label(t * 7.3, 2025) for t in range(500)]
        keys = [(l.year, l.day_of_year, l.hour_of_day) for l in labels]
        assert keys == sorted(keys)
        assert all(0 <= l.day_of_year <= 365 and 0 <= l.hour_of_day < 24 for l in labels)

    def test_repr(self):
        assert "2025 - 277 days" in repr(SimulationClock())
