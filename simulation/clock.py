#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Simulation Clock Module

Holds the single elapsed-time value that drives every body position and
the calendar label derived from it for display.

Time is measured in simulated days. The clock is the only writer of
elapsed time; everything else reads it.
"""

import math
import logging
from dataclasses import dataclass

from .epoch import DAYS_PER_YEAR

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class CalendarLabel:
    """
    Display-only calendar projection of elapsed time.

    Attributes
    ----------
    year : int
        Displayed year
    day_of_year : int
        Whole days into the displayed year
    hour_of_day : int
        Whole hours into the current day
    """
    year: int
    day_of_year: int
    hour_of_day: int

    def __str__(self) -> str:
        days = self.day_of_year
        hours = self.hour_of_day
        return (
            f"{self.year} - {days} day{'s' if days != 1 else ''} "
            f"{hours} hour{'s' if hours != 1 else ''}"
        )


def calendar_label(
    elapsed_days: float,
    reference_year: int,
    start_day_offset: float = 0.0,
) -> CalendarLabel:
    """
    Project elapsed days onto a (year, day, hour) label.

    Parameters
    ----------
    elapsed_days : float
        Simulated days since the clock origin
    reference_year : int
        Year shown while fewer than 365.25 days have passed since the anchor
    start_day_offset : float
        Day at which the displayed year rolls over

    Returns
    -------
    CalendarLabel
        The label. Never fed back into the clock.
    """
    since_anchor = elapsed_days - start_day_offset
    years_elapsed = math.floor(since_anchor / DAYS_PER_YEAR)
    into_year = since_anchor - years_elapsed * DAYS_PER_YEAR
    day = math.floor(into_year)
    hour = math.floor((into_year - day) * HOURS_PER_DAY)
    return CalendarLabel(
        year=reference_year + years_elapsed,
        day_of_year=day,
        hour_of_day=hour,
    )


class SimulationClock:
    """
    Pausable, speed-scaled accumulator of simulated days.

    Each call to ``tick`` adds ``delta_seconds * speed_multiplier`` days
    unless the clock is paused. Elapsed time is never wrapped; periodic
    quantities reduce it themselves.

    Parameters
    ----------
    reference_year : int
        Calendar year at the clock origin (default 2025)
    start_day_of_year : float
        Elapsed days at start, i.e. days since 1 January of the
        reference year (default 277, 4 October)
    speed_multiplier : float
        Simulated days per real second (default 0.5)
    paused : bool
        Start paused (default False)
    start_day_offset : float
        Anchor for the displayed year rollover (default 0)

    Attributes
    ----------
    elapsed_days : float
        Current simulated time in days
    tick_count : int
        Number of ticks that advanced the clock
    """

    MIN_SPEED = 0.01
    MAX_SPEED = 100.0

    def __init__(
        self,
        reference_year: int = 2025,
        start_day_of_year: float = 277.0,
        speed_multiplier: float = 0.5,
        paused: bool = False,
        start_day_offset: float = 0.0,
    ):
        if not math.isfinite(start_day_of_year):
            raise ValueError("Start day must be finite")
        if not math.isfinite(start_day_offset):
            raise ValueError("Start day offset must be finite")

        self.reference_year = reference_year
        self.start_day_of_year = start_day_of_year
        self.start_day_offset = start_day_offset
        self._initial_speed = self._clamp_speed(speed_multiplier)
        self._initial_paused = paused

        self.elapsed_days = start_day_of_year
        self.speed_multiplier = self._initial_speed
        self.paused = paused
        self.tick_count = 0

    @classmethod
    def _clamp_speed(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"Speed must be finite, got {value}")
        return max(cls.MIN_SPEED, min(cls.MAX_SPEED, value))

    def tick(self, delta_seconds: float) -> float:
        """
        Advance the clock by one frame.

        Parameters
        ----------
        delta_seconds : float
            Real seconds since the previous frame

        Returns
        -------
        float
            Elapsed days after the tick
        """
        if not math.isfinite(delta_seconds) or delta_seconds < 0:
            raise ValueError(f"Tick delta must be finite and non-negative, got {delta_seconds}")

        if self.paused:
            return self.elapsed_days

        self.elapsed_days += delta_seconds * self.speed_multiplier
        self.tick_count += 1
        return self.elapsed_days

    def pause(self) -> None:
        """Stop advancing time."""
        self.paused = True

    def resume(self) -> None:
        """Continue advancing time."""
        self.paused = False

    def toggle_pause(self) -> bool:
        """Flip the paused flag and return the new value."""
        self.paused = not self.paused
        return self.paused

    def set_speed(self, value: float) -> float:
        """Set the speed multiplier, clamped to [MIN_SPEED, MAX_SPEED]."""
        self.speed_multiplier = self._clamp_speed(value)
        return self.speed_multiplier

    def shift_years(self, years: int) -> float:
        """
        Jump forward or backward by whole display years.

        The day of year is preserved because the shift is an exact
        multiple of the year length.
        """
        if not math.isfinite(years):
            raise ValueError(f"Year shift must be finite, got {years}")

        self.elapsed_days += years * DAYS_PER_YEAR
        logger.debug("Shifted clock by %d years to %.3f days", years, self.elapsed_days)
        return self.elapsed_days

    def seek_day_of_year(self, day_of_year: float) -> float:
        """
        Move to a day within the currently displayed year.

        Parameters
        ----------
        day_of_year : float
            Target day, fractional part is the time of day

        Returns
        -------
        float
            Elapsed days after the seek
        """
        if not 0 <= day_of_year < DAYS_PER_YEAR:
            raise ValueError(f"Day of year must be in [0, {DAYS_PER_YEAR}), got {day_of_year}")

        since_anchor = self.elapsed_days - self.start_day_offset
        year_start = math.floor(since_anchor / DAYS_PER_YEAR) * DAYS_PER_YEAR
        self.elapsed_days = self.start_day_offset + year_start + day_of_year
        return self.elapsed_days

    def reset(self) -> None:
        """Return to the configured start time, speed and pause state."""
        self.elapsed_days = self.start_day_of_year
        self.speed_multiplier = self._initial_speed
        self.paused = self._initial_paused
        self.tick_count = 0

    @property
    def calendar(self) -> CalendarLabel:
        """Calendar label for the current elapsed time."""
        return calendar_label(self.elapsed_days, self.reference_year, self.start_day_offset)

    @property
    def display_year(self) -> int:
        """Displayed year."""
        return self.calendar.year

    def __repr__(self) -> str:
        return (
            f"SimulationClock(days={self.elapsed_days:.3f}, "
            f"speed={self.speed_multiplier}x, "
            f"paused={self.paused}, "
            f"label='{self.calendar}')"
        )
