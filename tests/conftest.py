#!/usr/bin/env python3
"""
Pytest Configuration and Shared Fixtures

Provides common fixtures, markers, and utilities for testing the
orrery simulation and visualization components.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "requires_pygame: mark test as requiring pygame installation"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
    config.addinivalue_line(
        "markers", "integration: mark as integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests based on available dependencies."""
    try:
        import pygame  # noqa: F401
        pygame_available = True
    except ImportError:
        pygame_available = False

    skip_pygame = pytest.mark.skip(reason="pygame not installed")

    for item in items:
        if "requires_pygame" in item.keywords and not pygame_available:
            item.add_marker(skip_pygame)


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def solar_catalog():
    """Default solar system catalog with literal start angles."""
    from simulation import create_solar_system

    return create_solar_system(reference_year=None)


@pytest.fixture
def epoch_catalog():
    """Default solar system catalog seeded for 1 January 2025."""
    from simulation import create_solar_system

    return create_solar_system(reference_year=2025)


@pytest.fixture
def small_specs():
    """Star with one planet, one moon and one moon-of-moon."""
    from simulation import BodySpec

    return [
        BodySpec(name="Star", distance=0.0, radius=1.0,
                 orbital_period_years=0.0, rotation_period_days=10.0, kind="star"),
        BodySpec(
            name="Planet", distance=10.0, radius=0.5,
            orbital_period_years=1.0, rotation_period_days=1.0, start_angle=2.1,
            moons=[
                BodySpec(
                    name="Moon", distance=1.5, radius=0.1,
                    orbital_period_years=27.3 / 365.25, rotation_period_days=27.3,
                    kind="moon",
                    moons=[
                        BodySpec(name="Minimoon", distance=0.3, radius=0.02,
                                 orbital_period_years=1.0 / 365.25,
                                 rotation_period_days=1.0, kind="moon"),
                    ],
                ),
            ],
        ),
    ]


@pytest.fixture
def small_catalog(small_specs):
    """Catalog built from ``small_specs``."""
    from simulation import BodyCatalog

    return BodyCatalog.from_specs(small_specs)


# =============================================================================
# SIMULATION FIXTURES
# =============================================================================

@pytest.fixture
def simulation_config():
    """Default simulation configuration for testing."""
    from simulation import SimulationConfig

    return SimulationConfig(
        reference_year=2025,
        start_day_of_year=277.0,
        speed=2.0,
    )


@pytest.fixture
def small_simulation(simulation_config):
    """Initialized solar system simulation with run logging."""
    from simulation import Simulation

    sim = Simulation(simulation_config, enable_logging=True)
    sim.initialize()
    return sim

