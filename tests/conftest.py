"""Pytest configuration and fixtures."""

import logging

import pytest
from dotenv import load_dotenv

from cinema_facility import (
    CleanableArea,
    Floor,
    Hall,
    Registry,
    Settings,
    WC,
    XmlExtentStore,
    reset_default_registry,
)

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Load environment variables
load_dotenv()

# Production halls hold 100 seats; tests use a small cap to reach the bound quickly
TEST_HALL_CAPACITY = 3


@pytest.fixture(autouse=True)
def fresh_default_registry():
    """Give every test an empty process-wide registry."""
    reset_default_registry(Settings())
    yield
    reset_default_registry(Settings())


@pytest.fixture
def settings(tmp_path):
    """Settings with a small hall capacity and a temporary data directory."""
    return Settings(hall_max_capacity=TEST_HALL_CAPACITY, data_dir=tmp_path)


@pytest.fixture
def registry(settings):
    """Create an isolated registry.

    Returns:
        Registry: Empty registry using the test settings
    """
    return Registry(settings)


@pytest.fixture
def other_registry(settings):
    """Second isolated registry, used as a load target."""
    return Registry(settings)


@pytest.fixture
def store(registry):
    return XmlExtentStore(registry)


@pytest.fixture
def floor(registry):
    """Floor 1 in the test registry."""
    return Floor(1, registry=registry)


@pytest.fixture
def describe():
    """Return a function describing the area graph of a registry.

    The description covers attributes and link structure, so two registries
    with equal descriptions hold equivalent object graphs.
    """

    def _describe(registry):
        return {
            "floors": [
                (
                    f.number,
                    f.description,
                    f.cleaning_period,
                    [h.number for h in f.halls],
                    [w.type for w in f.wcs],
                )
                for f in Floor.extent(registry)
            ],
            "halls": [
                (
                    h.number,
                    h.description,
                    h.cleaning_period,
                    h.floor.number if h.floor is not None else None,
                    [(s.number, s.row) for s in h.seats],
                )
                for h in Hall.extent(registry)
            ],
            "wcs": [
                (w.type, w.description, w.cleaning_period, w.floor.number)
                for w in WC.extent(registry)
            ],
            "areas": [(type(a).__name__, a.description) for a in CleanableArea.extent(registry)],
        }

    return _describe
