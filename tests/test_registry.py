"""Tests for extents, registries and settings."""

import logging
from pathlib import Path

import pytest

from cinema_facility import (
    CleanableArea,
    Extent,
    Floor,
    Hall,
    Item,
    NullReferenceError,
    Registry,
    Settings,
    Snack,
    ValidationError,
    default_registry,
    reset_default_registry,
)
from cinema_facility.config import HALL_MAX_CAPACITY

logger = logging.getLogger(__name__)


class TestExtent:
    """Tests for a single extent."""

    def test_register_keeps_insertion_order(self):
        extent = Extent(object)
        first, second, third = object(), object(), object()
        for item in (first, second, third):
            extent.register(item)

        assert extent.all() == (first, second, third)
        assert len(extent) == 3
        assert second in extent

    def test_register_none_fails(self):
        extent = Extent(object)

        with pytest.raises(NullReferenceError):
            extent.register(None)

        assert len(extent) == 0

    def test_deregister(self):
        extent = Extent(object)
        item = object()
        extent.register(item)

        assert extent.deregister(item) is True
        assert extent.deregister(item) is False
        assert item not in extent

    def test_all_is_a_snapshot(self):
        extent = Extent(object)
        extent.register(object())

        view = extent.all()
        extent.register(object())

        assert isinstance(view, tuple)
        assert len(view) == 1

    def test_replace(self, registry):
        first = Floor(1, registry=registry)
        second = Floor(2, registry=registry)
        extent = registry.extent(Floor)

        extent.replace([second, first])

        assert extent.all() == (second, first)

    def test_replace_rejects_foreign_items(self, registry):
        floor = Floor(1, registry=registry)
        extent = registry.extent(Floor)

        with pytest.raises(ValidationError):
            extent.replace([floor, "not a floor"])
        with pytest.raises(NullReferenceError):
            extent.replace([None])

        assert extent.all() == (floor,)


class TestRegistry:
    """Tests for registries holding several extents."""

    def test_polymorphic_extents(self, registry):
        """Test that abstract bases see every instance of their subtypes."""
        floor = Floor(1, registry=registry)
        hall = floor.add_hall(1)
        wc = floor.add_wc("Men")

        assert Floor.extent(registry) == (floor,)
        assert Hall.extent(registry) == (hall,)
        assert CleanableArea.extent(registry) == (floor, hall, wc)

    def test_registries_are_isolated(self, registry, other_registry):
        Floor(1, registry=registry)

        assert len(Floor.extent(registry)) == 1
        assert Floor.extent(other_registry) == ()

    def test_register_none_fails(self, registry):
        with pytest.raises(NullReferenceError):
            registry.register(None)

    def test_clear(self, registry):
        Snack("Popcorn", 10, registry=registry)
        registry.clear()

        assert Item.extent(registry) == ()

    def test_default_registry(self):
        """Test that entities created without a registry use the process registry."""
        floor = Floor(3)

        assert floor.registry is default_registry()
        assert Floor.extent() == (floor,)

        reset_default_registry()
        assert Floor.extent() == ()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CINEMA_HALL_MAX_CAPACITY", raising=False)
        monkeypatch.delenv("CINEMA_DATA_DIR", raising=False)

        settings = Settings.from_env()

        assert settings.hall_max_capacity == HALL_MAX_CAPACITY == 100
        assert settings.data_dir == Path("data")

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CINEMA_HALL_MAX_CAPACITY", "42")
        monkeypatch.setenv("CINEMA_DATA_DIR", str(tmp_path))

        settings = Settings.from_env()

        assert settings.hall_max_capacity == 42
        assert settings.data_dir == tmp_path

    def test_registry_reads_env(self, monkeypatch):
        monkeypatch.setenv("CINEMA_HALL_MAX_CAPACITY", "7")

        hall = Hall(1, registry=Registry())

        assert hall.max_capacity == 7

    @pytest.mark.parametrize("capacity", ["abc", "0", "-3"])
    def test_invalid_env_capacity(self, monkeypatch, capacity):
        monkeypatch.setenv("CINEMA_HALL_MAX_CAPACITY", capacity)

        with pytest.raises(ValidationError, match="Invalid settings"):
            Settings.from_env()
        with pytest.raises(ValidationError):
            Registry()
