"""Extents: registries of every live entity, one per entity class.

A registry is confined to a single thread. Nothing here takes a lock; callers
that share a registry between threads must serialize access themselves.
"""

import logging
from collections.abc import Iterable, Iterator

from .config import Settings
from .exceptions import NullReferenceError, ValidationError

logger = logging.getLogger(__name__)


class Extent:
    """Ordered collection of the live instances of one entity class.

    Read access is open to everyone; mutation goes through the owning
    entity's methods.
    """

    def __init__(self, entity_type: type):
        self.entity_type = entity_type
        self._items: list = []

    def register(self, entity) -> None:
        """Append an entity to the extent.

        Raises:
            NullReferenceError: If entity is None
        """
        if entity is None:
            raise NullReferenceError(f"{self.entity_type.__name__} cannot be None")
        self._items.append(entity)

    def deregister(self, entity) -> bool:
        """Remove an entity from the extent.

        Returns:
            True if the entity was present
        """
        for index, item in enumerate(self._items):
            if item is entity:
                del self._items[index]
                return True
        return False

    def all(self) -> tuple:
        """Get every registered entity in insertion order."""
        return tuple(self._items)

    def replace(self, items: Iterable) -> None:
        """Replace the content wholesale (bulk load).

        Args:
            items: New content, in the order it should be kept

        Raises:
            NullReferenceError: If any item is None
            ValidationError: If any item is not an instance of the extent type
        """
        new_items = list(items)
        for item in new_items:
            if item is None:
                raise NullReferenceError(f"{self.entity_type.__name__} cannot be None")
            if not isinstance(item, self.entity_type):
                raise ValidationError(
                    f"{type(item).__name__} does not belong to the {self.entity_type.__name__} extent"
                )
        self._items = new_items

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(tuple(self._items))

    def __contains__(self, entity) -> bool:
        return any(item is entity for item in self._items)

    def __repr__(self) -> str:
        return f"Extent({self.entity_type.__name__}, {len(self._items)} items)"


class Registry:
    """Set of extents plus the settings entities read from.

    Create one per process (see default_registry) or one per test.
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize registry.

        Args:
            settings: Settings for entities in this registry (default: read from env)
        """
        self.settings = settings if settings is not None else Settings.from_env()
        self._extents: dict[type, Extent] = {}

    def extent(self, entity_type: type) -> Extent:
        """Get the extent of an entity class, creating it on first use."""
        extent = self._extents.get(entity_type)
        if extent is None:
            extent = Extent(entity_type)
            self._extents[entity_type] = extent
        return extent

    def all_of(self, entity_type: type) -> tuple:
        """Get a read-only view of every live instance of entity_type."""
        return self.extent(entity_type).all()

    def register(self, entity) -> None:
        """Register an entity in its own extent and in its bases' extents.

        Raises:
            NullReferenceError: If entity is None
        """
        if entity is None:
            raise NullReferenceError("entity cannot be None")
        for entity_type in entity.extent_types():
            self.extent(entity_type).register(entity)
        logger.debug(f"Registered {entity!r}")

    def deregister(self, entity) -> None:
        """Remove an entity from every extent it was registered in."""
        for entity_type in entity.extent_types():
            self.extent(entity_type).deregister(entity)
        logger.debug(f"Deregistered {entity!r}")

    def clear(self) -> None:
        """Forget every extent."""
        self._extents.clear()
        logger.debug("Cleared all extents")


_default_registry: Registry | None = None


def default_registry() -> Registry:
    """Get the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry()
    return _default_registry


def reset_default_registry(settings: Settings | None = None) -> Registry:
    """Replace the process-wide registry with an empty one.

    Args:
        settings: Settings for the new registry (default: read from env)

    Returns:
        The new default registry
    """
    global _default_registry
    _default_registry = Registry(settings)
    return _default_registry
