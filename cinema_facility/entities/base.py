"""Base class for every entity kept in an extent."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import ExistenceError, ValidationError
from ..registry import Registry, default_registry


class Entity(ABC):
    """Entity bound to a registry.

    Subclasses validate their attributes, then call _register() once the
    instance is complete. Every entity class in the MRO below Entity gets an
    extent, so abstract bases hold all instances of their subtypes.
    """

    def __init__(self, registry: Registry | None = None):
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> Registry:
        return self._registry

    @classmethod
    def extent_types(cls) -> tuple[type, ...]:
        """Get the classes whose extents hold instances of cls."""
        return tuple(c for c in cls.__mro__ if issubclass(c, Entity) and c is not Entity)

    @classmethod
    def extent(cls, registry: Registry | None = None) -> tuple:
        """Get every live instance of cls in insertion order.

        Args:
            registry: Registry to read (default: process registry)
        """
        registry = registry if registry is not None else default_registry()
        return registry.all_of(cls)

    @classmethod
    def save(cls, path: str | Path | None = None, registry: Registry | None = None) -> Path:
        """Save the extent of cls to an XML document.

        Args:
            path: Target file (default: <data_dir>/<type>.xml)
            registry: Registry to save (default: process registry)

        Returns:
            Path written

        Raises:
            PersistenceError: If cls cannot be persisted or the file cannot be written
        """
        from ..persistence import XmlExtentStore

        return XmlExtentStore(registry).save(cls, path)

    @classmethod
    def load(cls, path: str | Path | None = None, registry: Registry | None = None):
        """Replace the extent of cls with the content of an XML document.

        Args:
            path: Source file (default: <data_dir>/<type>.xml)
            registry: Registry to load into (default: process registry)

        Returns:
            LoadResult describing the outcome
        """
        from ..persistence import XmlExtentStore

        return XmlExtentStore(registry).load(cls, path)

    @property
    def is_registered(self) -> bool:
        """Whether the entity is still in its extent."""
        return self in self._registry.extent(type(self))

    def _register(self) -> None:
        self._registry.register(self)

    def _deregister(self) -> None:
        self._registry.deregister(self)

    def _check_same_registry(self, other: "Entity") -> None:
        if other._registry is not self._registry:
            raise ValidationError(f"{self} and {other} belong to different registries")

    def _check_not_deleted(self) -> None:
        if not self.is_registered:
            raise ExistenceError(f"{self} has been deleted")

    @abstractmethod
    def delete(self) -> None:
        """Remove the entity, its dependents and its links."""
