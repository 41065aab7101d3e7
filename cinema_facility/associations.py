"""Owner side of a composition association.

Parents keep their composed children in a Composition and link the child's
back-reference in the same call, so both sides change together:

    self._halls.check_attach(hall)   # may raise, nothing changed yet
    hall._register()
    self._halls.add(hall)
    hall._floor = self
"""

import logging
from collections.abc import Callable, Hashable, Iterator

from .exceptions import CapacityError, DuplicateError, ExistenceError, NullReferenceError

logger = logging.getLogger(__name__)


class Composition:
    """Ordered collection of children owned by one parent."""

    def __init__(
        self,
        owner,
        child_name: str,
        key: Callable[[object], Hashable],
        capacity: int | None = None,
    ):
        """Initialize composition.

        Args:
            owner: Parent entity
            child_name: Child kind used in error messages (e.g., "hall")
            key: Natural key of a child, unique among siblings
            capacity: Maximum number of children (None = unbounded)
        """
        self.owner = owner
        self.child_name = child_name
        self.key = key
        self.capacity = capacity
        self._children: list = []

    def check_attach(self, child) -> None:
        """Check that child could be attached, without changing anything.

        Raises:
            NullReferenceError: If child is None
            DuplicateError: If child is already attached, or a sibling has the same key
            CapacityError: If the collection is full
        """
        if child is None:
            raise NullReferenceError(f"{self.child_name} cannot be None")
        if child in self:
            raise DuplicateError(f"{child} is already attached to {self.owner}")
        if self.capacity is not None and len(self._children) >= self.capacity:
            raise CapacityError(
                f"{self.owner} cannot hold more than {self.capacity} {self.child_name}s"
            )
        self.check_key(self.key(child))

    def check_key(self, key: Hashable, ignore=None) -> None:
        """Check that no sibling other than ignore uses key.

        Raises:
            DuplicateError: If a sibling already uses key
        """
        sibling = self.find(key)
        if sibling is not None and sibling is not ignore:
            raise DuplicateError(f"{self.owner} already has {sibling}")

    def add(self, child) -> None:
        """Attach child after checking it.

        Raises:
            Same as check_attach
        """
        self.check_attach(child)
        self._children.append(child)
        logger.debug(f"Attached {child} to {self.owner}")

    def remove(self, child) -> None:
        """Detach child.

        Raises:
            NullReferenceError: If child is None
            ExistenceError: If child is not attached to this owner
        """
        if child is None:
            raise NullReferenceError(f"{self.child_name} cannot be None")
        if not self.discard(child):
            raise ExistenceError(f"{child} is not attached to {self.owner}")

    def discard(self, child) -> bool:
        """Detach child if present.

        Returns:
            True if child was attached
        """
        for index, item in enumerate(self._children):
            if item is child:
                del self._children[index]
                logger.debug(f"Detached {child} from {self.owner}")
                return True
        return False

    def find(self, key: Hashable):
        """Get the child with the given natural key, or None."""
        for child in self._children:
            if self.key(child) == key:
                return child
        return None

    def all(self) -> tuple:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator:
        return iter(tuple(self._children))

    def __contains__(self, child) -> bool:
        return any(item is child for item in self._children)
