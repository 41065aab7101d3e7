"""Floors of the cinema building."""

import logging
from datetime import timedelta

from ..associations import Composition
from ..exceptions import DuplicateError, ExistenceError, MultiplicityError
from ..registry import Registry
from ..utils import require, require_int
from .cleanable_area import CleanableArea
from .hall import Hall
from .wc import WC, WCType

logger = logging.getLogger(__name__)

FLOOR_CLEANING_PERIOD = timedelta(hours=4)
MAX_WCS_PER_FLOOR = 2


class Floor(CleanableArea):
    """A floor; composes its halls and at most two WCs of distinct types."""

    def __init__(
        self,
        number: int,
        *,
        description: str | None = None,
        cleaning_period: timedelta = FLOOR_CLEANING_PERIOD,
        registry: Registry | None = None,
    ):
        """Create and register a floor.

        Args:
            number: Floor number, non-negative and unique among floors
            description: Description (default: "Floor <number>")
            cleaning_period: Time allowed between cleanings (default: 4 hours)
            registry: Registry to register in (default: process registry)

        Raises:
            ValidationError: If an attribute is invalid
            DuplicateError: If another floor already has this number
        """
        super().__init__(
            description if description is not None else f"Floor {number}",
            cleaning_period,
            registry,
        )
        self._number = self._check_number(number)
        self._halls = Composition(self, "hall", key=lambda hall: hall.number)
        self._wcs = Composition(self, "WC", key=lambda wc: wc.type, capacity=MAX_WCS_PER_FLOOR)
        self._register()

    @classmethod
    def find(cls, number: int, registry: Registry | None = None) -> "Floor | None":
        """Get the floor with the given number, or None."""
        for floor in cls.extent(registry):
            if floor.number == number:
                return floor
        return None

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = self._check_number(value)

    def _check_number(self, value: int) -> int:
        require_int(value, "floor number", minimum=0)
        for floor in self.registry.all_of(Floor):
            if floor is not self and floor.number == value:
                raise DuplicateError(f"Floor {value} already exists")
        return value

    # Halls

    @property
    def halls(self) -> tuple[Hall, ...]:
        return self._halls.all()

    def add_hall(self, number: int, **kwargs) -> Hall:
        """Create a hall on this floor.

        Args:
            number: Hall number, unique on this floor
            **kwargs: Extra Hall arguments (description, cleaning_period)

        Returns:
            The new hall

        Raises:
            ValidationError: If an attribute is invalid
            ExistenceError: If the floor has been deleted
            DuplicateError: If the floor already has a hall with this number
        """
        return Hall(number, self, registry=self.registry, **kwargs)

    def attach_hall(self, hall: Hall) -> None:
        """Attach an existing hall that has no floor yet.

        Raises:
            NullReferenceError: If hall is None
            ExistenceError: If this floor or hall has been deleted
            DuplicateError: If hall is already on this floor or its number is taken
            MultiplicityError: If hall belongs to another floor
        """
        require(hall, "hall")
        self._check_not_deleted()
        self._check_same_registry(hall)
        if not hall.is_registered:
            raise ExistenceError(f"{hall} has been deleted")
        if hall.floor is not None and hall.floor is not self:
            raise MultiplicityError(f"{hall} already belongs to {hall.floor}")
        self._halls.add(hall)
        hall._floor = self

    def remove_hall(self, hall: Hall) -> None:
        """Remove a hall from this floor and delete it.

        Raises:
            NullReferenceError: If hall is None
            ExistenceError: If hall is not on this floor
        """
        require(hall, "hall")
        self._halls.remove(hall)
        hall._floor = None
        hall.delete()

    def _check_hall(self, hall: Hall) -> None:
        self._check_not_deleted()
        self._check_same_registry(hall)
        self._halls.check_attach(hall)

    def _link_hall(self, hall: Hall) -> None:
        self._halls.add(hall)
        hall._floor = self

    def _unlink_hall(self, hall: Hall) -> None:
        self._halls.discard(hall)
        hall._floor = None

    # WCs

    @property
    def wcs(self) -> tuple[WC, ...]:
        return self._wcs.all()

    def add_wc(self, wc_type: WCType, **kwargs) -> WC:
        """Create a WC on this floor.

        Args:
            wc_type: WC type, unique on this floor
            **kwargs: Extra WC arguments (description, cleaning_period)

        Returns:
            The new WC

        Raises:
            ExistenceError: If the floor has been deleted
            CapacityError: If the floor already has two WCs
            DuplicateError: If the floor already has a WC of this type
        """
        return WC(wc_type, self, **kwargs)

    def remove_wc(self, wc: WC) -> None:
        """Remove a WC from this floor and delete it.

        Raises:
            NullReferenceError: If wc is None
            ExistenceError: If wc is not on this floor
        """
        require(wc, "WC")
        self._wcs.remove(wc)
        wc._floor = None
        wc.delete()

    def _check_wc(self, wc: WC) -> None:
        self._check_not_deleted()
        self._check_same_registry(wc)
        self._wcs.check_attach(wc)

    def _link_wc(self, wc: WC) -> None:
        self._wcs.add(wc)
        wc._floor = self

    def _unlink_wc(self, wc: WC) -> None:
        self._wcs.discard(wc)
        wc._floor = None

    def delete(self) -> None:
        """Delete the floor together with its halls and WCs."""
        for hall in self._halls:
            hall.delete()
        for wc in self._wcs:
            wc.delete()
        self._cancel_cleaning_assignments()
        self._deregister()
        logger.debug(f"Deleted {self}")

    def __str__(self) -> str:
        return f"Floor {self._number}"

    def __repr__(self) -> str:
        return f"Floor(number={self._number})"
