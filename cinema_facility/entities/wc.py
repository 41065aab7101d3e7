"""Restrooms (WCs)."""

import logging
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING

from ..exceptions import ValidationError
from ..utils import require
from .cleanable_area import CleanableArea

if TYPE_CHECKING:
    from .floor import Floor

logger = logging.getLogger(__name__)

WC_CLEANING_PERIOD = timedelta(hours=1)


class WCType(str, Enum):
    """Kind of restroom."""

    MEN = "Men"
    WOMEN = "Women"
    ACCESSIBLE = "Accessible"


class WC(CleanableArea):
    """A restroom; always belongs to exactly one floor."""

    def __init__(
        self,
        wc_type: WCType,
        floor: "Floor",
        *,
        description: str | None = None,
        cleaning_period: timedelta = WC_CLEANING_PERIOD,
    ):
        """Create and register a WC on floor.

        Args:
            wc_type: WC type, unique on the floor
            floor: Owning floor
            description: Description (default: "WC <type> in floor <number>")
            cleaning_period: Time allowed between cleanings (default: 1 hour)

        Raises:
            NullReferenceError: If floor is None
            ValidationError: If an attribute is invalid
            ExistenceError: If floor has been deleted
            CapacityError: If the floor already has two WCs
            DuplicateError: If the floor already has a WC of this type
        """
        require(floor, "floor")
        try:
            wc_type = WCType(wc_type)
        except ValueError as e:
            raise ValidationError(f"Unknown WC type: {wc_type!r}") from e
        super().__init__(
            description if description is not None else f"WC {wc_type.value} in floor {floor.number}",
            cleaning_period,
            floor.registry,
        )
        self._type = wc_type
        self._floor: "Floor | None" = None

        floor._check_wc(self)
        self._register()
        floor._link_wc(self)

    @property
    def type(self) -> WCType:
        return self._type

    @property
    def floor(self) -> "Floor | None":
        return self._floor

    def delete(self) -> None:
        """Delete the WC and unlink it from its floor."""
        if self._floor is not None:
            self._floor._unlink_wc(self)
        self._cancel_cleaning_assignments()
        self._deregister()
        logger.debug(f"Deleted {self}")

    def __str__(self) -> str:
        return f"WC: {self._type.value}"

    def __repr__(self) -> str:
        floor = self._floor.number if self._floor is not None else None
        return f"WC(type={self._type.name}, floor={floor})"
