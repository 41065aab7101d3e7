"""Screening halls."""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from ..associations import Composition
from ..registry import Registry
from ..utils import require, require_int
from .cleanable_area import CleanableArea
from .seat import Seat, normalize_row

if TYPE_CHECKING:
    from .floor import Floor
    from .scheduling import DisplayerAssignment, Screening

logger = logging.getLogger(__name__)

HALL_CLEANING_PERIOD = timedelta(hours=3)


class Hall(CleanableArea):
    """A screening hall.

    Composes its seats, optionally belongs to a floor, and keeps the
    screenings and displayer assignments that reference it.
    """

    def __init__(
        self,
        number: int,
        floor: "Floor | None" = None,
        *,
        description: str | None = None,
        cleaning_period: timedelta = HALL_CLEANING_PERIOD,
        registry: Registry | None = None,
    ):
        """Create and register a hall, linking it to floor if given.

        Args:
            number: Positive hall number, unique on its floor
            floor: Owning floor (default: none)
            description: Description (default: "Hall <number>")
            cleaning_period: Time allowed between cleanings (default: 3 hours)
            registry: Registry to register in (default: the floor's, else process registry)

        Raises:
            ValidationError: If an attribute is invalid
            ExistenceError: If floor has been deleted
            DuplicateError: If floor already has a hall with this number
        """
        if registry is None and floor is not None:
            registry = floor.registry
        super().__init__(
            description if description is not None else f"Hall {number}",
            cleaning_period,
            registry,
        )
        self._number = require_int(number, "hall number", minimum=1)
        self._floor: "Floor | None" = None
        self._seats = Composition(
            self,
            "seat",
            key=lambda seat: (seat.number, seat.row),
            capacity=self.registry.settings.hall_max_capacity,
        )
        self._screenings: list["Screening"] = []
        self._displayer_assignments: list["DisplayerAssignment"] = []

        if floor is not None:
            floor._check_hall(self)
        self._register()
        if floor is not None:
            floor._link_hall(self)

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        require_int(value, "hall number", minimum=1)
        if self._floor is not None:
            self._floor._halls.check_key(value, ignore=self)
        self._number = value

    @property
    def floor(self) -> "Floor | None":
        return self._floor

    @property
    def max_capacity(self) -> int:
        return self._seats.capacity

    # Seats

    @property
    def seats(self) -> tuple[Seat, ...]:
        return self._seats.all()

    def add_seat(self, number: int, row: str) -> Seat:
        """Create a seat in this hall.

        Args:
            number: Positive seat number
            row: Row letter (case-insensitive)

        Returns:
            The new seat

        Raises:
            ValidationError: If number or row is invalid
            ExistenceError: If the hall has been deleted
            CapacityError: If the hall is full
            DuplicateError: If the hall already has a seat at (number, row)
        """
        return Seat(number, row, self)

    def remove_seat(self, seat: Seat) -> None:
        """Remove a seat from this hall and delete it.

        Raises:
            NullReferenceError: If seat is None
            ExistenceError: If seat is not in this hall
        """
        require(seat, "seat")
        self._seats.remove(seat)
        seat._hall = None
        seat.delete()

    def find_seat(self, number: int, row: str) -> Seat | None:
        """Get the seat at (number, row), or None.

        Raises:
            ValidationError: If row is not a single letter
        """
        return self._seats.find((number, normalize_row(row)))

    def _check_seat(self, seat: Seat) -> None:
        self._check_not_deleted()
        self._check_same_registry(seat)
        self._seats.check_attach(seat)

    def _link_seat(self, seat: Seat) -> None:
        self._seats.add(seat)
        seat._hall = self

    def _unlink_seat(self, seat: Seat) -> None:
        self._seats.discard(seat)
        seat._hall = None

    # Screenings and displayer assignments

    @property
    def screenings(self) -> tuple["Screening", ...]:
        return tuple(self._screenings)

    @property
    def displayer_assignments(self) -> tuple["DisplayerAssignment", ...]:
        return tuple(self._displayer_assignments)

    def _add_screening(self, screening: "Screening") -> None:
        self._screenings.append(screening)

    def _remove_screening(self, screening: "Screening") -> None:
        self._screenings = [s for s in self._screenings if s is not screening]

    def _add_displayer_assignment(self, assignment: "DisplayerAssignment") -> None:
        self._displayer_assignments.append(assignment)

    def _remove_displayer_assignment(self, assignment: "DisplayerAssignment") -> None:
        self._displayer_assignments = [a for a in self._displayer_assignments if a is not assignment]

    def delete(self) -> None:
        """Delete the hall.

        Cancels its screenings, deletes its seats, leaves its floor, cancels
        its displayer and cleaning assignments, then deregisters.
        """
        for screening in list(self._screenings):
            screening.cancel()
        for seat in self._seats:
            seat.delete()
        if self._floor is not None:
            self._floor._unlink_hall(self)
        for assignment in list(self._displayer_assignments):
            assignment.cancel()
        self._cancel_cleaning_assignments()
        self._deregister()
        logger.debug(f"Deleted {self}")

    def __str__(self) -> str:
        return f"Hall {self._number} (Max Capacity: {self.max_capacity})"

    def __repr__(self) -> str:
        floor = self._floor.number if self._floor is not None else None
        return f"Hall(number={self._number}, floor={floor})"
