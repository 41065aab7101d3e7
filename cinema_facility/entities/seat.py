"""Seats inside a hall."""

from typing import TYPE_CHECKING

from ..exceptions import ValidationError
from ..utils import require, require_int
from .base import Entity

if TYPE_CHECKING:
    from .hall import Hall


def normalize_row(row: str) -> str:
    """Upper-case a single-letter row.

    Raises:
        ValidationError: If row is not a single letter
    """
    if not isinstance(row, str) or len(row) != 1 or not row.isalpha():
        raise ValidationError(f"row must be a single letter, got {row!r}")
    # Some letters upper-case to several characters ("ß" -> "SS")
    upper = row.upper()
    if len(upper) != 1:
        raise ValidationError(f"row must be a single letter, got {row!r}")
    return upper


class Seat(Entity):
    """A seat identified by (number, row) within its hall."""

    def __init__(self, number: int, row: str, hall: "Hall"):
        require(hall, "hall")
        super().__init__(hall.registry)
        self._number = require_int(number, "seat number", minimum=1)
        self._row = normalize_row(row)
        self._hall: "Hall | None" = None

        hall._check_seat(self)
        self._register()
        hall._link_seat(self)

    @property
    def number(self) -> int:
        return self._number

    @property
    def row(self) -> str:
        return self._row

    @property
    def hall(self) -> "Hall | None":
        return self._hall

    def delete(self) -> None:
        if self._hall is not None:
            self._hall._unlink_seat(self)
        self._deregister()

    def __str__(self) -> str:
        return f"Seat {self._row}{self._number}"

    def __repr__(self) -> str:
        return f"Seat(number={self._number}, row={self._row!r})"
