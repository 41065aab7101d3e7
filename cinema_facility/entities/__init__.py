"""Entities of the cinema facility model.

You can import from specific modules:
    from cinema_facility.entities.floor import Floor
    from cinema_facility.entities.staff import Employee, PartTimeContract

Or from this package:
    from cinema_facility.entities import Floor, Hall, Seat, WC
"""

from .base import Entity
from .cleanable_area import CleanableArea
from .floor import Floor
from .hall import Hall
from .items import Glass3D, Item, Snack
from .scheduling import Displayer, DisplayerAssignment, Screening
from .seat import Seat
from .staff import CleaningAssignment, Employee, PartTimeContract
from .wc import WC, WCType

__all__ = [
    "Entity",
    # Areas
    "CleanableArea",
    "Floor",
    "Hall",
    "Seat",
    "WC",
    "WCType",
    # Staff
    "Employee",
    "PartTimeContract",
    "CleaningAssignment",
    # Scheduling
    "Screening",
    "Displayer",
    "DisplayerAssignment",
    # Items
    "Item",
    "Snack",
    "Glass3D",
]
