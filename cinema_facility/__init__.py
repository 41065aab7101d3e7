"""Cinema Facility - In-memory object model of a cinema with XML persistence."""

__version__ = "0.1.0"

# Settings and registries
from .config import Settings
from .registry import Extent, Registry, default_registry, reset_default_registry

# Entities
from .entities import (
    CleanableArea,
    CleaningAssignment,
    Displayer,
    DisplayerAssignment,
    Employee,
    Entity,
    Floor,
    Glass3D,
    Hall,
    Item,
    PartTimeContract,
    Screening,
    Seat,
    Snack,
    WC,
    WCType,
)

# Exceptions
from .exceptions import (
    CapacityError,
    CinemaFacilityError,
    DuplicateError,
    ExistenceError,
    MultiplicityError,
    NullReferenceError,
    ParseError,
    PersistenceError,
    ValidationError,
)

# Models
from .models import LoadResult

# Persistence
from .persistence import XmlExtentStore

__all__ = [
    # Version
    "__version__",
    # Settings and registries
    "Settings",
    "Extent",
    "Registry",
    "default_registry",
    "reset_default_registry",
    # Entities
    "Entity",
    "CleanableArea",
    "Floor",
    "Hall",
    "Seat",
    "WC",
    "WCType",
    "Employee",
    "PartTimeContract",
    "CleaningAssignment",
    "Screening",
    "Displayer",
    "DisplayerAssignment",
    "Item",
    "Snack",
    "Glass3D",
    # Exceptions
    "CinemaFacilityError",
    "ValidationError",
    "NullReferenceError",
    "DuplicateError",
    "ExistenceError",
    "MultiplicityError",
    "CapacityError",
    "PersistenceError",
    "ParseError",
    # Models
    "LoadResult",
    # Persistence
    "XmlExtentStore",
]
