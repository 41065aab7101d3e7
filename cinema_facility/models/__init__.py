"""Pydantic models for persisted cinema-facility documents.

You can import from specific modules:
    from cinema_facility.models.areas import FloorRecord, HallRecord
    from cinema_facility.models.common import LoadResult

Or from the main models module:
    from cinema_facility.models import FloorRecord, LoadResult
"""

# Area records
from .areas import FloorRecord, HallRecord, SeatRecord, WCRecord

# Common models
from .common import LoadResult

# Item records
from .items import Glass3DRecord, SnackRecord

# Staff records
from .staff import EmployeeRecord, PartTimeContractRecord

__all__ = [
    # Area records
    "FloorRecord",
    "HallRecord",
    "SeatRecord",
    "WCRecord",
    # Item records
    "SnackRecord",
    "Glass3DRecord",
    # Staff records
    "EmployeeRecord",
    "PartTimeContractRecord",
    # Common models
    "LoadResult",
]
