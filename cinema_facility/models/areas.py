"""Pydantic records for persisted floors, halls, WCs and seats."""

from datetime import timedelta
from typing import ClassVar

from pydantic import BaseModel, Field

from ..entities.wc import WCType


class SeatRecord(BaseModel):
    """Seat inside a hall record."""

    tag: ClassVar[str] = "seat"

    number: int = Field(gt=0, description="Seat number")
    row: str = Field(min_length=1, max_length=1, description="Row letter")

    model_config = {"frozen": True}


class HallRecord(BaseModel):
    """Hall with its seats; floor is the number of the owning floor, if any."""

    tag: ClassVar[str] = "hall"

    number: int = Field(gt=0, description="Hall number")
    description: str = Field(min_length=1, description="Area description")
    cleaning_period: timedelta = Field(description="Time allowed between cleanings")
    floor: int | None = Field(default=None, ge=0, description="Owning floor number")
    seats: list[SeatRecord] = Field(default_factory=list, description="Seats in hall order")

    model_config = {"frozen": True}


class WCRecord(BaseModel):
    """WC; floor is required unless the record is nested in its floor."""

    tag: ClassVar[str] = "wc"

    type: WCType = Field(description="WC type")
    description: str = Field(min_length=1, description="Area description")
    cleaning_period: timedelta = Field(description="Time allowed between cleanings")
    floor: int | None = Field(default=None, ge=0, description="Owning floor number")

    model_config = {"frozen": True}


class FloorRecord(BaseModel):
    """Floor, optionally with its halls and WCs nested."""

    tag: ClassVar[str] = "floor"

    number: int = Field(ge=0, description="Floor number")
    description: str = Field(min_length=1, description="Area description")
    cleaning_period: timedelta = Field(description="Time allowed between cleanings")
    halls: list[HallRecord] = Field(default_factory=list, description="Nested halls")
    wcs: list[WCRecord] = Field(default_factory=list, description="Nested WCs")

    model_config = {"frozen": True}
