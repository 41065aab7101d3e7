"""Pydantic records for persisted items."""

from typing import ClassVar

from pydantic import BaseModel, Field


class SnackRecord(BaseModel):
    """Snack item."""

    tag: ClassVar[str] = "snack"

    name: str = Field(min_length=1, description="Item name")
    price: float = Field(ge=0, description="Item price")

    model_config = {"frozen": True}


class Glass3DRecord(BaseModel):
    """3D glasses item."""

    tag: ClassVar[str] = "glass3d"

    name: str = Field(min_length=1, description="Item name")
    price: float = Field(ge=0, description="Item price")

    model_config = {"frozen": True}
