"""Pydantic records for persisted employees."""

from typing import ClassVar

from pydantic import BaseModel, Field

from ..entities.staff import MAX_PART_TIME_HOURS


class PartTimeContractRecord(BaseModel):
    """Part-time contract nested in its employee."""

    tag: ClassVar[str] = "part-time-contract"

    hours_per_week: int = Field(ge=1, le=MAX_PART_TIME_HOURS, description="Hours per week")

    model_config = {"frozen": True}


class EmployeeRecord(BaseModel):
    """Employee with an optional part-time contract."""

    tag: ClassVar[str] = "employee"

    name: str = Field(min_length=1, description="First name")
    surname: str = Field(min_length=1, description="Last name")
    part_time_contract: PartTimeContractRecord | None = Field(
        default=None, description="Part-time contract, if any"
    )

    model_config = {"frozen": True}
