"""Runtime settings for cinema-facility."""

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

HALL_MAX_CAPACITY = 100

ENV_HALL_MAX_CAPACITY = "CINEMA_HALL_MAX_CAPACITY"
ENV_DATA_DIR = "CINEMA_DATA_DIR"


class Settings(BaseModel):
    """Settings shared by every entity bound to a registry."""

    hall_max_capacity: int = Field(
        default=HALL_MAX_CAPACITY, ge=1, description="Maximum number of seats in a hall"
    )
    data_dir: Path = Field(default=Path("data"), description="Directory for saved extents")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        Reads CINEMA_HALL_MAX_CAPACITY and CINEMA_DATA_DIR, falling back to the
        defaults when they are not set.

        Returns:
            Settings instance

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        values = {}
        capacity = os.environ.get(ENV_HALL_MAX_CAPACITY)
        if capacity:
            values["hall_max_capacity"] = capacity
        data_dir = os.environ.get(ENV_DATA_DIR)
        if data_dir:
            values["data_dir"] = Path(data_dir).expanduser()
        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid settings in environment: {e}") from e
