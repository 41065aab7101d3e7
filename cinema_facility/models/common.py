"""Pydantic models shared across persistence operations."""

from pydantic import BaseModel, Field

from ..exceptions import PersistenceError


class LoadResult(BaseModel):
    """Outcome of loading an extent from a document."""

    entity_type: str = Field(description="Name of the loaded entity class")
    path: str | None = Field(default=None, description="Source document, if read from a file")
    success: bool = Field(description="Whether the extent was loaded")
    loaded: int = Field(default=0, ge=0, description="Number of entities in the loaded extent")
    error: str | None = Field(default=None, description="Failure reason if not successful")

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return self.success

    def raise_for_status(self) -> "LoadResult":
        """Raise if the load failed.

        Returns:
            self, when the load succeeded

        Raises:
            PersistenceError: If the load failed
        """
        if not self.success:
            raise PersistenceError(f"Failed to load {self.entity_type}: {self.error}")
        return self
