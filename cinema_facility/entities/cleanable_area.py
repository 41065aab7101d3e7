"""Areas of the cinema that are cleaned on a schedule."""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from ..registry import Registry
from ..utils import require_period, require_text
from .base import Entity

if TYPE_CHECKING:
    from .staff import CleaningAssignment


class CleanableArea(Entity):
    """Abstract base of Floor, Hall and WC.

    The CleanableArea extent holds every floor, hall and WC in creation order.
    """

    def __init__(
        self,
        description: str,
        cleaning_period: timedelta,
        registry: Registry | None = None,
    ):
        """Initialize shared area state. Does not register the instance.

        Args:
            description: Non-blank description
            cleaning_period: Time allowed between cleanings, in [0, 24h)
            registry: Registry the area belongs to (default: process registry)

        Raises:
            ValidationError: If description or cleaning_period is invalid
        """
        super().__init__(registry)
        self._description = require_text(description, "description")
        self._cleaning_period = require_period(cleaning_period)
        self._cleaning_assignments: list["CleaningAssignment"] = []

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = require_text(value, "description")

    @property
    def cleaning_period(self) -> timedelta:
        return self._cleaning_period

    @cleaning_period.setter
    def cleaning_period(self, value: timedelta) -> None:
        self._cleaning_period = require_period(value)

    @property
    def cleaning_assignments(self) -> tuple["CleaningAssignment", ...]:
        return tuple(self._cleaning_assignments)

    @property
    def last_cleaned_at(self) -> datetime | None:
        """Time of the latest cleaning assignment, or None if never cleaned."""
        if not self._cleaning_assignments:
            return None
        return max(a.cleaned_at for a in self._cleaning_assignments)

    def needs_cleaning_at(self, now: datetime) -> bool:
        """Check whether the area is due for cleaning at a given time.

        An area that was never cleaned always needs cleaning. Otherwise it
        needs cleaning once more than cleaning_period has elapsed since the
        latest assignment.

        Args:
            now: Reference time

        Returns:
            True if the area needs cleaning
        """
        last = self.last_cleaned_at
        if last is None:
            return True
        return now - last > self._cleaning_period

    @property
    def needs_cleaning(self) -> bool:
        """Whether the area needs cleaning right now."""
        return self.needs_cleaning_at(datetime.now())

    @classmethod
    def areas_to_clean(
        cls, registry: Registry | None = None, now: datetime | None = None
    ) -> list["CleanableArea"]:
        """List the areas of this class that need cleaning, in extent order.

        Args:
            registry: Registry to scan (default: process registry)
            now: Reference time (default: current time)
        """
        now = now if now is not None else datetime.now()
        return [area for area in cls.extent(registry) if area.needs_cleaning_at(now)]

    def _add_cleaning_assignment(self, assignment: "CleaningAssignment") -> None:
        self._cleaning_assignments.append(assignment)

    def _remove_cleaning_assignment(self, assignment: "CleaningAssignment") -> None:
        self._cleaning_assignments = [a for a in self._cleaning_assignments if a is not assignment]

    def _cancel_cleaning_assignments(self) -> None:
        for assignment in list(self._cleaning_assignments):
            assignment.cancel()
