"""Screenings and displayer assignments that reference halls."""

import logging
from datetime import datetime

from ..exceptions import ValidationError
from ..registry import Registry
from ..utils import require, require_text
from .base import Entity
from .hall import Hall

logger = logging.getLogger(__name__)


def _require_datetime(value, name: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"{name} must be a datetime, got {value!r}")
    return value


class Screening(Entity):
    """A movie screening in a hall."""

    def __init__(self, hall: Hall, movie_title: str, starts_at: datetime):
        require(hall, "hall")
        super().__init__(hall.registry)
        hall._check_not_deleted()
        self._movie_title = require_text(movie_title, "movie_title")
        self._starts_at = _require_datetime(starts_at, "starts_at")
        self._hall: Hall | None = hall
        self._cancelled = False

        self._register()
        hall._add_screening(self)

    @property
    def hall(self) -> Hall | None:
        return self._hall

    @property
    def movie_title(self) -> str:
        return self._movie_title

    @property
    def starts_at(self) -> datetime:
        return self._starts_at

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Cancel the screening: release its hall and deregister it."""
        if self._cancelled:
            return
        if self._hall is not None:
            self._hall._remove_screening(self)
            self._hall = None
        self._cancelled = True
        self._deregister()
        logger.info(f"Cancelled screening of {self._movie_title!r} at {self._starts_at}")

    def delete(self) -> None:
        self.cancel()

    def __str__(self) -> str:
        return f"{self._movie_title} at {self._starts_at:%Y-%m-%d %H:%M}"


class Displayer(Entity):
    """Display device (projector, screen) that can be assigned to halls."""

    def __init__(self, model: str, *, registry: Registry | None = None):
        super().__init__(registry)
        self._model = require_text(model, "model")
        self._assignments: list["DisplayerAssignment"] = []
        self._register()

    @property
    def model(self) -> str:
        return self._model

    @property
    def assignments(self) -> tuple["DisplayerAssignment", ...]:
        return tuple(self._assignments)

    def delete(self) -> None:
        for assignment in list(self._assignments):
            assignment.cancel()
        self._deregister()

    def __str__(self) -> str:
        return f"Displayer {self._model}"


class DisplayerAssignment(Entity):
    """Assignment of a displayer to a hall."""

    def __init__(self, displayer: Displayer, hall: Hall, assigned_at: datetime | None = None):
        require(displayer, "displayer")
        require(hall, "hall")
        super().__init__(hall.registry)
        self._check_same_registry(displayer)
        displayer._check_not_deleted()
        hall._check_not_deleted()
        self._assigned_at = _require_datetime(
            assigned_at if assigned_at is not None else datetime.now(), "assigned_at"
        )
        self._displayer: Displayer | None = displayer
        self._hall: Hall | None = hall

        self._register()
        displayer._assignments.append(self)
        hall._add_displayer_assignment(self)

    @property
    def displayer(self) -> Displayer | None:
        return self._displayer

    @property
    def hall(self) -> Hall | None:
        return self._hall

    @property
    def assigned_at(self) -> datetime:
        return self._assigned_at

    def cancel(self) -> None:
        """Unlink the assignment from its displayer and hall and deregister it."""
        if self._hall is not None:
            self._hall._remove_displayer_assignment(self)
            self._hall = None
        if self._displayer is not None:
            self._displayer._assignments = [
                a for a in self._displayer._assignments if a is not self
            ]
            self._displayer = None
        self._deregister()

    def delete(self) -> None:
        self.cancel()

    def __str__(self) -> str:
        return f"{self._displayer} in {self._hall}"
