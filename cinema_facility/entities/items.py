"""Sellable and rentable items."""

import math
from abc import abstractmethod

from ..exceptions import ValidationError
from ..registry import Registry
from ..utils import require_text
from .base import Entity


class Item(Entity):
    """Abstract base of the item inventory.

    The Item extent holds every snack and pair of 3D glasses.
    """

    def __init__(self, name: str, price: float, *, registry: Registry | None = None):
        super().__init__(registry)
        self._name = require_text(name, "name")
        self._price = self._check_price(price)
        self._register()

    @staticmethod
    def _check_price(value: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(f"price must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValidationError(f"price must be finite, got {value}")
        if value < 0:
            raise ValidationError(f"price cannot be negative, got {value}")
        return float(value)

    @property
    @abstractmethod
    def category(self) -> str:
        """Short category label (e.g., "snack")."""

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_text(value, "name")

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self._price = self._check_price(value)

    def delete(self) -> None:
        self._deregister()

    def __str__(self) -> str:
        return f"{self._name} ({self._price:.2f})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, price={self._price})"


class Snack(Item):
    """Food or drink sold at the bar."""

    @property
    def category(self) -> str:
        return "snack"


class Glass3D(Item):
    """3D glasses handed out for 3D screenings."""

    @property
    def category(self) -> str:
        return "3d-glasses"
