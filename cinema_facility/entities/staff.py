"""Employees, their part-time contracts and cleaning assignments."""

import logging
from datetime import datetime

from ..exceptions import DuplicateError, ExistenceError, MultiplicityError, ValidationError
from ..registry import Registry
from ..utils import require, require_int, require_text
from .base import Entity
from .cleanable_area import CleanableArea

logger = logging.getLogger(__name__)

MAX_HOURS_PER_DAY = 6
WORK_DAYS_PER_WEEK = 5
MAX_PART_TIME_HOURS = MAX_HOURS_PER_DAY * WORK_DAYS_PER_WEEK


class Employee(Entity):
    """Cinema employee.

    The contract type is held by composition rather than subclassing, so an
    employee can switch contracts at runtime.
    """

    def __init__(self, name: str, surname: str, *, registry: Registry | None = None):
        super().__init__(registry)
        self._name = require_text(name, "name")
        self._surname = require_text(surname, "surname")
        self._part_time_contract: "PartTimeContract | None" = None
        self._cleaning_assignments: list["CleaningAssignment"] = []
        self._register()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_text(value, "name")

    @property
    def surname(self) -> str:
        return self._surname

    @surname.setter
    def surname(self, value: str) -> None:
        self._surname = require_text(value, "surname")

    @property
    def full_name(self) -> str:
        return f"{self._name} {self._surname}"

    @property
    def part_time_contract(self) -> "PartTimeContract | None":
        return self._part_time_contract

    @property
    def cleaning_assignments(self) -> tuple["CleaningAssignment", ...]:
        return tuple(self._cleaning_assignments)

    def set_part_time(self, contract: "PartTimeContract") -> None:
        """Link a part-time contract to this employee, on both sides.

        Args:
            contract: Contract not yet held by anyone else

        Raises:
            NullReferenceError: If contract is None
            ExistenceError: If this employee or the contract has been deleted
            DuplicateError: If this employee already holds a contract
            MultiplicityError: If contract belongs to another employee
        """
        self._check_part_time(contract)
        contract._check_not_deleted()
        self._part_time_contract = contract
        contract._employee = self
        logger.debug(f"Linked {contract} to {self}")

    def _check_part_time(self, contract: "PartTimeContract") -> None:
        require(contract, "contract")
        self._check_not_deleted()
        self._check_same_registry(contract)
        if self._part_time_contract is contract:
            raise DuplicateError(f"{contract} is already linked to {self}")
        if self._part_time_contract is not None:
            raise DuplicateError(f"{self} already has {self._part_time_contract}")
        if contract.employee is not None and contract.employee is not self:
            raise MultiplicityError(f"{contract} already belongs to {contract.employee}")

    def remove_part_time(self) -> None:
        """Delete this employee's part-time contract.

        Raises:
            ExistenceError: If the employee has no contract
        """
        if self._part_time_contract is None:
            raise ExistenceError(f"{self} has no part-time contract")
        self._part_time_contract.delete()

    def _add_cleaning_assignment(self, assignment: "CleaningAssignment") -> None:
        self._cleaning_assignments.append(assignment)

    def _remove_cleaning_assignment(self, assignment: "CleaningAssignment") -> None:
        self._cleaning_assignments = [a for a in self._cleaning_assignments if a is not assignment]

    def delete(self) -> None:
        """Delete the employee, their contract and cleaning assignments."""
        if self._part_time_contract is not None:
            self._part_time_contract.delete()
        for assignment in list(self._cleaning_assignments):
            assignment.cancel()
        self._deregister()
        logger.debug(f"Deleted {self}")

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"Employee(name={self._name!r}, surname={self._surname!r})"


class PartTimeContract(Entity):
    """Part-time contract of exactly one employee."""

    def __init__(self, hours_per_week: int, employee: Employee):
        """Create a contract and link it to employee.

        Args:
            hours_per_week: Hours worked per week, 1 to 30
            employee: Employee without a contract

        Raises:
            NullReferenceError: If employee is None
            ValidationError: If hours_per_week is out of range
            ExistenceError: If employee has been deleted
            DuplicateError: If employee already holds a contract
        """
        require(employee, "employee")
        super().__init__(employee.registry)
        self._hours_per_week = self._check_hours(hours_per_week)
        self._employee: Employee | None = None

        employee._check_part_time(self)
        self._register()
        employee.set_part_time(self)

    @staticmethod
    def _check_hours(value: int) -> int:
        try:
            return require_int(value, "hours_per_week", minimum=1, maximum=MAX_PART_TIME_HOURS)
        except ValidationError as e:
            raise ValidationError(
                f"Part-time employee must work between 1 and {MAX_PART_TIME_HOURS} hours: {e}"
            ) from e

    @property
    def hours_per_week(self) -> int:
        return self._hours_per_week

    @hours_per_week.setter
    def hours_per_week(self, value: int) -> None:
        self._hours_per_week = self._check_hours(value)

    @property
    def employee(self) -> Employee | None:
        return self._employee

    def delete(self) -> None:
        if self._employee is not None:
            self._employee._part_time_contract = None
            self._employee = None
        self._deregister()

    def __str__(self) -> str:
        return f"Part-Time Contract ({self._hours_per_week}h/week)"

    def __repr__(self) -> str:
        return f"PartTimeContract(hours_per_week={self._hours_per_week})"


class CleaningAssignment(Entity):
    """An employee cleaning an area at a given time."""

    def __init__(
        self,
        employee: Employee,
        area: CleanableArea,
        cleaned_at: datetime | None = None,
    ):
        """Create an assignment and link it to both employee and area.

        Args:
            employee: Employee doing the cleaning
            area: Area being cleaned
            cleaned_at: Time of cleaning (default: now)

        Raises:
            NullReferenceError: If employee or area is None
            ExistenceError: If employee or area has been deleted
            ValidationError: If cleaned_at is not a datetime
        """
        require(employee, "employee")
        require(area, "area")
        super().__init__(employee.registry)
        self._check_same_registry(area)
        employee._check_not_deleted()
        area._check_not_deleted()
        if cleaned_at is None:
            cleaned_at = datetime.now()
        if not isinstance(cleaned_at, datetime):
            raise ValidationError(f"cleaned_at must be a datetime, got {cleaned_at!r}")
        self._cleaned_at = cleaned_at
        self._employee: Employee | None = employee
        self._area: CleanableArea | None = area

        self._register()
        area._add_cleaning_assignment(self)
        employee._add_cleaning_assignment(self)

    @property
    def cleaned_at(self) -> datetime:
        return self._cleaned_at

    @property
    def employee(self) -> Employee | None:
        return self._employee

    @property
    def area(self) -> CleanableArea | None:
        return self._area

    def cancel(self) -> None:
        """Unlink the assignment from its employee and area and deregister it."""
        if self._area is not None:
            self._area._remove_cleaning_assignment(self)
            self._area = None
        if self._employee is not None:
            self._employee._remove_cleaning_assignment(self)
            self._employee = None
        self._deregister()

    def delete(self) -> None:
        self.cancel()

    def __str__(self) -> str:
        return f"Cleaning of {self._area} by {self._employee} at {self._cleaned_at:%Y-%m-%d %H:%M}"
