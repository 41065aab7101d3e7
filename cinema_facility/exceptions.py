"""Custom exceptions for cinema-facility package."""


class CinemaFacilityError(Exception):
    """Base exception for all cinema-facility errors."""

    pass


class ValidationError(CinemaFacilityError):
    """Raised when an attribute value is out of range or empty."""

    pass


class NullReferenceError(CinemaFacilityError):
    """Raised when a required reference is missing."""

    pass


class DuplicateError(CinemaFacilityError):
    """Raised on a natural-key collision or when re-linking an already linked pair."""

    pass


class ExistenceError(CinemaFacilityError):
    """Raised when removing something that is not present."""

    pass


class MultiplicityError(CinemaFacilityError):
    """Raised when an association would break its multiplicity."""

    pass


class CapacityError(MultiplicityError):
    """Raised when a bounded collection is already full."""

    pass


class PersistenceError(CinemaFacilityError):
    """Base exception for save/load errors."""

    pass


class ParseError(PersistenceError):
    """Raised when a persisted document cannot be parsed."""

    pass
