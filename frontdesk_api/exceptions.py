"""Custom exceptions for the front-desk API."""


class FrontDeskError(Exception):
    """Base exception for front-desk errors."""

    pass


class RecordValidationError(FrontDeskError, ValueError):
    """A payload or identifier failed validation. Nothing was written."""

    pass


class RecordNotFound(FrontDeskError, LookupError):
    """No record exists with the given identifier."""

    pass
