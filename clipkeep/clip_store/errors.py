"""Errors raised at the Clip Store boundary."""


class ClipStoreError(Exception):
    """Base class for all Clip Store failures."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ClipStoreError):
    """A required field is missing or empty."""

    status_code = 400


class NotFound(ClipStoreError):
    """The operation targets a clip that does not exist."""

    status_code = 404


class StoreUnavailable(ClipStoreError):
    """There is no live connection to the database."""

    status_code = 500


class UnknownStoreError(ClipStoreError):
    """Any other persistence failure."""

    status_code = 500
