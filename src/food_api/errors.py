"""Error types surfaced to API clients."""

from fastapi import status


class FoodApiError(Exception):
    """Base class for expected client-facing errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FoodApiError):
    """Malformed or semantically invalid input."""


class ConflictError(ValidationError):
    """Path and body identifiers disagree."""


class UnsupportedApiVersionError(ValidationError):
    """Requested API version is not served."""


class NotFoundError(FoodApiError):
    """Unknown or non-positive identifier."""

    status_code = status.HTTP_404_NOT_FOUND
