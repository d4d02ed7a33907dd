"""Input validation exceptions."""

from eventhub.exceptions.base import AppException


class ValidationError(AppException):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None):
        """
        Create a ValidationError representing a rejected input.

        Parameters:
            message (str): Human-readable error message, returned verbatim to the caller.
            field (str | None): Optional name of the offending field or parameter.
        """
        self.field = field
        super().__init__(message)
