"""
Customer domain exceptions.

Raised by the service layer when a precondition fails.  The API layer
does not catch these in each route; ``main.create_app`` registers a
single handler that turns every ``CustomerError`` into an HTTP 400
response carrying the message.
"""


class CustomerError(Exception):
    """Base class for failures of a customer operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(CustomerError):
    """A required argument was not provided."""


class CustomerNotFoundError(CustomerError):
    """The identifier does not resolve to a stored customer."""
