"""
Reservation Error Taxonomy

Every failure that leaves the booking engine is one of these. Database
exceptions never cross the engine boundary; they are translated by
shared.application.uow.translate_database_errors.
"""


class ReservationError(Exception):
    """Base class for booking engine errors."""

    code = "error"
    retryable = False

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)

    default_message = "Reservation request failed."


class InvalidInput(ReservationError):
    """A field is malformed or out of range. Fix the request and resend."""

    code = "invalid_input"
    default_message = "Invalid reservation request."


class NotFound(ReservationError):
    """The referenced room or reservation does not exist."""

    code = "not_found"
    default_message = "Requested resource was not found."


class Conflict(ReservationError):
    """The requested slot overlaps an existing reservation."""

    code = "conflict"
    default_message = "The room is already reserved for that time."


class Unavailable(ReservationError):
    """The store is unreachable or the connection was lost. Safe to retry."""

    code = "unavailable"
    retryable = True
    default_message = "Database connection error. Please try again later."


class Internal(ReservationError):
    """Unexpected store failure."""

    code = "internal"
    default_message = "An error occurred while processing the reservation."
