"""
Custom exceptions for the parcel data-access layer.

Zero-row outcomes are reported through these typed errors. Every other
storage failure propagates unchanged from SQLAlchemy.
"""

from typing import Any, Dict

from sqlalchemy.exc import NoResultFound


class TrackerError(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ParcelNotFoundError(TrackerError, NoResultFound):
    """
    Raised when a point read matches no parcel.

    It is also the driver's empty-result error, so callers catching
    ``NoResultFound`` see it too.
    """

    def __init__(self, number: int):
        super().__init__(
            message=f"Parcel with number {number} not found",
            error_code="ERR_NOT_FOUND_001",
            details={"number": number}
        )


class NoRowsUpdatedError(TrackerError):
    """
    Raised when a conditional update touches no rows.

    Either the parcel does not exist or its status blocks the update.
    """

    def __init__(self, number: int):
        super().__init__(
            message=f"parcel store: no rows have been updated (number={number})",
            error_code="ERR_NO_ROWS_UPDATED",
            details={"number": number}
        )


class NoRowsDeletedError(TrackerError):
    """
    Raised when a conditional delete removes no rows.

    Either the parcel does not exist or it is no longer registered.
    """

    def __init__(self, number: int):
        super().__init__(
            message=f"parcel store: no rows have been deleted (number={number})",
            error_code="ERR_NO_ROWS_DELETED",
            details={"number": number}
        )
