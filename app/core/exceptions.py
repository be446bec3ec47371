"""Domain errors raised by the service layer.

Each error carries the HTTP status the API layer answers with, so endpoints
never have to translate them one by one.
"""


class RollCallError(Exception):
    """Base class for expected check-in failures."""

    code = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RollCallError):
    """A token or id has no matching record."""

    code = "not_found"
    status_code = 404


class ConflictError(RollCallError):
    """The member already has an attendance record."""

    code = "conflict"
    status_code = 400


class UnauthorizedError(RollCallError):
    """An admin-only operation was invoked without an admin session."""

    code = "unauthorized"
    status_code = 401


class StoreFailureError(RollCallError):
    """The database rejected a read or write."""

    code = "store_failure"
    status_code = 500


class InputFailureError(RollCallError):
    """An uploaded file could not be read as a roster CSV."""

    code = "input_failure"
    status_code = 400
