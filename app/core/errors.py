"""
Domain errors raised by the service layer.

Each error carries the error code returned to API clients. The mapping to
HTTP status codes lives in app.api.error_handlers; nothing here imports
FastAPI.
"""


class EmployeeRecordsError(Exception):
    """Base error for everything the service layer raises on purpose."""

    error_code = "ERR500"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class DuplicateResourceError(EmployeeRecordsError):
    """A unique value (e.g. an active employee's email) is already taken."""

    error_code = "ERR001"


class ValidationError(EmployeeRecordsError):
    """Input passed the schema checks but is still unusable."""

    error_code = "ERR003"


class ResourceNotFoundError(EmployeeRecordsError):
    """The referenced employee or department does not exist (or is deleted)."""

    error_code = "ERR004"


class InternalServerError(EmployeeRecordsError):
    error_code = "ERR500"
