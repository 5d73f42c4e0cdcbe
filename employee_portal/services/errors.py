"""
Failures raised by the employee store and service.

Route handlers catch these at the HTTP boundary and turn them into
status-coded JSON (or plain text for the HTML views).
"""
from typing import Optional


class EmployeeError(Exception):
    """Base class for every employee operation failure."""


class ValidationFailed(EmployeeError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateKey(EmployeeError):
    """A unique column (employee_id, email or username) already holds the value."""

    def __init__(self, field: str):
        super().__init__(f"duplicate value for {field}")
        self.field = field


class ConstraintViolation(EmployeeError):
    """Integrity failure that is not a uniqueness collision (e.g. NOT NULL)."""


class NotFound(EmployeeError):
    def __init__(self, employee_pk: Optional[int] = None):
        super().__init__(f"employee {employee_pk} not found")
        self.employee_pk = employee_pk


class StoreError(EmployeeError):
    """Any other database failure."""
