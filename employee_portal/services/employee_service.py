from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from employee_portal.models.employee import (
    DEFAULT_PERMISSION,
    EMPLOYMENT_TYPES,
    GENDERS,
    PERMISSIONS,
    Employee,
)
from employee_portal.schemas.employee import FIELD_LABELS, UPDATABLE_FIELDS, EmployeeInput
from employee_portal.services.employee_store import EmployeeStore
from employee_portal.services.errors import ValidationFailed

MISSING_FIELDS_MESSAGE = "All required fields must be filled"

CHOICES = {
    "gender": GENDERS,
    "employment_type": EMPLOYMENT_TYPES,
    "permissions": PERMISSIONS,
}
DATE_FIELDS = ("date_of_birth", "start_date")
CENTS = Decimal("0.01")
# Numeric(10, 2) holds at most 8 integer digits
SALARY_LIMIT = Decimal("1e8")


def _invalid(field: str) -> ValidationFailed:
    return ValidationFailed(f"Invalid value for {FIELD_LABELS[field]}")


def _coerce(field: str, value: Optional[str]) -> Any:
    """Turn one submitted string into its column value; ``None`` stays ``None``."""
    if value is None:
        return None

    if field in DATE_FIELDS:
        try:
            return date.fromisoformat(value)
        except ValueError:
            raise _invalid(field)

    if field == "salary":
        try:
            amount = Decimal(value)
            if not amount.is_finite():
                raise _invalid(field)
            amount = amount.quantize(CENTS)
        except InvalidOperation:
            raise _invalid(field)
        if abs(amount) >= SALARY_LIMIT:
            raise _invalid(field)
        return amount

    if field in CHOICES:
        lowered = value.lower()
        if lowered not in CHOICES[field]:
            raise _invalid(field)
        return lowered

    return value


def _column_values(data: EmployeeInput, fields: tuple[str, ...]) -> dict[str, Any]:
    values = {name: _coerce(name, getattr(data, name)) for name in fields}
    if "permissions" in values and values["permissions"] is None:
        values["permissions"] = DEFAULT_PERMISSION
    return values


class EmployeeService:
    """Employee operations on top of an injected :class:`EmployeeStore`."""

    CREATE_FIELDS = ("employee_id", "password") + UPDATABLE_FIELDS

    def __init__(self, store: EmployeeStore):
        self.store = store

    async def create_employee(self, data: EmployeeInput) -> int:
        if data.missing_required():
            raise ValidationFailed(MISSING_FIELDS_MESSAGE)

        return await self.store.insert(_column_values(data, self.CREATE_FIELDS))

    async def get_employee(self, employee_pk: int) -> Employee:
        return await self.store.fetch_by_id(employee_pk)

    async def list_employees(self) -> list[Employee]:
        return await self.store.fetch_all()

    async def update_employee(self, employee_pk: int, data: EmployeeInput) -> None:
        # No presence check: absent fields are written as NULL and the
        # table's NOT NULL constraints reject blanking a required column.
        await self.store.update(employee_pk, _column_values(data, UPDATABLE_FIELDS))

    async def delete_employee(self, employee_pk: int) -> None:
        await self.store.delete_by_id(employee_pk)
