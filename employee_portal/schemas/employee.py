from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


# column name -> name used by clients in request bodies and messages
FIELD_LABELS = {
    "employee_id": "employeeId",
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "date_of_birth": "dateOfBirth",
    "gender": "gender",
    "address": "address",
    "department": "department",
    "position": "position",
    "employment_type": "employmentType",
    "start_date": "startDate",
    "salary": "salary",
    "username": "username",
    "password": "password",
    "permissions": "permissions",
}

REQUIRED_FIELDS = (
    "employee_id",
    "first_name",
    "last_name",
    "email",
    "department",
    "position",
    "employment_type",
    "start_date",
    "username",
    "password",
)

# employee_id, password and the timestamps cannot be changed through an update
UPDATABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "date_of_birth",
    "gender",
    "address",
    "department",
    "position",
    "employment_type",
    "start_date",
    "salary",
    "username",
    "permissions",
)


class EmployeeInput(BaseModel):
    """
    Raw employee fields as submitted by a form post or a JSON body.

    Every field is optional here; ``None`` is the one marker for "not
    supplied". Blank strings collapse to ``None`` so a form with an empty
    input and a body that omits the key mean the same thing.
    """

    model_config = ConfigDict(extra="ignore")

    employee_id: Optional[str] = Field(default=None, validation_alias=_alias("employeeId", "employee_id"))
    first_name: Optional[str] = Field(default=None, validation_alias=_alias("firstName", "first_name"))
    last_name: Optional[str] = Field(default=None, validation_alias=_alias("lastName", "last_name"))
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = Field(
        default=None, validation_alias=_alias("dateOfBirth", "dob", "date_of_birth")
    )
    gender: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    employment_type: Optional[str] = Field(
        default=None, validation_alias=_alias("employmentType", "employment_type")
    )
    start_date: Optional[str] = Field(default=None, validation_alias=_alias("startDate", "start_date"))
    salary: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    permissions: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any, info: ValidationInfo) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        if not value.strip():
            return None
        # passwords are kept exactly as typed
        if info.field_name == "password":
            return value
        return value.strip()

    def missing_required(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]
