from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, DateTime, Enum, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from employee_portal.db.base import Base

GENDERS = ("male", "female", "other")
EMPLOYMENT_TYPES = ("full-time", "part-time", "contract", "intern")
PERMISSIONS = ("employee", "manager", "admin")
DEFAULT_PERMISSION = "employee"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    employee_id: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(Enum(*GENDERS, name="employee_gender"), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    employment_type: Mapped[str] = mapped_column(
        Enum(*EMPLOYMENT_TYPES, name="employee_employment_type"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    salary: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # Stored verbatim; there is no hashing layer in this application.
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    permissions: Mapped[str] = mapped_column(
        Enum(*PERMISSIONS, name="employee_permissions"),
        default=DEFAULT_PERMISSION,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def to_dict(self, include_password: bool = True) -> dict:
        data = {c.name: getattr(self, c.name) for c in self.__table__.columns}
        if not include_password:
            data.pop("password", None)
        return data
