from datetime import date, datetime
from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, Field

from app.schemas.base import CamelModel
from app.schemas.department import DepartmentOut


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _valid_email(value: str) -> str:
    # syntax check only; the address is stored exactly as sent
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


EmployeeName = Annotated[str, Field(max_length=100), AfterValidator(_not_blank)]
EmployeeEmail = Annotated[str, AfterValidator(_valid_email)]


class EmployeeCreate(CamelModel):
    name: EmployeeName
    email: EmployeeEmail
    department_id: int
    join_date: date


class EmployeeUpdate(CamelModel):
    """Partial update: fields left out (or null) keep their current value."""
    name: EmployeeName | None = None
    email: EmployeeEmail | None = None
    department_id: int | None = None


class EmployeeOut(CamelModel):
    id: int
    employee_number: str
    name: str
    email: str
    department: DepartmentOut
    join_date: date
    created_at: datetime
