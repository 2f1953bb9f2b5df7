"""
Employee business rules.

Email uniqueness and department existence are checked here before writing;
the partial unique indexes on the employees table are the durable guarantee
when two writers race past these checks. Soft-deleted employees are never
visible to any operation in this module.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

from sqlalchemy.orm import Session

from app.core.errors import DuplicateResourceError, ResourceNotFoundError, ValidationError
from app.db import repositories
from app.models.department import Department
from app.models.employee import Employee

logger = logging.getLogger(__name__)

EMPLOYEE_NUMBER_PREFIX = "EMP"
_EMPLOYEE_NUMBER_RE = re.compile(rf"^{EMPLOYEE_NUMBER_PREFIX}(\d+)$")


@dataclass
class EmployeePage:
    items: list[Employee]
    total: int
    page: int
    size: int


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_active_employee(db: Session, employee_id: int) -> Employee:
    employee = repositories.get_active_employee(db, employee_id)
    if employee is None:
        raise ResourceNotFoundError(f"Employee not found: id={employee_id}")
    return employee


def _require_department(db: Session, department_id: int) -> Department:
    department = repositories.get_department(db, department_id)
    if department is None:
        raise ResourceNotFoundError(f"Department does not exist: id={department_id}")
    return department


def _ensure_email_available(db: Session, email: str) -> None:
    if repositories.get_active_employee_by_email(db, email) is not None:
        raise DuplicateResourceError(f"Email address is already in use: {email}")


def next_employee_number(existing: list[str]) -> str:
    """
    Highest numeric suffix among `existing` plus one, as EMP + at least
    three digits. Numbers that don't look like EMP<digits> are ignored.
    """
    highest = 0
    for number in existing:
        match = _EMPLOYEE_NUMBER_RE.match(number or "")
        if match:
            highest = max(highest, int(match.group(1)))
    return f"{EMPLOYEE_NUMBER_PREFIX}{highest + 1:03d}"


def list_employees(
    db: Session,
    page: int = 0,
    size: int = 20,
    name: str | None = None,
    department_id: int | None = None,
) -> EmployeePage:
    logger.info(
        "Listing employees: page=%d, size=%d, name=%s, department_id=%s",
        page, size, name, department_id,
    )
    if page < 0:
        raise ValidationError("page must not be negative")
    if size <= 0:
        raise ValidationError("size must be greater than zero")

    items, total = repositories.search_active_employees(
        db,
        name=name,
        department_id=department_id,
        offset=page * size,
        limit=size,
    )
    logger.info("Listed employees: total=%d", total)
    return EmployeePage(items=items, total=total, page=page, size=size)


def get_employee(db: Session, employee_id: int) -> Employee:
    logger.info("Fetching employee: id=%s", employee_id)
    employee = _require_active_employee(db, employee_id)
    logger.info("Fetched employee: id=%s", employee_id)
    return employee


def create_employee(
    db: Session,
    *,
    name: str,
    email: str,
    department_id: int,
    join_date: date,
) -> Employee:
    logger.info("Creating employee: name=%s, email=%s", name, email)

    _ensure_email_available(db, email)
    department = _require_department(db, department_id)

    now = _now()
    employee = Employee(
        employee_number=next_employee_number(repositories.list_employee_numbers(db)),
        name=name,
        email=email,
        department=department,
        join_date=join_date,
        created_at=now,
        updated_at=now,
        deleted_at=None,
    )
    repositories.save(db, employee)

    logger.info("Created employee: id=%s, employee_number=%s", employee.id, employee.employee_number)
    return employee


def update_employee(
    db: Session,
    employee_id: int,
    *,
    name: str | None = None,
    email: str | None = None,
    department_id: int | None = None,
) -> Employee:
    logger.info("Updating employee: id=%s", employee_id)
    employee = _require_active_employee(db, employee_id)

    if email is not None and email != employee.email:
        _ensure_email_available(db, email)
        employee.email = email

    if name is not None:
        employee.name = name

    if department_id is not None:
        employee.department = _require_department(db, department_id)

    employee.updated_at = _now()
    repositories.save(db, employee)

    logger.info("Updated employee: id=%s", employee_id)
    return employee


def delete_employee(db: Session, employee_id: int) -> None:
    logger.info("Deleting employee: id=%s", employee_id)
    employee = _require_active_employee(db, employee_id)

    employee.deleted_at = _now()
    employee.updated_at = employee.deleted_at
    repositories.save(db, employee)

    logger.info("Deleted employee: id=%s", employee_id)
