"""
Data access for departments and employees.

Thin wrappers around SQLAlchemy queries so services never build queries
themselves. Every employee read goes through active_only(), which is the
single place the soft-delete rule is expressed.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session, joinedload

from app.core.errors import DuplicateResourceError, InternalServerError
from app.db.base import Base
from app.models.department import Department
from app.models.employee import Employee

logger = logging.getLogger(__name__)


# =============================================================================
# Departments
# =============================================================================
def list_departments(db: Session) -> list[Department]:
    return db.query(Department).order_by(Department.id.asc()).all()


def get_department(db: Session, department_id: int) -> Department | None:
    return db.get(Department, department_id)


def get_department_by_code(db: Session, code: str) -> Department | None:
    return db.query(Department).filter(Department.code == code).one_or_none()


# =============================================================================
# Employees
# =============================================================================
def active_only(query: Query) -> Query:
    """Restrict an employee query to rows that have not been soft-deleted."""
    return query.filter(Employee.deleted_at.is_(None))


def get_active_employee(db: Session, employee_id: int) -> Employee | None:
    return active_only(db.query(Employee)).filter(Employee.id == employee_id).one_or_none()


def get_active_employee_by_email(db: Session, email: str) -> Employee | None:
    return active_only(db.query(Employee)).filter(Employee.email == email).one_or_none()


def search_active_employees(
    db: Session,
    name: str | None = None,
    department_id: int | None = None,
    offset: int = 0,
    limit: int = 20,
) -> tuple[list[Employee], int]:
    """
    Filtered, paginated scan over active employees.

    `name` is an unanchored substring match, `department_id` an exact match;
    both apply together when given. Returns the page and the total count of
    matching rows.
    """
    query = active_only(db.query(Employee))

    if name is not None:
        query = query.filter(Employee.name.contains(name, autoescape=True))

    if department_id is not None:
        query = query.filter(Employee.department_id == department_id)

    total = query.count()

    employees = (
        query.options(joinedload(Employee.department))
        .order_by(Employee.id.asc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return employees, total


def list_employee_numbers(db: Session) -> list[str]:
    """Every employee number ever issued, soft-deleted rows included."""
    return [number for (number,) in db.query(Employee.employee_number).all()]


# =============================================================================
# Writes
# =============================================================================
def save(db: Session, entity: Base) -> Base:
    """
    Add (or re-add) an entity and flush it so generated ids and constraint
    violations surface immediately.
    """
    db.add(entity)
    try:
        db.flush()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Unique constraint rejected %s write: %s", type(entity).__name__, exc.orig)
        raise DuplicateResourceError(
            f"{type(entity).__name__} conflicts with an existing record"
        ) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise InternalServerError(f"Failed to save {type(entity).__name__}") from exc
    return entity
