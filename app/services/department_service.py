import logging

from sqlalchemy.orm import Session

from app.core.errors import ResourceNotFoundError
from app.db import repositories
from app.models.department import Department

logger = logging.getLogger(__name__)


def list_departments(db: Session) -> list[Department]:
    logger.info("Listing departments")
    departments = repositories.list_departments(db)
    logger.info("Listed departments: count=%d", len(departments))
    return departments


def get_department(db: Session, department_id: int) -> Department:
    logger.info("Fetching department: id=%s", department_id)
    department = repositories.get_department(db, department_id)
    if department is None:
        raise ResourceNotFoundError(f"Department not found: id={department_id}")
    logger.info("Fetched department: id=%s", department_id)
    return department
