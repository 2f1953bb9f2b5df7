from datetime import date, datetime, timezone

from sqlalchemy.orm import Session

from app.models.department import Department
from app.models.employee import Employee


def create_department(db: Session, name: str = "Sales", code: str = "SALES") -> Department:
    d = Department(name=name, code=code)
    db.add(d)
    db.commit()
    db.refresh(d)
    return d


def create_employee(
    db: Session,
    *,
    department: Department,
    employee_number: str,
    name: str,
    email: str,
    join_date: date = date(2024, 1, 1),
    deleted: bool = False,
) -> Employee:
    now = datetime.now(timezone.utc)
    e = Employee(
        employee_number=employee_number,
        name=name,
        email=email,
        department_id=department.id,
        join_date=join_date,
        created_at=now,
        updated_at=now,
        deleted_at=now if deleted else None,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return e
