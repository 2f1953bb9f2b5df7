from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.departments import department_to_out
from app.db.session import get_db
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from app.schemas.pagination import Page
from app.services import employee_service

router = APIRouter(prefix="/employees", tags=["employees"])


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=e.id,
        employee_number=e.employee_number,
        name=e.name,
        email=e.email,
        department=department_to_out(e.department),
        join_date=e.join_date,
        created_at=e.created_at,
    )


@router.get("", response_model=Page[EmployeeOut])
def list_employees(
    page: int = Query(default=0, ge=0, description="Zero-based page number"),
    size: int = Query(default=20, ge=1, description="Page size"),
    name: str | None = Query(default=None, description="Substring of the employee name"),
    department_id: int | None = Query(default=None, alias="departmentId", description="Exact department id"),
    db: Session = Depends(get_db),
):
    """
    List active employees, optionally filtered by name and/or department.
    """
    result = employee_service.list_employees(
        db, page=page, size=size, name=name, department_id=department_id
    )
    return Page[EmployeeOut].build(
        [employee_to_out(e) for e in result.items],
        total=result.total,
        page=result.page,
        size=result.size,
    )


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return employee_to_out(employee_service.get_employee(db, employee_id))


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, db: Session = Depends(get_db)):
    e = employee_service.create_employee(
        db,
        name=payload.name,
        email=payload.email,
        department_id=payload.department_id,
        join_date=payload.join_date,
    )
    return employee_to_out(e)


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: int, payload: EmployeeUpdate, db: Session = Depends(get_db)):
    e = employee_service.update_employee(
        db,
        employee_id,
        name=payload.name,
        email=payload.email,
        department_id=payload.department_id,
    )
    return employee_to_out(e)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    employee_service.delete_employee(db, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
