from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.department import Department
from app.schemas.department import DepartmentOut
from app.services import department_service

router = APIRouter(prefix="/departments", tags=["departments"])


def department_to_out(d: Department) -> DepartmentOut:
    return DepartmentOut(id=d.id, name=d.name, code=d.code)


@router.get("", response_model=list[DepartmentOut])
def list_departments(db: Session = Depends(get_db)):
    return [department_to_out(d) for d in department_service.list_departments(db)]


@router.get("/{department_id}", response_model=DepartmentOut)
def get_department(department_id: int, db: Session = Depends(get_db)):
    return department_to_out(department_service.get_department(db, department_id))
