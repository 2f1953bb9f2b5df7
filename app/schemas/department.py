from app.schemas.base import CamelModel


class DepartmentOut(CamelModel):
    id: int
    name: str
    code: str
