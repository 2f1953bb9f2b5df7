"""
Seed the department lookup table.

Departments have no write endpoints; this script is the only way they are
created. Safe to re-run: existing codes are left alone.

    python -m scripts.seed_departments
"""
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.logging import configure_logging
from app.db import repositories
from app.db.session import create_db_engine, create_session_factory
from app.models.department import Department

DEFAULT_DEPARTMENTS = [
    ("Sales", "SALES"),
    ("Engineering", "ENG"),
    ("Human Resources", "HR"),
    ("Finance", "FIN"),
    ("General Affairs", "GA"),
]


def upsert_department(db: Session, name: str, code: str) -> Department:
    dept = repositories.get_department_by_code(db, code)
    if dept:
        return dept
    return repositories.save(db, Department(name=name, code=code))


def main():
    configure_logging(settings.LOG_LEVEL)
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    db = create_session_factory(engine)()
    try:
        seeded = [upsert_department(db, name, code) for name, code in DEFAULT_DEPARTMENTS]
        db.commit()

        print("Seeded departments:")
        for d in seeded:
            print(d.id, d.code, d.name)
    finally:
        db.close()
        engine.dispose()

if __name__ == "__main__":
    main()
