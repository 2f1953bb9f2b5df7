from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Employee Records Service",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "api": "/api/v1",
    }
