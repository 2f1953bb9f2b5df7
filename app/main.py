import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.departments import router as departments_router
from app.api.employees import router as employees_router
from app.api.error_handlers import register_error_handlers
from app.api.health import router as health_router
from app.api.root import router as root_router
from app.core.config import settings
from app.core.logging import configure_logging
from app.db.session import create_db_engine, create_session_factory

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database engine at startup and dispose of it at shutdown."""
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Database engine opened (env=%s)", settings.APP_ENV)

    yield

    engine.dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Employee Records Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(departments_router, prefix=API_PREFIX)
    app.include_router(employees_router, prefix=API_PREFIX)

    return app


app = create_app()
