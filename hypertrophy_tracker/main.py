"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from hypertrophy_tracker.api.v1 import api_router
from hypertrophy_tracker.core.config import get_settings
from hypertrophy_tracker.core.exceptions import AlreadyExistsError, NotFoundError
from hypertrophy_tracker.db.base import Base
from hypertrophy_tracker.db.session import async_session_maker, engine
from hypertrophy_tracker.services.seed import seed_vacation_plan, seed_workout_plan

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, optional create tables + seed (use Alembic in production); shutdown: cleanup."""
    configure_logging(settings.log_level)
    if settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created")
    if settings.seed_plan_on_startup:
        async with async_session_maker() as session:
            await seed_workout_plan(session)
            await seed_vacation_plan(session)
            await session.commit()
    yield
    await engine.dispose()


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def already_exists_handler(request: Request, exc: AlreadyExistsError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Lost race on a unique key (e.g. the same set replayed concurrently).
    logger.warning("%s %s: integrity error: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Conflicting write"})


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Database not available"})


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    # CORS: allow localhost in dev; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug:
        cors_origins = ["*"]
    elif settings.environment == "development":
        cors_origins = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:5173"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(AlreadyExistsError, already_exists_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # Health path for load balancers
    @app.get("/")
    def root():
        return {"status": "ok", "message": "Hypertrophy Tracker API"}

    app.include_router(api_router, prefix=settings.api_v1_prefix)
    return app


app = create_application()
