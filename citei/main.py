"""Citei Colecao API - FastAPI Entry Point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .error_handlers import register_error_handlers
from .infrastructure.database import init_async_db, close_async_db
from .observability import setup_logging

# Import routers
from .routes.colecao import router as colecao_router
from .routes.health import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: runs before the application starts accepting requests
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)
    if config.REPOSITORY_BACKEND == "sqlite":
        await init_async_db()
    yield
    # Shutdown: close pooled connections
    await close_async_db()


def create_app() -> FastAPI:
    """Build the application with handlers and routers registered."""
    app = FastAPI(title="Citei", lifespan=lifespan, root_path=config.ROOT_PATH)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(colecao_router)
    return app


app = create_app()
