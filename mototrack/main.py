"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mototrack.api.routes import (
    agendamentos_router,
    eventos_router,
    filiais_router,
    health_router,
    motos_router,
    usuarios_router,
)
from mototrack.config.settings import get_settings
from mototrack.core.cache import close_redis
from mototrack.core.error_handlers import register_error_handlers
from mototrack.core.logging import configure_logging, get_logger
from mototrack.db.database import close_engine, init_db
from mototrack.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()
    await init_db()
    logger.info("application_started", app=app.title, version=app.version)

    yield

    await close_redis()
    await close_engine()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Fleet tracking API for motos, filiais, usuarios, eventos and agendamentos",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(MetricsMiddleware)
    # Added last so it runs first and the id is set for everything below it
    app.add_middleware(RequestIDMiddleware)

    register_error_handlers(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(motos_router, prefix="/motos", tags=["Motos"])
    app.include_router(filiais_router, prefix="/filiais", tags=["Filiais"])
    app.include_router(usuarios_router, prefix="/usuarios", tags=["Usuarios"])
    app.include_router(eventos_router, prefix="/eventos", tags=["Eventos"])
    app.include_router(agendamentos_router, prefix="/agendamentos", tags=["Agendamentos"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mototrack.main:app", host="0.0.0.0", port=8080, reload=True)
