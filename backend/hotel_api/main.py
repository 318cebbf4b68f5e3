"""Hotel Rooms API — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_api.api.v1.guests import router as guests_router
from hotel_api.api.v1.rooms import router as rooms_router
from hotel_api.config import Settings, settings as default_settings
from hotel_api.database import build_engine, build_session_factory, create_schema
from hotel_api.errors import HotelError

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid request payload"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def hotel_error_handler(request: Request, exc: HotelError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON, a missing body, or wrongly typed fields."""
    logger.info("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, INVALID_PAYLOAD)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any other store failure; the driver's message is passed through verbatim."""
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    orig = getattr(exc, "orig", None)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(orig if orig is not None else exc))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around its own engine and session factory."""
    settings = settings or default_settings
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Bootstrap the schema on startup and dispose the pool on shutdown."""
        await create_schema(engine)
        logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="CRUD service for hotel rooms and the guests staying in them.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(HotelError, hotel_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

    # Routers
    app.include_router(rooms_router)
    app.include_router(guests_router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": settings.app_name}

    return app


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    # Configure root logger so all hotel_api.* loggers output to stderr.
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(), host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
