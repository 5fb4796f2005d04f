# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import (
    auth_router,
    folders_router,
    health_router,
    notes_router,
    tags_router,
    users_router,
)
from .config import get_settings
from .core.errors import NotefulError, NotFoundError, RequestValidationFailed
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import MessageResponse
from .core.validation import describe_request_errors
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Noteful application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # tests run against their own database and skip this
    if os.getenv("NOTEFUL_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEFUL_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Noteful application")


def register_exception_handlers(app: FastAPI) -> None:
    """Translate application errors into status codes and ``{"message"}`` bodies.

    This is the only place an error kind becomes a transport status.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return Response(status_code=exc.status_code)

    @app.exception_handler(NotefulError)
    async def handle_noteful_error(request: Request, exc: NotefulError):
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                exc_info=exc,
                extra={"method": request.method, "path": request.url.path},
            )
        body = MessageResponse(message=exc.message)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        # bodies that never reach the field validators: bad JSON, non-objects, login fields
        error = RequestValidationFailed(describe_request_errors(exc.errors()))
        logger.warning(
            "Rejected request body",
            extra={"method": request.method, "path": request.url.path, "reason": error.message},
        )
        body = MessageResponse(message=error.message)
        return JSONResponse(status_code=error.status_code, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


app = FastAPI(
    title="Noteful",
    description="Personal notes API with folders and tags",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(users_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(folders_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(tags_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "Noteful API"}


# Basic unprefixed health endpoint for load balancers
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("noteful.main:app", host=settings.host, port=settings.port, reload=settings.reload)
