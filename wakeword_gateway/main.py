"""
Wake Word Gateway FastAPI Application (Clean Architecture).
Accepts wake word training clips and stores them in the blob store.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from wakeword_gateway.api.dependencies import (
    get_dependency_container,
    get_error_reporter,
    validate_dependencies
)
from wakeword_gateway.api.responses import create_response
from wakeword_gateway.api.routes.wake_word import router as wake_word_router
from wakeword_gateway.infrastructure.config.infrastructure_settings import infra_settings
from wakeword_gateway.infrastructure.logging.log_config import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    """
    # Startup
    validate_dependencies()
    initialize_infrastructure()

    yield


def initialize_infrastructure() -> None:
    """
    Initialize infrastructure services if needed.
    """
    store = get_dependency_container().blob_store
    logger.info("Blob store configured", extra={"extra_fields": store.get_store_info()})

    if infra_settings.use_memory_store or not infra_settings.s3_auto_create_bucket:
        return

    from wakeword_gateway.infrastructure.storage.s3_setup import S3Setup
    if not S3Setup().setup_training_bucket():
        # Don't fail startup - the bucket can be created manually
        logger.warning("Training bucket is not available", extra={
            "extra_fields": {"bucket_name": infra_settings.s3_bucket_name}
        })


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with Clean Architecture.
    """
    app = FastAPI(
        title="Wake Word Gateway API",
        version="1.0.0",
        description="Wake word training data upload service",
        lifespan=lifespan,
        # Paths match exactly, a trailing slash is an unknown path
        redirect_slashes=False
    )

    @app.middleware("http")
    async def answer_preflight(request: Request, call_next):
        # CORS preflight, on any path
        if request.method == "OPTIONS":
            return create_response(content="ok", status_code=200)
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return create_response(content="Not Found", status_code=404)
        if exc.status_code == 405:
            # Methods the upload route does not list are rejected by the router
            return create_response(content={"message": "Invalid method"}, status_code=405)
        return create_response(content={"message": str(exc.detail)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        get_error_reporter().capture_exception(exc, {
            "path": request.url.path,
            "method": request.method
        })
        return create_response(content={"message": "Internal server error"}, status_code=500)

    # Route registration
    app.include_router(wake_word_router)

    return app


app = create_app()
