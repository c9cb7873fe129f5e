"""FastAPI application."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from threads.application.error import StoreAccessError
from threads.config import Settings
from threads.domain.error import NotFoundError
from threads.interface.api.routes import health, threads, users
from threads.util.di.container import create_container, setup_di
from threads.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def store_access_error_handler(
    request: Request, exc: StoreAccessError
) -> JSONResponse:
    """Map store failures to HTTP responses.

    A missing referenced resource is a 404; anything else is a 500 that
    carries the normalized message.
    """
    if isinstance(exc.__cause__, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logfire.error("Store access failed", path=request.url.path, error=str(exc))

    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Instrument httpx for revalidation webhook calls
    instrument_httpx()

    app_instance = FastAPI(
        title="Threads API",
        description="Backend API for threads: profiles, threads and nested replies",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.add_exception_handler(StoreAccessError, store_access_error_handler)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(threads.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
