"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from circle.config import Settings
from circle.interface.api.exception_handlers import setup_exception_handlers
from circle.interface.api.routes import health, posts, users
from circle.util.di.container import create_container, setup_di
from circle.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it and passes an in-memory container.

    Args:
        container: DI container to use; the production container when None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Circle API",
        description="Backend API for Circle - users, posts and activity feeds",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_exception_handlers(app_instance)

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(posts.router)

    return app_instance
