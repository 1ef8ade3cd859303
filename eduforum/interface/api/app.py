"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eduforum.config import Settings
from eduforum.interface.api.routes import (
    assist,
    auth,
    comments,
    communities,
    feedbacks,
    health,
)
from eduforum.interface.error import register_error_handlers
from eduforum.util.di.container import create_container, setup_di
from eduforum.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    # Instrument httpx for outbound assistant requests
    instrument_httpx()

    app_instance = FastAPI(
        title="EduForum API",
        description="Backend API for EduForum - a student feedback forum with moderated posts, votes and AI summaries",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Frontend sends the session cookie cross-origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(communities.router)
    app_instance.include_router(feedbacks.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(assist.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
