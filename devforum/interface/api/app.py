"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devforum.config import Settings
from devforum.interface.api.errors import register_error_handlers
from devforum.interface.api.routes import (
    answers,
    auth,
    comments,
    communities,
    health,
    questions,
    tags,
    users,
    votes,
)
from devforum.util.di.container import create_container, setup_di
from devforum.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does so in production.

    Args:
        container: DI container to use; a production container is built if omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="DevForum API",
        description="Backend API for DevForum - a Q&A forum for developers",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(communities.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(users.router)

    return app_instance


# Created at import for uvicorn; logfire must be configured first
app = create_app()
