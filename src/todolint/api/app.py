"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from todolint import __version__
from todolint.config import get_settings
from todolint.pipeline import LintPipeline


# Global pipeline instance
_pipeline: Optional[LintPipeline] = None


def get_pipeline() -> LintPipeline:
    """Get the global pipeline instance."""
    global _pipeline
    if _pipeline is None:
        _pipeline = LintPipeline()
    return _pipeline


def reset_pipeline() -> None:
    """Reset the global pipeline (for testing)."""
    global _pipeline
    _pipeline = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Compile the configured rule on startup so bad settings fail early
    get_pipeline()
    yield
    reset_pipeline()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="todolint",
        description="Flags warning comments that lack an issue tracker reference",
        version=__version__,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        lifespan=lifespan,
    )

    # Import and include routes
    from todolint.api.routes import router
    app.include_router(router)

    return app
