"""API module for todolint."""

from todolint.api.app import create_app, get_pipeline, reset_pipeline
from todolint.api.routes import router

__all__ = [
    "create_app",
    "get_pipeline",
    "reset_pipeline",
    "router",
]
