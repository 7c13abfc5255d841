"""FastAPI application serving the blog."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from blogsite.config import BLOGSITE_CONTENT_PATH
from server.routers import api, pages


def create_app(posts_dir: Path = BLOGSITE_CONTENT_PATH) -> FastAPI:
    """Build the application serving posts from ``posts_dir``."""
    application = FastAPI(title="blogsite", docs_url="/api/docs", redoc_url=None)
    application.state.posts_dir = posts_dir
    application.include_router(pages.router)
    application.include_router(api.router)
    return application


app = create_app()
