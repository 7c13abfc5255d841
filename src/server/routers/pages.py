"""HTML page routes."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse

from blogsite.exceptions import ContentError
from blogsite.posts import load_post, load_posts
from blogsite.render import (
    render_blog_index_page,
    render_home_page,
    render_not_found_page,
    render_post,
    render_post_page,
)
from blogsite.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Landing page."""
    return HTMLResponse(render_home_page())


@router.get("/blog", response_class=HTMLResponse)
async def blog_index(request: Request, category: str = "all") -> HTMLResponse:
    """Blog index, optionally filtered by ``category``."""
    posts = await load_posts(request.app.state.posts_dir)
    return HTMLResponse(render_blog_index_page(posts, selected=category))


@router.get("/blog/{slug}", response_class=HTMLResponse)
async def blog_post(request: Request, slug: str) -> HTMLResponse:
    """Single post page with its table of contents.

    Any failure to load the post renders the not-found page with a 404.
    """
    try:
        document = await load_post(slug, request.app.state.posts_dir)
    except ContentError as exc:
        logger.warning("Post could not be loaded", extra={"slug": slug, "error": str(exc)})
        return HTMLResponse(render_not_found_page(), status_code=status.HTTP_404_NOT_FOUND)
    return HTMLResponse(render_post_page(render_post(document)))
