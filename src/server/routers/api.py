"""JSON endpoints for posts and their tables of contents."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from blogsite.config import BLOGSITE_UNIQUE_HEADING_IDS
from blogsite.exceptions import ContentError, PostNotFoundError
from blogsite.headings import extract_headings
from blogsite.posts import filter_posts, load_post, load_posts
from server.models import HeadingsResponse, PostListResponse

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=PostListResponse)
async def list_posts(request: Request, category: str = "all") -> PostListResponse:
    """List posts newest first.

    **Query Parameters**
    - **category** (`str`, optional): Category value to filter by, ``all`` by default
    """
    posts = await load_posts(request.app.state.posts_dir)
    return PostListResponse(category=category, posts=filter_posts(posts, category))


@router.get("/posts/{slug}/headings", response_model=HeadingsResponse)
async def post_headings(request: Request, slug: str) -> HeadingsResponse:
    """Return the table of contents of a post.

    **Raises**

    - **HTTPException**: **404** - no post exists for ``slug``
    - **HTTPException**: **422** - the post's front matter cannot be parsed
    """
    try:
        document = await load_post(slug, request.app.state.posts_dir)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ContentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return HeadingsResponse(
        slug=document.post.slug,
        title=document.post.title,
        headings=extract_headings(document.content, unique_ids=BLOGSITE_UNIQUE_HEADING_IDS),
    )
