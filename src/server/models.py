"""Pydantic response models for the JSON API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from blogsite.schemas import BlogPost, Heading


class PostListResponse(BaseModel):
    """Response model for ``GET /api/posts``.

    Attributes
    ----------
    category : str
        Category the list was filtered by (``all`` for no filter).
    posts : list[BlogPost]
        Posts in index order, newest first.

    """

    category: str = "all"
    posts: list[BlogPost] = Field(default_factory=list)


class HeadingsResponse(BaseModel):
    """Response model for ``GET /api/posts/{slug}/headings``.

    Attributes
    ----------
    slug : str
        Post slug.
    title : str
        Post title from the front matter.
    headings : list[Heading]
        Table of contents entries in document order.

    """

    slug: str
    title: str
    headings: list[Heading] = Field(default_factory=list)
