"""Blog post models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from blogsite.schemas.headings import Heading


class CategoryOption(BaseModel):
    """A selectable category on the blog index."""

    value: str
    label: str


BLOG_CATEGORIES: tuple[CategoryOption, ...] = (
    CategoryOption(value="all", label="All Posts"),
    CategoryOption(value="system-papers", label="System"),
    CategoryOption(value="ai", label="AI"),
)


class BlogPost(BaseModel):
    """Index metadata for a single post.

    Attributes:
        slug: File name without extension; the URL path segment.
        title: Display title, defaults to the slug.
        date: Date string from the front matter, empty when missing.
        categories: Category values the post is listed under.
    """

    slug: str
    title: str
    date: str = ""
    categories: list[str] = Field(default_factory=list)


class PostDocument(BaseModel):
    """A loaded post: index metadata plus the body without front matter."""

    post: BlogPost
    content: str


class RenderedPost(BaseModel):
    """A post rendered to HTML together with its table of contents."""

    post: BlogPost
    html: str
    headings: list[Heading] = Field(default_factory=list)
