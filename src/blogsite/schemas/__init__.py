"""Shared schemas for blogsite."""

from blogsite.schemas.headings import Heading
from blogsite.schemas.posts import BLOG_CATEGORIES, BlogPost, CategoryOption, PostDocument, RenderedPost

__all__ = ["BLOG_CATEGORIES", "BlogPost", "CategoryOption", "Heading", "PostDocument", "RenderedPost"]
