"""blogsite: a Markdown blog with heading anchors and a tracking table of contents."""

from blogsite.components import H2, H3, H4, H5, H6, TableOfContents
from blogsite.document import Element, ElementRegistry, IntersectionEntry, IntersectionWatcher, Viewport
from blogsite.exceptions import BlogsiteError, ContentError, FrontMatterError, PostNotFoundError
from blogsite.headings import HeadingSlugger, extract_headings
from blogsite.posts import generate_static_params, load_post, load_posts
from blogsite.render import render_post
from blogsite.schemas import BlogPost, Heading, PostDocument, RenderedPost
from blogsite.slugify import slugify
from blogsite.text_content import Container, Leaf, Sequence, build_node, extract_text

__all__ = [
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "BlogPost",
    "BlogsiteError",
    "Container",
    "ContentError",
    "Element",
    "ElementRegistry",
    "FrontMatterError",
    "Heading",
    "HeadingSlugger",
    "IntersectionEntry",
    "IntersectionWatcher",
    "Leaf",
    "PostDocument",
    "PostNotFoundError",
    "RenderedPost",
    "Sequence",
    "TableOfContents",
    "Viewport",
    "build_node",
    "extract_headings",
    "extract_text",
    "generate_static_params",
    "load_post",
    "load_posts",
    "render_post",
    "slugify",
]
