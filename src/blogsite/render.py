"""Render posts and compose full pages inside the site layout."""

from __future__ import annotations

import logging

import markdown
from bs4 import BeautifulSoup
from bs4.element import Tag

from blogsite.components import TableOfContents, apply_heading_ids, blog_index, footer, navbar
from blogsite.config import (
    BLOG_TITLE,
    BLOGSITE_SITE_AUTHOR,
    BLOGSITE_UNIQUE_HEADING_IDS,
    SITE_DESCRIPTION,
    SITE_TITLE,
)
from blogsite.document import ElementRegistry, Viewport
from blogsite.headings import HeadingSlugger, extract_headings
from blogsite.schemas import BlogPost, Heading, PostDocument, RenderedPost
from blogsite.slugify import slugify
from blogsite.text_content import extract_text

logger = logging.getLogger(__name__)

_MARKDOWN_EXTENSIONS = ["extra", "fenced_code", "tables"]

_PAGE_SKELETON = """<!DOCTYPE html>
<html lang="en" class="scroll-smooth">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width, initial-scale=1"/>
<meta name="description" content=""/>
<title></title>
<script src="https://cdn.tailwindcss.com?plugins=typography"></script>
</head>
<body class="min-h-screen flex flex-col bg-gray-50 text-gray-900"></body>
</html>"""


def render_markdown(content: str) -> str:
    """Convert a Markdown/MDX body to HTML; raw HTML blocks pass through."""
    return markdown.markdown(content, extensions=_MARKDOWN_EXTENSIONS)


def render_post(
    document: PostDocument,
    *,
    registry: ElementRegistry | None = None,
    unique_ids: bool = BLOGSITE_UNIQUE_HEADING_IDS,
) -> RenderedPost:
    """Render a post body and collect its table of contents.

    The sidebar entries come from the raw source; the rendered headings get
    their ids from their own text, and are registered in ``registry`` so the
    table of contents can find them. With ``unique_ids`` the sidebar takes
    the suffixed ids of the rendered headings.
    """
    headings = extract_headings(document.content, unique_ids=unique_ids)
    soup = BeautifulSoup(render_markdown(document.content), "html.parser")
    rendered = apply_heading_ids(soup, registry=registry, slugger=HeadingSlugger(unique=unique_ids))
    if unique_ids:
        headings = _align_heading_ids(headings, rendered)

    rendered_ids = [tag.get("id") for tag in rendered]
    missing = [heading.id for heading in headings if heading.id not in rendered_ids]
    if missing:
        logger.info(
            "Table of contents entries without a rendered heading",
            extra={"slug": document.post.slug, "ids": missing},
        )
    return RenderedPost(post=document.post, html=str(soup), headings=headings)


def _align_heading_ids(headings: list[Heading], rendered: list[Tag]) -> list[Heading]:
    """Give each sidebar entry the suffixed id of its rendered heading.

    The n-th entry with a given base slug takes the id of the n-th rendered
    heading with that base slug; entries without one keep their own id.
    """
    rendered_ids: dict[str, list[str]] = {}
    for tag in rendered:
        rendered_ids.setdefault(slugify(extract_text(tag)), []).append(tag["id"])

    aligned: list[Heading] = []
    for heading in headings:
        candidates = rendered_ids.get(slugify(heading.text))
        if candidates:
            heading = heading.model_copy(update={"id": candidates.pop(0)})
        aligned.append(heading)
    return aligned


def render_layout(
    content: Tag | str,
    *,
    title: str = SITE_TITLE,
    description: str = SITE_DESCRIPTION,
    year: int | None = None,
) -> str:
    """Wrap page content with the navbar and footer."""
    soup = BeautifulSoup(_PAGE_SKELETON, "html.parser")
    soup.title.string = title
    soup.find("meta", attrs={"name": "description"})["content"] = description

    main = soup.new_tag("main", attrs={"class": "flex-1 container mx-auto px-4 py-10"})
    _append_content(main, content)

    body = soup.body
    body.append(navbar())
    body.append(main)
    body.append(footer(year=year))
    return str(soup)


def render_home_page(*, year: int | None = None, author: str = BLOGSITE_SITE_AUTHOR) -> str:
    soup = BeautifulSoup("", "html.parser")
    section = soup.new_tag("section", attrs={"class": "prose lg:prose-lg"})
    greeting = soup.new_tag("h1", attrs={"class": "font-semibold"})
    names = author.split()
    greeting.string = f"Hi, I’m {names[0] if names else author} 👋"
    intro = soup.new_tag("p")
    intro.string = (
        "Software engineer passionate about high-performance data systems. "
        "Here I share deep dives on databases, systems, and various topics."
    )
    link = soup.new_tag("a", attrs={"href": "/blog", "class": "text-primary underline"})
    link.string = "Read the blog →"
    section.append(greeting)
    section.append(intro)
    section.append(link)
    return render_layout(section, year=year)


def render_blog_index_page(posts: list[BlogPost], *, selected: str = "all", year: int | None = None) -> str:
    section = _blog_section()
    section.append(blog_index(posts, selected=selected))
    return render_layout(section, title=BLOG_TITLE, year=year)


def render_post_page(
    rendered: RenderedPost,
    *,
    toc: TableOfContents | None = None,
    year: int | None = None,
) -> str:
    """Render a post page: article on the left, table of contents alongside."""
    if toc is None:
        toc = TableOfContents(rendered.headings, registry=ElementRegistry(), viewport=Viewport(height=0))

    soup = BeautifulSoup("", "html.parser")
    grid = soup.new_tag("div", attrs={"class": "xl:grid xl:grid-cols-[minmax(0,1fr)_14rem] xl:gap-10"})

    article = soup.new_tag("article", attrs={"class": "prose lg:prose-lg mx-auto"})
    title = soup.new_tag("h1", attrs={"class": "mb-0"})
    title.string = rendered.post.title
    date = soup.new_tag("p", attrs={"class": "mt-0 text-sm text-gray-500"})
    date.string = rendered.post.date
    article.append(title)
    article.append(date)
    _append_content(article, rendered.html)
    grid.append(article)

    sidebar = toc.to_tag()
    if sidebar is not None:
        aside = soup.new_tag("aside")
        aside.append(sidebar)
        grid.append(aside)

    return render_layout(grid, title=f"{rendered.post.title} | {BLOG_TITLE}", year=year)


def render_not_found_page(*, year: int | None = None) -> str:
    section = _blog_section()
    message = BeautifulSoup("<h1>Post not found</h1><p><a href=\"/blog\">Back to the blog</a></p>", "html.parser")
    _append_content(section, message)
    return render_layout(section, title=BLOG_TITLE, year=year)


def _blog_section() -> Tag:
    soup = BeautifulSoup("", "html.parser")
    return soup.new_tag("section", attrs={"class": "prose lg:prose-lg mx-auto"})


def _append_content(parent: Tag, content: Tag | str) -> None:
    if isinstance(content, str):
        content = BeautifulSoup(content, "html.parser")
    if isinstance(content, BeautifulSoup):
        for child in list(content.contents):
            parent.append(child.extract())
        return
    parent.append(content)
