"""Tests for post rendering and page composition."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from blogsite.components.blog_index import EMPTY_CATEGORY_MESSAGE
from blogsite.document import ElementRegistry
from blogsite.posts import load_post, load_posts
from blogsite.render import (
    render_blog_index_page,
    render_home_page,
    render_markdown,
    render_not_found_page,
    render_post,
    render_post_page,
)
from blogsite.schemas import BlogPost, PostDocument

RAFT_IDS = ["leader-election", "terms-votes", "log-replication", "safety-invariants"]


def _post_link(href: str | None) -> bool:
    return bool(href) and href.startswith("/blog/")


class TestRenderPost:
    """Tests for render_post function."""

    @pytest.mark.asyncio
    async def test_collects_headings_and_ids(self, posts_dir: Path) -> None:
        document = await load_post("raft", posts_dir)
        registry = ElementRegistry()

        rendered = render_post(document, registry=registry)

        assert [heading.id for heading in rendered.headings] == RAFT_IDS
        assert [heading.level for heading in rendered.headings] == [2, 3, 2, 4]
        assert [element.id for element in registry] == RAFT_IDS

        soup = BeautifulSoup(rendered.html, "html.parser")
        assert [tag["id"] for tag in soup.find_all(["h2", "h3", "h4", "h5", "h6"])] == RAFT_IDS
        assert soup.h4.code.get_text() == "invariants"

    def test_raw_html_passes_through(self) -> None:
        html = render_markdown('<div class="note">Hello</div>\n\nText')

        assert '<div class="note">Hello</div>' in html

    def test_headings_inside_fenced_code_are_not_rendered_as_headings(self) -> None:
        document = PostDocument(
            post=BlogPost(slug="code", title="Code"),
            content="## Real\n\n```\n## Not a heading\n```\n",
        )

        rendered = render_post(document)

        soup = BeautifulSoup(rendered.html, "html.parser")
        assert [tag["id"] for tag in soup.find_all("h2")] == ["real"]

    def test_unique_ids_suffix_repeated_headings(self) -> None:
        document = PostDocument(
            post=BlogPost(slug="dupes", title="Dupes"),
            content="## Setup\n\n## Setup\n",
        )

        rendered = render_post(document, unique_ids=True)

        soup = BeautifulSoup(rendered.html, "html.parser")
        assert [heading.id for heading in rendered.headings] == ["setup", "setup-1"]
        assert [tag["id"] for tag in soup.find_all("h2")] == ["setup", "setup-1"]

    def test_unique_ids_match_rendered_headings_around_code_blocks(self) -> None:
        """A heading line inside a code block does not shift the suffixes."""
        document = PostDocument(
            post=BlogPost(slug="dupes", title="Dupes"),
            content="## Setup\n```bash\n## Setup\n```\n## Setup\n\n### Setup\n",
        )

        rendered = render_post(document, unique_ids=True)

        soup = BeautifulSoup(rendered.html, "html.parser")
        rendered_ids = [tag["id"] for tag in soup.find_all(["h2", "h3"])]
        assert rendered_ids == ["setup", "setup-1", "setup-2"]
        assert [heading.id for heading in rendered.headings] == rendered_ids
        assert [heading.level for heading in rendered.headings] == [2, 2, 3]

    def test_repeated_headings_share_an_id_by_default(self) -> None:
        document = PostDocument(
            post=BlogPost(slug="dupes", title="Dupes"),
            content="## Setup\n\n## Setup\n",
        )

        rendered = render_post(document, unique_ids=False)

        assert [heading.id for heading in rendered.headings] == ["setup", "setup"]


class TestPages:
    """Tests for full page rendering."""

    @pytest.mark.asyncio
    async def test_post_page_table_of_contents_matches_article(self, posts_dir: Path) -> None:
        """Every sidebar link points at a heading id in the article."""
        rendered = render_post(await load_post("raft", posts_dir))

        soup = BeautifulSoup(render_post_page(rendered, year=2030), "html.parser")

        article_ids = {tag["id"] for tag in soup.article.find_all(["h2", "h3", "h4"])}
        links = [link["href"] for link in soup.aside.find_all("a")]
        assert links == [f"#{heading_id}" for heading_id in RAFT_IDS]
        assert {href[1:] for href in links} <= article_ids
        assert soup.article.h1.get_text() == "Reading the Raft Paper"
        assert soup.title.get_text().startswith("Reading the Raft Paper | Blog")

    @pytest.mark.asyncio
    async def test_post_without_headings_has_no_sidebar(self, posts_dir: Path) -> None:
        rendered = render_post(await load_post("undated", posts_dir))

        soup = BeautifulSoup(render_post_page(rendered), "html.parser")

        assert soup.aside is None
        assert soup.find("nav", attrs={"aria-label": "Table of contents"}) is None

    @pytest.mark.asyncio
    async def test_blog_index_lists_posts_with_labels(self, posts_dir: Path) -> None:
        soup = BeautifulSoup(render_blog_index_page(await load_posts(posts_dir)), "html.parser")

        titles = [link.get_text() for link in soup.main.find_all("a", href=_post_link)]
        assert titles == ["Notes on Attention", "Reading the Raft Paper", "An Undated Post"]
        assert "System" in [badge.get_text() for badge in soup.find_all("span", class_="rounded")]

    @pytest.mark.asyncio
    async def test_blog_index_filters_by_category(self, posts_dir: Path) -> None:
        html = render_blog_index_page(await load_posts(posts_dir), selected="ai")

        soup = BeautifulSoup(html, "html.parser")
        titles = [link.get_text() for link in soup.main.find_all("a", href=_post_link)]
        assert titles == ["Notes on Attention"]
        selected = soup.find("a", attrs={"data-category": "ai"})
        assert "bg-primary" in selected["class"]

    def test_blog_index_empty_category_message(self) -> None:
        html = render_blog_index_page([BlogPost(slug="a", title="A", categories=["ai"])], selected="system-papers")

        assert EMPTY_CATEGORY_MESSAGE in html

    def test_layout_has_navbar_and_footer_year(self) -> None:
        soup = BeautifulSoup(render_home_page(year=2030), "html.parser")

        assert soup.header is not None
        assert "© 2030" in soup.footer.get_text()
        assert soup.find("a", href="/blog") is not None

    def test_not_found_page(self) -> None:
        soup = BeautifulSoup(render_not_found_page(), "html.parser")

        assert soup.main.h1.get_text() == "Post not found"

    def test_home_greeting_uses_first_name(self) -> None:
        soup = BeautifulSoup(render_home_page(author="Jiahe Yan"), "html.parser")

        assert soup.main.h1.get_text() == "Hi, I’m Jiahe 👋"

    @pytest.mark.parametrize("author", ["", "   "])
    def test_home_page_with_blank_author(self, author: str) -> None:
        soup = BeautifulSoup(render_home_page(author=author), "html.parser")

        assert soup.main.h1.get_text().split() == ["Hi,", "I’m", "👋"]
