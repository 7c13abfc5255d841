"""Tests for post loading and front matter parsing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from blogsite.exceptions import FrontMatterError, PostNotFoundError
from blogsite.posts import (
    filter_posts,
    generate_static_params,
    load_post,
    load_posts,
    normalize_categories,
    parse_front_matter,
    sort_posts,
)
from blogsite.schemas import BlogPost


class TestParseFrontMatter:
    """Tests for parse_front_matter function."""

    def test_splits_yaml_and_body(self) -> None:
        data, body = parse_front_matter("---\ntitle: Hello\ntags: [a, b]\n---\n## Body\n")

        assert data == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "## Body\n"

    def test_without_front_matter(self) -> None:
        assert parse_front_matter("## Just a body\n") == ({}, "## Just a body\n")

    def test_unclosed_fence_is_treated_as_body(self) -> None:
        source = "---\ntitle: Hello\n## Body\n"

        assert parse_front_matter(source) == ({}, source)

    def test_empty_front_matter(self) -> None:
        assert parse_front_matter("---\n---\nbody") == ({}, "body")

    def test_strips_byte_order_mark(self) -> None:
        data, body = parse_front_matter("\ufeff---\ntitle: BOM\n---\nbody")

        assert data == {"title": "BOM"}
        assert body == "body"

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="Invalid YAML"):
            parse_front_matter("---\ntitle: [unclosed\n---\nbody")

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(FrontMatterError, match="must be a mapping"):
            parse_front_matter("---\n- a\n- b\n---\nbody")


class TestNormalizeCategories:
    """Tests for normalize_categories function."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"categories": ["ai", "system-papers"]}, ["ai", "system-papers"]),
            ({"categories": "ai"}, ["ai"]),
            ({"category": "ai"}, ["ai"]),
            ({"category": ["ai"]}, ["ai"]),
            ({"categories": ["ai"], "category": "system-papers"}, ["ai"]),
            ({}, ["system-papers"]),
            ({"categories": None}, ["system-papers"]),
            ({"categories": []}, []),
        ],
    )
    def test_normalization(self, data: dict, expected: list[str]) -> None:
        assert normalize_categories(data) == expected


class TestSortAndFilter:
    """Tests for sort_posts and filter_posts functions."""

    def test_sorts_newest_first_with_undated_last(self) -> None:
        posts = [
            BlogPost(slug="undated", title="Undated"),
            BlogPost(slug="old", title="Old", date="2023-01-01"),
            BlogPost(slug="spelled", title="Spelled", date="March 5, 2024"),
            BlogPost(slug="garbage", title="Garbage", date="sometime"),
            BlogPost(slug="new", title="New", date="2024-06-01T10:00:00+02:00"),
        ]

        assert [post.slug for post in sort_posts(posts)] == ["new", "spelled", "old", "undated", "garbage"]

    def test_filter_all_returns_everything(self) -> None:
        posts = [BlogPost(slug="a", title="A", categories=["ai"]), BlogPost(slug="b", title="B")]

        assert filter_posts(posts, "all") == posts

    def test_filter_by_category(self) -> None:
        posts = [
            BlogPost(slug="a", title="A", categories=["ai"]),
            BlogPost(slug="b", title="B", categories=["system-papers", "ai"]),
            BlogPost(slug="c", title="C", categories=["system-papers"]),
        ]

        assert [post.slug for post in filter_posts(posts, "ai")] == ["a", "b"]
        assert filter_posts(posts, "unknown") == []


class TestLoadPosts:
    """Tests for load_posts and load_post functions."""

    @pytest.mark.asyncio
    async def test_loads_index_newest_first(self, posts_dir: Path) -> None:
        posts = await load_posts(posts_dir)

        assert [post.slug for post in posts] == ["attention", "raft", "undated"]
        assert posts[0].title == "Notes on Attention"
        assert posts[0].date == "2024-05-01"
        assert posts[0].categories == ["ai"]
        assert posts[1].categories == ["system-papers"]
        assert posts[2].date == ""
        assert posts[2].categories == ["system-papers"]

    @pytest.mark.asyncio
    async def test_title_defaults_to_slug(self, posts_dir: Path) -> None:
        (posts_dir / "no-title.mdx").write_text("Body only.", encoding="utf-8")

        posts = await load_posts(posts_dir)

        assert any(post.slug == "no-title" and post.title == "no-title" for post in posts)

    @pytest.mark.asyncio
    async def test_skips_posts_with_broken_front_matter(
        self, posts_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (posts_dir / "broken.mdx").write_text("---\ntitle: [oops\n---\nbody", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="blogsite.posts"):
            posts = await load_posts(posts_dir)

        assert "broken" not in [post.slug for post in posts]
        assert "Skipping post broken.mdx" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_directory_gives_empty_index(self, tmp_path: Path) -> None:
        assert await load_posts(tmp_path / "missing") == []

    @pytest.mark.asyncio
    async def test_load_post_strips_front_matter(self, posts_dir: Path) -> None:
        document = await load_post("attention", posts_dir)

        assert document.post.title == "Notes on Attention"
        assert not document.content.lstrip().startswith("---")
        assert "## Scaled Dot-Product" in document.content

    @pytest.mark.asyncio
    async def test_mdx_preferred_over_md(self, posts_dir: Path) -> None:
        (posts_dir / "raft.md").write_text("---\ntitle: Shadowed\n---\n", encoding="utf-8")

        document = await load_post("raft", posts_dir)

        assert document.post.title == "Reading the Raft Paper"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", ["missing", "../secret", ".hidden", "", "nested/post"])
    async def test_unknown_or_unsafe_slugs_raise(self, posts_dir: Path, slug: str) -> None:
        (posts_dir.parent / "secret.mdx").write_text("private", encoding="utf-8")

        with pytest.raises(PostNotFoundError):
            await load_post(slug, posts_dir)

    @pytest.mark.asyncio
    async def test_load_post_broken_front_matter_raises(self, posts_dir: Path) -> None:
        (posts_dir / "broken.mdx").write_text("---\n- a list\n---\nbody", encoding="utf-8")

        with pytest.raises(FrontMatterError):
            await load_post("broken", posts_dir)


class TestGenerateStaticParams:
    """Tests for generate_static_params function."""

    def test_lists_every_post_once(self, posts_dir: Path) -> None:
        (posts_dir / "raft.markdown").write_text("duplicate slug", encoding="utf-8")
        (posts_dir / "notes.txt").write_text("not a post", encoding="utf-8")

        assert generate_static_params(posts_dir) == [
            {"slug": "attention"},
            {"slug": "raft"},
            {"slug": "undated"},
        ]

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert generate_static_params(tmp_path / "missing") == []
