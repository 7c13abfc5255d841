"""Load blog posts and their front matter from the content directory."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Iterable

import yaml

from blogsite.config import BLOGSITE_CONTENT_PATH, DEFAULT_POST_CATEGORY
from blogsite.content_io import read_text_async
from blogsite.exceptions import FrontMatterError, PostNotFoundError
from blogsite.schemas import BlogPost, PostDocument

logger = logging.getLogger(__name__)

# Checked in this order when two files share a slug.
POST_EXTENSIONS = (".mdx", ".md", ".markdown")

_FRONT_MATTER_FENCE = "---"
_DATE_FORMATS = ("%Y/%m/%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y")


def parse_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from a post body.

    Returns ``({}, source)`` when the file does not open with a ``---``
    fence or the fence is never closed.

    Raises:
        FrontMatterError: If the YAML is invalid or is not a mapping.
    """
    text = source.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _FRONT_MATTER_FENCE:
        return {}, text

    closing = next(
        (index for index in range(1, len(lines)) if lines[index].strip() == _FRONT_MATTER_FENCE),
        None,
    )
    if closing is None:
        return {}, text

    raw = "".join(lines[1:closing])
    body = "".join(lines[closing + 1 :])
    try:
        data = yaml.safe_load(raw) if raw.strip() else {}
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid YAML front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"Front matter must be a mapping, got {type(data).__name__}")
    return data, body


def normalize_categories(data: dict[str, Any]) -> list[str]:
    """Read ``categories``, falling back to the older single ``category`` key."""
    for key in ("categories", "category"):
        value = data.get(key)
        # An explicit empty list still counts as set.
        if value is None or value is False or value == "":
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        return [str(item) for item in values]
    return [DEFAULT_POST_CATEGORY]


def post_from_front_matter(slug: str, data: dict[str, Any]) -> BlogPost:
    return BlogPost(
        slug=slug,
        title=str(data.get("title") or slug),
        date=_format_date(data.get("date")),
        categories=normalize_categories(data),
    )


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Newest first; posts without a parseable date go last in their original order."""
    return sorted(posts, key=_date_sort_key, reverse=True)


def filter_posts(posts: Iterable[BlogPost], category: str) -> list[BlogPost]:
    if category == "all":
        return list(posts)
    return [post for post in posts if category in post.categories]


def list_post_files(posts_dir: Path) -> dict[str, Path]:
    """Map each slug to its post file, sorted by slug."""
    files: dict[str, Path] = {}
    if not posts_dir.is_dir():
        return files
    for extension in POST_EXTENSIONS:
        for path in sorted(posts_dir.glob(f"*{extension}")):
            if path.is_file() and path.stem not in files:
                files[path.stem] = path
    return dict(sorted(files.items()))


def generate_static_params(posts_dir: Path = BLOGSITE_CONTENT_PATH) -> list[dict[str, str]]:
    """Route parameters for every post page that should be pre-rendered."""
    return [{"slug": slug} for slug in list_post_files(posts_dir)]


async def load_posts(posts_dir: Path = BLOGSITE_CONTENT_PATH) -> list[BlogPost]:
    """Load index metadata for every post, newest first.

    Posts with broken front matter are skipped with a warning so that one
    bad file does not take down the index.
    """
    if not posts_dir.is_dir():
        logger.warning("Posts directory %s does not exist", posts_dir)
        return []

    posts: list[BlogPost] = []
    for slug, path in list_post_files(posts_dir).items():
        source = await read_text_async(path)
        try:
            data, _ = parse_front_matter(source)
        except FrontMatterError as exc:
            logger.warning("Skipping post %s: %s", path.name, exc)
            continue
        posts.append(post_from_front_matter(slug, data))
    return sort_posts(posts)


async def load_post(slug: str, posts_dir: Path = BLOGSITE_CONTENT_PATH) -> PostDocument:
    """Load a single post by slug.

    Raises:
        PostNotFoundError: If no post file exists for ``slug``.
        FrontMatterError: If the post's front matter cannot be parsed.
    """
    path = _resolve_post_path(slug, posts_dir)
    source = await read_text_async(path)
    data, body = parse_front_matter(source)
    return PostDocument(post=post_from_front_matter(slug, data), content=body)


def _resolve_post_path(slug: str, posts_dir: Path) -> Path:
    if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
        raise PostNotFoundError(f"Invalid post slug: {slug!r}")
    base = posts_dir.resolve()
    for extension in POST_EXTENSIONS:
        candidate = (base / f"{slug}{extension}").resolve()
        if candidate.parent != base:
            raise PostNotFoundError(f"Invalid post slug: {slug!r}")
        if candidate.is_file():
            return candidate
    raise PostNotFoundError(f"Post {slug!r} not found")


def _format_date(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).strip()


def _parse_date(value: str) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = None
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _date_sort_key(post: BlogPost) -> tuple[bool, datetime]:
    parsed = _parse_date(post.date)
    if parsed is None:
        return (False, datetime.min)
    return (True, parsed)
