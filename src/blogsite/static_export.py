"""Pre-render every page of the site to static HTML files."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from blogsite.config import BLOGSITE_CONTENT_PATH, BLOGSITE_EXPORT_PATH
from blogsite.content_io import write_text_async
from blogsite.exceptions import ContentError
from blogsite.posts import generate_static_params, load_post, load_posts
from blogsite.render import render_blog_index_page, render_home_page, render_post, render_post_page
from blogsite.utils.logging_config import get_logger

logger = get_logger(__name__)


async def export_site(
    posts_dir: Path = BLOGSITE_CONTENT_PATH,
    out_dir: Path = BLOGSITE_EXPORT_PATH,
) -> list[Path]:
    """Write the home page, the blog index and one page per post.

    Posts that fail to load are logged and left out rather than aborting
    the export.

    Returns:
        Paths of the files written, in write order.
    """
    written: list[Path] = []

    async def write(relative: str, html: str) -> None:
        path = out_dir / relative
        await write_text_async(path, html)
        written.append(path)

    await write("index.html", render_home_page())
    await write("blog/index.html", render_blog_index_page(await load_posts(posts_dir)))

    for params in generate_static_params(posts_dir):
        slug = params["slug"]
        try:
            document = await load_post(slug, posts_dir)
        except ContentError as exc:
            logger.error("Skipping post during export", extra={"slug": slug, "error": str(exc)})
            continue
        await write(f"blog/{slug}/index.html", render_post_page(render_post(document)))

    logger.info("Exported site", extra={"out_dir": str(out_dir), "pages": len(written)})
    return written


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export the blog as static HTML.")
    parser.add_argument("--content", type=Path, default=BLOGSITE_CONTENT_PATH, help="Directory of post files")
    parser.add_argument("--out", type=Path, default=BLOGSITE_EXPORT_PATH, help="Output directory")
    args = parser.parse_args(argv)

    if not args.content.is_dir():
        parser.error(f"Content directory not found: {args.content}")

    written = asyncio.run(export_site(args.content, args.out))
    print(f"Wrote {len(written)} pages to {args.out}")


if __name__ == "__main__":
    main()
