"""Local configuration for blogsite."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CONTENT_DIR = "content/blog"
DEFAULT_EXPORT_DIR = "out"
DEFAULT_SITE_AUTHOR = "Jiahe Yan"
DEFAULT_GITHUB_URL = "https://github.com/RandomY-2"
DEFAULT_LINKEDIN_URL = "https://www.linkedin.com/in/jiahe-yan/"
DEFAULT_POST_CATEGORY = "system-papers"

# Pixels kept clear above a heading when the TOC scrolls to it (sticky navbar).
TOC_HEADER_OFFSET = 80
# Trigger band for the active-heading watcher, as CSS-style percentages of viewport height.
TOC_ROOT_MARGIN_TOP_PCT = -20.0
TOC_ROOT_MARGIN_BOTTOM_PCT = -35.0
TOC_THRESHOLD = 0.0

BLOGSITE_CONTENT_PATH = Path(os.getenv("BLOGSITE_CONTENT_PATH", DEFAULT_CONTENT_DIR)).expanduser().resolve()
BLOGSITE_EXPORT_PATH = Path(os.getenv("BLOGSITE_EXPORT_PATH", DEFAULT_EXPORT_DIR)).expanduser().resolve()
BLOGSITE_SITE_AUTHOR = os.getenv("BLOGSITE_SITE_AUTHOR", DEFAULT_SITE_AUTHOR)
BLOGSITE_GITHUB_URL = os.getenv("BLOGSITE_GITHUB_URL", DEFAULT_GITHUB_URL)
BLOGSITE_LINKEDIN_URL = os.getenv("BLOGSITE_LINKEDIN_URL", DEFAULT_LINKEDIN_URL)
BLOGSITE_UNIQUE_HEADING_IDS = os.getenv("BLOGSITE_UNIQUE_HEADING_IDS", "false").lower() == "true"
BLOGSITE_LOG_LEVEL = os.getenv("BLOGSITE_LOG_LEVEL", "INFO").upper()

SITE_TITLE = f"{BLOGSITE_SITE_AUTHOR} | Personal Site"
SITE_DESCRIPTION = "Software engineer writing about databases, systems, and various things."
BLOG_TITLE = f"Blog | {BLOGSITE_SITE_AUTHOR}"
