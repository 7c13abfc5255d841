"""Heading text to URL fragment identifiers."""

from __future__ import annotations

import re

# Word characters are ASCII only; whitespace matching stays Unicode-aware.
_SPECIAL_CHARS_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATOR_RUN_RE = re.compile(r"[\s-]+")


def slugify(text: str) -> str:
    """Convert heading text to an anchor id.

    Lowercases and trims the text, drops everything except ASCII word
    characters, whitespace and hyphens, then collapses whitespace/hyphen
    runs into a single hyphen and strips hyphens from both ends. May return
    ``""``, for example for headings written entirely in non-Latin script.
    """
    slug = text.lower().strip()
    slug = _SPECIAL_CHARS_RE.sub("", slug)
    slug = _SEPARATOR_RUN_RE.sub("-", slug)
    return slug.strip("-")
