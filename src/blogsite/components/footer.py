"""Site footer."""

from __future__ import annotations

from datetime import date

from bs4 import BeautifulSoup
from bs4.element import Tag

from blogsite.config import BLOGSITE_SITE_AUTHOR


def footer(*, year: int | None = None) -> Tag:
    soup = BeautifulSoup("", "html.parser")
    tag = soup.new_tag("footer", attrs={"class": "bg-white border-t mt-10"})
    inner = soup.new_tag(
        "div",
        attrs={"class": "container mx-auto px-4 py-6 text-sm text-center text-gray-500"},
    )
    inner.string = f"© {year or date.today().year} {BLOGSITE_SITE_AUTHOR} • Built with Python & Tailwind CSS"
    tag.append(inner)
    return tag
