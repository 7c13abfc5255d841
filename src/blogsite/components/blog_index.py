"""Blog index: category filter and post list."""

from __future__ import annotations

from typing import Iterable

from bs4 import BeautifulSoup
from bs4.element import Tag

from blogsite.posts import filter_posts
from blogsite.schemas import BLOG_CATEGORIES, BlogPost, CategoryOption

EMPTY_CATEGORY_MESSAGE = "No posts found in this category."

_SELECTED_BUTTON_CLASSES = "bg-primary text-white"
_BUTTON_CLASSES = "bg-gray-100 text-gray-700 hover:bg-gray-200"


def category_label(value: str, categories: Iterable[CategoryOption] = BLOG_CATEGORIES) -> str:
    """Display label for a category value, falling back to the raw value."""
    for category in categories:
        if category.value == value:
            return category.label
    return value


def blog_index(
    posts: list[BlogPost],
    *,
    selected: str = "all",
    categories: tuple[CategoryOption, ...] = BLOG_CATEGORIES,
) -> Tag:
    """Render the category buttons and the posts listed under ``selected``."""
    soup = BeautifulSoup("", "html.parser")
    root = soup.new_tag("div")

    title = soup.new_tag("h1", attrs={"class": "font-bold mb-6 text-2xl md:text-3xl"})
    title.string = "Blog"
    root.append(title)

    buttons = soup.new_tag("div", attrs={"class": "mb-8 flex flex-wrap gap-3"})
    for category in categories:
        state = _SELECTED_BUTTON_CLASSES if category.value == selected else _BUTTON_CLASSES
        href = "/blog" if category.value == "all" else f"/blog?category={category.value}"
        button = soup.new_tag(
            "a",
            attrs={
                "href": href,
                "class": f"px-4 py-2 rounded-full text-sm font-medium transition-colors {state}",
                "data-category": category.value,
            },
        )
        button.string = category.label
        buttons.append(button)
    root.append(buttons)

    visible = filter_posts(posts, selected)
    if not visible:
        empty = soup.new_tag("p", attrs={"class": "text-gray-500"})
        empty.string = EMPTY_CATEGORY_MESSAGE
        root.append(empty)
        return root

    items = soup.new_tag("ul", attrs={"class": "space-y-4"})
    for post in visible:
        items.append(_post_item(soup, post, categories))
    root.append(items)
    return root


def _post_item(soup: BeautifulSoup, post: BlogPost, categories: tuple[CategoryOption, ...]) -> Tag:
    item = soup.new_tag("li", attrs={"class": "border-b border-gray-200 pb-4 last:border-0"})
    link = soup.new_tag(
        "a",
        attrs={
            "href": f"/blog/{post.slug}",
            "class": "text-primary hover:underline text-lg font-medium block mb-1",
        },
    )
    link.string = post.title
    item.append(link)

    meta = soup.new_tag("div", attrs={"class": "flex items-center gap-3 text-sm text-gray-500 flex-wrap"})
    date = soup.new_tag("span")
    date.string = post.date
    meta.append(date)

    if post.categories:
        separator = soup.new_tag("span")
        separator.string = "•"
        meta.append(separator)
        badges = soup.new_tag("div", attrs={"class": "flex flex-wrap gap-2"})
        for value in post.categories:
            badge = soup.new_tag("span", attrs={"class": "px-2 py-1 bg-gray-100 rounded text-xs"})
            badge.string = category_label(value, categories)
            badges.append(badge)
        meta.append(badges)

    item.append(meta)
    return item
