"""Heading components that carry their own anchor ids."""

from __future__ import annotations

import copy
import re
from typing import Any, Callable, Iterable

from bs4 import BeautifulSoup
from bs4.element import NavigableString, Tag

from blogsite.document import Element, ElementRegistry
from blogsite.headings import HeadingSlugger
from blogsite.slugify import slugify
from blogsite.text_content import build_node, extract_text

SCROLL_MARGIN_CLASS = "scroll-mt-20"

_HEADING_TAG_RE = re.compile(r"^h[2-6]$")

HeadingComponent = Callable[..., Tag]


def render_heading(
    level: int,
    children: Any,
    *,
    registry: ElementRegistry | None = None,
    slugger: HeadingSlugger | None = None,
) -> Tag:
    """Render an ``h{level}`` tag whose id is derived from its rendered children."""
    if not 2 <= level <= 6:
        raise ValueError(f"Heading level must be between 2 and 6, got {level}")
    soup = BeautifulSoup("", "html.parser")
    tag = soup.new_tag(f"h{level}")
    for child in _iter_children(children):
        if isinstance(child, Tag):
            tag.append(copy.copy(child))
        else:
            text = extract_text(child)
            if text:
                tag.append(NavigableString(text))
    _assign_heading_id(tag, registry=registry, slugger=slugger)
    return tag


def _make_heading(level: int) -> HeadingComponent:
    def component(
        children: Any,
        *,
        registry: ElementRegistry | None = None,
        slugger: HeadingSlugger | None = None,
    ) -> Tag:
        return render_heading(level, children, registry=registry, slugger=slugger)

    component.__name__ = f"H{level}"
    component.__qualname__ = f"H{level}"
    component.__doc__ = f"Render an h{level} with a slugified anchor id and scroll margin."
    return component


H2 = _make_heading(2)
H3 = _make_heading(3)
H4 = _make_heading(4)
H5 = _make_heading(5)
H6 = _make_heading(6)

HEADING_COMPONENTS: dict[str, HeadingComponent] = {"h2": H2, "h3": H3, "h4": H4, "h5": H5, "h6": H6}


def apply_heading_ids(
    root: Tag,
    *,
    registry: ElementRegistry | None = None,
    slugger: HeadingSlugger | None = None,
) -> list[Tag]:
    """Give every h2-h6 under ``root`` its anchor id and scroll margin, in place.

    Returns the heading tags in document order.
    """
    headings = list(root.find_all(_HEADING_TAG_RE))
    for heading in headings:
        _assign_heading_id(heading, registry=registry, slugger=slugger)
    return headings


def _assign_heading_id(
    tag: Tag,
    *,
    registry: ElementRegistry | None,
    slugger: HeadingSlugger | None,
) -> None:
    text = extract_text(build_node(list(tag.children)))
    heading_id = slugger.slug(text) if slugger is not None else slugify(text)
    tag["id"] = heading_id

    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    if SCROLL_MARGIN_CLASS not in classes:
        classes = [*classes, SCROLL_MARGIN_CLASS]
    tag["class"] = classes

    # An empty id cannot be targeted by a fragment link.
    if registry is not None and heading_id:
        registry.register(Element(id=heading_id, tag=tag.name))


def _iter_children(children: Any) -> Iterable[Any]:
    if children is None:
        return []
    if isinstance(children, (list, tuple)):
        return list(children)
    return [children]
