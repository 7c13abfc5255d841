"""Flatten rendered content trees into plain text.

Rendered headings can contain inline markup (``<code>``, ``<em>``, links),
so their ids are computed from the flattened text of the rendered tree
rather than the raw source line. Trees are built once into a small tagged
union and then walked without further shape inspection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag


@dataclass(frozen=True)
class Leaf:
    """A run of text."""

    text: str


@dataclass(frozen=True)
class Sequence:
    """Sibling nodes in document order."""

    items: tuple["Node", ...] = ()


@dataclass(frozen=True)
class Container:
    """An element wrapping child nodes."""

    children: tuple["Node", ...] = ()
    tag: str | None = None


Node = Union[Leaf, Sequence, Container]

_EMPTY = Sequence()


def build_node(value: Any) -> Node:
    """Convert a raw content value into a Node.

    Strings and numbers become leaves, lists and tuples become sequences,
    mappings with a ``children`` key and BeautifulSoup tags become
    containers. Anything else (``None``, booleans, comments) becomes an
    empty sequence.
    """
    if isinstance(value, (Leaf, Sequence, Container)):
        return value
    if isinstance(value, Comment):
        return _EMPTY
    if isinstance(value, NavigableString):
        return Leaf(str(value))
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, bool):
        return _EMPTY
    if isinstance(value, int):
        return Leaf(str(value))
    if isinstance(value, float):
        return Leaf(_format_float(value))
    if isinstance(value, (list, tuple)):
        return Sequence(tuple(build_node(item) for item in value))
    if isinstance(value, Tag):
        return Container(tuple(build_node(child) for child in value.children), tag=value.name)
    if isinstance(value, Mapping):
        return Container(_build_children(value.get("children")))
    return _EMPTY


def node_from_html(html: str) -> Node:
    """Build a content tree from an HTML fragment."""
    soup = BeautifulSoup(html, "html.parser")
    return Sequence(tuple(build_node(child) for child in soup.contents))


def extract_text(node: Any) -> str:
    """Concatenate every leaf under ``node`` in document order.

    Raw values are converted with :func:`build_node` first, so plain
    strings, lists and tags can be passed directly.
    """
    if not isinstance(node, (Leaf, Sequence, Container)):
        node = build_node(node)
    if isinstance(node, Leaf):
        return node.text
    if isinstance(node, Sequence):
        return "".join(extract_text(item) for item in node.items)
    return "".join(extract_text(child) for child in node.children)


def _build_children(children: Any) -> tuple[Node, ...]:
    if children is None:
        return ()
    if isinstance(children, (list, tuple)):
        return tuple(build_node(child) for child in children)
    return (build_node(children),)


def _format_float(value: float) -> str:
    # 2.0 renders as "2", matching how markup stringifies numbers.
    if value.is_integer():
        return str(int(value))
    return repr(value)
