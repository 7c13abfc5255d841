"""Table of contents sidebar that tracks the heading currently in view."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Callable

from bs4 import BeautifulSoup
from bs4.element import Tag

from blogsite.config import TOC_HEADER_OFFSET
from blogsite.document import (
    Element,
    ElementRegistry,
    IntersectionCallback,
    IntersectionEntry,
    IntersectionWatcher,
    Viewport,
)
from blogsite.schemas import Heading

logger = logging.getLogger(__name__)

WatcherFactory = Callable[[IntersectionCallback, Viewport], IntersectionWatcher]

_ACTIVE_LINK_CLASSES = "text-primary font-medium border-l-2 border-primary -ml-3 pl-2"
_INACTIVE_LINK_CLASSES = "text-gray-600 hover:text-primary"
_LINK_BASE_CLASSES = "block text-xs transition-colors py-0.5 leading-snug"


def indent_class(level: int) -> str:
    """Tailwind padding class for a heading level; h2 is flush, each level adds a step."""
    return f"pl-{3 * (max(level, 2) - 2)}"


class WatchSubscription:
    """Elements observed by one watcher for one heading sequence.

    Releasing unobserves exactly the elements that were observed and
    disconnects the watcher; it is safe to call more than once.
    """

    def __init__(self, watcher: IntersectionWatcher) -> None:
        self.watcher = watcher
        self.elements: list[Element] = []
        self.active = True

    def observe(self, element: Element) -> None:
        self.watcher.observe(element)
        self.elements.append(element)

    def release(self) -> None:
        if not self.active:
            return
        for element in self.elements:
            self.watcher.unobserve(element)
        self.watcher.disconnect()
        self.elements = []
        self.active = False

    def __enter__(self) -> "WatchSubscription":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class TableOfContents:
    """Sidebar listing a post's headings with the visible one highlighted.

    ``active_id`` is the only state. It is written solely by the watcher
    callback of the current subscription, so entries from a previous
    document's watcher are dropped once :meth:`update` or :meth:`unmount`
    has released it.
    """

    def __init__(
        self,
        headings: list[Heading],
        *,
        registry: ElementRegistry,
        viewport: Viewport,
        watcher_factory: WatcherFactory = IntersectionWatcher,
        header_offset: float = TOC_HEADER_OFFSET,
    ) -> None:
        self.headings = list(headings)
        self.registry = registry
        self.viewport = viewport
        self.watcher_factory = watcher_factory
        self.header_offset = header_offset
        self.active_id = ""
        self._subscription: WatchSubscription | None = None

    @property
    def subscription(self) -> WatchSubscription | None:
        return self._subscription

    def mount(self) -> None:
        """Observe the rendered element of every heading that has one."""
        self._release()
        self._subscription = self._subscribe(self.headings)

    def update(self, headings: list[Heading]) -> None:
        """Switch to a new document's headings, releasing the old subscription first.

        Elements are looked up again even when the headings compare equal,
        since another document can reuse the same ids.
        """
        self._release()
        self.headings = list(headings)
        self._subscription = self._subscribe(self.headings)

    def unmount(self) -> None:
        self._release()

    def __enter__(self) -> "TableOfContents":
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    def _subscribe(self, headings: list[Heading]) -> WatchSubscription:
        subscription: WatchSubscription | None = None

        def on_intersect(entries: list[IntersectionEntry]) -> None:
            if subscription is not self._subscription:
                logger.debug("Ignoring %d entries from a released subscription", len(entries))
                return
            self._handle_entries(entries)

        subscription = WatchSubscription(self.watcher_factory(on_intersect, self.viewport))
        for heading in headings:
            element = self.registry.get(heading.id)
            if element is not None:
                subscription.observe(element)
        return subscription

    def _release(self) -> None:
        if self._subscription is not None:
            self._subscription.release()
            self._subscription = None

    def _handle_entries(self, entries: list[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting:
                self.active_id = entry.target.id

    def click(self, heading_id: str) -> bool:
        """Smooth-scroll to a heading, leaving room for the sticky header.

        Returns False without scrolling when the heading has no rendered element.
        """
        element = self.registry.get(heading_id)
        if element is None:
            return False
        element_position = self.viewport.bounding_top(element)
        offset_position = element_position + self.viewport.page_y_offset - self.header_offset
        self.viewport.scroll_to(offset_position, behavior="smooth")
        return True

    def to_tag(self) -> Tag | None:
        """Build the sidebar markup, or None when there are no headings."""
        if not self.headings:
            return None

        soup = BeautifulSoup("", "html.parser")
        nav = soup.new_tag(
            "nav",
            attrs={
                "class": "sticky top-8 hidden xl:block max-h-[calc(100vh-4rem)] overflow-y-auto",
                "aria-label": "Table of contents",
            },
        )
        wrapper = soup.new_tag("div", attrs={"class": "border-l border-gray-200 pl-3"})
        title = soup.new_tag(
            "h2",
            attrs={"class": "text-xs font-semibold text-gray-900 mb-2 uppercase tracking-wide"},
        )
        title.string = "Contents"
        items = soup.new_tag("ul", attrs={"class": "space-y-0.5"})

        for heading in self.headings:
            is_active = heading.id == self.active_id
            item = soup.new_tag("li", attrs={"class": indent_class(heading.level)})
            link_classes = _ACTIVE_LINK_CLASSES if is_active else _INACTIVE_LINK_CLASSES
            link = soup.new_tag(
                "a",
                attrs={"href": f"#{heading.id}", "class": f"{_LINK_BASE_CLASSES} {link_classes}"},
            )
            if is_active:
                link["aria-current"] = "location"
            link.string = heading.text
            item.append(link)
            items.append(item)

        wrapper.append(title)
        wrapper.append(items)
        nav.append(wrapper)
        return nav

    def render(self) -> str:
        tag = self.to_tag()
        return str(tag) if tag is not None else ""
