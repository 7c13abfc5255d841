"""In-memory document model for rendered pages.

Heading components register their elements here at mount time and the
table of contents looks them up by id instead of querying a live DOM.
The viewport and intersection watcher reproduce the browser behaviour the
TOC relies on: a scroll position and a callback fired when elements enter
or leave a trigger band.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator
from urllib.parse import unquote

from blogsite.config import TOC_ROOT_MARGIN_BOTTOM_PCT, TOC_ROOT_MARGIN_TOP_PCT, TOC_THRESHOLD

logger = logging.getLogger(__name__)


@dataclass
class Element:
    """Handle for a rendered element.

    Attributes:
        id: Anchor id of the element.
        tag: Element tag name (``h2`` ... ``h6`` for headings).
        top: Distance from the top of the document, in pixels.
        height: Rendered height, in pixels.
    """

    id: str
    tag: str
    top: float = 0.0
    height: float = 0.0

    @property
    def bottom(self) -> float:
        return self.top + self.height


class ElementRegistry:
    """Mapping from anchor id to element handle for one rendered document."""

    def __init__(self) -> None:
        self._elements: dict[str, Element] = {}

    def register(self, element: Element) -> Element:
        """Register ``element`` under its id and return the element the id resolves to.

        The first registration of an id wins, so a repeated id keeps
        resolving to the earlier element in the document.
        """
        existing = self._elements.get(element.id)
        if existing is not None:
            logger.debug("Element id %r already registered, keeping first", element.id)
            return existing
        self._elements[element.id] = element
        return element

    def unregister(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def get(self, element_id: str) -> Element | None:
        return self._elements.get(element_id)

    def resolve_fragment(self, href: str) -> Element | None:
        """Resolve an in-page link such as ``#setup`` or ``/blog/post#setup``."""
        _, sep, fragment = href.partition("#")
        if not sep or not fragment:
            return None
        return self.get(unquote(fragment))

    def clear(self) -> None:
        self._elements.clear()

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)


class Viewport:
    """Scrollable window onto a rendered document."""

    def __init__(self, height: float, scroll_y: float = 0.0) -> None:
        self.height = height
        self.scroll_y = max(scroll_y, 0.0)
        self.last_scroll_behavior: str | None = None

    @property
    def page_y_offset(self) -> float:
        return self.scroll_y

    def bounding_top(self, element: Element) -> float:
        """Element top relative to the viewport, like ``getBoundingClientRect().top``."""
        return element.top - self.scroll_y

    def scroll_to(self, top: float, behavior: str = "auto") -> None:
        self.scroll_y = max(top, 0.0)
        self.last_scroll_behavior = behavior


@dataclass(frozen=True)
class IntersectionEntry:
    """A change in an observed element's intersection state."""

    target: Element
    is_intersecting: bool


IntersectionCallback = Callable[[list[IntersectionEntry]], None]


class IntersectionWatcher:
    """Report observed elements entering or leaving a band of the viewport.

    The band is the viewport shrunk by ``root_margin`` (top, bottom) given in
    percent of the viewport height; negative margins shrink it. With a zero
    threshold an element counts as intersecting as soon as it touches the
    band. :meth:`poll` is driven by the host (scroll or layout events) and
    delivers entries only for elements whose state changed since the last
    poll, in document order. Newly observed elements always get one entry.
    """

    def __init__(
        self,
        callback: IntersectionCallback,
        viewport: Viewport,
        *,
        root_margin: tuple[float, float] = (TOC_ROOT_MARGIN_TOP_PCT, TOC_ROOT_MARGIN_BOTTOM_PCT),
        threshold: float = TOC_THRESHOLD,
    ) -> None:
        self._callback = callback
        self.viewport = viewport
        self.root_margin = root_margin
        self.threshold = threshold
        self._observed: dict[str, Element] = {}
        self._states: dict[str, bool | None] = {}

    @property
    def observed(self) -> list[Element]:
        return list(self._observed.values())

    def observe(self, element: Element) -> None:
        self._observed[element.id] = element
        self._states[element.id] = None

    def unobserve(self, element: Element) -> None:
        self._observed.pop(element.id, None)
        self._states.pop(element.id, None)

    def disconnect(self) -> None:
        self._observed.clear()
        self._states.clear()

    def band(self) -> tuple[float, float]:
        """Return the (top, bottom) document coordinates of the trigger band."""
        margin_top, margin_bottom = self.root_margin
        top = self.viewport.scroll_y - self.viewport.height * margin_top / 100
        bottom = self.viewport.scroll_y + self.viewport.height * (1 + margin_bottom / 100)
        return top, bottom

    def poll(self) -> list[IntersectionEntry]:
        """Recompute intersection states and deliver changes to the callback."""
        band_top, band_bottom = self.band()
        entries: list[IntersectionEntry] = []
        for element in sorted(self._observed.values(), key=lambda el: el.top):
            intersecting = self._intersects(element, band_top, band_bottom)
            if self._states.get(element.id) is intersecting:
                continue
            self._states[element.id] = intersecting
            entries.append(IntersectionEntry(target=element, is_intersecting=intersecting))
        if entries:
            self._callback(entries)
        return entries

    def _intersects(self, element: Element, band_top: float, band_bottom: float) -> bool:
        overlap = min(element.bottom, band_bottom) - max(element.top, band_top)
        if overlap < 0:
            return False
        if self.threshold <= 0 or element.height <= 0:
            return True
        return overlap / element.height >= self.threshold
