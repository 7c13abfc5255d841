"""Extract table-of-contents headings from Markdown/MDX source."""

from __future__ import annotations

import logging
import re

from blogsite.schemas import Heading
from blogsite.slugify import slugify

logger = logging.getLogger(__name__)

# h1 is the post title and stays out of the table of contents.
_HEADING_LINE_RE = re.compile(r"^(#{2,6})[ \t]+(.+)$", re.MULTILINE)
_FENCE_RE = re.compile(r"^(`{3,}|~{3,})")


class HeadingSlugger:
    """Assign heading ids for a single document.

    Repeated ids are always logged. With ``unique=True`` repeats get a
    numeric suffix (``setup``, ``setup-1``, ``setup-2``); otherwise every
    heading keeps its plain slug and anchors become ambiguous.
    """

    def __init__(self, *, unique: bool = False) -> None:
        self.unique = unique
        self._counts: dict[str, int] = {}

    def slug(self, text: str) -> str:
        base = slugify(text)
        seen = self._counts.get(base)
        if seen is None:
            self._counts[base] = 0
            return base

        logger.warning("Duplicate heading id %r for heading text %r", base, text)
        if not self.unique:
            return base

        seen += 1
        candidate = f"{base}-{seen}"
        while candidate in self._counts:
            seen += 1
            candidate = f"{base}-{seen}"
        self._counts[base] = seen
        self._counts[candidate] = 0
        return candidate


def extract_headings(content: str, *, unique_ids: bool = False) -> list[Heading]:
    """Extract h2-h6 headings from raw Markdown in document order.

    Args:
        content: Post body text.
        unique_ids: Suffix repeated ids instead of reusing them. Heading
            lines inside fenced code blocks are then skipped, so the
            suffixes count the same headings the rendered page has.

    Returns:
        One Heading per matching line. Lines that are not headings, h1
        lines and lines with seven or more ``#`` are skipped.
    """
    source = blank_fenced_code(content) if unique_ids else content
    slugger = HeadingSlugger(unique=unique_ids)
    headings: list[Heading] = []
    for match in _HEADING_LINE_RE.finditer(source):
        text = match.group(2).strip()
        if not text:
            continue
        headings.append(Heading(id=slugger.slug(text), text=text, level=len(match.group(1))))
    return headings


def blank_fenced_code(content: str) -> str:
    """Replace the lines of closed fenced code blocks with empty lines.

    Fences follow the Markdown renderer: they open at the start of a line
    and close on a line holding the same fence. Unclosed fences are left as
    they are, since they render as plain text.
    """
    lines = content.splitlines(keepends=True)
    start: int | None = None
    fence = ""
    for index, line in enumerate(lines):
        if start is None:
            match = _FENCE_RE.match(line)
            if match:
                start, fence = index, match.group(1)
        elif line.rstrip("\r\n").rstrip(" ") == fence:
            for blanked in range(start, index + 1):
                lines[blanked] = _blank(lines[blanked])
            start = None
    return "".join(lines)


def _blank(line: str) -> str:
    return "\n" if line.endswith("\n") else ""
