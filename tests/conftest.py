"""Test setup for blogsite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SYSTEMS_POST = """---
title: Reading the Raft Paper
date: 2024-03-10
categories:
  - system-papers
---

Intro paragraph.

## Leader Election

Details.

### Terms & Votes

More details.

## Log Replication

#### Safety `invariants`
"""

AI_POST = """---
title: Notes on Attention
date: 2024-05-01
category: ai
---

## Scaled Dot-Product

Text.
"""

LEGACY_POST = """---
title: An Undated Post
---

No headings here.
"""


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    """A content directory with three posts in different front matter styles."""
    directory = tmp_path / "content" / "blog"
    directory.mkdir(parents=True)
    (directory / "raft.mdx").write_text(SYSTEMS_POST, encoding="utf-8")
    (directory / "attention.md").write_text(AI_POST, encoding="utf-8")
    (directory / "undated.mdx").write_text(LEGACY_POST, encoding="utf-8")
    return directory
