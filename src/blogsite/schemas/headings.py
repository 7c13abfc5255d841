"""Heading record model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Heading(BaseModel):
    """A table-of-contents entry extracted from a post."""

    id: str
    text: str
    level: int = Field(..., ge=2, le=6)
