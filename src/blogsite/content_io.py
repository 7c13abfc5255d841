"""Async file helpers for reading content and writing exported pages."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file asynchronously, creating parent directories.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
