"""Run the blog server with ``python -m server``."""

from __future__ import annotations

import os

import uvicorn

from blogsite.config import BLOGSITE_CONTENT_PATH, BLOGSITE_LOG_LEVEL
from blogsite.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Serve ``server.main:app``; HOST, PORT and RELOAD come from the environment."""
    configure_logging(BLOGSITE_LOG_LEVEL)
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "3000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Serving blog posts",
        extra={"host": host, "port": port, "content": str(BLOGSITE_CONTENT_PATH)},
    )
    # Root logging is already set up; keep uvicorn from installing its own.
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
