"""Input layer: local markdown files and uploaded content."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def decode_markdown(content: str | bytes) -> str:
    """Return content as text, dropping a UTF-8 BOM and replacing invalid bytes."""
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.warning("Input is not valid UTF-8; undecodable bytes replaced")
            content = content.decode("utf-8-sig", errors="replace")
    return content


def read_markdown_file(path: str | Path) -> str:
    """Read a markdown file.

    Raises OSError (FileNotFoundError, PermissionError, IsADirectoryError, ...)
    when the file cannot be read; callers decide how to report it.
    """
    path = Path(path)
    content = path.read_bytes()
    logger.info("Read %d bytes from %s", len(content), path)
    return decode_markdown(content)
