"""Markdown → Slack Block Kit blocks conversion.

This module builds **Slack API-compatible** block payloads for the `blocks`
field of `chat.postMessage` and incoming webhooks.

Only titles, subtitles, links and plain paragraphs are understood. Everything
else is passed through line by line as `mrkdwn` text.
"""

from __future__ import annotations

import logging
from typing import Any

from .markdown_parser import (
    LineKind,
    classify_line,
    has_link,
    rewrite_link_line,
    strip_heading_marker,
    trim_line,
)

logger = logging.getLogger(__name__)


def parse_markdown(
    markdown: str,
    text: str | None = None,
    header: str | None = None,
) -> list[dict[str, Any]] | dict[str, Any]:
    """Convert markdown into Slack blocks.

    Block types:
    - header: only when `header` is given, always first
    - section: a title/subtitle (`*Title*`) or a run of consecutive plain lines
    - divider: right after a top-level (`#`/`##`) title section

    When `text` is given the blocks are wrapped as `{"text": ..., "blocks": [...]}`
    (the shape `chat.postMessage` and webhooks expect); otherwise the bare list
    is returned.
    """
    blocks: list[dict[str, Any]] = []
    current: dict[str, Any] | None = None

    if header:
        blocks.append(_slack_header_block(header))

    lines = markdown.split("\n") if markdown else []
    for raw_line in lines:
        line = trim_line(raw_line)
        kind = classify_line(line)
        if kind is not LineKind.PLAIN:
            if current is not None:
                blocks.append(current)
                current = None
            blocks.append(_slack_section_block(f"*{strip_heading_marker(line)}*"))
            if kind is LineKind.TITLE:
                blocks.append(_slack_divider_block())
            continue
        if current is None:
            current = _slack_section_block("")
        if has_link(line):
            current["text"]["text"] += rewrite_link_line(line)
        else:
            current["text"]["text"] += line + "\n"

    if current is not None:
        blocks.append(current)

    logger.debug("Built %d blocks from %d lines", len(blocks), len(lines))
    if text:
        return {"text": text, "blocks": blocks}
    return blocks


def _slack_header_block(text: str) -> dict[str, Any]:
    return {"type": "header", "text": {"type": "plain_text", "text": text}}


def _slack_section_block(text: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text, "verbatim": True}}


def _slack_divider_block() -> dict[str, Any]:
    return {"type": "divider"}
