"""Line-level Markdown helpers: heading classification and link rewriting.

This is not a Markdown parser in the full sense. Every input line is trimmed and
classified as a title (`#`/`##`), a subtitle (`###` to `######`) or plain text,
and inline `[name](url)` links are rewritten into Slack's `<url|name>` form.
"""

from __future__ import annotations

import re
from enum import Enum

TITLE_RE = re.compile(r"^#{1,2} ")
SUBTITLE_RE = re.compile(r"^#{3,6} ")
LINK_RE = re.compile(r"\[([^\[]+)\](\(.*\))")
LINK_URL_RE = re.compile(r"(\(.*\))")
LINK_NAME_RE = re.compile(r"\[([^\[]+)\]")
TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


class LineKind(str, Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    PLAIN = "plain"


def trim_line(line: str) -> str:
    """Strip surrounding whitespace and byte-order marks."""
    return TRIM_RE.sub("", line)


def is_title(line: str) -> bool:
    return TITLE_RE.search(line) is not None


def is_subtitle(line: str) -> bool:
    return SUBTITLE_RE.search(line) is not None


def classify_line(line: str) -> LineKind:
    """Classify a trimmed line. Blank lines are plain."""
    if is_title(line):
        return LineKind.TITLE
    if is_subtitle(line):
        return LineKind.SUBTITLE
    return LineKind.PLAIN


def strip_heading_marker(line: str) -> str:
    """Remove the leading `#` run and the space after it (first match only)."""
    regex = TITLE_RE if is_title(line) else SUBTITLE_RE
    return regex.sub("", line, count=1)


def has_link(line: str) -> bool:
    return LINK_RE.search(line) is not None


def strip_links(line: str) -> str:
    # Surrounding whitespace is kept as-is: "See [a](u) now" -> "See  now".
    return LINK_RE.sub("", line)


def convert_md_link_to_slack_link(line: str) -> str:
    """Build a single `<url|name>` token from the line.

    Only the first parenthesised group and the first bracketed group are used,
    even when the line holds several links. The greedy URL pattern also means
    `[a](u1) and [b](u2)` yields the URL `u1) and [b](u2`.
    """
    # TODO: pair each URL with its own name and emit one token per link.
    url_match = LINK_URL_RE.search(line)
    name_match = LINK_NAME_RE.search(line)
    if url_match is None or name_match is None:
        raise ValueError(f"No Markdown link found in line: {line!r}")
    url = url_match.group(0)[1:-1]
    name = name_match.group(0)[1:-1]
    return f"<{url}|{name}>"


def rewrite_link_line(line: str) -> str:
    """Line text with links removed, one space, the Slack link token and a newline."""
    return f"{strip_links(line)} {convert_md_link_to_slack_link(line)}\n"
