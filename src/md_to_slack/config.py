"""Load settings from environment (.env and env vars)."""

from __future__ import annotations

import os
from pathlib import Path

# Load .env from project root if present
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
if _env_path.exists():
    from dotenv import load_dotenv
    load_dotenv(_env_path)


def _str(key: str, default: str = "") -> str:
    return (os.environ.get(key) or "").strip() or default


# Logging
LOG_LEVEL = _str("LOG_LEVEL", "WARNING").upper()

# CLI defaults (explicit --text/--header flags win)
DEFAULT_TEXT = _str("MD_TO_SLACK_TEXT")
DEFAULT_HEADER = _str("MD_TO_SLACK_HEADER")
