"""Command-line entry point: print Slack blocks for markdown as JSON.

Usage:
  md-to-slack "## v1.0.0"
  python -m md_to_slack.cli --file CHANGELOG.md --header "New Release!"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from . import config
from .logging_config import setup_logging
from .services.block_converter import parse_markdown
from .services.input_layer import read_markdown_file

logger = logging.getLogger(__name__)

USAGE = """
Usage: md-to-slack [options] <markdown-content or file-path>

Options:
  --file, -f      Read markdown from a file
  --text, -t      Add text field to output (for slack-send compatibility)
  --header, -h    Add a header block
  --verbose, -v   Log debug output to stderr
  --help          Show this help message

Examples:
  md-to-slack "## v1.0.0"
  md-to-slack --file CHANGELOG.md
  md-to-slack --file CHANGELOG.md --header "New Release!"
  md-to-slack --file CHANGELOG.md --text "Check out the latest release"
"""


def print_usage() -> None:
    print(USAGE)


VALUE_OPTIONS = {"--text": "--text", "-t": "--text", "--header": "--header", "-h": "--header"}


def build_parser() -> argparse.ArgumentParser:
    # -h is the header option, so argparse's own help flag is disabled.
    parser = argparse.ArgumentParser(prog="md-to-slack", add_help=False, allow_abbrev=False)
    parser.add_argument("inputs", nargs="*")
    parser.add_argument("--file", "-f", action="store_true", dest="is_file")
    parser.add_argument("--text", "-t", default=None)
    parser.add_argument("--header", "-h", default=None)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def attach_option_values(argv: list[str]) -> list[str]:
    """Join --text/--header with the following argument as `--text=VALUE`.

    The next argument is always the value, even when it starts with a dash.
    A trailing option with no value is dropped.
    """
    out: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in VALUE_OPTIONS:
            if i + 1 < len(argv):
                out.append(f"{VALUE_OPTIONS[arg]}={argv[i + 1]}")
            i += 2
            continue
        out.append(arg)
        i += 1
    return out


def render(result: Any) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv or "--help" in argv:
        print_usage()
        return 0

    args, unknown = build_parser().parse_known_intermixed_args(attach_option_values(argv))
    setup_logging("DEBUG" if args.verbose else config.LOG_LEVEL)
    for opt in unknown:
        logger.debug("Ignoring unknown option %s", opt)

    markdown = args.inputs[-1] if args.inputs else ""
    text = args.text if args.text is not None else config.DEFAULT_TEXT
    header = args.header if args.header is not None else config.DEFAULT_HEADER

    if args.is_file and markdown:
        try:
            markdown = read_markdown_file(markdown)
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1

    if not markdown:
        print("Error: No markdown content provided", file=sys.stderr)
        print_usage()
        return 1

    result = parse_markdown(markdown, text=text, header=header)
    print(render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
