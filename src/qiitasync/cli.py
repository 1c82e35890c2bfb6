"""Command-line entry point: publish a Markdown article and print the result."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .client import DEFAULT_HOST, Qiita
from .errors import QiitaSyncError
from .frontmatter import parse_markdown, render_markdown
from .utils import env_flag

DEFAULT_POST = "_posts/sample.md"

_logger = logging.getLogger("qiitasync")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qiitasync",
        description="Publish a Markdown article with YAML frontmatter to Qiita.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_POST, help=f"Article file (default: {DEFAULT_POST})")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=env_flag(os.environ.get("QIITA_DRY_RUN")),
        help="Print the outgoing request instead of sending it (env: QIITA_DRY_RUN)",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help=f"API host (default: {DEFAULT_HOST})")
    parser.add_argument("--timeout", type=float, default=20, help="Request timeout in seconds")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the authenticated user's items instead of publishing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )

    client = Qiita(host=args.host, dry_run=args.dry_run, default_timeout=args.timeout)
    try:
        if args.list:
            for item in client.items.list_own():
                print(render_markdown(item))
            return 0

        text = Path(args.path).read_text(encoding="utf-8")
        article = parse_markdown(text)
        created = client.items.create(article)
        if client.dry_run:
            _logger.info("Dry run: nothing was published.")
            return 0
        print(render_markdown(created))
    except (OSError, UnicodeDecodeError) as exc:
        _logger.error("Could not read %s: %s", args.path, exc)
        return 1
    except QiitaSyncError as exc:
        _logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0
