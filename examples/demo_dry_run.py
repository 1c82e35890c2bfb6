"""Demo that parses the sample post and shows the request it would send.

Run with the virtual environment activated::

    python examples/demo_dry_run.py

Nothing is sent: the client runs in dry-run mode, so ``QIITA_API_TOKEN``
does not need to be valid.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from qiitasync import Qiita, parse_markdown, render_markdown

logging.basicConfig(level=logging.INFO)

def main() -> None:
    with open(os.path.join(PROJECT_ROOT, "_posts", "sample.md"), encoding="utf-8") as handle:
        article = parse_markdown(handle.read())

    print(f"Parsed {article.title!r} with {len(article.tags)} tags")
    pprint(article.to_payload())

    client = Qiita(dry_run=True)
    client.items.create(article)

    print("\nRendered back to Markdown:\n")
    print(render_markdown(article))


if __name__ == "__main__":
    main()
