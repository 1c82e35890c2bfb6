"""Markdown-with-frontmatter parsing and rendering for articles.

A document looks like::

    ---
    title: Hello
    tags: go:1.x sample
    private: false
    ---
    Body text here.

``tags`` holds space-separated tokens in the ``name[:v1,v2]`` micro-format.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from .errors import MalformedDocumentError, MissingTitleError, RenderError, TypeMismatchError
from .resources.items_types import Article
from .resources.tags_types import decode_tag, encode_tag

DELIMITER = "---\n"

_logger = logging.getLogger(__name__)


def parse_markdown(text: str) -> Article:
    """Parse a Markdown document into a local, unsynced :class:`Article`.

    Parameters
    ----------
    text
        Full document text, frontmatter included.

    Returns
    -------
    Article
        Article with title, body, private flag and tags populated.

    Raises
    ------
    MalformedDocumentError
        If the two ``---`` delimiter lines are missing or the YAML is invalid.
    MissingTitleError
        If ``title`` is absent or empty.
    TypeMismatchError
        If a known field has the wrong type.
    """
    sections = text.split(DELIMITER, 2)
    if len(sections) < 3:
        raise MalformedDocumentError(
            f"Expected a frontmatter block between two {DELIMITER.strip()!r} lines"
        )
    preamble, raw_meta, body = sections
    if preamble.strip():
        _logger.warning("Discarding text before the frontmatter block: %r", preamble[:40])

    try:
        meta = yaml.safe_load(raw_meta)
    except yaml.YAMLError as exc:
        raise MalformedDocumentError(f"Frontmatter is not valid YAML: {exc}") from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise TypeMismatchError("frontmatter", "a mapping", meta)

    return Article(
        title=_title(meta),
        body=body,
        private=_private(meta),
        tags=tuple(decode_tag(token) for token in _tag_tokens(meta)),
    )


def _title(meta: dict[str, Any]) -> str:
    title = meta.get("title")
    if title is None or title == "":
        raise MissingTitleError("Frontmatter has no 'title'")
    if not isinstance(title, str):
        raise TypeMismatchError("title", "a string", title)
    return title


def _private(meta: dict[str, Any]) -> bool:
    if "private" not in meta:
        return True
    private = meta["private"]
    if not isinstance(private, bool):
        raise TypeMismatchError("private", "a boolean", private)
    return private


def _tag_tokens(meta: dict[str, Any]) -> list[str]:
    tags = meta.get("tags")
    if tags is None:
        return []
    if not isinstance(tags, str):
        raise TypeMismatchError("tags", "a space-separated string", tags)
    return tags.split()


class _FrontmatterDumper(yaml.SafeDumper):
    """Safe dumper that keeps delimiter-like text inside quotes."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # A plain scalar ending in "---" would close the frontmatter early
    style = '"' if "---" in data or "\n" in data or "\r" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_FrontmatterDumper.add_representer(str, _represent_str)


def render_markdown(article: Article) -> str:
    """Render ``article`` as a Markdown document.

    Only ``title``, ``tags``, ``private`` and ``body`` are used.

    Raises
    ------
    RenderError
        If the frontmatter cannot be emitted.
    """
    tags = " ".join(encode_tag(tag) for tag in article.tags) or None
    meta = {"title": article.title, "tags": tags, "private": article.private}
    try:
        header = yaml.dump(
            meta,
            Dumper=_FrontmatterDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=float("inf"),
        )
    except yaml.YAMLError as exc:
        raise RenderError(f"Could not render frontmatter: {exc}") from exc
    if DELIMITER in header:
        raise RenderError("Rendered frontmatter contains a delimiter line")
    return DELIMITER + header + DELIMITER + article.body


__all__ = ["DELIMITER", "parse_markdown", "render_markdown"]
