"""Public package surface for the qiitasync client."""

from .client import DEFAULT_HOST, TOKEN_ENV, Qiita
from .errors import *
from .frontmatter import parse_markdown, render_markdown
from .resources.items_types import Article
from .resources.tags_types import Tag, decode_tag, encode_tag



__all__ = [
    "DEFAULT_HOST",
    "TOKEN_ENV",
    "Article",
    "Qiita",
    "Tag",
    "decode_tag",
    "encode_tag",
    "parse_markdown",
    "render_markdown",
]
