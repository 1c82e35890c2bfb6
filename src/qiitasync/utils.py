"""Shared helpers for the qiitasync client."""

from __future__ import annotations

from urllib.parse import urlsplit

import requests


def dump_request(prepared: requests.PreparedRequest) -> str:
    """Return an HTTP/1.1-style text dump of ``prepared``.

    The dump holds the request line, a ``Host`` header, the prepared headers
    and the body, in that order.
    """
    lines = [f"{prepared.method} {prepared.path_url} HTTP/1.1"]
    lines.append(f"Host: {urlsplit(prepared.url or '').netloc}")
    for name, value in prepared.headers.items():
        lines.append(f"{name}: {value}")
    body = prepared.body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + (body or "")


def env_flag(value: str | None) -> bool:
    """Interpret an environment variable as a boolean switch."""
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}
