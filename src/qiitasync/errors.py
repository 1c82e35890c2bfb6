"""Exception hierarchy for the qiitasync client."""

from __future__ import annotations

from typing import Optional


class QiitaSyncError(Exception):
    """Base class for every error raised by qiitasync."""


class ParseError(QiitaSyncError):
    """A Markdown document could not be turned into an article."""


class MalformedDocumentError(ParseError):
    """The frontmatter delimiters or the YAML block are broken."""


class MissingTitleError(ParseError):
    """The frontmatter has no usable ``title``."""


class TypeMismatchError(ParseError):
    """A frontmatter field holds a value of the wrong type."""

    def __init__(self, field: str, expected: str, value: object) -> None:
        super().__init__(
            f"Frontmatter field {field!r} must be {expected}, got {type(value).__name__}"
        )
        self.field = field
        self.expected = expected
        self.value = value


class RenderError(QiitaSyncError):
    """An article could not be rendered to Markdown."""


class RequestError(QiitaSyncError):
    """Base class for failures tied to one HTTP request.

    ``stage`` is one of ``prepare``, ``transport``, ``status`` or ``decode``.
    """

    def __init__(
        self,
        message: str,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        stage: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        context = " ".join(part for part in (method, url) if part)
        if stage:
            context = f"{stage}: {context}" if context else stage
        super().__init__(f"[{context}] {message}" if context else message)
        self.method = method
        self.url = url
        self.stage = stage
        self.status_code = status_code


class EncodeError(RequestError):
    """The request body could not be serialized to JSON."""


class NetworkError(RequestError):
    """Transport failure: DNS, connection, timeout."""


class AuthError(RequestError):
    """The bearer token is missing or was rejected."""


class RemoteError(RequestError):
    """The service answered with an error status."""


class DecodeError(RequestError):
    """The response body is not JSON or not shaped like an item."""


__all__ = [
    "AuthError",
    "DecodeError",
    "EncodeError",
    "MalformedDocumentError",
    "MissingTitleError",
    "NetworkError",
    "ParseError",
    "QiitaSyncError",
    "RemoteError",
    "RenderError",
    "RequestError",
    "TypeMismatchError",
]
