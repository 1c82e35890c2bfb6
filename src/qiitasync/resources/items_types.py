'''Types, structures, and wire conversion for items'''

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from typing_extensions import ReadOnly, TypedDict

from ..errors import DecodeError
from .tags_types import Tag, TaggingPayload, TaggingResponse, tag_from_wire, tag_to_wire

__all__ = [
    "Article",
    "ItemPayload",
    "ItemResponse",
]


class ItemPayload(TypedDict):
    """Body of a create-item request."""
    body: str
    tags: list[TaggingPayload]
    title: str
    private: bool


class ItemResponse(TypedDict, total=False):
    """Readonly item dict returned by item endpoints."""
    id: ReadOnly[str]
    title: ReadOnly[str]
    body: ReadOnly[str]
    rendered_body: ReadOnly[str]
    private: ReadOnly[bool]
    tags: ReadOnly[list[TaggingResponse]]
    created_at: ReadOnly[str]
    updated_at: ReadOnly[str]


@dataclass(frozen=True)
class Article:
    """An article, either authored locally or read back from the service.

    ``id``, ``rendered_body`` and the timestamps are only ever set by the
    service; a freshly parsed document leaves them empty.
    """

    title: str = ""
    body: str = ""
    private: bool = True
    tags: tuple[Tag, ...] = ()
    id: str = ""
    rendered_body: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_payload(self) -> ItemPayload:
        """Return the create-item request body.

        Only ``body``, ``tags``, ``title`` and ``private`` are sent.
        """
        return {
            "body": self.body,
            "tags": [tag_to_wire(tag) for tag in self.tags],
            "title": self.title,
            "private": self.private,
        }

    @classmethod
    def from_payload(cls, obj: Any) -> "Article":
        """Build an article from an item response object.

        Missing or null fields fall back to the dataclass defaults: empty
        strings, no tags, no timestamps, and ``private=True``.

        Raises
        ------
        DecodeError
            If ``obj`` is not an item object or a field has the wrong type.
        """
        if not isinstance(obj, Mapping):
            raise DecodeError(f"Item must be an object, got {type(obj).__name__}", stage="decode")

        tags = obj.get("tags")
        if tags is None:
            tags = []
        if not isinstance(tags, list):
            raise DecodeError("Item field 'tags' must be a list", stage="decode")

        private = obj.get("private")
        if private is None:
            private = True
        if not isinstance(private, bool):
            raise DecodeError("Item field 'private' must be a boolean", stage="decode")

        return cls(
            id=_string_field(obj, "id"),
            title=_string_field(obj, "title"),
            body=_string_field(obj, "body"),
            rendered_body=_string_field(obj, "rendered_body"),
            private=private,
            tags=tuple(tag_from_wire(tag) for tag in tags),
            created_at=_timestamp_field(obj, "created_at"),
            updated_at=_timestamp_field(obj, "updated_at"),
        )


def _string_field(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Item field {key!r} must be a string", stage="decode")
    return value


def _timestamp_field(obj: Mapping[str, Any], key: str) -> Optional[datetime]:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Item field {key!r} must be a date-time string", stage="decode")
    try:
        # fromisoformat only accepts a trailing "Z" from 3.11 on
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as exc:
        raise DecodeError(f"Item field {key!r} is not a date-time: {value!r}", stage="decode") from exc
