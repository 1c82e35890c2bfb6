"""Tag types, the ``name:v1,v2`` micro-format and the tag wire shapes.

A tag's ``versions`` is tri-state: ``None`` means the field is omitted on the
wire, ``()`` sends an empty list, anything else sends the listed versions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from typing_extensions import NotRequired, ReadOnly, TypedDict

from ..errors import DecodeError


class TaggingPayload(TypedDict):
    """Tag object sent when creating an item.

    The version list travels under the ``tags`` key.
    """
    name: str
    tags: NotRequired[list[str]]


class TaggingResponse(TypedDict, total=False):
    """Readonly tag object returned inside item responses."""
    name: ReadOnly[str]
    versions: ReadOnly[Optional[list[str]]]


@dataclass(frozen=True)
class Tag:
    """A tag name with an optional version list."""

    name: str
    versions: Optional[tuple[str, ...]] = None

    def __str__(self) -> str:
        return encode_tag(self)


def encode_tag(tag: Tag) -> str:
    """Return the ``name[:v1,v2]`` form of ``tag``."""
    if tag.versions is None:
        return tag.name
    return tag.name + ":" + ",".join(tag.versions)


def decode_tag(token: str) -> Tag:
    """Parse a ``name[:v1,v2]`` token.

    Only the first ``:`` separates name from versions. The name is not
    validated, and a trailing ``:`` yields a single empty version.
    """
    name, sep, rest = token.partition(":")
    if not sep:
        return Tag(name=name)
    return Tag(name=name, versions=tuple(rest.split(",")))


def tag_to_wire(tag: Tag) -> TaggingPayload:
    payload: TaggingPayload = {"name": tag.name}
    if tag.versions is not None:
        payload["tags"] = list(tag.versions)
    return payload


def tag_from_wire(obj: Any) -> Tag:
    """Build a :class:`Tag` from a response tag object.

    Raises
    ------
    DecodeError
        If ``obj`` is not a tag object.
    """
    if not isinstance(obj, dict):
        raise DecodeError(f"Tag must be an object, got {type(obj).__name__}", stage="decode")
    name = obj.get("name")
    if not isinstance(name, str):
        raise DecodeError(f"Tag name must be a string: {name!r}", stage="decode")
    versions = obj.get("versions")
    if versions is None:
        return Tag(name=name)
    if not isinstance(versions, list) or not all(isinstance(v, str) for v in versions):
        raise DecodeError(f"Tag versions for {name!r} must be a list of strings", stage="decode")
    return Tag(name=name, versions=tuple(versions))


__all__ = [
    "Tag",
    "TaggingPayload",
    "TaggingResponse",
    "decode_tag",
    "encode_tag",
    "tag_from_wire",
    "tag_to_wire",
]
