"""Lookup identifiers accepted by MimeTypeRegistry.resolve()."""

import re
from dataclasses import dataclass

from mimereg.models.mime_type import MimeType


@dataclass(frozen=True)
class ByName:
    """Look up one simplified type by name, e.g. ``text/plain``."""

    content_type: str


@dataclass(frozen=True)
class ByPattern:
    """Look up every simplified type the pattern matches (``re.search``)."""

    pattern: re.Pattern[str]


@dataclass(frozen=True)
class ByType:
    """Resolve an already known MimeType to itself."""

    mime_type: MimeType


TypeQuery = ByName | ByPattern | ByType


def as_query(identifier: "TypeQuery | MimeType | re.Pattern[str] | str") -> TypeQuery:
    """Wrap a bare identifier in its query variant."""
    if isinstance(identifier, ByName | ByPattern | ByType):
        return identifier
    if isinstance(identifier, MimeType):
        return ByType(identifier)
    if isinstance(identifier, re.Pattern):
        return ByPattern(identifier)
    return ByName(str(identifier))
