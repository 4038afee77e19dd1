"""Domain models for mimereg."""

from mimereg.models.attributes import MimeTypeAttributes, normalize_attribute_key
from mimereg.models.mime_type import Encoding, MimeType, simplified
from mimereg.models.query import ByName, ByPattern, ByType, TypeQuery, as_query

__all__ = [
    "ByName",
    "ByPattern",
    "ByType",
    "Encoding",
    "MimeType",
    "MimeTypeAttributes",
    "TypeQuery",
    "as_query",
    "normalize_attribute_key",
    "simplified",
]
