"""MIME type registry.

Loads MIME type definitions from a line-oriented corpus and looks
them up by type name, pattern, or file extension.
"""

from mimereg.errors import (
    ConfigurationError,
    DatasetParseError,
    InvalidContentTypeError,
    InvalidEncodingError,
    MimeRegError,
)
from mimereg.models import Encoding, MimeType, MimeTypeAttributes, simplified
from mimereg.registry import MimeTypeRegistry

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DatasetParseError",
    "Encoding",
    "InvalidContentTypeError",
    "InvalidEncodingError",
    "MimeRegError",
    "MimeType",
    "MimeTypeAttributes",
    "MimeTypeRegistry",
    "__version__",
    "simplified",
]
