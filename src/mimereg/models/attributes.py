"""Attribute set for building MIME types.

MimeTypeAttributes has one canonical key per field. External spellings
(``Content-Type``, ``Content-Transfer-Encoding``, ``URL`` ...) are mapped
onto those keys by normalize_attribute_key() before validation.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from mimereg.errors import InvalidContentTypeError, InvalidEncodingError
from mimereg.models.mime_type import MEDIA_TYPE_RE, Encoding, _flatten

# Normalized external spellings that differ from the canonical field name
KEY_ALIASES: dict[str, str] = {
    "content_transfer_encoding": "encoding",
    "urls": "url",
}


def normalize_attribute_key(key: str) -> str:
    """
    Map an external attribute spelling onto its canonical key.

    Keys are case-insensitive and dashes may be used instead of
    underscores, so ``Content-Type``, ``content-type`` and
    ``CONTENT_TYPE`` all become ``content_type``.
    """
    normalized = key.strip().lower().replace("-", "_")
    return KEY_ALIASES.get(normalized, normalized)


class MimeTypeAttributes(BaseModel):
    """Validated attributes of one MIME type definition."""

    model_config = ConfigDict(extra="forbid")

    content_type: str
    extensions: list[str] = Field(default_factory=list)
    encoding: Encoding | None = None
    system: str | None = None
    obsolete: bool = False
    docs: str | None = None
    url: list[str] = Field(default_factory=list)
    registered: bool = True

    @field_validator("content_type")
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        """Require the media/subtype form."""
        if MEDIA_TYPE_RE.fullmatch(v) is None:
            raise ValueError(f"content_type must be in the form media/subtype, got {v!r}")
        return v

    @field_validator("extensions", "url", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> Any:
        """Accept a single string, None, or nested lists; None entries are dropped."""
        return [item for item in _flatten(v) if item is not None]

    @field_validator("encoding", mode="before")
    @classmethod
    def resolve_default_encoding(cls, v: Any) -> Any:
        """Treat the ``default`` marker as no explicit encoding."""
        if v == "default":
            return None
        return v

    @field_validator("obsolete", "registered", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any, info: ValidationInfo) -> Any:
        """None means the field was present but unset."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MimeTypeAttributes":
        """
        Validate a mapping whose keys may use any accepted spelling.

        Raises:
            InvalidContentTypeError: If the content type is missing or malformed.
            InvalidEncodingError: If the encoding is not a known value.
            ValidationError: For any other invalid field.
        """
        data = {normalize_attribute_key(str(k)): v for k, v in mapping.items()}
        try:
            return cls(**data)
        except ValidationError as e:
            fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            if "content_type" in fields:
                raise InvalidContentTypeError(data.get("content_type")) from e
            if "encoding" in fields:
                raise InvalidEncodingError(data.get("encoding")) from e
            raise
