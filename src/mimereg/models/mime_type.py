"""MIME type entity model.

A MimeType pairs an immutable identity (the content-type string and
everything derived from it) with mutable descriptive attributes.

    >>> plaintext = MimeType("text/plain", extensions=["txt", "asc"])
    >>> plaintext.media_type, plaintext.sub_type
    ('text', 'plain')
    >>> plaintext.encoding
    'quoted-printable'
    >>> plaintext == "text/plain"
    True
    >>> simplified("x-appl/x-zip")
    'appl/zip'
"""

import re
import sys
from collections.abc import Iterable, Mapping
from enum import StrEnum
from functools import total_ordering
from typing import TYPE_CHECKING, Any, ClassVar

from mimereg.errors import InvalidContentTypeError, InvalidEncodingError

if TYPE_CHECKING:
    from mimereg.models.attributes import MimeTypeAttributes

MEDIA_TYPE_PATTERN = r"([-\w.+]+)/([-\w.+]*)"
MEDIA_TYPE_RE = re.compile(MEDIA_TYPE_PATTERN)
USE_INSTEAD_RE = re.compile(r"use-instead:" + MEDIA_TYPE_PATTERN)
UNREGISTERED_PREFIX_RE = re.compile(r"^[Xx]-")

IANA_URL = "http://www.iana.org/assignments/media-types/{}/{}"
RFC_URL = "http://rfc-editor.org/rfc/rfc{}.txt"
DRAFT_URL = "http://datatracker.ietf.org/public/idindex.cgi?command=id_details&filename={}"
LTSW_URL = "http://www.ltsw.se/knbase/internet/{}.htp"
CONTACT_URL = "http://www.iana.org/assignments/contact-people.htm#{}"

_URL_MACROS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^IANA$"), "iana"),
    (re.compile(r"^RFC(\d+)$"), "rfc"),
    (re.compile(r"^DRAFT:(.+)$"), "draft"),
    (re.compile(r"^LTSW$"), "ltsw"),
    (re.compile(r"^\{([^=]+)=([^\]]+)\}"), "pair"),
    (re.compile(r"^\[([^=]+)=([^\]]+)\]"), "contact_pair"),
    (re.compile(r"^\[([^\]]+)\]"), "contact"),
]


class Encoding(StrEnum):
    """Content-Transfer-Encoding values a MIME type may carry."""

    SEVEN_BIT = "7bit"
    EIGHT_BIT = "8bit"
    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"


DEFAULT_ENCODING = "default"


def simplified(content_type: str) -> str | None:
    """
    Return the normalized form of a content type.

    Both halves are lowercased and a leading ``x-`` is removed from each
    half independently.

    Args:
        content_type: A "media/subtype" string.

    Returns:
        The simplified string, or None if content_type is not a media type.
    """
    match = MEDIA_TYPE_RE.fullmatch(content_type)
    if match is None:
        return None
    media_type, sub_type = match.groups()
    return f"{_simplify_half(media_type)}/{_simplify_half(sub_type)}"


def _simplify_half(value: str) -> str:
    return UNREGISTERED_PREFIX_RE.sub("", value.lower())


def _flatten(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, Iterable):
        return [value]
    flat: list[Any] = []
    for item in value:
        flat.extend(_flatten(item))
    return flat


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@total_ordering
class MimeType:
    """
    The definition of one MIME content type.

    The content type and the values derived from it are fixed at
    construction. Extensions, encoding, system, registration, obsolescence,
    docs and URLs may be reassigned at any time; each setter normalizes its
    input.

    Equality is case-insensitive on ``content_type`` between two MimeType
    objects and uses the simplified form when comparing against a string.
    """

    SIGNATURES: ClassVar[frozenset[str]] = frozenset(
        {
            "application/pgp-keys",
            "application/pgp",
            "application/pgp-signature",
            "application/pkcs10",
            "application/pkcs7-mime",
            "application/pkcs7-signature",
            "text/vcard",
        }
    )

    def __init__(
        self,
        content_type: str,
        *,
        extensions: Any = None,
        encoding: str | None = None,
        system: str | re.Pattern[str] | None = None,
        obsolete: bool = False,
        docs: str | None = None,
        url: Any = None,
        registered: bool = True,
    ) -> None:
        """Build a MimeType from a "media/subtype" string.

        Raises:
            InvalidContentTypeError: If content_type is not a media type.
        """
        match = MEDIA_TYPE_RE.fullmatch(content_type) if isinstance(content_type, str) else None
        if match is None:
            raise InvalidContentTypeError(content_type)

        self._content_type = content_type
        self._raw_media_type, self._raw_sub_type = match.groups()
        self._simplified = simplified(content_type) or ""
        self._media_type, self._sub_type = self._simplified.split("/", 1)

        self._use_instead: list[str] | None = None
        self.extensions = extensions
        self.encoding = encoding
        self.system = system
        self.registered = registered
        self.obsolete = obsolete
        self.docs = docs
        self.url = url

    # Identity

    @property
    def content_type(self) -> str:
        """The content type exactly as supplied (``x-chemical/x-pdb``)."""
        return self._content_type

    @property
    def raw_media_type(self) -> str:
        """Media type half of the unmodified content type (``x-chemical``)."""
        return self._raw_media_type

    @property
    def raw_sub_type(self) -> str:
        """Subtype half of the unmodified content type (``x-pdb``)."""
        return self._raw_sub_type

    @property
    def simplified(self) -> str:
        """Lowercased content type with ``x-`` prefixes removed (``chemical/pdb``)."""
        return self._simplified

    @property
    def media_type(self) -> str:
        """Media type half of the simplified content type (``chemical``)."""
        return self._media_type

    @property
    def sub_type(self) -> str:
        """Subtype half of the simplified content type (``pdb``)."""
        return self._sub_type

    # Attributes

    @property
    def extensions(self) -> list[str]:
        """File extensions known to be used for this type."""
        return self._extensions

    @extensions.setter
    def extensions(self, value: Any) -> None:
        # Nested and scalar values collapse to a flat list without Nones.
        self._extensions = [ext for ext in _flatten(value) if ext is not None]

    @property
    def default_encoding(self) -> str:
        if self._media_type == "text":
            return Encoding.QUOTED_PRINTABLE.value
        return Encoding.BASE64.value

    @property
    def encoding(self) -> str:
        """The encoding required to transport this type across a network."""
        return self._encoding

    @encoding.setter
    def encoding(self, value: str | None) -> None:
        if value is None or value == DEFAULT_ENCODING:
            self._encoding = self.default_encoding
            return
        try:
            self._encoding = Encoding(value).value
        except ValueError:
            raise InvalidEncodingError(value) from None

    @property
    def system(self) -> re.Pattern[str] | None:
        """Platform matcher this type is specific to, if any."""
        return self._system

    @system.setter
    def system(self, value: str | re.Pattern[str] | None) -> None:
        if value is None or isinstance(value, re.Pattern):
            self._system = value
        else:
            self._system = re.compile(value)

    @property
    def registered(self) -> bool:
        """
        Whether the type is registered with IANA.

        Names that begin with ``x-`` in either half are unregistered,
        whatever the stored flag says.
        """
        if UNREGISTERED_PREFIX_RE.match(self._raw_media_type) or UNREGISTERED_PREFIX_RE.match(
            self._raw_sub_type
        ):
            return False
        return self._registered

    @registered.setter
    def registered(self, value: bool) -> None:
        self._registered = bool(value)

    @property
    def obsolete(self) -> bool:
        return self._obsolete

    @obsolete.setter
    def obsolete(self, value: bool | None) -> None:
        self._obsolete = bool(value)

    @property
    def docs(self) -> str | None:
        return self._docs

    @docs.setter
    def docs(self, value: str | None) -> None:
        # use-instead references are re-read on every assignment
        self._docs = value
        references = USE_INSTEAD_RE.findall(value) if value else []
        self._use_instead = [simplified(f"{m}/{s}") or f"{m}/{s}" for m, s in references] or None

    @property
    def use_instead(self) -> list[str] | None:
        """Replacement types named in docs; None unless the type is obsolete."""
        if not self._obsolete or self._use_instead is None:
            return None
        return list(self._use_instead)

    @property
    def url(self) -> list[str]:
        """Raw URL tokens. See urls() for the expanded form."""
        return self._url

    @url.setter
    def url(self, value: Any) -> None:
        self._url = [token for token in _flatten(value) if token is not None]

    def urls(self) -> list[str | tuple[str, str]]:
        """
        Expand the raw URL tokens.

        ``IANA``, ``RFC<n>``, ``DRAFT:<name>`` and ``LTSW`` become full URLs,
        ``{label=value}`` becomes ``(label, value)``, ``[label=name]`` becomes
        ``(label, contact URL)`` and ``[name]`` becomes a contact URL.
        Anything else is passed through unchanged.
        """
        return [self._expand_url(token) for token in self._url]

    def _expand_url(self, token: str) -> str | tuple[str, str]:
        for pattern, kind in _URL_MACROS:
            match = pattern.match(token)
            if match is None:
                continue
            if kind == "iana":
                return IANA_URL.format(self._media_type, self._sub_type)
            if kind == "rfc":
                return RFC_URL.format(match.group(1))
            if kind == "draft":
                return DRAFT_URL.format(match.group(1))
            if kind == "ltsw":
                return LTSW_URL.format(self._media_type)
            if kind == "pair":
                return (match.group(1), match.group(2))
            if kind == "contact_pair":
                return (match.group(1), CONTACT_URL.format(match.group(2)))
            return CONTACT_URL.format(match.group(1))
        return token

    # Predicates

    @property
    def is_binary(self) -> bool:
        return self._encoding == Encoding.BASE64

    @property
    def is_ascii(self) -> bool:
        return not self.is_binary

    @property
    def is_signature(self) -> bool:
        """True for the known digital-signature types."""
        return self._simplified.lower() in self.SIGNATURES

    @property
    def is_system(self) -> bool:
        """True if the type is specific to some platform."""
        return self._system is not None

    @property
    def is_complete(self) -> bool:
        """True if at least one extension is known."""
        return bool(self._extensions)

    def is_platform(self, platform_id: str | None = None) -> bool:
        """
        Check whether the type is specific to the given platform.

        Args:
            platform_id: Platform identifier to match. Defaults to sys.platform.
        """
        if self._system is None:
            return False
        return self._system.search(platform_id or sys.platform) is not None

    def like(self, other: "MimeType | str") -> bool:
        """True if other has the same simplified type."""
        if isinstance(other, MimeType):
            return self._simplified == other.simplified
        return self._simplified == simplified(other)

    # Ordering

    def priority_key(self) -> tuple[Any, ...]:
        """Sort key used by priority_compare(); lower sorts first."""
        use_instead = self.use_instead
        if self._obsolete:
            use_instead_rank = (0, use_instead) if use_instead is not None else (1, [])
        else:
            use_instead_rank = (0, [])
        return (
            self._simplified,
            not self.registered,
            self.is_system,
            not self.is_complete,
            self._obsolete,
            use_instead_rank,
        )

    def priority_compare(self, other: "MimeType") -> int:
        """
        Compare by how reliable each definition is.

        Stages, each consulted only when the previous ones are equal:

        1. simplified type (different types never rank against each other)
        2. registered before unregistered
        3. generic before platform-specific
        4. complete before incomplete
        5. current before obsolete
        6. obsolete with use-instead before obsolete without
        7. use-instead lists, compared as lists (shorter first on a shared prefix)

        Returns:
            -1, 0 or 1.
        """
        return _cmp(self.priority_key(), other.priority_key())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MimeType):
            return self._content_type.lower() == other.content_type.lower()
        if isinstance(other, str):
            return self._simplified == simplified(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, MimeType):
            return self._content_type.lower() < other.content_type.lower()
        if isinstance(other, str):
            other_simplified = simplified(other)
            if other_simplified is None:
                return NotImplemented
            return self._simplified < other_simplified
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._content_type.lower())

    def __str__(self) -> str:
        return self._content_type

    def __repr__(self) -> str:
        return f"MimeType({self._content_type!r})"

    # Conversion

    @classmethod
    def from_attributes(cls, attributes: "MimeTypeAttributes") -> "MimeType":
        """Build a MimeType from a validated attribute set."""
        return cls(
            attributes.content_type,
            extensions=attributes.extensions,
            encoding=attributes.encoding,
            system=attributes.system,
            obsolete=attributes.obsolete,
            docs=attributes.docs,
            url=attributes.url,
            registered=attributes.registered,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MimeType":
        """
        Build a MimeType from a loosely keyed mapping.

        Keys such as ``Content-Type``, ``content_type`` or
        ``Content-Transfer-Encoding`` are accepted; see
        normalize_attribute_key().
        """
        from mimereg.models.attributes import MimeTypeAttributes

        return cls.from_attributes(MimeTypeAttributes.from_mapping(mapping))

    def to_attributes(self) -> "MimeTypeAttributes":
        from mimereg.models.attributes import MimeTypeAttributes

        return MimeTypeAttributes(
            content_type=self._content_type,
            extensions=list(self._extensions),
            encoding=self._encoding,
            system=self._system.pattern if self._system is not None else None,
            obsolete=self._obsolete,
            docs=self._docs,
            url=list(self._url),
            registered=self.registered,
        )

    def copy(self) -> "MimeType":
        """Return an independent copy with the same attributes."""
        return MimeType(
            self._content_type,
            extensions=list(self._extensions),
            encoding=self._encoding,
            system=self._system,
            obsolete=self._obsolete,
            docs=self._docs,
            url=list(self._url),
            registered=self._registered,
        )
