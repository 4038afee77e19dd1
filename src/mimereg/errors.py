"""mimereg error types.

All custom exceptions inherit from MimeRegError to allow
catching any registry-specific error.
"""


class MimeRegError(Exception):
    """Base exception for all mimereg errors."""

    pass


class ConfigurationError(MimeRegError):
    """Invalid configuration."""

    pass


class InvalidContentTypeError(MimeRegError, ValueError):
    """A content-type string is not in the form media/subtype."""

    def __init__(self, content_type: object) -> None:
        super().__init__(f"Invalid Content-Type provided ({content_type!r})")
        self.content_type = content_type


class InvalidEncodingError(MimeRegError, ValueError):
    """An encoding outside of 7bit, 8bit, quoted-printable or base64."""

    def __init__(self, encoding: object) -> None:
        super().__init__(
            f"Invalid encoding {encoding!r}: the encoding must be None, 'default', "
            "base64, 7bit, 8bit, or quoted-printable"
        )
        self.encoding = encoding


class DatasetParseError(MimeRegError):
    """A corpus line does not match the record grammar.

    Fatal to the whole bulk load.
    """

    def __init__(self, line_number: int, line: str, source: str = "<string>") -> None:
        super().__init__(
            f"{source}:{line_number}: Parsing error in MIME type definitions: {line!r}"
        )
        self.line_number = line_number
        self.line = line
        self.source = source
