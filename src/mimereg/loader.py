"""Bulk loader for MIME type corpora.

A corpus holds one definition per line:

    [*][!][os:]media/subtype[ @ext,ext][ :encoding][ 'url,url][ =docs]

``*`` marks an unregistered type, ``!`` an obsolete one and ``os:`` a
platform-specific one. Everything except the media type and subtype is
optional. ``#`` starts a comment that runs to the end of the line; blank
lines are skipped.
"""

import re
from importlib import resources
from pathlib import Path

from loguru import logger

from mimereg.errors import DatasetParseError
from mimereg.models.attributes import MimeTypeAttributes
from mimereg.models.mime_type import MEDIA_TYPE_PATTERN, MimeType
from mimereg.registry import MimeTypeRegistry

DEFAULT_CORPUS = "mime_types.txt"

RECORD_RE = re.compile(
    r"""
    ^
    (?P<unregistered>\*)?
    (?P<obsolete>!)?
    (?:(?P<platform>\w+):)?
    """
    + MEDIA_TYPE_PATTERN
    + r"""
    (?:\s@(?P<extensions>\S+))?
    (?:\s:(?P<encoding>base64|7bit|8bit|quoted-printable))?
    (?:\s'(?P<urls>.+?))?
    (?:\s=(?P<docs>.+))?
    $
    """,
    re.VERBOSE,
)

COMMENT_RE = re.compile(r"#.*")


def parse_line(line: str) -> MimeTypeAttributes | None:
    """
    Parse one corpus line.

    Args:
        line: Raw line text.

    Returns:
        The parsed attributes, or None for blank and comment-only lines.

    Raises:
        ValueError: If the line does not match the record grammar.
    """
    item = COMMENT_RE.sub("", line).strip()
    if not item:
        return None

    match = RECORD_RE.match(item)
    if match is None:
        raise ValueError(f"Not a MIME type definition: {item!r}")

    media_type, sub_type = match.group(4), match.group(5)
    extensions = match.group("extensions")
    urls = match.group("urls")

    return MimeTypeAttributes(
        content_type=f"{media_type}/{sub_type}",
        extensions=extensions.split(",") if extensions else [],
        encoding=match.group("encoding"),
        system=match.group("platform"),
        obsolete=match.group("obsolete") is not None,
        docs=match.group("docs"),
        url=urls.split(",") if urls else [],
        registered=match.group("unregistered") is None,
    )


def parse_corpus(text: str, source: str = "<string>") -> list[MimeType]:
    """
    Parse a whole corpus into MimeType objects.

    Args:
        text: Corpus text, one definition per line.
        source: Name used in error messages.

    Returns:
        The parsed types in corpus order.

    Raises:
        DatasetParseError: On the first line that fails to parse.
    """
    types: list[MimeType] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            attributes = parse_line(line)
        except ValueError as e:
            logger.error("Parse error at {}:{}: {}", source, line_number, e)
            raise DatasetParseError(line_number, line, source) from e
        if attributes is not None:
            types.append(MimeType.from_attributes(attributes))
    return types


def load_corpus(
    text: str, registry: MimeTypeRegistry, source: str = "<string>"
) -> list[MimeType]:
    """
    Parse a corpus and add its types to a registry.

    Nothing is added unless the whole corpus parses.

    Returns:
        The types that were added.
    """
    types = parse_corpus(text, source)
    registry.add(*types)
    logger.debug("Loaded {} MIME type definitions from {}", len(types), source)
    return types


def load_corpus_file(path: Path, registry: MimeTypeRegistry) -> list[MimeType]:
    """Load a corpus file into a registry."""
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")
    return load_corpus(path.read_text(encoding="utf-8"), registry, source=str(path))


def load_default_corpus(registry: MimeTypeRegistry) -> list[MimeType]:
    """Load the corpus bundled with the package into a registry."""
    corpus = resources.files("mimereg").joinpath("data").joinpath(DEFAULT_CORPUS)
    text = corpus.read_text(encoding="utf-8")
    return load_corpus(text, registry, source=DEFAULT_CORPUS)
