"""Shared pytest fixtures for mimereg tests."""

import io
from collections.abc import Generator

import pytest
from loguru import logger

from mimereg.models.mime_type import MimeType
from mimereg.registry import MimeTypeRegistry


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture loguru output to a string buffer."""
    string_io = io.StringIO()
    handler_id = logger.add(string_io, format="{level} {message}")
    yield string_io
    logger.remove(handler_id)


@pytest.fixture
def registry() -> MimeTypeRegistry:
    """Empty registry pinned to a linux platform identifier."""
    return MimeTypeRegistry(platform="linux")


@pytest.fixture
def plain_text() -> MimeType:
    """Registered, complete text/plain definition."""
    return MimeType("text/plain", extensions=["txt", "asc"], url=["IANA", "RFC2046"])


@pytest.fixture
def vms_plain_text() -> MimeType:
    """Platform-specific, incomplete text/plain definition."""
    return MimeType("text/plain", system="vms", encoding="8bit")


@pytest.fixture
def sample_corpus() -> str:
    """Small corpus covering every field of the record grammar."""
    return """\
  # application/*
application/msword @doc,dot,wrd :base64 'IANA,[Lindner]
*!application/x-msword @doc,dot,wrd :base64 =use-instead:application/msword
application/xml @xml,xsl :8bit 'IANA,RFC3023
*mac:application/x-mac @bin :base64

  # text/*
text/plain @txt,asc,c,cc,h :8bit 'IANA,RFC2046,RFC3676
text/xml @xml,dtd :8bit 'IANA,RFC3023
vms:text/plain @doc :8bit
x-chemical/x-pdb @pdb # trailing comment
"""
