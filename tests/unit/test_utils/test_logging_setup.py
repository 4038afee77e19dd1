"""Tests for loguru configuration."""

from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from mimereg.config.models import LoggingConfig
from mimereg.loader import load_corpus
from mimereg.models.mime_type import MimeType
from mimereg.registry import MimeTypeRegistry
from mimereg.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    """Remove handlers added by configure_logging(), flushing file sinks."""
    yield
    logger.remove()


def _add_duplicate(registry: MimeTypeRegistry) -> None:
    registry.add(MimeType("text/plain"), MimeType("TEXT/PLAIN"))


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_writes_to_file(
        self, tmp_path: Path, registry: MimeTypeRegistry, sample_corpus: str
    ) -> None:
        """A configured file receives registry messages at or above the level."""
        log_file = tmp_path / "mimereg.log"
        configure_logging(LoggingConfig(level="WARNING", file=log_file))

        load_corpus(sample_corpus, registry)
        _add_duplicate(registry)
        logger.remove()

        content = log_file.read_text()
        assert "already registered as a variant of text/plain" in content
        assert "Loaded" not in content

    def test_debug_level(
        self, tmp_path: Path, registry: MimeTypeRegistry, sample_corpus: str
    ) -> None:
        """DEBUG shows corpus load summaries."""
        log_file = tmp_path / "mimereg.log"
        configure_logging(LoggingConfig(level="DEBUG", file=log_file))

        load_corpus(sample_corpus, registry, source="sample.txt")
        logger.remove()

        assert "MIME type definitions from sample.txt" in log_file.read_text()

    def test_other_modules_filtered(self, tmp_path: Path) -> None:
        """Records emitted outside the mimereg package are dropped."""
        log_file = tmp_path / "mimereg.log"
        configure_logging(LoggingConfig(level="DEBUG", file=log_file))

        logger.warning("from a caller")
        logger.remove()

        content = log_file.read_text()
        assert "Logging configured" in content
        assert "from a caller" not in content

    def test_json_format(self, tmp_path: Path, registry: MimeTypeRegistry) -> None:
        """JSON format serializes records."""
        log_file = tmp_path / "mimereg.log"
        configure_logging(LoggingConfig(level="WARNING", format="json", file=log_file))

        _add_duplicate(registry)
        logger.remove()

        content = log_file.read_text()
        assert '"message": "Type TEXT/PLAIN already registered' in content
        assert '"level"' in content
