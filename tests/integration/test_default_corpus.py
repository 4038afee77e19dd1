"""Integration tests against the bundled corpus."""

import re

import pytest

from mimereg.config.models import RegistryConfig
from mimereg.registry import MimeTypeRegistry


@pytest.fixture(scope="module")
def default_registry() -> MimeTypeRegistry:
    """Registry loaded from the bundled corpus."""
    return MimeTypeRegistry.create_default(RegistryConfig(platform="linux"))


class TestDefaultCorpus:
    """Lookups that exercise the full corpus."""

    def test_loads_every_definition(self, default_registry: MimeTypeRegistry) -> None:
        """The corpus loads without parse errors."""
        assert len(default_registry) > 1000
        assert "application/octet-stream" in default_registry

    def test_text_plain(self, default_registry: MimeTypeRegistry) -> None:
        """The generic text/plain ranks before the VMS one."""
        result = default_registry.resolve("text/plain")

        assert len(result) == 2
        assert result[0].system is None
        assert "txt" in result[0].extensions
        assert result[0].urls()[0] == "http://www.iana.org/assignments/media-types/text/plain"
        assert result[1].system is not None
        assert result[1].system.pattern == "vms"

    def test_obsolete_replacement(self, default_registry: MimeTypeRegistry) -> None:
        """application/x-msword points at application/msword."""
        result = default_registry.resolve("application/x-msword")

        assert [t.content_type for t in result] == ["application/msword", "application/x-msword"]
        assert result[1].obsolete
        assert result[1].use_instead == ["application/msword"]

    def test_type_for_xml(self, default_registry: MimeTypeRegistry) -> None:
        """Both XML types are found in corpus order regardless of case."""
        lower = default_registry.type_for("citydesk.xml")
        upper = default_registry.type_for("citydesk.XML")

        assert [t.content_type for t in lower] == ["application/xml", "text/xml"]
        assert [id(t) for t in upper] == [id(t) for t in lower]

    def test_type_for_mixed_case_extensions(self, default_registry: MimeTypeRegistry) -> None:
        """@z,Z lists each compress type once under the lowercase extension."""
        expected = ["application/x-compress", "application/x-compressed"]

        assert [t.content_type for t in default_registry.type_for("archive.Z")] == expected
        assert [t.content_type for t in default_registry.type_for("archive.z")] == expected

    def test_unregistered_types(self, default_registry: MimeTypeRegistry) -> None:
        """x- types are unregistered and simplified."""
        candidates = default_registry.resolve("chemical/pdb")
        (pdb_type,) = [t for t in candidates if t.content_type == "x-chemical/x-pdb"]
        assert pdb_type.registered is False
        assert pdb_type.simplified == "chemical/pdb"

    def test_platform_specific_types(self) -> None:
        """Mac-only types are found on a mac platform identifier."""
        registry = MimeTypeRegistry.create_default(RegistryConfig(platform="powerpc-mac"))

        result = registry.type_for("archive.bin", platform=True)

        assert [t.content_type for t in result] == ["application/x-mac", "application/x-macbase64"]

    def test_complete_pattern_lookup(self, default_registry: MimeTypeRegistry) -> None:
        """Pattern lookups with complete=True only return types with extensions."""
        result = default_registry.resolve(re.compile(r"^image/"), complete=True)

        assert result
        assert all(t.is_complete for t in result)
        assert all(t.simplified.startswith("image/") for t in result)

    def test_signature_types(self, default_registry: MimeTypeRegistry) -> None:
        """Signature types from the corpus are flagged."""
        assert default_registry.resolve("application/pgp-signature")[0].is_signature
        assert not default_registry.resolve("application/pgp-encrypted")[0].is_signature
