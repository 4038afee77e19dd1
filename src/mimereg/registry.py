"""Registry of known MIME types.

Keeps two indices over MimeType objects: one keyed by simplified type
(the variant index) and one keyed by file extension.
"""

import re
import sys
import threading
from collections import defaultdict
from typing import TYPE_CHECKING

from loguru import logger

from mimereg.models.mime_type import MimeType, simplified
from mimereg.models.query import ByName, ByPattern, ByType, TypeQuery, as_query

if TYPE_CHECKING:
    from mimereg.config.models import RegistryConfig

DATA_VERSION = "1.16"


class MimeTypeRegistry:
    """
    In-memory registry of MIME type definitions.

    Several definitions may share one simplified type (a generic one and
    a platform-specific one, say); resolve() orders them by
    MimeType.priority_compare(). Types are never removed.
    """

    def __init__(self, platform: str | None = None, data_version: str = DATA_VERSION) -> None:
        """Initialize empty registry.

        Args:
            platform: Platform identifier matched against each type's system.
                Defaults to sys.platform.
            data_version: Version label of the loaded corpus.
        """
        self.platform = platform or sys.platform
        self.data_version = data_version
        self._variants: defaultdict[str, list[MimeType]] = defaultdict(list)
        self._extension_index: defaultdict[str, list[MimeType]] = defaultdict(list)
        # Guards both indices; readers never see one updated without the other
        self._lock = threading.Lock()

    def add(self, *types: MimeType) -> None:
        """
        Add one or more types to the registry.

        Adding a type equal to one already registered under the same
        simplified type logs a warning; the type is added regardless.
        """
        for mime_type in types:
            with self._lock:
                variants = self._variants[mime_type.simplified]
                if mime_type in variants:
                    logger.warning(
                        "Type {} already registered as a variant of {}",
                        mime_type,
                        mime_type.simplified,
                    )
                variants.append(mime_type)
                # @z,Z indexes the type once under "z"
                for ext in dict.fromkeys(ext.lower() for ext in mime_type.extensions):
                    self._extension_index[ext].append(mime_type)

    def register(self, *types: MimeType) -> None:
        """Register one or more types. Same as add()."""
        self.add(*types)

    def resolve(
        self,
        identifier: TypeQuery | MimeType | re.Pattern[str] | str,
        *,
        complete: bool = False,
        platform: bool = False,
    ) -> list[MimeType]:
        """
        Find the definitions for a type, most reliable first.

        Args:
            identifier: A type name, a compiled pattern matched against the
                simplified types, a MimeType, or an explicit query.
            complete: Only return types that have extensions.
            platform: Only return types specific to the current platform.

        Returns:
            Matching types sorted by priority. Empty if nothing matches.
        """
        matches = self._candidates(as_query(identifier))

        if complete:
            matches = [m for m in matches if m.is_complete]
        if platform:
            matches = [m for m in matches if m.is_platform(self.platform)]

        return sorted(matches, key=MimeType.priority_key)

    def __getitem__(
        self, identifier: TypeQuery | MimeType | re.Pattern[str] | str
    ) -> list[MimeType]:
        return self.resolve(identifier)

    def _candidates(self, query: TypeQuery) -> list[MimeType]:
        with self._lock:
            return self._match(query)

    def _match(self, query: TypeQuery) -> list[MimeType]:
        if isinstance(query, ByPattern):
            return [
                mime_type
                for key, variants in self._variants.items()
                if query.pattern.search(key)
                for mime_type in variants
            ]
        if isinstance(query, ByType):
            return [query.mime_type]
        if isinstance(query, ByName):
            key = simplified(query.content_type)
            if key is None or key not in self._variants:
                return []
            return list(self._variants[key])
        raise TypeError(f"Unsupported type query: {query!r}")

    def type_for(self, filename: str, platform: bool = False) -> list[MimeType]:
        """
        Return the types registered for a filename's extension.

        The extension is everything after the last dot, lowercased; a name
        without a dot is used whole. Results keep registration order.

        Args:
            filename: File name or path.
            platform: Only return types specific to the current platform.
        """
        ext = filename.strip().lower().rsplit(".", 1)[-1]
        with self._lock:
            matches = list(self._extension_index.get(ext, []))
        if platform:
            matches = [m for m in matches if m.is_platform(self.platform)]
        return matches

    def of(self, filename: str, platform: bool = False) -> list[MimeType]:
        """Alias for type_for()."""
        return self.type_for(filename, platform)

    def simplified_types(self) -> set[str]:
        """Get all known simplified types."""
        with self._lock:
            return set(self._variants.keys())

    def __contains__(self, content_type: object) -> bool:
        if isinstance(content_type, MimeType):
            key: str | None = content_type.simplified
        elif isinstance(content_type, str):
            key = simplified(content_type)
        else:
            return False
        if key is None:
            return False
        with self._lock:
            return bool(self._variants.get(key))

    def __len__(self) -> int:
        with self._lock:
            return sum(len(variants) for variants in self._variants.values())

    @classmethod
    def create_default(cls, config: "RegistryConfig | None" = None) -> "MimeTypeRegistry":
        """Create a registry loaded from the configured or bundled corpus."""
        from mimereg.config.models import RegistryConfig
        from mimereg.loader import load_corpus_file, load_default_corpus

        config = config or RegistryConfig()
        registry = cls(platform=config.platform, data_version=config.data_version)
        if config.data_file is None:
            load_default_corpus(registry)
        else:
            load_corpus_file(config.data_file, registry)
        return registry
