"""Per-type reader registries keyed by the server version that introduced a shape."""

import logging
from bisect import bisect_right
from typing import Any, Callable, Dict, Generic, Mapping, Tuple, TypeVar

import structlog

from maasapi.errors import UnsupportedVersionError
from maasapi.version import Version, VersionLike

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

T = TypeVar("T")
ReadFunc = Callable[[Dict[str, Any], Version], T]


class ReaderRegistry(Generic[T]):
    """Ordered table of (version, reader) pairs for one resource type.

    Built once at import time and never mutated, so lookups need no locking.
    """

    def __init__(self, type_name: str, readers: Mapping[VersionLike, ReadFunc[T]]):
        entries = sorted(
            ((Version.parse(version), reader) for version, reader in readers.items()),
            key=lambda entry: entry[0],
        )
        versions = tuple(version for version, _ in entries)
        if len(versions) != len(set(versions)):
            raise ValueError(f"duplicate reader versions for {type_name}: {[str(v) for v in versions]}")
        self.type_name = type_name
        self._versions: Tuple[Version, ...] = versions
        self._readers: Tuple[ReadFunc[T], ...] = tuple(reader for _, reader in entries)

    @property
    def versions(self) -> Tuple[Version, ...]:
        return self._versions

    def select(self, version: VersionLike) -> ReadFunc[T]:
        """Pick the newest reader registered at or below ``version``.

        Raises:
            UnsupportedVersionError: If every registered version is newer.
        """
        requested = Version.parse(version)
        index = bisect_right(self._versions, requested)
        if index == 0:
            logger.warning("unsupported_version", type_name=self.type_name, version=str(requested))
            raise UnsupportedVersionError(
                f"no {self.type_name} read func for version {requested}",
                type_name=self.type_name,
                version=requested,
            )
        logger.debug(
            "reader_selected",
            type_name=self.type_name,
            requested=str(requested),
            selected=str(self._versions[index - 1]),
        )
        return self._readers[index - 1]
