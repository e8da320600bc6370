"""Shared read pipeline for all resource types.

list/single endpoint -> base shape check -> reader selection by version ->
per-version field check -> nested reads at the same version -> typed result.
"""

from typing import Any, Dict, List, TypeVar

from maasapi._internal.checker import check_list, check_map
from maasapi._internal.registry import ReaderRegistry, ReadFunc
from maasapi.errors import MAASError
from maasapi.version import Version, VersionLike

T = TypeVar("T")


def read_list(registry: ReaderRegistry[T], version: VersionLike, source: Any) -> List[T]:
    """Read a list endpoint response."""
    items = check_list(source, registry.type_name)
    requested = Version.parse(version)
    return read_each(items, registry.select(requested), registry.type_name, requested)


def read_one(registry: ReaderRegistry[T], version: VersionLike, source: Any) -> T:
    """Read a single-resource endpoint response."""
    valid = check_map(source, registry.type_name)
    requested = Version.parse(version)
    return registry.select(requested)(valid, requested)


def read_each(items: List[Any], read_func: ReadFunc[T], type_name: str, version: Version) -> List[T]:
    """Apply ``read_func`` to every element, tagging failures with the index."""
    result = []
    for index, item in enumerate(items):
        try:
            result.append(read_func(item, version))
        except MAASError as exc:
            raise exc.annotate(f"{type_name} {index}") from exc
    return result


def read_nested(registry: ReaderRegistry[T], version: Version, source: Dict[str, Any], field: str) -> T:
    """Read an embedded object, tagging failures with the owning field."""
    try:
        return registry.select(version)(source, version)
    except MAASError as exc:
        raise exc.annotate(field) from exc


def read_nested_list(
    registry: ReaderRegistry[T], version: Version, items: List[Any], field: str
) -> List[T]:
    """Read an embedded list of objects, tagging failures with the owning field."""
    try:
        return read_each(items, registry.select(version), registry.type_name, version)
    except MAASError as exc:
        raise exc.annotate(field) from exc
