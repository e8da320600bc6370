"""Zone reader."""

from typing import Any, Dict, List

from maasapi._internal.checker import String, WireModel, check_fields, wire
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list, read_one
from maasapi.resources.zone import Zone
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class ZoneV20(WireModel):
    """v2.0 zone schema."""
    resource_uri: String = wire("resource_uri")
    name: String = wire("Name")
    description: String = wire("Description")


def zone_2_0(source: Dict[str, Any], version: Version) -> Zone:
    valid = check_fields(ZoneV20, source, "zone 2.0")
    return Zone(
        resource_uri=valid.resource_uri,
        name=valid.name,
        description=valid.description,
    )


ZONE_READERS: ReaderRegistry[Zone] = ReaderRegistry("zone", {TWO_DOT_OH: zone_2_0})


def read_zones(version: VersionLike, source: Any) -> List[Zone]:
    return read_list(ZONE_READERS, version, source)


def read_zone(version: VersionLike, source: Any) -> Zone:
    return read_one(ZONE_READERS, version, source)
