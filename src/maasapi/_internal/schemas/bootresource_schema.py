"""Boot resource reader."""

from typing import Any, Dict, List

from maasapi._internal.checker import ForceInt, String, WireModel, check_fields, wire
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list
from maasapi.resources.bootresource import BootResource
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class BootResourceV20(WireModel):
    """v2.0 boot resource schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    type: String = wire("type")
    architecture: String = wire("Architecture")
    subarches: String = wire("subarches", "")
    kflavor: String = wire("kflavor", "")


def boot_resource_2_0(source: Dict[str, Any], version: Version) -> BootResource:
    valid = check_fields(BootResourceV20, source, "boot resource 2.0")
    return BootResource(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        type=valid.type,
        architecture=valid.architecture,
        sub_arches=valid.subarches,
        kernel_flavor=valid.kflavor,
    )


BOOT_RESOURCE_READERS: ReaderRegistry[BootResource] = ReaderRegistry(
    "boot resource", {TWO_DOT_OH: boot_resource_2_0}
)


def read_boot_resources(version: VersionLike, source: Any) -> List[BootResource]:
    return read_list(BOOT_RESOURCE_READERS, version, source)
