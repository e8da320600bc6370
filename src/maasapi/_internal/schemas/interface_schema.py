"""Interface reader.

An interface embeds its VLAN and its links, and each link may embed the
subnet it is attached to. All of them are read at the version the
interface itself was read at.
"""

from typing import Any, Dict, List

from maasapi._internal.checker import (
    Bool,
    ForceInt,
    MapList,
    NullableStringList,
    OptionalMap,
    String,
    StringList,
    WireModel,
    check_fields,
    wire,
)
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list, read_nested, read_nested_list, read_one
from maasapi._internal.schemas.network_schema import LINK_READERS, VLAN_READERS
from maasapi.resources.interface import Interface
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class InterfaceV20(WireModel):
    """v2.0 interface schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    type: String = wire("type")
    enabled: Bool = wire("Enabled")
    tags: NullableStringList = wire("Tags")

    # Required key, null when the interface is disconnected.
    vlan: OptionalMap = wire("VLAN")
    links: MapList = wire("Links")

    mac_address: String = wire("mac_address", "")
    effective_mtu: ForceInt = wire("effective_mtu")

    parents: StringList = wire("Parents")
    children: StringList = wire("Children")


def interface_2_0(source: Dict[str, Any], version: Version) -> Interface:
    valid = check_fields(InterfaceV20, source, "interface 2.0")
    vlan = None
    if valid.vlan is not None:
        vlan = read_nested(VLAN_READERS, version, valid.vlan, "VLAN")
    links = read_nested_list(LINK_READERS, version, valid.links, "Links")
    return Interface(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        type=valid.type,
        enabled=valid.enabled,
        tags=valid.tags,
        vlan=vlan,
        links=links,
        mac_address=valid.mac_address,
        effective_mtu=valid.effective_mtu,
        parents=valid.parents,
        children=valid.children,
    )


INTERFACE_READERS: ReaderRegistry[Interface] = ReaderRegistry(
    "interface", {TWO_DOT_OH: interface_2_0}
)


def read_interfaces(version: VersionLike, source: Any) -> List[Interface]:
    return read_list(INTERFACE_READERS, version, source)


def read_interface(version: VersionLike, source: Any) -> Interface:
    return read_one(INTERFACE_READERS, version, source)
