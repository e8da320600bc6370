"""Readers for VLANs, fabrics, subnets, spaces, static routes and links."""

from typing import Any, Dict, List

from maasapi._internal.checker import (
    Bool,
    ForceInt,
    MapList,
    NullableStringList,
    OptionalMap,
    String,
    StringMap,
    WireModel,
    check_fields,
    wire,
)
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import (
    read_each,
    read_list,
    read_nested,
    read_nested_list,
    read_one,
)
from maasapi.resources.network import VLAN, Fabric, Link, Space, StaticRoute, Subnet
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class VLANV20(WireModel):
    """v2.0 VLAN schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name", "")  # absent for a fabric's default VLAN
    fabric: String = wire("Fabric")
    vid: ForceInt = wire("VID")
    mtu: ForceInt = wire("MTU")
    dhcp_on: Bool = wire("dhcp_on")
    primary_rack: String = wire("primary_rack", "")
    secondary_rack: String = wire("secondary_rack", "")


def vlan_2_0(source: Dict[str, Any], version: Version) -> VLAN:
    valid = check_fields(VLANV20, source, "vlan 2.0")
    return VLAN(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        fabric=valid.fabric,
        vid=valid.vid,
        mtu=valid.mtu,
        dhcp=valid.dhcp_on,
        primary_rack=valid.primary_rack,
        secondary_rack=valid.secondary_rack,
    )


VLAN_READERS: ReaderRegistry[VLAN] = ReaderRegistry("vlan", {TWO_DOT_OH: vlan_2_0})


def read_vlans(version: VersionLike, source: Any) -> List[VLAN]:
    return read_list(VLAN_READERS, version, source)


def read_vlan(version: VersionLike, source: Any) -> VLAN:
    return read_one(VLAN_READERS, version, source)


class FabricV20(WireModel):
    """v2.0 fabric schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    class_type: String = wire("class_type", "")
    vlans: MapList = wire("VLANs")


def fabric_2_0(source: Dict[str, Any], version: Version) -> Fabric:
    valid = check_fields(FabricV20, source, "fabric 2.0")
    vlans = read_nested_list(VLAN_READERS, version, valid.vlans, "VLANs")
    return Fabric(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        class_type=valid.class_type,
        vlans=vlans,
    )


FABRIC_READERS: ReaderRegistry[Fabric] = ReaderRegistry("fabric", {TWO_DOT_OH: fabric_2_0})


def read_fabrics(version: VersionLike, source: Any) -> List[Fabric]:
    return read_list(FABRIC_READERS, version, source)


class SubnetV20(WireModel):
    """v2.0 subnet schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    space: String = wire("space")
    gateway_ip: String = wire("gateway_ip", "")
    cidr: String = wire("cidr")
    vlan: StringMap = wire("VLAN")
    dns_servers: NullableStringList = wire("dns_servers")


def subnet_2_0(source: Dict[str, Any], version: Version) -> Subnet:
    valid = check_fields(SubnetV20, source, "subnet 2.0")
    vlan = read_nested(VLAN_READERS, version, valid.vlan, "VLAN")
    return Subnet(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        space=valid.space,
        vlan=vlan,
        gateway=valid.gateway_ip,
        cidr=valid.cidr,
        dns_servers=valid.dns_servers,
    )


SUBNET_READERS: ReaderRegistry[Subnet] = ReaderRegistry("subnet", {TWO_DOT_OH: subnet_2_0})


def read_subnets(version: VersionLike, source: Any) -> List[Subnet]:
    return read_list(SUBNET_READERS, version, source)


def read_subnet(version: VersionLike, source: Any) -> Subnet:
    return read_one(SUBNET_READERS, version, source)


class SpaceV20(WireModel):
    """v2.0 space schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    subnets: MapList = wire("Subnets")


def space_2_0(source: Dict[str, Any], version: Version) -> Space:
    valid = check_fields(SpaceV20, source, "space 2.0")
    subnets = read_nested_list(SUBNET_READERS, version, valid.subnets, "Subnets")
    return Space(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        subnets=subnets,
    )


SPACE_READERS: ReaderRegistry[Space] = ReaderRegistry("space", {TWO_DOT_OH: space_2_0})


def read_spaces(version: VersionLike, source: Any) -> List[Space]:
    return read_list(SPACE_READERS, version, source)


class StaticRouteV20(WireModel):
    """v2.0 static route schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    source: StringMap = wire("Source")
    destination: StringMap = wire("Destination")
    gateway_ip: String = wire("gateway_ip")
    metric: ForceInt = wire("Metric")


def static_route_2_0(source: Dict[str, Any], version: Version) -> StaticRoute:
    valid = check_fields(StaticRouteV20, source, "static-route 2.0")
    # Source and destination go through the subnet list reader as a pair.
    subnets = read_each(
        [valid.source, valid.destination],
        SUBNET_READERS.select(version),
        SUBNET_READERS.type_name,
        version,
    )
    return StaticRoute(
        resource_uri=valid.resource_uri,
        id=valid.id,
        source=subnets[0],
        destination=subnets[1],
        gateway_ip=valid.gateway_ip,
        metric=valid.metric,
    )


STATIC_ROUTE_READERS: ReaderRegistry[StaticRoute] = ReaderRegistry(
    "static-route", {TWO_DOT_OH: static_route_2_0}
)


def read_static_routes(version: VersionLike, source: Any) -> List[StaticRoute]:
    return read_list(STATIC_ROUTE_READERS, version, source)


class LinkV20(WireModel):
    """v2.0 interface link schema."""
    id: ForceInt = wire("ID")
    mode: String = wire("Mode")
    subnet: OptionalMap = wire("Subnet", None)
    ip_address: String = wire("ip_address", "")


def link_2_0(source: Dict[str, Any], version: Version) -> Link:
    valid = check_fields(LinkV20, source, "link 2.0")
    subnet = None
    if valid.subnet is not None:
        subnet = read_nested(SUBNET_READERS, version, valid.subnet, "Subnet")
    return Link(
        id=valid.id,
        mode=valid.mode,
        subnet=subnet,
        ip_address=valid.ip_address,
    )


LINK_READERS: ReaderRegistry[Link] = ReaderRegistry("link", {TWO_DOT_OH: link_2_0})


def read_links(version: VersionLike, source: Any) -> List[Link]:
    return read_list(LINK_READERS, version, source)
