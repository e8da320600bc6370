"""Machine and device readers.

Nodes are the deepest aggregates: a machine read pulls in its zone,
interfaces (with VLANs, links and subnets) and block devices (with
partitions and filesystems), every one of them at the machine's version.
"""

from typing import Any, Dict, List

from pydantic import StrictStr

from maasapi._internal.checker import (
    ForceInt,
    MapList,
    OptionalMap,
    String,
    StringList,
    StringMap,
    WireModel,
    check_fields,
    wire,
)
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list, read_nested, read_nested_list, read_one
from maasapi._internal.schemas.interface_schema import INTERFACE_READERS
from maasapi._internal.schemas.storage_schema import BLOCK_DEVICE_READERS
from maasapi._internal.schemas.zone_schema import ZONE_READERS
from maasapi.resources.node import Device, Machine
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class DeviceV20(WireModel):
    """v2.0 device schema."""
    resource_uri: String = wire("resource_uri")
    system_id: String = wire("system_id")
    hostname: String = wire("Hostname")
    fqdn: String = wire("FQDN")
    parent: String = wire("Parent", "")
    owner: String = wire("Owner", "")
    ip_addresses: StringList = wire("ip_addresses")
    interface_set: MapList = wire("interface_set")
    zone: StringMap = wire("Zone")


def device_2_0(source: Dict[str, Any], version: Version) -> Device:
    valid = check_fields(DeviceV20, source, "device 2.0")
    interfaces = read_nested_list(INTERFACE_READERS, version, valid.interface_set, "interface_set")
    zone = read_nested(ZONE_READERS, version, valid.zone, "Zone")
    return Device(
        resource_uri=valid.resource_uri,
        system_id=valid.system_id,
        hostname=valid.hostname,
        fqdn=valid.fqdn,
        parent=valid.parent,
        owner=valid.owner,
        ip_addresses=valid.ip_addresses,
        interface_set=interfaces,
        zone=zone,
    )


DEVICE_READERS: ReaderRegistry[Device] = ReaderRegistry("device", {TWO_DOT_OH: device_2_0})


def read_devices(version: VersionLike, source: Any) -> List[Device]:
    return read_list(DEVICE_READERS, version, source)


def read_device(version: VersionLike, source: Any) -> Device:
    return read_one(DEVICE_READERS, version, source)


class MachineV20(WireModel):
    """v2.0 machine schema."""
    resource_uri: String = wire("resource_uri")
    system_id: String = wire("system_id")
    hostname: String = wire("Hostname")
    fqdn: String = wire("FQDN")
    tag_names: StringList = wire("tag_names")
    owner_data: Dict[str, StrictStr] = wire("owner_data")

    osystem: String = wire("osystem")
    distro_series: String = wire("distro_series")
    architecture: String = wire("Architecture", "")
    memory: ForceInt = wire("Memory")
    cpu_count: ForceInt = wire("cpu_count")
    ip_addresses: StringList = wire("ip_addresses")
    power_state: String = wire("power_state")
    status_name: String = wire("status_name")
    status_message: String = wire("status_message", "")

    boot_interface: OptionalMap = wire("boot_interface", None)
    interface_set: MapList = wire("interface_set")
    zone: StringMap = wire("Zone")

    physicalblockdevice_set: MapList = wire("physicalblockdevice_set")
    blockdevice_set: MapList = wire("blockdevice_set")


def machine_2_0(source: Dict[str, Any], version: Version) -> Machine:
    valid = check_fields(MachineV20, source, "machine 2.0")
    boot_interface = None
    if valid.boot_interface is not None:
        boot_interface = read_nested(INTERFACE_READERS, version, valid.boot_interface, "boot_interface")
    interfaces = read_nested_list(INTERFACE_READERS, version, valid.interface_set, "interface_set")
    zone = read_nested(ZONE_READERS, version, valid.zone, "Zone")
    physical = read_nested_list(
        BLOCK_DEVICE_READERS, version, valid.physicalblockdevice_set, "physicalblockdevice_set"
    )
    block_devices = read_nested_list(
        BLOCK_DEVICE_READERS, version, valid.blockdevice_set, "blockdevice_set"
    )
    return Machine(
        resource_uri=valid.resource_uri,
        system_id=valid.system_id,
        hostname=valid.hostname,
        fqdn=valid.fqdn,
        tags=valid.tag_names,
        owner_data=valid.owner_data,
        operating_system=valid.osystem,
        distro_series=valid.distro_series,
        architecture=valid.architecture,
        memory=valid.memory,
        cpu_count=valid.cpu_count,
        ip_addresses=valid.ip_addresses,
        power_state=valid.power_state,
        status_name=valid.status_name,
        status_message=valid.status_message,
        boot_interface=boot_interface,
        interface_set=interfaces,
        zone=zone,
        physical_block_devices=physical,
        block_devices=block_devices,
    )


MACHINE_READERS: ReaderRegistry[Machine] = ReaderRegistry("machine", {TWO_DOT_OH: machine_2_0})


def read_machines(version: VersionLike, source: Any) -> List[Machine]:
    return read_list(MACHINE_READERS, version, source)


def read_machine(version: VersionLike, source: Any) -> Machine:
    return read_one(MACHINE_READERS, version, source)
