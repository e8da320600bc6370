"""Block device, partition and filesystem readers."""

from typing import Any, Dict, List

from maasapi._internal.checker import (
    ForceInt,
    ForceUint,
    MapList,
    OptionalMap,
    String,
    StringList,
    WireModel,
    check_fields,
    wire,
)
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list, read_nested, read_nested_list, read_one
from maasapi.resources.storage import BlockDevice, Filesystem, Partition
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class FilesystemV20(WireModel):
    """v2.0 filesystem schema."""
    type: String = wire("Type")
    mount_point: String = wire("mount_point", "")
    label: String = wire("Label", "")
    uuid: String = wire("UUID")


def filesystem_2_0(source: Dict[str, Any], version: Version) -> Filesystem:
    valid = check_fields(FilesystemV20, source, "filesystem 2.0")
    return Filesystem(
        type=valid.type,
        mount_point=valid.mount_point,
        label=valid.label,
        uuid=valid.uuid,
    )


FILESYSTEM_READERS: ReaderRegistry[Filesystem] = ReaderRegistry(
    "filesystem", {TWO_DOT_OH: filesystem_2_0}
)


class PartitionV20(WireModel):
    """v2.0 partition schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    path: String = wire("Path")
    uuid: String = wire("UUID", "")
    used_for: String = wire("used_for")
    size: ForceUint = wire("Size")
    filesystem: OptionalMap = wire("filesystem", None)


def partition_2_0(source: Dict[str, Any], version: Version) -> Partition:
    valid = check_fields(PartitionV20, source, "partition 2.0")
    filesystem = None
    if valid.filesystem is not None:
        filesystem = read_nested(FILESYSTEM_READERS, version, valid.filesystem, "filesystem")
    return Partition(
        resource_uri=valid.resource_uri,
        id=valid.id,
        path=valid.path,
        uuid=valid.uuid,
        used_for=valid.used_for,
        size=valid.size,
        filesystem=filesystem,
    )


PARTITION_READERS: ReaderRegistry[Partition] = ReaderRegistry(
    "partition", {TWO_DOT_OH: partition_2_0}
)


def read_partitions(version: VersionLike, source: Any) -> List[Partition]:
    return read_list(PARTITION_READERS, version, source)


class BlockDeviceV20(WireModel):
    """v2.0 block device schema."""
    resource_uri: String = wire("resource_uri")
    id: ForceInt = wire("ID")
    name: String = wire("Name")
    model: String = wire("Model", "")
    id_path: String = wire("id_path", "")
    path: String = wire("Path")
    used_for: String = wire("used_for")
    tags: StringList = wire("Tags")

    block_size: ForceUint = wire("block_size")
    used_size: ForceUint = wire("used_size")
    size: ForceUint = wire("Size")

    partitions: MapList = wire("Partitions")


def block_device_2_0(source: Dict[str, Any], version: Version) -> BlockDevice:
    valid = check_fields(BlockDeviceV20, source, "block device 2.0")
    partitions = read_nested_list(PARTITION_READERS, version, valid.partitions, "Partitions")
    return BlockDevice(
        resource_uri=valid.resource_uri,
        id=valid.id,
        name=valid.name,
        model=valid.model,
        id_path=valid.id_path,
        path=valid.path,
        used_for=valid.used_for,
        tags=valid.tags,
        block_size=valid.block_size,
        used_size=valid.used_size,
        size=valid.size,
        partitions=partitions,
    )


BLOCK_DEVICE_READERS: ReaderRegistry[BlockDevice] = ReaderRegistry(
    "block device", {TWO_DOT_OH: block_device_2_0}
)


def read_block_devices(version: VersionLike, source: Any) -> List[BlockDevice]:
    return read_list(BLOCK_DEVICE_READERS, version, source)


def read_block_device(version: VersionLike, source: Any) -> BlockDevice:
    return read_one(BLOCK_DEVICE_READERS, version, source)
