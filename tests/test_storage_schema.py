"""Tests for block device, partition and filesystem readers."""

import pytest

from maasapi.api import read_block_device, read_block_devices, read_partitions
from maasapi.errors import DeserializationError
from maasapi.resources.storage import Filesystem


def test_read_block_devices(fixture):
    sda, vdb = read_block_devices("2.0", fixture("block_devices"))

    assert sda.id == 34
    assert sda.name == "sda"
    assert sda.model == "QEMU HARDDISK"
    assert sda.id_path == "/dev/disk/by-id/ata-QEMU_HARDDISK_QM00001"
    assert sda.path == "/dev/disk/by-dname/sda"
    assert sda.used_for == "MBR partitioned with 1 partition"
    assert sda.tags == ["rotary"]
    assert sda.block_size == 4096
    assert sda.used_size == 8586788864
    assert sda.size == 8589934592

    [partition] = sda.partitions
    assert partition.id == 1
    assert partition.path == "/dev/disk/by-dname/sda-part1"
    assert partition.uuid == "6199b7c9-b66f-40f6-a238-a938a58a0adf"
    assert partition.size == 8581545984
    assert partition.filesystem == Filesystem(
        type="ext4",
        mount_point="/",
        label="root",
        uuid="fcd7745e-f1b5-4f5d-9575-9b0bb796b752",
    )
    assert sda.partition(1) is partition
    assert sda.partition(2) is None


def test_block_device_nulls(fixture):
    _, vdb = read_block_devices("2.0", fixture("block_devices"))
    assert vdb.model == ""
    assert vdb.id_path == ""
    assert vdb.partitions == []
    assert vdb.used_size == 0


def test_negative_size_is_rejected(fixture):
    source = fixture("block_devices")[0]
    source["Size"] = -1
    with pytest.raises(DeserializationError, match="block device 2.0 schema check failed: Size: expected unsigned number"):
        read_block_device("2.0", source)


def test_partition_without_filesystem(fixture):
    source = fixture("block_devices")[0]["Partitions"]
    source[0]["filesystem"] = None
    source[0]["UUID"] = None
    [partition] = read_partitions("2.0", source)
    assert partition.filesystem is None
    assert partition.uuid == ""


def test_filesystem_failure_is_annotated(fixture):
    source = fixture("block_devices")
    del source[0]["Partitions"][0]["filesystem"]["Type"]
    with pytest.raises(DeserializationError) as exc_info:
        read_block_devices("2.0", source)
    assert str(exc_info.value) == (
        "block device 0: Partitions: partition 0: filesystem: "
        "filesystem 2.0 schema check failed: Type: missing required field"
    )
