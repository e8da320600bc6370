"""Storage models: block devices own partitions, partitions own a filesystem.

IDs are unique within the owning machine only.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Filesystem(BaseModel):
    type: str
    mount_point: str
    label: str
    uuid: str

    model_config = ConfigDict(frozen=True)


class Partition(BaseModel):
    resource_uri: str
    id: int
    path: str
    uuid: str
    used_for: str
    size: int
    filesystem: Optional[Filesystem] = None

    model_config = ConfigDict(frozen=True)


class BlockDevice(BaseModel):
    """A physical or virtual disk. Sizes are in bytes."""
    resource_uri: str
    id: int
    name: str
    model: str
    id_path: str
    path: str
    used_for: str
    tags: List[str] = Field(default_factory=list)

    block_size: int
    used_size: int
    size: int

    partitions: List[Partition] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def partition(self, partition_id: int) -> Optional[Partition]:
        for partition in self.partitions:
            if partition.id == partition_id:
                return partition
        return None
