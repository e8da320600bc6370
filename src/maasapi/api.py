"""Public API for the maasapi package.

Reader functions take the negotiated server version and a decoded JSON
body and return typed resources. Callers should use these (or a
ResponseReader) instead of importing from _internal.
"""

from typing import Any, List, Optional, Set, Tuple

# Internal imports (not exposed to users)
from maasapi._internal.schemas import (
    read_allocation_response,
    read_block_device,
    read_block_devices,
    read_boot_resources,
    read_device,
    read_devices,
    read_fabrics,
    read_file,
    read_files,
    read_interface,
    read_interfaces,
    read_links,
    read_machine,
    read_machines,
    read_partitions,
    read_spaces,
    read_static_routes,
    read_subnet,
    read_subnets,
    read_version_info,
    read_vlan,
    read_vlans,
    read_zone,
    read_zones,
    resolve_constraint_matches,
)
from maasapi.config import MAASSettings
from maasapi.resources.bootresource import BootResource
from maasapi.resources.constraints import ConstraintMatches
from maasapi.resources.file import File
from maasapi.resources.interface import Interface
from maasapi.resources.network import VLAN, Fabric, Link, Space, StaticRoute, Subnet
from maasapi.resources.node import Device, Machine
from maasapi.resources.storage import BlockDevice, Partition
from maasapi.resources.zone import Zone
from maasapi.version import Version, VersionLike


class ResponseReader:
    """Reads response bodies at one negotiated server version.

    The transport negotiates the API version once per controller; a
    ResponseReader holds it so CRUD wrappers only pass the body.
    """

    def __init__(self, version: Optional[VersionLike] = None):
        if version is None:
            version = MAASSettings().version
        self.version: Version = Version.parse(version)

    def machines(self, source: Any) -> List[Machine]:
        return read_machines(self.version, source)

    def machine(self, source: Any) -> Machine:
        return read_machine(self.version, source)

    def devices(self, source: Any) -> List[Device]:
        return read_devices(self.version, source)

    def device(self, source: Any) -> Device:
        return read_device(self.version, source)

    def interfaces(self, source: Any) -> List[Interface]:
        return read_interfaces(self.version, source)

    def interface(self, source: Any) -> Interface:
        return read_interface(self.version, source)

    def links(self, source: Any) -> List[Link]:
        return read_links(self.version, source)

    def vlans(self, source: Any) -> List[VLAN]:
        return read_vlans(self.version, source)

    def vlan(self, source: Any) -> VLAN:
        return read_vlan(self.version, source)

    def fabrics(self, source: Any) -> List[Fabric]:
        return read_fabrics(self.version, source)

    def subnets(self, source: Any) -> List[Subnet]:
        return read_subnets(self.version, source)

    def subnet(self, source: Any) -> Subnet:
        return read_subnet(self.version, source)

    def spaces(self, source: Any) -> List[Space]:
        return read_spaces(self.version, source)

    def static_routes(self, source: Any) -> List[StaticRoute]:
        return read_static_routes(self.version, source)

    def block_devices(self, source: Any) -> List[BlockDevice]:
        return read_block_devices(self.version, source)

    def block_device(self, source: Any) -> BlockDevice:
        return read_block_device(self.version, source)

    def partitions(self, source: Any) -> List[Partition]:
        return read_partitions(self.version, source)

    def files(self, source: Any) -> List[File]:
        return read_files(self.version, source)

    def file(self, source: Any) -> File:
        return read_file(self.version, source)

    def zones(self, source: Any) -> List[Zone]:
        return read_zones(self.version, source)

    def zone(self, source: Any) -> Zone:
        return read_zone(self.version, source)

    def boot_resources(self, source: Any) -> List[BootResource]:
        return read_boot_resources(self.version, source)

    def allocation(self, source: Any) -> Tuple[Machine, ConstraintMatches]:
        return read_allocation_response(self.version, source)

    def refresh_machine(self, machine: Machine, source: Any) -> Machine:
        """Read an action response and merge it into ``machine`` in place."""
        machine.update_from(read_machine(self.version, source))
        return machine

    def refresh_interface(self, interface: Interface, source: Any) -> Interface:
        """Read a link/unlink/update response and merge it into ``interface``."""
        interface.update_from(read_interface(self.version, source))
        return interface

    @staticmethod
    def version_info(source: Any) -> Set[str]:
        return read_version_info(source)


__all__ = [
    "ResponseReader",
    "read_allocation_response",
    "read_block_device",
    "read_block_devices",
    "read_boot_resources",
    "read_device",
    "read_devices",
    "read_fabrics",
    "read_file",
    "read_files",
    "read_interface",
    "read_interfaces",
    "read_links",
    "read_machine",
    "read_machines",
    "read_partitions",
    "read_spaces",
    "read_static_routes",
    "read_subnet",
    "read_subnets",
    "read_version_info",
    "read_vlan",
    "read_vlans",
    "read_zone",
    "read_zones",
    "resolve_constraint_matches",
]
