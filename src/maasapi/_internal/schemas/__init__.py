"""Versioned response readers, one module per resource family.

Each module declares the wire schema for a version (``*V20``), the reader
for that version and a ReaderRegistry that picks the reader for a
negotiated server version.
"""

from .bootresource_schema import read_boot_resources
from .constraints_schema import read_allocation_response, resolve_constraint_matches
from .file_schema import read_file, read_files
from .interface_schema import read_interface, read_interfaces
from .network_schema import (
    read_fabrics,
    read_links,
    read_spaces,
    read_static_routes,
    read_subnet,
    read_subnets,
    read_vlan,
    read_vlans,
)
from .node_schema import read_device, read_devices, read_machine, read_machines
from .storage_schema import read_block_device, read_block_devices, read_partitions
from .version_schema import read_version_info
from .zone_schema import read_zone, read_zones

__all__ = [
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
