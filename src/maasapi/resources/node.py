"""Machine and device aggregates.

Both are built wholesale from one response, including their interfaces,
zone and (for machines) block devices. Machine.update_from merges a later
response in place; it is single-writer and needs external locking if a
Machine is shared between threads.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field

from maasapi.resources.interface import Interface
from maasapi.resources.storage import BlockDevice
from maasapi.resources.zone import Zone


class Device(BaseModel):
    """A non-installable node, usually a container or VM hosted on a machine."""
    resource_uri: str
    system_id: str
    hostname: str
    fqdn: str
    parent: str = ""  # system_id of the parent machine
    owner: str = ""  # user that created the device
    ip_addresses: List[str] = Field(default_factory=list)
    interface_set: List[Interface] = Field(default_factory=list)
    zone: Zone

    def interface(self, interface_id: int) -> Optional[Interface]:
        for iface in self.interface_set:
            if iface.id == interface_id:
                return iface
        return None


class Machine(BaseModel):
    resource_uri: str
    system_id: str
    hostname: str
    fqdn: str
    tags: List[str] = Field(default_factory=list)
    owner_data: Dict[str, str] = Field(default_factory=dict)

    operating_system: str
    distro_series: str
    architecture: str = ""
    memory: int  # MB
    cpu_count: int
    ip_addresses: List[str] = Field(default_factory=list)
    power_state: str

    status_name: str
    status_message: str = ""

    boot_interface: Optional[Interface] = None
    interface_set: List[Interface] = Field(default_factory=list)
    zone: Zone

    physical_block_devices: List[BlockDevice] = Field(default_factory=list)
    # physical and virtual
    block_devices: List[BlockDevice] = Field(default_factory=list)

    def interface(self, interface_id: int) -> Optional[Interface]:
        for iface in self.interface_set:
            if iface.id == interface_id:
                return iface
        return None

    def physical_block_device(self, device_id: int) -> Optional[BlockDevice]:
        for device in self.physical_block_devices:
            if device.id == device_id:
                return device
        return None

    def block_device(self, device_id: int) -> Optional[BlockDevice]:
        for device in self.block_devices:
            if device.id == device_id:
                return device
        return None

    def update_from(self, other: "Machine") -> None:
        """Copy the mutable state of a freshly read machine onto this one.

        Interfaces and block devices are left alone so references that
        callers already hold (for example from constraint matches) stay valid.
        """
        self.resource_uri = other.resource_uri
        self.system_id = other.system_id
        self.hostname = other.hostname
        self.fqdn = other.fqdn
        self.operating_system = other.operating_system
        self.distro_series = other.distro_series
        self.architecture = other.architecture
        self.memory = other.memory
        self.cpu_count = other.cpu_count
        self.ip_addresses = other.ip_addresses
        self.power_state = other.power_state
        self.status_name = other.status_name
        self.status_message = other.status_message
        self.zone = other.zone
        self.tags = other.tags
        self.owner_data = other.owner_data

    def owner_data_matches(self, wanted: Mapping[str, str]) -> bool:
        """True if every key in ``wanted`` is set to the same value.

        An empty wanted value matches a missing key, mirroring how the
        server clears owner data.
        """
        for key, value in wanted.items():
            if self.owner_data.get(key, "") != value:
                return False
        return True

    def devices_of(self, devices: Iterable[Device]) -> List[Device]:
        """Filter a device listing down to devices parented by this machine."""
        return [device for device in devices if device.parent == self.system_id]
