"""Request arguments and their local validation.

Every ``validate`` raises NotValidError before a request is built, so a
bad argument never reaches the server. ``params`` renders the arguments
as the form values the server expects.
"""

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, List, Optional, Tuple
from urllib.parse import urlencode

from maasapi.errors import NotValidError
from maasapi.resources.network import VLAN, Subnet


class URLParams:
    """Ordered form values that skip empty arguments."""

    def __init__(self) -> None:
        self.values: List[Tuple[str, str]] = []

    def add(self, name: str, value: str) -> None:
        self.values.append((name, value))

    def maybe_add(self, name: str, value: str) -> None:
        if value != "":
            self.add(name, value)

    def maybe_add_int(self, name: str, value: int) -> None:
        if value != 0:
            self.add(name, str(value))

    def maybe_add_bool(self, name: str, value: bool) -> None:
        if value:
            self.add(name, "true")

    def maybe_add_many(self, name: str, values: Optional[List[str]]) -> None:
        for value in values or ():
            self.maybe_add(name, value)

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self.values if key == name]

    def encode(self) -> str:
        return urlencode(self.values)


class NodeStatus(str, Enum):
    """Numeric node status codes, as strings, used in ``status`` filters."""
    DECLARED = "0"
    COMMISSIONING = "1"
    FAILED_TESTS = "2"
    MISSING = "3"
    READY = "4"
    RESERVED = "5"
    DEPLOYED = "6"
    RETIRED = "7"
    BROKEN = "8"
    DEPLOYING = "9"
    ALLOCATED = "10"
    FAILED_DEPLOYMENT = "11"
    RELEASING = "12"
    FAILED_RELEASING = "13"
    DISK_ERASING = "14"
    FAILED_DISK_ERASING = "15"


@dataclass
class StorageSpec:
    """One disk constraint for allocation. ``size`` is the minimum in GB."""
    size: int
    label: str = ""  # unique across an allocation's storage specs
    tags: List[str] = field(default_factory=list)

    def validate(self) -> None:
        if self.size <= 0:
            raise NotValidError(f"size value {self.size} not valid")
        for tag in self.tags:
            if tag == "":
                raise NotValidError("empty tag not valid")

    def __str__(self) -> str:
        label = f"{self.label}:" if self.label else ""
        tags = ",".join(self.tags)
        if tags:
            tags = f"({tags})"
        return f"{label}{self.size}{tags}"


@dataclass
class InterfaceSpec:
    """One network interface constraint for allocation.

    The label comes back as a key of the allocation's constraint matches.
    """
    label: str
    space: str

    def validate(self) -> None:
        if self.label == "":
            raise NotValidError("missing label not valid")
        if self.space == "":
            raise NotValidError("empty space constraint not valid")

    def __str__(self) -> str:
        return f"{self.label}:space={self.space}"


@dataclass
class AllocateMachineArgs:
    hostname: str = ""
    system_id: str = ""
    architecture: str = ""
    min_cpu_count: int = 0
    min_memory: int = 0  # MB
    tags: List[str] = field(default_factory=list)
    not_tags: List[str] = field(default_factory=list)
    zone: str = ""
    not_in_zone: List[str] = field(default_factory=list)
    # The first storage spec, if any, is the root disk.
    storage: List[StorageSpec] = field(default_factory=list)
    interfaces: List[InterfaceSpec] = field(default_factory=list)
    # Machine-wide, unlike the per-interface space constraints.
    not_space: List[str] = field(default_factory=list)
    agent_name: str = ""
    comment: str = ""
    dry_run: bool = False

    def validate(self) -> None:
        storage_labels = set()
        for spec in self.storage:
            try:
                spec.validate()
            except NotValidError as exc:
                raise exc.annotate("storage") from exc
            if spec.label:
                if spec.label in storage_labels:
                    raise NotValidError(f'reusing storage label "{spec.label}" not valid')
                storage_labels.add(spec.label)

        interface_labels = set()
        for spec in self.interfaces:
            try:
                spec.validate()
            except NotValidError as exc:
                raise exc.annotate("interfaces") from exc
            if spec.label in interface_labels:
                raise NotValidError(f'reusing interface label "{spec.label}" not valid')
            interface_labels.add(spec.label)

        for space in self.not_space:
            if space == "":
                raise NotValidError("empty not_space constraint not valid")

    def params(self) -> URLParams:
        params = URLParams()
        params.maybe_add("name", self.hostname)
        params.maybe_add("system_id", self.system_id)
        params.maybe_add("arch", self.architecture)
        params.maybe_add_int("cpu_count", self.min_cpu_count)
        params.maybe_add_int("mem", self.min_memory)
        params.maybe_add_many("tags", self.tags)
        params.maybe_add_many("not_tags", self.not_tags)
        params.maybe_add("storage", ",".join(str(spec) for spec in self.storage))
        params.maybe_add("interfaces", ";".join(str(spec) for spec in self.interfaces))
        params.maybe_add_many("not_subnets", [f"space:{space}" for space in self.not_space])
        params.maybe_add("zone", self.zone)
        params.maybe_add_many("not_in_zone", self.not_in_zone)
        params.maybe_add("agent_name", self.agent_name)
        params.maybe_add("comment", self.comment)
        params.maybe_add_bool("dry_run", self.dry_run)
        return params


@dataclass
class StartArgs:
    user_data: str = ""  # base64 cloud-init user data
    distro_series: str = ""
    kernel: str = ""
    comment: str = ""

    def params(self) -> URLParams:
        params = URLParams()
        params.maybe_add("user_data", self.user_data)
        params.maybe_add("distro_series", self.distro_series)
        params.maybe_add("hwe_kernel", self.kernel)
        params.maybe_add("comment", self.comment)
        return params


class LinkMode(str, Enum):
    DHCP = "DHCP"
    STATIC = "STATIC"
    LINK_UP = "LINK_UP"


@dataclass
class LinkSubnetArgs:
    mode: str
    subnet: Optional[Subnet]
    # Only with STATIC; the server picks an address when empty.
    ip_address: str = ""
    default_gateway: bool = False

    def validate(self) -> None:
        if self.mode == "":
            raise NotValidError("missing mode not valid")
        if self.mode not in {member.value for member in LinkMode}:
            raise NotValidError(f'unknown mode value ("{self.mode}") not valid')
        if self.subnet is None:
            raise NotValidError("missing subnet not valid")
        if self.ip_address and self.mode != LinkMode.STATIC:
            raise NotValidError("setting IP address when mode is not STATIC not valid")
        if self.default_gateway and self.mode != LinkMode.STATIC:
            raise NotValidError(f'specifying default gateway for mode "{LinkMode(self.mode).value}" not valid')

    def params(self) -> URLParams:
        params = URLParams()
        params.add("mode", LinkMode(self.mode).value)
        params.add("subnet", str(self.subnet.id))
        params.maybe_add("ip_address", self.ip_address)
        params.maybe_add_bool("default_gateway", self.default_gateway)
        return params


@dataclass
class CreateInterfaceArgs:
    name: str
    mac_address: str
    vlan: Optional[VLAN]  # untagged VLAN
    tags: List[str] = field(default_factory=list)
    mtu: int = 0
    accept_ra: bool = False  # IPv6 only
    autoconf: bool = False  # IPv6 only

    def validate(self) -> None:
        if self.name == "":
            raise NotValidError("missing name not valid")
        if self.mac_address == "":
            raise NotValidError("missing MAC address not valid")
        if self.vlan is None:
            raise NotValidError("missing VLAN not valid")

    def params(self) -> URLParams:
        params = URLParams()
        params.add("name", self.name)
        params.add("mac_address", self.mac_address)
        params.add("vlan", str(self.vlan.id))
        params.maybe_add("tags", ",".join(self.tags))
        params.maybe_add_int("mtu", self.mtu)
        params.maybe_add_bool("accept_ra", self.accept_ra)
        params.maybe_add_bool("autoconf", self.autoconf)
        return params


@dataclass
class CreateMachineDeviceArgs:
    interface_name: str
    mac_address: str
    hostname: str = ""
    subnet: Optional[Subnet] = None
    vlan: Optional[VLAN] = None

    def validate(self) -> None:
        if self.interface_name == "":
            raise NotValidError("missing interface name not valid")
        if self.mac_address == "":
            raise NotValidError("missing MAC address not valid")
        if self.subnet is not None and self.vlan is not None and self.subnet.vlan.id != self.vlan.id:
            raise NotValidError(
                f'given subnet "{self.subnet.cidr}" on VLAN {self.subnet.vlan.id} '
                f"does not match given VLAN {self.vlan.id}"
            )


@dataclass
class AddFileArgs:
    """Exactly one of ``content`` or ``reader`` plus ``length`` is set."""
    filename: str
    content: Optional[bytes] = None
    reader: Optional[BinaryIO] = None
    length: int = 0

    def validate(self) -> None:
        directory, _ = posixpath.split(self.filename)
        if directory:
            raise NotValidError(f'paths in filename "{self.filename}" not valid')
        if self.filename == "":
            raise NotValidError("missing filename not valid")
        if self.content is None:
            if self.reader is None:
                raise NotValidError("missing content or reader not valid")
            if self.length == 0:
                raise NotValidError("missing length not valid")
        else:
            if self.reader is not None:
                raise NotValidError("specifying content and reader not valid")
            if self.length != 0:
                raise NotValidError("specifying length and content not valid")

    def read_content(self) -> bytes:
        """Return the bytes to upload, reading at most ``length`` from ``reader``."""
        self.validate()
        if self.content is not None:
            return self.content
        return self.reader.read(self.length)
