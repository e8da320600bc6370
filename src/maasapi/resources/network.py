"""Network topology resources: fabrics, VLANs, subnets, spaces and routes.

Back-references are by name or ID only (a Subnet names its Space, a VLAN
names its Fabric), so the object graph never forms a cycle.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VLAN(BaseModel):
    """A virtual LAN, identified by its VID within a Fabric.

    The implicit default VLAN of a fabric may have no name; it reads as "".
    """
    resource_uri: str
    id: int
    name: str
    fabric: str
    vid: int
    mtu: int
    dhcp: bool
    primary_rack: str
    secondary_rack: str

    model_config = ConfigDict(frozen=True)


class Fabric(BaseModel):
    """A set of interconnected VLANs capable of mutual communication."""
    resource_uri: str
    id: int
    name: str
    class_type: str
    vlans: List[VLAN] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Subnet(BaseModel):
    """An IP range on one VLAN, grouped into a Space by name."""
    resource_uri: str
    id: int
    name: str
    space: str
    vlan: VLAN
    gateway: str
    cidr: str
    dns_servers: List[str] = Field(default_factory=list)  # may be empty

    model_config = ConfigDict(frozen=True)


class Space(BaseModel):
    """A group of subnets considered mutually routable."""
    resource_uri: str
    id: int
    name: str
    subnets: List[Subnet] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class StaticRoute(BaseModel):
    """An explicit route from machines in ``source`` to ``destination``.

    Traffic is sent via ``gateway_ip``; lower ``metric`` wins among
    overlapping routes.
    """
    resource_uri: str
    id: int
    source: Subnet
    destination: Subnet
    gateway_ip: str
    metric: int

    model_config = ConfigDict(frozen=True)


class Link(BaseModel):
    """Association of an interface with a subnet.

    ``mode`` is one of the LinkMode values (or ``"auto"``/``"link_up"`` as
    reported by the server); ``subnet`` is absent for unconfigured links.
    """
    id: int
    mode: str
    subnet: Optional[Subnet] = None
    ip_address: str = ""

    model_config = ConfigDict(frozen=True)
