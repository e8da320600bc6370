"""Network interface model."""

from typing import List, Optional

from pydantic import BaseModel, Field

from maasapi.resources.network import VLAN, Link


class Interface(BaseModel):
    """A network interface belonging to one machine or device.

    Not frozen: link/unlink/update responses are merged in place through
    update_from so callers holding this object see the new state. Merging
    is single-writer; callers sharing an Interface across threads must
    serialise updates themselves.
    """
    resource_uri: str
    id: int
    name: str
    type: str
    enabled: bool
    tags: List[str] = Field(default_factory=list)

    vlan: Optional[VLAN] = None
    links: List[Link] = Field(default_factory=list)

    mac_address: str = ""
    effective_mtu: int = 0

    parents: List[str] = Field(default_factory=list)
    children: List[str] = Field(default_factory=list)

    def update_from(self, other: "Interface") -> None:
        """Copy every field of a freshly read interface onto this one."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(other, name))

    def link_for_subnet(self, subnet_id: int) -> Optional[Link]:
        """Return the link to the subnet with ``subnet_id``, if any."""
        for link in self.links:
            if link.subnet is not None and link.subnet.id == subnet_id:
                return link
        return None
