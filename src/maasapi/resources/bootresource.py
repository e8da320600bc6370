"""Boot resource model."""

from typing import Set

from pydantic import BaseModel, ConfigDict


class BootResource(BaseModel):
    """An OS image the server can boot machines with."""
    resource_uri: str
    id: int
    name: str
    type: str
    architecture: str
    sub_arches: str = ""  # comma-separated, as sent by the server
    kernel_flavor: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def sub_architectures(self) -> Set[str]:
        """Sub-architectures supported by the image, as a set."""
        return {name for name in self.sub_arches.split(",") if name}
