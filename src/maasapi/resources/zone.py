"""Physical zone model."""

from pydantic import BaseModel, ConfigDict


class Zone(BaseModel):
    """A physical zone: a rack, a network or a data centre."""
    resource_uri: str
    name: str
    description: str

    model_config = ConfigDict(frozen=True)
