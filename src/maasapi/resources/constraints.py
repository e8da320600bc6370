"""Constraint matches returned alongside an allocated machine."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from maasapi.resources.interface import Interface
from maasapi.resources.storage import BlockDevice


class ConstraintMatches(BaseModel):
    """How an allocated machine satisfied labelled allocation constraints.

    Keys are the labels given in the interface and storage specs. Values
    are the machine's own Interface and BlockDevice objects, not copies, so
    a ConstraintMatches is only meaningful next to the Machine it was
    resolved against and should not outlive the allocation call.
    """
    interfaces: Dict[str, List[Interface]] = Field(default_factory=dict)
    storage: Dict[str, List[BlockDevice]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
