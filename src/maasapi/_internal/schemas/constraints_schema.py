"""Allocation responses and constraint match resolution.

An allocate call returns the machine plus ``constraints_by_type``, which
maps each labelled interface or storage constraint to the IDs that
satisfied it. The IDs are resolved against the machine that was read from
the same response, so the matches hold that machine's own objects.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from maasapi._internal.checker import ForceInt, WireModel, check_fields, check_map, wire
from maasapi._internal.schemas.node_schema import read_machine
from maasapi.errors import DeserializationError
from maasapi.resources.constraints import ConstraintMatches
from maasapi.resources.node import Machine
from maasapi.version import VersionLike

MatchIDs = Optional[Dict[str, List[ForceInt]]]


class ConstraintMatchesV20(WireModel):
    """v2.0 constraint matches schema."""
    interfaces: MatchIDs = wire("interfaces", None)
    storage: MatchIDs = wire("storage", None)


class AllocationV20(WireModel):
    """v2.0 allocation response schema."""
    constraints_by_type: ConstraintMatchesV20 = wire("constraints_by_type")


def _resolve(valid: ConstraintMatchesV20, machine: Machine) -> ConstraintMatches:
    interfaces = {}
    for label, ids in (valid.interfaces or {}).items():
        matched = []
        for interface_id in ids:
            iface = machine.interface(interface_id)
            if iface is None:
                raise DeserializationError(
                    f"constraint match interface {json.dumps(label)}: {interface_id} "
                    "does not match an interface for the machine"
                )
            matched.append(iface)
        interfaces[label] = matched

    storage = {}
    for label, ids in (valid.storage or {}).items():
        matched = []
        for device_id in ids:
            device = machine.block_device(device_id)
            if device is None:
                raise DeserializationError(
                    f"constraint match storage {json.dumps(label)}: {device_id} "
                    "does not match a block device for the machine"
                )
            matched.append(device)
        storage[label] = matched

    return ConstraintMatches(interfaces=interfaces, storage=storage)


def resolve_constraint_matches(source: Any, machine: Machine) -> ConstraintMatches:
    """Resolve a ``{"interfaces": {...}, "storage": {...}}`` map against ``machine``.

    Either section may be omitted. Every ID must name an interface or
    block device of ``machine``; there are no partial results.

    Raises:
        DeserializationError: On a malformed map or an ID the machine lacks.
    """
    valid = check_fields(
        ConstraintMatchesV20,
        check_map(source, "allocation constraints"),
        "allocation constraints",
    )
    return _resolve(valid, machine)


def read_allocation_response(version: VersionLike, source: Any) -> Tuple[Machine, ConstraintMatches]:
    """Read an allocate response into the machine and its constraint matches."""
    machine = read_machine(version, source)
    valid = check_fields(AllocationV20, source, "allocation constraints response")
    return machine, _resolve(valid.constraints_by_type, machine)
