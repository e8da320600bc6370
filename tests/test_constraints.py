"""Tests for allocation responses and constraint match resolution."""

import pytest

from maasapi.api import read_allocation_response, read_machine, resolve_constraint_matches
from maasapi.errors import DeserializationError


@pytest.fixture
def machine(machine_source):
    return read_machine("2.0", machine_source)


def test_resolves_to_the_machines_own_members(machine):
    matches = resolve_constraint_matches(
        {"interfaces": {"db": [48]}, "storage": {"root": [1]}}, machine
    )
    assert [iface.id for iface in matches.interfaces["db"]] == [48]
    assert [device.id for device in matches.storage["root"]] == [1]
    assert matches.interfaces["db"][0] is machine.interface(48)
    assert matches.storage["root"][0] is machine.block_device(1)


def test_several_ids_per_label(machine):
    matches = resolve_constraint_matches({"interfaces": {"db": [48, 49], "web": ["49"]}}, machine)
    assert [iface.id for iface in matches.interfaces["db"]] == [48, 49]
    assert [iface.id for iface in matches.interfaces["web"]] == [49]
    assert matches.storage == {}


def test_both_sections_are_optional(machine):
    matches = resolve_constraint_matches({}, machine)
    assert matches.interfaces == {}
    assert matches.storage == {}


def test_unknown_interface_id(machine):
    with pytest.raises(DeserializationError) as exc_info:
        resolve_constraint_matches({"interfaces": {"db": [48, 99]}}, machine)
    assert str(exc_info.value) == (
        'constraint match interface "db": 99 does not match an interface for the machine'
    )


def test_unknown_block_device_id(machine):
    with pytest.raises(DeserializationError, match='constraint match storage "root": 99 does not match a block device'):
        resolve_constraint_matches({"storage": {"root": [99]}}, machine)


def test_malformed_constraint_map(machine):
    with pytest.raises(DeserializationError, match="allocation constraints schema check failed: interfaces"):
        resolve_constraint_matches({"interfaces": ["db"]}, machine)
    with pytest.raises(DeserializationError, match="allocation constraints base schema check failed"):
        resolve_constraint_matches("wat?", machine)


def test_read_allocation_response(machine_source):
    machine, matches = read_allocation_response("2.0", machine_source)
    assert machine.system_id == "4y3ha3"
    assert matches.interfaces["db"][0] is machine.interface(48)
    assert matches.storage["root"][0] is machine.block_device(1)


def test_allocation_response_requires_constraints(machine_source):
    del machine_source["constraints_by_type"]
    with pytest.raises(
        DeserializationError,
        match="allocation constraints response schema check failed: constraints_by_type: missing required field",
    ):
        read_allocation_response("2.0", machine_source)


def test_allocation_response_with_unknown_id(machine_source):
    machine_source["constraints_by_type"]["storage"]["root"] = [1, 99]
    with pytest.raises(DeserializationError, match="99"):
        read_allocation_response("2.0", machine_source)
