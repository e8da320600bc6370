"""Tests for the public surface and the ResponseReader facade."""

import pytest

import maasapi
from maasapi.api import ResponseReader, read_machine
from maasapi.errors import UnsupportedVersionError
from maasapi.version import Version


def test_root_exports():
    for name in maasapi.__all__:
        assert hasattr(maasapi, name), name
    assert isinstance(maasapi.__version__, str)


def test_reader_uses_explicit_version():
    assert ResponseReader("2.1").version == Version(2, 1, 0)


def test_reader_defaults_to_settings(monkeypatch):
    monkeypatch.setenv("MAASAPI_API_VERSION", "2.4")
    assert ResponseReader().version == Version(2, 4, 0)


def test_reader_defaults_to_2_0(monkeypatch):
    monkeypatch.delenv("MAASAPI_API_VERSION", raising=False)
    assert ResponseReader().version == Version(2, 0, 0)


def test_reader_methods_match_functions(fixture, machine_source):
    reader = ResponseReader("2.0")
    assert reader.machine(machine_source) == read_machine("2.0", machine_source)
    assert [vlan.id for vlan in reader.vlans(fixture("vlans"))] == [1]
    assert len(reader.files(fixture("files"))) == 2
    assert reader.zone(fixture("zones")[0]).name == "default"
    assert "devices-management" in reader.version_info(fixture("version"))


def test_reader_at_old_version(fixture):
    with pytest.raises(UnsupportedVersionError):
        ResponseReader("1.0").zones(fixture("zones"))


def test_refresh_machine_merges_in_place(machine_source):
    reader = ResponseReader("2.0")
    machine = reader.machine(machine_source)
    machine_source["status_name"] = "Releasing"
    refreshed = reader.refresh_machine(machine, machine_source)
    assert refreshed is machine
    assert machine.status_name == "Releasing"


def test_refresh_interface_merges_in_place(fixture):
    reader = ResponseReader("2.0")
    source = fixture("interfaces")[0]
    interface = reader.interface(source)
    source["Links"] = []
    assert reader.refresh_interface(interface, source) is interface
    assert interface.links == []


def test_allocation(machine_source):
    machine, matches = ResponseReader("2.0").allocation(machine_source)
    assert matches.interfaces["db"][0] is machine.interface(48)
