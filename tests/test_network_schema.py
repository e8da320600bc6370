"""Tests for VLAN, fabric, subnet, space, static route and link readers."""

import pytest

from maasapi.api import (
    read_fabrics,
    read_links,
    read_spaces,
    read_static_routes,
    read_subnet,
    read_subnets,
    read_vlan,
    read_vlans,
)
from maasapi.errors import DeserializationError, UnsupportedVersionError
from maasapi.resources.network import VLAN


def test_read_vlans(fixture):
    vlans = read_vlans("2.0", fixture("vlans"))
    assert vlans == [
        VLAN(
            resource_uri="/MAAS/api/2.0/vlans/1/",
            id=1,
            name="untagged",
            fabric="fabric-0",
            vid=2,
            mtu=1500,
            dhcp=True,
            primary_rack="a-rack",
            secondary_rack="",
        )
    ]


def test_vlan_without_name(fixture):
    """The default VLAN of a fabric has a null name; it reads as empty."""
    [vlan] = read_vlans("2.0", fixture("vlans_without_name"))
    assert vlan.id == 5006
    assert vlan.name == ""
    assert vlan.primary_rack == "4y3h7n"
    assert vlan.secondary_rack == ""
    assert vlan.dhcp is True


def test_vlans_below_first_version(fixture):
    with pytest.raises(UnsupportedVersionError) as exc_info:
        read_vlans("1.9.0", fixture("vlans_without_name"))
    assert str(exc_info.value) == "no vlan read func for version 1.9.0"


def test_vlans_at_later_version_read_like_2_0(fixture):
    source = fixture("vlans_without_name")
    assert read_vlans("2.1.9", source) == read_vlans("2.0", source)


def test_vlans_base_schema_failure():
    with pytest.raises(DeserializationError) as exc_info:
        read_vlans("2.0", "wat?")
    assert str(exc_info.value) == 'vlan base schema check failed: expected list, got string("wat?")'


def test_vlan_element_failure_names_index(fixture):
    source = fixture("vlans") + fixture("vlans")
    del source[1]["VID"]
    with pytest.raises(DeserializationError) as exc_info:
        read_vlans("2.0", source)
    assert str(exc_info.value) == "vlan 1: vlan 2.0 schema check failed: VID: missing required field"


def test_read_single_vlan(fixture):
    [expected] = read_vlans("2.0", fixture("vlans"))
    assert read_vlan("2.0", fixture("vlans")[0]) == expected


def test_read_single_vlan_rejects_list(fixture):
    with pytest.raises(DeserializationError, match="vlan base schema check failed: expected map"):
        read_vlan("2.0", fixture("vlans"))


def test_read_fabrics(fixture):
    [fabric] = read_fabrics("2.0", fixture("fabrics"))
    assert fabric.id == 0
    assert fabric.name == "fabric-0"
    assert fabric.class_type == ""
    assert [vlan.id for vlan in fabric.vlans] == [1, 5004]
    assert fabric.vlans[1].mtu == 9000


def test_fabric_nested_vlan_failure_is_annotated(fixture):
    source = fixture("fabrics")
    source[0]["VLANs"][1]["dhcp_on"] = "yes"
    with pytest.raises(DeserializationError) as exc_info:
        read_fabrics("2.0", source)
    message = str(exc_info.value)
    assert message.startswith("fabric 0: VLANs: vlan 1: vlan 2.0 schema check failed: dhcp_on:")


def test_read_subnets(fixture):
    first, second = read_subnets("2.0", fixture("subnets"))
    assert first.id == 1
    assert first.cidr == "192.168.100.0/24"
    assert first.gateway == "192.168.100.1"
    assert first.space == "space-0"
    assert first.dns_servers == ["8.8.8.8", "8.8.4.4"]
    assert first.vlan.name == "untagged"
    assert second.gateway == ""
    assert second.dns_servers == []
    assert second.vlan.id == 5004


def test_subnet_without_vlan(fixture):
    source = fixture("subnets")[0]
    del source["VLAN"]
    with pytest.raises(DeserializationError, match="subnet 2.0 schema check failed: VLAN: missing required field"):
        read_subnet("2.0", source)


def test_read_spaces(fixture):
    space, undefined = read_spaces("2.0", fixture("spaces"))
    assert space.name == "space-0"
    assert [subnet.id for subnet in space.subnets] == [34]
    assert space.subnets[0].gateway == ""
    assert undefined.id == -1
    assert undefined.subnets == []


def test_read_static_routes(fixture):
    [route] = read_static_routes("2.0", fixture("static_routes"))
    assert route.id == 2
    assert route.metric == 100
    assert route.gateway_ip == "10.0.0.1"
    assert route.source.cidr == "10.0.0.0/24"
    assert route.destination.cidr == "192.168.0.0/24"
    assert route.destination.vlan.primary_rack == ""


def test_static_route_destination_failure_names_position(fixture):
    source = fixture("static_routes")
    del source[0]["Destination"]["cidr"]
    with pytest.raises(DeserializationError) as exc_info:
        read_static_routes("2.0", source)
    assert str(exc_info.value) == (
        "static-route 0: subnet 1: subnet 2.0 schema check failed: cidr: missing required field"
    )


def test_read_links(fixture):
    auto, link_up, static = read_links("2.0", fixture("links"))
    assert auto.id == 69
    assert auto.mode == "auto"
    assert auto.subnet.id == 3
    assert auto.ip_address == ""
    assert link_up.subnet is None
    assert static.subnet is None
    assert static.ip_address == ""


def test_reads_are_repeatable(fixture):
    source = fixture("static_routes")
    assert read_static_routes("2.0", source) == read_static_routes("2.0", source)
