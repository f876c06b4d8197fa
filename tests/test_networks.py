from __future__ import annotations

from netmapper.devices import create_device_data, toggle_ap_ssid
from netmapper.models import NetworkState
from netmapper.networks import add_ssid, add_vlan, delete_ssid, delete_vlan, get_vlan_name


def test_add_vlan(state: NetworkState) -> None:
    assert add_vlan(state, 30, "Guests", "192.168.30.0/24", "192.168.30.1") is True
    assert add_vlan(state, 40, "Cameras", "192.168.40.0/24") is True

    assert [v.id for v in state.vlans] == [1, 10, 20, 30, 40]
    assert state.vlans[-1].gateway == ""


def test_add_vlan_requires_fields(state: NetworkState) -> None:
    assert add_vlan(state, 0, "Zero", "10.0.0.0/24") is False
    assert add_vlan(state, 30, "", "10.0.0.0/24") is False
    assert add_vlan(state, 30, "Guests", "") is False
    assert add_vlan(state, "abc", "Guests", "10.0.0.0/24") is False
    assert len(state.vlans) == 3


def test_add_vlan_rejects_duplicate_id(state: NetworkState) -> None:
    assert add_vlan(state, 10, "Other", "10.10.0.0/24") is False
    assert add_vlan(state, "10", "Other", "10.10.0.0/24") is False
    assert len(state.vlans) == 3


def test_delete_vlan_by_index(state: NetworkState) -> None:
    assert delete_vlan(state, 3) is False
    assert delete_vlan(state, -1) is False
    assert delete_vlan(state, 1) is True
    assert [v.id for v in state.vlans] == [1, 20]


def test_get_vlan_name(state: NetworkState) -> None:
    assert get_vlan_name(state.vlans, 10) == "VLAN 10 - Management"
    assert get_vlan_name(state.vlans, 99) == "None"
    assert get_vlan_name(state.vlans, None) == "None"


def test_add_ssid(state: NetworkState) -> None:
    assert add_ssid(state, "Office", "WPA3-Enterprise", 10) is True
    assert add_ssid(state, "Guest") is True
    assert add_ssid(state, "Guest") is False
    assert add_ssid(state, "") is False

    assert [(s.name, s.security, s.vlan) for s in state.ssids] == [
        ("Office", "WPA3-Enterprise", 10),
        ("Guest", "WPA2-Personal", ""),
    ]


def test_delete_ssid_cascades_to_access_points(state: NetworkState) -> None:
    add_ssid(state, "Office")
    add_ssid(state, "Guest")
    ap1 = create_device_data(state, "ap", 0, 0)
    ap2 = create_device_data(state, "ap", 0, 0)
    bare_ap = create_device_data(state, "ap", 0, 0)
    toggle_ap_ssid(ap1, "Office")
    toggle_ap_ssid(ap1, "Guest")
    toggle_ap_ssid(ap2, "Guest")

    assert delete_ssid(state, 1) is True

    assert [s.name for s in state.ssids] == ["Office"]
    assert ap1.ssids == ["Office"]
    assert ap2.ssids == []
    assert bare_ap.ssids is None


def test_delete_ssid_out_of_range(state: NetworkState) -> None:
    add_ssid(state, "Office")
    assert delete_ssid(state, 1) is False
    assert delete_ssid(state, -1) is False
    assert len(state.ssids) == 1
