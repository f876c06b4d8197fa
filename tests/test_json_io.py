from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from netmapper.connections import add_connection
from netmapper.devices import add_vm, create_device_data, toggle_ap_ssid, toggle_switch_vlan
from netmapper.json_io import (
    dumps_state,
    export_state_to_json,
    import_state_from_json,
    load_state,
    loads_state,
    save_state,
)
from netmapper.models import IdfZone, NetworkState, SwitchDevice, VMHostDevice
from netmapper.networks import add_ssid, add_vlan
from netmapper.state import create_initial_state
from netmapper.zones import create_zone_data


@pytest.fixture
def populated(state: NetworkState) -> NetworkState:
    switch = create_device_data(state, "switch", 100, 200)
    ap = create_device_data(state, "ap", 300, 200)
    host = create_device_data(state, "vmhost", 500, 200)
    toggle_switch_vlan(switch, 10)
    add_ssid(state, "Office", vlan=10)
    toggle_ap_ssid(ap, "Office")
    add_vm(host, "dc01")
    add_connection(state, switch.id, "right", ap.id, "left")
    zone = create_zone_data(state, "idf", 0, 0)
    zone.connected_mdf = "Basement"
    add_vlan(state, 30, "Guests", "192.168.30.0/24")
    state.zoom = 1.5
    state.pan_x = -120
    state.pan_y = 40
    return state


def test_export_shape(populated: NetworkState) -> None:
    data = export_state_to_json(populated, "Acme", "HQ")

    assert set(data) == {
        "devices", "connections", "zones", "vlans", "ssids", "config",
        "clientName", "siteName", "view",
    }
    assert data["clientName"] == "Acme"
    assert data["siteName"] == "HQ"
    assert data["view"] == {"zoom": 1.5, "panX": -120, "panY": 40}
    assert data["devices"][0]["assignedVlans"] == [10]
    assert data["devices"][2]["vms"] == [{"name": "dc01", "status": "online"}]
    assert "vms" not in data["devices"][0]
    assert "poe" not in data["devices"][0]
    assert set(data["connections"][0]) == {"id", "from", "fromPos", "to", "toPos", "type"}
    assert data["zones"][0]["connectedMDF"] == "Basement"
    json.dumps(data)


def test_export_defaults_names(state: NetworkState) -> None:
    data = export_state_to_json(state)
    assert (data["clientName"], data["siteName"]) == ("", "")
    data = export_state_to_json(state, None, None)
    assert (data["clientName"], data["siteName"]) == ("", "")


def test_export_does_not_alias_config(state: NetworkState) -> None:
    data = export_state_to_json(state)
    data["config"]["dnsPrimary"] = "9.9.9.9"
    assert state.config["dnsPrimary"] == "8.8.8.8"


def test_round_trip(populated: NetworkState) -> None:
    exported = export_state_to_json(populated, "Acme", "HQ")
    fresh = create_initial_state()

    meta = import_state_from_json(fresh, exported)

    assert meta == {"clientName": "Acme", "siteName": "HQ"}
    again = export_state_to_json(fresh, "Acme", "HQ")
    for key in ("devices", "connections", "zones", "vlans", "ssids", "config", "view"):
        assert again[key] == exported[key]
    assert isinstance(fresh.devices[0], SwitchDevice)
    assert isinstance(fresh.devices[2], VMHostDevice)
    assert isinstance(fresh.zones[0], IdfZone)
    assert len(fresh.vlans) == 4
    assert fresh.zoom == 1.5


def test_round_trip_keeps_ad_hoc_properties(state: NetworkState) -> None:
    device = create_device_data(state, "camera", 0, 0)
    device.set_property("resolution", "4K")

    fresh = create_initial_state()
    import_state_from_json(fresh, export_state_to_json(state))

    assert fresh.devices[0].to_json_dict()["resolution"] == "4K"


def test_import_defaults_missing_collections(state: NetworkState) -> None:
    create_device_data(state, "desktop", 0, 0)
    add_ssid(state, "Office")

    result = import_state_from_json(state, {})

    assert state.devices == []
    assert state.connections == []
    assert state.zones == []
    assert state.ssids == []
    assert result == {"clientName": "", "siteName": ""}


def test_import_keeps_vlans_and_config_when_absent(state: NetworkState) -> None:
    add_vlan(state, 30, "Guests", "192.168.30.0/24")
    state.config["dnsPrimary"] = "1.1.1.1"
    original_vlans = [v.to_json_dict() for v in state.vlans]

    import_state_from_json(state, {"devices": []})

    assert [v.to_json_dict() for v in state.vlans] == original_vlans
    assert state.config["dnsPrimary"] == "1.1.1.1"


def test_import_explicit_empty_vlans_replaces(state: NetworkState) -> None:
    import_state_from_json(state, {"vlans": [], "config": {}})
    assert state.vlans == []
    assert state.config == {}


def test_import_view_defaults(state: NetworkState) -> None:
    state.zoom = 2
    import_state_from_json(state, {"view": {"zoom": 0, "panX": None}})
    assert (state.zoom, state.pan_x, state.pan_y) == (1, 0, 0)


def test_import_without_view_keeps_view(state: NetworkState) -> None:
    state.zoom = 2
    state.pan_x = 15
    import_state_from_json(state, {"devices": []})
    assert (state.zoom, state.pan_x) == (2, 15)


def test_import_browser_document(state: NetworkState) -> None:
    doc = {
        "devices": [
            {"id": "dev1_1", "type": "router", "name": "Edge", "ip": "", "mac": "",
             "status": "online", "vlan": "", "notes": "", "manufacturer": "", "os": "",
             "x": 4000, "y": 4000, "vms": None, "connectionType": "fiber"},
            {"id": "dev1_2", "type": "desktop", "name": "PC", "x": 4200, "y": 4000, "vms": None},
        ],
        "connections": [
            {"id": "conn1", "from": "dev1_1", "fromPos": "right", "to": "dev1_2",
             "toPos": "left", "type": "wired"},
        ],
        "view": {"zoom": 1, "panX": 0, "panY": 0},
    }

    import_state_from_json(state, doc)

    assert state.devices[0].connection_type == "fiber"
    assert state.connections[0].from_id == "dev1_1"


def test_import_rejects_bad_documents_atomically(state: NetworkState) -> None:
    device = create_device_data(state, "desktop", 0, 0)

    with pytest.raises(ValidationError):
        import_state_from_json(state, {"devices": [{"id": "x", "type": "toaster", "name": "T"}]})
    with pytest.raises(ValueError):
        import_state_from_json(state, ["not", "a", "dict"])

    assert state.devices == [device]


def test_string_helpers(populated: NetworkState) -> None:
    text = dumps_state(populated, "Acme", "HQ")
    fresh = create_initial_state()

    assert loads_state(fresh, text) == {"clientName": "Acme", "siteName": "HQ"}
    assert len(fresh.devices) == 3


def test_file_helpers(populated: NetworkState, tmp_path: Path) -> None:
    path = save_state(populated, tmp_path / "maps" / "site.json", "Acme", "HQ")
    assert path.exists()

    fresh = create_initial_state()
    assert load_state(fresh, path)["siteName"] == "HQ"
    assert len(fresh.connections) == 1


def test_load_missing_file(state: NetworkState, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_state(state, tmp_path / "missing.json")


def test_import_view_that_is_not_an_object(state: NetworkState) -> None:
    state.zoom = 2
    state.pan_x = 30

    import_state_from_json(state, {"devices": [], "view": []})

    assert (state.zoom, state.pan_x, state.pan_y) == (1, 0, 0)


def test_import_bad_config_leaves_state_untouched(state: NetworkState) -> None:
    device = create_device_data(state, "desktop", 0, 0)

    with pytest.raises(ValueError):
        import_state_from_json(state, {"devices": [], "config": ["dhcp"]})

    assert state.devices == [device]
    assert state.config["dnsPrimary"] == "8.8.8.8"


def test_import_vmhost_with_null_vms(state: NetworkState) -> None:
    doc = {"devices": [{"id": "d1", "type": "vmhost", "name": "H", "x": 0, "y": 0, "vms": None}]}

    import_state_from_json(state, doc)

    host = state.devices[0]
    assert isinstance(host, VMHostDevice)
    assert host.vms == []
    assert add_vm(host, "dc01") is True
    assert host.to_json_dict()["vms"] == [{"name": "dc01", "status": "online"}]
