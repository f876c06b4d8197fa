"""
Whole-state JSON interchange.

The exported document is what the browser tool saves to disk:

    {devices, connections, zones, vlans, ssids, config,
     clientName, siteName, view: {zoom, panX, panY}}

Importing is asymmetric: missing devices/connections/zones/
ssids reset to empty, while missing vlans/config keep the current values.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Optional

from .models import DEVICE_ADAPTER, ZONE_ADAPTER, Connection, NetworkState, Ssid, Vlan

logger = logging.getLogger(__name__)


def export_state_to_json(
    state: NetworkState,
    client_name: Optional[str] = "",
    site_name: Optional[str] = ""
) -> dict:
    """
    Snapshot a state as a JSON-serializable dict.

    Args:
        state: Session to export
        client_name: Customer name shown on the exported map
        site_name: Site name shown on the exported map

    Returns:
        Dict with wire (camelCase) keys; unset optional fields are omitted
    """
    return {
        "devices": [d.to_json_dict() for d in state.devices],
        "connections": [c.to_json_dict() for c in state.connections],
        "zones": [z.to_json_dict() for z in state.zones],
        "vlans": [v.to_json_dict() for v in state.vlans],
        "ssids": [s.to_json_dict() for s in state.ssids],
        "config": copy.deepcopy(state.config),
        "clientName": client_name or "",
        "siteName": site_name or "",
        "view": {"zoom": state.zoom, "panX": state.pan_x, "panY": state.pan_y},
    }


def import_state_from_json(state: NetworkState, data: Any) -> dict:
    """
    Replace a state's contents with an exported document.

    Every entry is validated before anything is assigned, so a malformed
    document raises and leaves the state untouched.

    Args:
        state: Session to load into
        data: Dict produced by export_state_to_json (or the browser tool)

    Returns:
        {"clientName": ..., "siteName": ...}, each defaulting to ""

    Raises:
        ValueError: If data is not an object or an entry does not validate
            (pydantic's ValidationError is a ValueError)
    """
    if not isinstance(data, dict):
        raise ValueError("Network map data must be a JSON object")

    devices = [DEVICE_ADAPTER.validate_python(d) for d in data.get("devices") or []]
    connections = [Connection.model_validate(c) for c in data.get("connections") or []]
    zones = [ZONE_ADAPTER.validate_python(z) for z in data.get("zones") or []]
    ssids = [Ssid.model_validate(s) for s in data.get("ssids") or []]

    # Absent vlans/config keep what the session already has
    vlans = state.vlans
    if data.get("vlans") is not None:
        vlans = [Vlan.model_validate(v) for v in data["vlans"]]
    config = state.config
    if data.get("config") is not None:
        if not isinstance(data["config"], dict):
            raise ValueError("Network map config must be a JSON object")
        config = dict(data["config"])

    # A view that is not an object falls back to zoom 1, pan 0
    view = data.get("view")
    if view is not None and not isinstance(view, dict):
        view = {}

    state.devices = devices
    state.connections = connections
    state.zones = zones
    state.vlans = vlans
    state.ssids = ssids
    state.config = config

    if view is not None:
        state.zoom = view.get("zoom") or 1
        state.pan_x = view.get("panX") or 0
        state.pan_y = view.get("panY") or 0

    logger.info(
        "Loaded %d devices, %d connections, %d zones",
        len(devices), len(connections), len(zones),
    )
    return {
        "clientName": data.get("clientName") or "",
        "siteName": data.get("siteName") or "",
    }


# --- String and file helpers ---

def dumps_state(
    state: NetworkState,
    client_name: str = "",
    site_name: str = "",
    indent: Optional[int] = 2
) -> str:
    """Serialize a state to a JSON string."""
    return json.dumps(export_state_to_json(state, client_name, site_name), indent=indent)


def loads_state(state: NetworkState, text: str) -> dict:
    """Load a JSON string into a state. Returns the client/site names."""
    return import_state_from_json(state, json.loads(text))


def save_state(
    state: NetworkState,
    file_path: str | Path,
    client_name: str = "",
    site_name: str = ""
) -> Path:
    """Save a state to a JSON file, creating parent directories as needed."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(export_state_to_json(state, client_name, site_name), f, indent=2)

    return path


def load_state(state: NetworkState, file_path: str | Path) -> dict:
    """Load a JSON file into a state. Returns the client/site names."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Network map file not found: {path}")

    with open(path, "r") as f:
        data = json.load(f)

    return import_state_from_json(state, data)
