"""
VLAN and SSID management.

Both collections are addressed by position for deletion and keyed by a
unique value (VLAN id, SSID name) for duplicate detection.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from .models import NetworkState, Ssid, Vlan

logger = logging.getLogger(__name__)

DEFAULT_SSID_SECURITY = "WPA2-Personal"


# --- VLANs ---

def add_vlan(
    state: NetworkState,
    vlan_id: Union[int, str],
    name: str,
    subnet: str,
    gateway: Optional[str] = ""
) -> bool:
    """Add a VLAN. Requires id, name and subnet; the id must be new."""
    if not vlan_id or not name or not subnet:
        return False

    try:
        vlan = Vlan(id=vlan_id, name=name, subnet=subnet, gateway=gateway or "")
    except ValidationError:
        logger.debug("VLAN id %r is not a number", vlan_id)
        return False

    if any(v.id == vlan.id for v in state.vlans):
        logger.debug("VLAN %s already exists", vlan.id)
        return False

    state.vlans.append(vlan)
    return True


def delete_vlan(state: NetworkState, index: int) -> bool:
    """Delete the VLAN at `index`. Switch trunk lists are left as they are."""
    if index < 0 or index >= len(state.vlans):
        return False
    del state.vlans[index]
    return True


def get_vlan_name(vlans: list[Vlan], vlan_id: Union[int, str, None]) -> str:
    """Label for a VLAN id: "VLAN 10 - Management", or "None" when unknown."""
    for vlan in vlans:
        if vlan.id == vlan_id:
            return f"VLAN {vlan.id} - {vlan.name}"
    return "None"


# --- SSIDs ---

def add_ssid(
    state: NetworkState,
    name: str,
    security: Optional[str] = DEFAULT_SSID_SECURITY,
    vlan: Union[int, str, None] = ""
) -> bool:
    """Add an SSID. The name is required and must be unique."""
    if not name:
        return False
    if any(s.name == name for s in state.ssids):
        logger.debug("SSID %r already exists", name)
        return False

    state.ssids.append(Ssid(
        name=name,
        security=security or DEFAULT_SSID_SECURITY,
        vlan=vlan or "",
    ))
    return True


def delete_ssid(state: NetworkState, index: int) -> bool:
    """Delete the SSID at `index` and stop broadcasting it on every access point."""
    if index < 0 or index >= len(state.ssids):
        return False

    ssid_name = state.ssids.pop(index).name
    for device in state.devices:
        if device.type == "ap" and getattr(device, "ssids", None):
            device.ssids = [s for s in device.ssids if s != ssid_name]
    return True
