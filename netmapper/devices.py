"""
Device operations on a NetworkState.

Implements:
- Device create/delete/update against the session state
- Status changes on the selected device
- Per-device toggles (switch VLANs, access point SSIDs)
- VM management on VM hosts

Failures are reported through the return value (None or False) and leave
the state unchanged.
"""

import logging
from typing import Any, Optional, Union

from .models import DeviceBase, NetworkState, VirtualMachine, device_class_for
from .registry import DEVICE_TYPES, VALID_STATUSES, DeviceStatus
from .state import generate_device_id, selected_device

logger = logging.getLogger(__name__)

# The type picks the model variant, so it cannot change in place
READ_ONLY_DEVICE_KEYS = frozenset({"id", "type"})


# --- CRUD ---

def create_device_data(
    state: NetworkState,
    device_type: str,
    x: float,
    y: float
) -> Optional[DeviceBase]:
    """
    Create a device at (x, y) and append it to the state.

    The counter advances even when the type is unknown; the number is
    never handed out again.

    Args:
        state: Session to add the device to
        device_type: Key from DEVICE_TYPES
        x: Left edge in diagram coordinates
        y: Top edge in diagram coordinates

    Returns:
        The new device, or None for an unknown type
    """
    state.counter += 1
    cfg = DEVICE_TYPES.get(device_type)
    if cfg is None:
        logger.debug("Unknown device type %r (counter now %d)", device_type, state.counter)
        return None

    device = device_class_for(device_type)(
        id=generate_device_id(state.counter),
        type=device_type,
        name=f"{cfg['name']} {state.counter}",
        x=x,
        y=y,
    )
    state.devices.append(device)
    return device


def delete_device_data(state: NetworkState, device_id: str) -> bool:
    """Delete a device and all connections attached to it."""
    if state.get_device(device_id) is None:
        return False

    state.connections = [c for c in state.connections if not c.touches(device_id)]
    state.devices = [d for d in state.devices if d.id != device_id]

    if state.selected == device_id:
        state.selected = None
    return True


def update_device_property(state: NetworkState, key: str, value: Any) -> bool:
    """Set one property on the selected device (Python or wire field name)."""
    device = selected_device(state)
    if device is None:
        return False
    if key in READ_ONLY_DEVICE_KEYS:
        logger.debug("Refusing to change read-only device key %r", key)
        return False
    device.set_property(key, value)
    return True


def set_device_status(state: NetworkState, status: str) -> bool:
    """Set the selected device's status if the status is valid."""
    device = selected_device(state)
    if device is None:
        return False
    if status not in VALID_STATUSES:
        logger.debug("Invalid device status %r", status)
        return False
    device.status = status
    return True


# --- Toggles ---

def toggle_switch_vlan(device: Optional[DeviceBase], vlan_id: Union[int, str]) -> bool:
    """Add or remove a VLAN id on a switch's trunk list."""
    if device is None or device.type != "switch":
        return False
    if getattr(device, "assigned_vlans", None) is None:
        device.assigned_vlans = []

    if vlan_id in device.assigned_vlans:
        device.assigned_vlans.remove(vlan_id)
    else:
        device.assigned_vlans.append(vlan_id)
    return True


def toggle_ap_ssid(device: Optional[DeviceBase], ssid_name: str) -> bool:
    """Add or remove an SSID on an access point."""
    if device is None or device.type != "ap":
        return False
    if getattr(device, "ssids", None) is None:
        device.ssids = []

    if ssid_name in device.ssids:
        device.ssids.remove(ssid_name)
    else:
        device.ssids.append(ssid_name)
    return True


# --- VMs ---

def add_vm(
    device: Optional[DeviceBase],
    name: str,
    status: str = DeviceStatus.ONLINE.value
) -> bool:
    """Append a VM to a VM host. Fails on other device types or an empty name."""
    if device is None or device.type != "vmhost":
        return False
    if not name:
        return False
    device.vms.append(VirtualMachine(name=name, status=status or DeviceStatus.ONLINE.value))
    return True


def remove_vm(device: Optional[DeviceBase], index: int) -> bool:
    """Remove the VM at `index` from a VM host."""
    if device is None or device.type != "vmhost":
        return False
    vms = getattr(device, "vms", None)
    if not vms:
        return False
    if index < 0 or index >= len(vms):
        return False
    del vms[index]
    return True
