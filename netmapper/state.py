"""
State lifecycle helpers.

Creates fresh editing sessions, generates entity ids, and resolves the
current selection. Selections are stored as ids; every accessor looks the
id up again and treats a miss as "nothing selected".
"""

import logging
import time
import uuid
from typing import Optional

from .models import DeviceBase, NetworkState, ZoneBase

logger = logging.getLogger(__name__)


def create_initial_state() -> NetworkState:
    """Create an empty session with the three default VLANs seeded."""
    return NetworkState()


def now_millis() -> int:
    """Wall-clock time in milliseconds, used as the id stem."""
    return int(time.time() * 1000)


def generate_device_id(sequence: int) -> str:
    return f"dev{now_millis()}_{sequence}"


def generate_zone_id(sequence: int) -> str:
    return f"zone{now_millis()}_{sequence}"


def generate_connection_id() -> str:
    # Two links drawn within the same millisecond must not collide
    return f"conn{now_millis()}_{uuid.uuid4().hex[:6]}"


# --- Selection ---

def selected_device(state: NetworkState) -> Optional[DeviceBase]:
    """Get the selected device, or None if nothing (or a deleted id) is selected."""
    return state.get_device(state.selected)


def selected_zone(state: NetworkState) -> Optional[ZoneBase]:
    """Get the selected zone, or None if nothing (or a deleted id) is selected."""
    return state.get_zone(state.selected_zone)


def select_device(state: NetworkState, device_id: Optional[str]) -> bool:
    """
    Select a device for editing.

    Passing None clears the selection. An id that does not resolve leaves
    the selection unchanged and returns False.
    """
    if device_id is None:
        state.selected = None
        return True
    if state.get_device(device_id) is None:
        logger.debug("Cannot select unknown device %s", device_id)
        return False
    state.selected = device_id
    return True


def select_zone(state: NetworkState, zone_id: Optional[str]) -> bool:
    """Select a zone for editing (same rules as select_device)."""
    if zone_id is None:
        state.selected_zone = None
        return True
    if state.get_zone(zone_id) is None:
        logger.debug("Cannot select unknown zone %s", zone_id)
        return False
    state.selected_zone = zone_id
    return True


# --- Reset ---

def clear_all_data(state: NetworkState) -> None:
    """
    Remove every device, connection and zone and reset the counters.

    VLANs, SSIDs, network config and the view transform are kept.
    """
    state.devices = []
    state.connections = []
    state.zones = []
    state.counter = 0
    state.zone_counter = 0
    state.selected = None
    state.selected_zone = None
    logger.info("Cleared all devices, connections and zones")


def format_count(count: int, singular: str) -> str:
    """Format a count with a naively pluralized noun ("1 device", "2 devices")."""
    return f"{count} {singular}{'' if count == 1 else 's'}"
