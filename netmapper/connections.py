"""
Connection management.

Connections are undirected: a link from A to B blocks a second link from
B to A. Lookups are linear scans over `state.connections`, in list order.
"""

import logging
from typing import Optional

from .models import Connection, DeviceBase, NetworkState
from .registry import ConnectionMedium
from .state import generate_connection_id

logger = logging.getLogger(__name__)

VALID_MEDIA = tuple(m.value for m in ConnectionMedium)


def add_connection(
    state: NetworkState,
    from_id: str,
    from_pos: Optional[str],
    to_id: str,
    to_pos: Optional[str]
) -> Optional[Connection]:
    """
    Connect two devices using the state's current medium.

    Args:
        state: Session holding both devices
        from_id: Device the drag started on
        from_pos: Edge of the source device ("top", "bottom", "left", "right")
        to_id: Device the drag ended on
        to_pos: Edge of the target device

    Returns:
        The new connection, or None for a self-link, a duplicate pair, or
        an id that does not resolve
    """
    if from_id == to_id:
        logger.debug("Rejected self-connection on %s", from_id)
        return None

    if any(c.joins(from_id, to_id) for c in state.connections):
        logger.debug("Rejected duplicate connection %s <-> %s", from_id, to_id)
        return None

    if state.get_device(from_id) is None or state.get_device(to_id) is None:
        logger.debug("Rejected connection to unknown device %s <-> %s", from_id, to_id)
        return None

    connection = Connection(
        id=generate_connection_id(),
        from_id=from_id,
        from_pos=from_pos,
        to_id=to_id,
        to_pos=to_pos,
        type=state.conn_type,
    )
    state.connections.append(connection)
    return connection


def delete_connection(state: NetworkState, connection_id: str) -> bool:
    """Delete a single connection."""
    if state.get_connection(connection_id) is None:
        return False
    state.connections = [c for c in state.connections if c.id != connection_id]
    return True


def set_connection_type(state: NetworkState, medium: str) -> bool:
    """Set the medium applied to connections created from now on."""
    if medium not in VALID_MEDIA:
        return False
    state.conn_type = medium
    return True


def get_device_connections(state: NetworkState, device_id: str) -> list[Connection]:
    """Get all connections attached to a device."""
    return [c for c in state.connections if c.touches(device_id)]


def get_connected_devices(state: NetworkState, device_id: str) -> list[DeviceBase]:
    """Get the device at the far end of each connection, skipping dangling ids."""
    neighbors = []
    for connection in get_device_connections(state, device_id):
        other = state.get_device(connection.other_end(device_id))
        if other is not None:
            neighbors.append(other)
    return neighbors
