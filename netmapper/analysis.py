"""
Network map analysis - Inventory and connectivity summaries.

Provides the numbers shown in the editor's status bar and the CLI
`summarize` command.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .state import format_count

if TYPE_CHECKING:
    from .models import NetworkState


@dataclass
class ConnectedComponent:
    """A group of devices reachable from each other."""
    device_ids: list[str] = field(default_factory=list)
    connection_count: int = 0

    @property
    def size(self) -> int:
        return len(self.device_ids)


@dataclass
class NetworkSummary:
    """Complete summary of a network map."""
    total_devices: int
    total_connections: int
    total_zones: int
    total_vlans: int
    total_ssids: int
    devices_by_type: dict[str, int]
    devices_by_status: dict[str, int]
    wireless_connections: int
    connected_components: int
    unconnected_count: int

    @property
    def headline(self) -> str:
        """One-line status text, e.g. "3 devices, 1 connection"."""
        return (
            f"{format_count(self.total_devices, 'device')}, "
            f"{format_count(self.total_connections, 'connection')}"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "headline": self.headline,
            "total_devices": self.total_devices,
            "total_connections": self.total_connections,
            "total_zones": self.total_zones,
            "total_vlans": self.total_vlans,
            "total_ssids": self.total_ssids,
            "devices_by_type": self.devices_by_type,
            "devices_by_status": self.devices_by_status,
            "wireless_connections": self.wireless_connections,
            "connected_components": self.connected_components,
            "unconnected_count": self.unconnected_count,
        }


def find_connected_components(state: "NetworkState") -> list[ConnectedComponent]:
    """
    Find all connected components using BFS over the undirected links.

    Args:
        state: The state to analyze

    Returns:
        List of ConnectedComponent objects, in device order of their first member
    """
    if not state.devices:
        return []

    device_ids = [d.id for d in state.devices]
    adjacency: dict[str, set[str]] = {did: set() for did in device_ids}
    link_counts: dict[str, int] = defaultdict(int)

    for conn in state.connections:
        if conn.from_id in adjacency and conn.to_id in adjacency:
            adjacency[conn.from_id].add(conn.to_id)
            adjacency[conn.to_id].add(conn.from_id)
            link_counts[conn.from_id] += 1
            link_counts[conn.to_id] += 1

    visited: set[str] = set()
    components: list[ConnectedComponent] = []

    for start in device_ids:
        if start in visited:
            continue

        members: list[str] = []
        queue = [start]
        visited.add(start)

        while queue:
            current = queue.pop(0)
            members.append(current)
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        # Every link is counted once from each end
        components.append(ConnectedComponent(
            device_ids=members,
            connection_count=sum(link_counts[m] for m in members) // 2
        ))

    return components


def summarize_state(state: "NetworkState") -> NetworkSummary:
    """
    Generate a summary of a network map.

    Args:
        state: The state to summarize

    Returns:
        NetworkSummary object with all analysis results
    """
    type_counts: dict[str, int] = defaultdict(int)
    status_counts: dict[str, int] = defaultdict(int)
    for device in state.devices:
        type_counts[device.type] += 1
        status_counts[device.status] += 1

    components = find_connected_components(state)

    return NetworkSummary(
        total_devices=len(state.devices),
        total_connections=len(state.connections),
        total_zones=len(state.zones),
        total_vlans=len(state.vlans),
        total_ssids=len(state.ssids),
        devices_by_type=dict(type_counts),
        devices_by_status=dict(status_counts),
        wireless_connections=sum(1 for c in state.connections if c.type == "wireless"),
        connected_components=len(components),
        unconnected_count=sum(1 for c in components if c.size == 1),
    )
