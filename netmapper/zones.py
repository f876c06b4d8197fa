"""Zone operations on a NetworkState."""

import logging
from typing import Any, Optional

from .models import ZONE_CLASSES, NetworkState, ZoneBase
from .registry import ZONE_TYPES
from .state import generate_zone_id, selected_zone

logger = logging.getLogger(__name__)

DEFAULT_ZONE_WIDTH = 200
DEFAULT_ZONE_HEIGHT = 150

READ_ONLY_ZONE_KEYS = frozenset({"id", "type"})


def create_zone_data(
    state: NetworkState,
    zone_type: str,
    x: float,
    y: float
) -> Optional[ZoneBase]:
    """
    Create a 200x150 zone at (x, y) and append it to the state.

    Like devices, the zone counter advances even for an unknown type.

    Returns:
        The new zone, or None for an unknown type
    """
    state.zone_counter += 1
    cfg = ZONE_TYPES.get(zone_type)
    if cfg is None:
        logger.debug("Unknown zone type %r (zone counter now %d)", zone_type, state.zone_counter)
        return None

    zone = ZONE_CLASSES[zone_type](
        id=generate_zone_id(state.zone_counter),
        type=zone_type,
        name=f"{cfg['name']} {state.zone_counter}",
        x=x,
        y=y,
        width=DEFAULT_ZONE_WIDTH,
        height=DEFAULT_ZONE_HEIGHT,
    )
    state.zones.append(zone)
    return zone


def delete_zone_data(state: NetworkState, zone_id: str) -> bool:
    """Delete a zone. Devices drawn inside it are not affected."""
    if state.get_zone(zone_id) is None:
        return False

    state.zones = [z for z in state.zones if z.id != zone_id]
    if state.selected_zone == zone_id:
        state.selected_zone = None
    return True


def update_zone_property(state: NetworkState, key: str, value: Any) -> bool:
    """Set one property on the selected zone (Python or wire field name)."""
    zone = selected_zone(state)
    if zone is None:
        return False
    if key in READ_ONLY_ZONE_KEYS:
        logger.debug("Refusing to change read-only zone key %r", key)
        return False
    zone.set_property(key, value)
    return True
