"""
Geometry helpers for drawing and hit-testing the network map.

Provides:
- Connection anchor points on device edges
- Cubic Bezier path strings for SVG connection lines
- Nearest-edge detection for drag-to-connect
- Zoom clamping and zoom-around-cursor pan math
- Screen-to-diagram mapping for drag-and-drop
- Grid snapping and bounding boxes for fit-to-view and export

All functions are pure closed-form arithmetic.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from .registry import EdgePosition

# Zoom limits
MIN_ZOOM = 0.25
MAX_ZOOM = 3

# The diagram lives on a large virtual canvas centered at (4000, 4000)
CANVAS_OFFSET = 4000

# Default device box; drops are centered on the cursor using half of it
DEFAULT_DEVICE_WIDTH = 120
DEFAULT_DEVICE_HEIGHT = 80

GRID_SIZE = 20


@dataclass
class Point:
    """A point in diagram coordinates."""
    x: float
    y: float


@dataclass
class PanOffset:
    """Screen-space pan of the canvas."""
    pan_x: float
    pan_y: float


@dataclass
class BoundingBox:
    """Axis-aligned box covering a set of shapes."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def is_empty(self) -> bool:
        """True for the degenerate box returned when nothing was measured."""
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def _fmt(value: float) -> str:
    """Print a number the way a browser would (no trailing '.0')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def default_device_dimensions(device: Any) -> tuple[float, float]:
    return (DEFAULT_DEVICE_WIDTH, DEFAULT_DEVICE_HEIGHT)


# --- Connections ---

def calculate_connection_point(
    device: Optional[Any],
    position: Optional[str],
    width: float,
    height: float
) -> Point:
    """
    Get the anchor point on one edge of a device box.

    Args:
        device: Anything with `x`/`y` (top-left corner), or None
        position: "top", "bottom", "left" or "right"; anything else means center
        width: Box width
        height: Box height

    Returns:
        Midpoint of the named edge; the origin when device is None
    """
    if device is None:
        return Point(0, 0)

    center_x = device.x + width / 2
    center_y = device.y + height / 2

    if position == EdgePosition.TOP.value:
        return Point(center_x, device.y)
    if position == EdgePosition.BOTTOM.value:
        return Point(center_x, device.y + height)
    if position == EdgePosition.LEFT.value:
        return Point(device.x, center_y)
    if position == EdgePosition.RIGHT.value:
        return Point(device.x + width, center_y)
    return Point(center_x, center_y)


def generate_connection_path(start: Point, start_pos: Optional[str], end: Point) -> str:
    """
    Build an SVG cubic Bezier path between two anchor points.

    Lines leaving a top/bottom edge bend vertically (control points at the
    vertical midpoint); all others bend horizontally.
    """
    mid_x = (start.x + end.x) / 2
    mid_y = (start.y + end.y) / 2

    if start_pos in (EdgePosition.TOP.value, EdgePosition.BOTTOM.value):
        c1 = (start.x, mid_y)
        c2 = (end.x, mid_y)
    else:
        c1 = (mid_x, start.y)
        c2 = (mid_x, end.y)

    return (
        f"M{_fmt(start.x)},{_fmt(start.y)} "
        f"C{_fmt(c1[0])},{_fmt(c1[1])} "
        f"{_fmt(c2[0])},{_fmt(c2[1])} "
        f"{_fmt(end.x)},{_fmt(end.y)}"
    )


def get_nearest_edge(rel_x: float, rel_y: float, width: float, height: float) -> str:
    """
    Name the box edge closest to a point given relative to the top-left corner.

    Ties resolve in the order top, bottom, left, right.
    """
    distances = (
        (EdgePosition.TOP.value, rel_y),
        (EdgePosition.BOTTOM.value, height - rel_y),
        (EdgePosition.LEFT.value, rel_x),
        (EdgePosition.RIGHT.value, width - rel_x),
    )
    # min() keeps the first of equal items
    return min(distances, key=lambda item: item[1])[0]


# --- Zoom & pan ---

def clamp_zoom(zoom: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


def calculate_zoom_pan(
    old_zoom: float,
    new_zoom: float,
    mouse_x: float,
    mouse_y: float,
    pan_x: float,
    pan_y: float
) -> PanOffset:
    """Recompute the pan so the diagram point under the cursor stays put."""
    ratio = new_zoom / old_zoom
    return PanOffset(
        pan_x=mouse_x - (mouse_x - pan_x) * ratio,
        pan_y=mouse_y - (mouse_y - pan_y) * ratio,
    )


def calculate_drop_position(
    client_x: float,
    client_y: float,
    rect_left: float,
    rect_top: float,
    pan_x: float,
    pan_y: float,
    zoom: float
) -> Point:
    """Map a screen drop point to the top-left of a device centered under it."""
    return Point(
        x=(client_x - rect_left - pan_x) / zoom + CANVAS_OFFSET - DEFAULT_DEVICE_WIDTH / 2,
        y=(client_y - rect_top - pan_y) / zoom + CANVAS_OFFSET - DEFAULT_DEVICE_HEIGHT / 2,
    )


# --- Grid & bounds ---

def snap_to_grid_value(value: float, snap_enabled: bool = True, grid_size: int = GRID_SIZE) -> float:
    """
    Snap a coordinate to the grid.

    Halves round toward positive infinity (25 -> 20, 30 -> 40, -30 -> -20),
    matching how the browser editor snaps.
    """
    if not snap_enabled:
        return value
    return math.floor(value / grid_size + 0.5) * grid_size


def calculate_bounding_box(
    devices: Iterable[Any],
    zones: Optional[Iterable[Any]] = None,
    dimension_lookup: Callable[[Any], Union[tuple[float, float], Mapping[str, float]]] = default_device_dimensions
) -> BoundingBox:
    """
    Compute the box covering every device and zone.

    Args:
        devices: Objects with `x`/`y`
        zones: Objects with `x`/`y`/`width`/`height`, or None
        dimension_lookup: Returns a device's size, either as a
            (width, height) tuple or as a {"width", "height"} mapping

    Returns:
        The covering box; with no input, the degenerate
        (inf, inf, -inf, -inf) box, so callers must check `is_empty`
    """
    box = BoundingBox(math.inf, math.inf, -math.inf, -math.inf)

    for device in devices:
        dims = dimension_lookup(device)
        if isinstance(dims, Mapping):
            width, height = dims["width"], dims["height"]
        else:
            width, height = dims
        box.min_x = min(box.min_x, device.x)
        box.min_y = min(box.min_y, device.y)
        box.max_x = max(box.max_x, device.x + width)
        box.max_y = max(box.max_y, device.y + height)

    for zone in zones or ():
        box.min_x = min(box.min_x, zone.x)
        box.min_y = min(box.min_y, zone.y)
        box.max_x = max(box.max_x, zone.x + zone.width)
        box.max_y = max(box.max_y, zone.y + zone.height)

    return box
