from __future__ import annotations

import math

import pytest

from netmapper.geometry import (
    BoundingBox,
    PanOffset,
    Point,
    calculate_bounding_box,
    calculate_connection_point,
    calculate_drop_position,
    calculate_zoom_pan,
    clamp_zoom,
    generate_connection_path,
    get_nearest_edge,
    snap_to_grid_value,
)
from netmapper.models import CloudZone, EndpointDevice
from netmapper.registry import EdgePosition


def _device(x: float, y: float) -> EndpointDevice:
    return EndpointDevice(id="d", type="desktop", name="PC", x=x, y=y)


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        ("top", Point(160, 200)),
        ("bottom", Point(160, 280)),
        ("left", Point(100, 240)),
        ("right", Point(220, 240)),
        ("middle", Point(160, 240)),
        (None, Point(160, 240)),
    ],
)
def test_connection_point(position, expected) -> None:
    assert calculate_connection_point(_device(100, 200), position, 120, 80) == expected


def test_connection_point_without_device() -> None:
    assert calculate_connection_point(None, "top", 120, 80) == Point(0, 0)


def test_path_bends_vertically_from_top_and_bottom() -> None:
    path = generate_connection_path(Point(100, 100), "bottom", Point(300, 400))
    assert path == "M100,100 C100,250 300,250 300,400"


def test_path_bends_horizontally_from_sides() -> None:
    path = generate_connection_path(Point(100, 100), "right", Point(300, 400))
    assert path == "M100,100 C200,100 200,400 300,400"


def test_path_prints_fractions_unformatted() -> None:
    path = generate_connection_path(Point(0.5, 0), "left", Point(2.0, 3))
    assert path == "M0.5,0 C1.25,0 1.25,3 2,3"


@pytest.mark.parametrize(
    ("rel_x", "rel_y", "expected"),
    [
        (60, 5, "top"),
        (60, 75, "bottom"),
        (5, 40, "left"),
        (115, 40, "right"),
        (40, 40, "top"),     # top == bottom == left: top wins
        (60, 40, "top"),
        (10, 70, "bottom"),  # bottom == left: bottom wins
    ],
)
def test_nearest_edge(rel_x, rel_y, expected) -> None:
    assert get_nearest_edge(rel_x, rel_y, 120, 80) == expected


def test_nearest_edge_left_beats_right_on_tie() -> None:
    assert get_nearest_edge(50, 100, 100, 200) == "left"


def test_clamp_zoom() -> None:
    assert clamp_zoom(5) == 3
    assert clamp_zoom(0.1) == 0.25
    assert clamp_zoom(1) == 1
    assert clamp_zoom(1.75) == 1.75


def test_zoom_pan_keeps_cursor_point_fixed() -> None:
    assert calculate_zoom_pan(1, 2, 100, 100, 0, 0) == PanOffset(-100, -100)
    assert calculate_zoom_pan(1, 1, 300, 200, 40, 50) == PanOffset(40, 50)

    pan = calculate_zoom_pan(2, 1, 100, 100, -100, -100)
    assert (pan.pan_x, pan.pan_y) == (0, 0)


def test_drop_position() -> None:
    assert calculate_drop_position(500, 400, 0, 0, 0, 0, 1) == Point(4440, 4360)
    assert calculate_drop_position(500, 400, 0, 0, 100, 50, 1) == Point(4340, 4310)
    assert calculate_drop_position(500, 400, 0, 0, 0, 0, 2) == Point(4190, 4160)
    assert calculate_drop_position(550, 420, 50, 20, 0, 0, 1) == Point(4440, 4360)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(25, 20), (30, 40), (-25, -20), (-30, -20), (10, 20), (0, 0), (4000, 4000)],
)
def test_snap_to_grid(value, expected) -> None:
    assert snap_to_grid_value(value) == expected


def test_snap_disabled_returns_value() -> None:
    assert snap_to_grid_value(27, snap_enabled=False) == 27


def test_bounding_box_single_device() -> None:
    box = calculate_bounding_box([_device(100, 200)], [], lambda d: (120, 100))
    assert box == BoundingBox(100, 200, 220, 300)
    assert (box.width, box.height) == (120, 100)


def test_bounding_box_includes_zones() -> None:
    zone = CloudZone(id="z", name="Cloud", x=-50, y=0, width=200, height=500)
    box = calculate_bounding_box([_device(100, 200)], [zone], lambda d: (120, 80))
    assert box == BoundingBox(-50, 0, 220, 500)


def test_bounding_box_default_dimensions() -> None:
    box = calculate_bounding_box([_device(0, 0), _device(300, 100)])
    assert box == BoundingBox(0, 0, 420, 180)


def test_bounding_box_empty_is_degenerate() -> None:
    box = calculate_bounding_box([], None)
    assert (box.min_x, box.min_y) == (math.inf, math.inf)
    assert (box.max_x, box.max_y) == (-math.inf, -math.inf)
    assert box.is_empty


def test_bounding_box_accepts_mapping_dimensions() -> None:
    box = calculate_bounding_box([_device(100, 200)], [], lambda d: {"width": 150, "height": 60})
    assert box == BoundingBox(100, 200, 250, 260)


def test_nearest_edge_names_are_edge_positions() -> None:
    edges = {get_nearest_edge(x, y, 120, 80) for x, y in [(60, 1), (60, 79), (1, 40), (119, 40)]}
    assert edges == {p.value for p in EdgePosition}
