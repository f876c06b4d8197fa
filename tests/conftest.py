from __future__ import annotations

import pytest

from netmapper.config import get_settings
from netmapper.devices import create_device_data
from netmapper.models import DeviceBase, NetworkState
from netmapper.state import create_initial_state


@pytest.fixture
def state() -> NetworkState:
    return create_initial_state()


@pytest.fixture
def three_devices(state: NetworkState) -> tuple[DeviceBase, DeviceBase, DeviceBase]:
    d1 = create_device_data(state, "router", 0, 0)
    d2 = create_device_data(state, "switch", 200, 0)
    d3 = create_device_data(state, "desktop", 400, 0)
    return d1, d2, d3


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("GRID_SIZE", "SNAP_TO_GRID", "CSV_GRID_COLS", "CSV_START_X", "CSV_START_Y", "LOG_LEVEL"):
        monkeypatch.delenv(f"NETMAPPER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
