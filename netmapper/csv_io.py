"""
CSV interchange for device inventories.

Import:
- `parse_csv_line` tokenizes one line (double-quoted fields, `""` escapes)
- `parse_csv_content` turns a whole file into row dicts keyed by the
  normalized header ("IP Address" -> "ipaddress"), keeping only rows with a
  known device type
- `csv_row_to_device` maps a row to a device placed on a layout grid

Export:
- `escape_csv_cell` quotes a cell only when it has to
- `export_devices_to_csv` writes the fixed 16-column inventory sheet

Fields are trimmed as a whole token, quoted content included, and comment
lines are dropped before tokenizing.
"""

import logging
import re
from typing import Any, Iterable, Optional

from .config import get_settings
from .geometry import GRID_SIZE, snap_to_grid_value
from .models import DeviceBase, NetworkState, device_class_for
from .registry import CSV_DEVICE_TYPES, VALID_STATUSES, DeviceStatus, device_type_name
from .state import now_millis

logger = logging.getLogger(__name__)

# Distance between devices laid out by an import
CSV_GRID_SPACING = 160

CSV_EXPORT_HEADERS = [
    "Type",
    "Name",
    "IP Address",
    "MAC Address",
    "Manufacturer",
    "Model",
    "OS",
    "Serial Number",
    "Ports",
    "PoE",
    "Connection Type",
    "Download Mbps",
    "Upload Mbps",
    "VLAN ID",
    "Status",
    "Notes",
]

_WHITESPACE = re.compile(r"\s+")


# --- Import ---

def parse_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into trimmed fields.

    Commas inside double quotes do not split; `""` inside quotes is a
    literal quote.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def normalize_header(header: str) -> str:
    """Lowercase a header cell and drop all whitespace ("IP Address" -> "ipaddress")."""
    return _WHITESPACE.sub("", header.lower())


def parse_csv_content(content: str) -> list[dict[str, str]]:
    """
    Parse a device CSV file into row dicts.

    Blank lines and lines starting with `#` are ignored. The first remaining
    line is the header. Rows whose `type` is not an importable device type
    are dropped.

    Args:
        content: Full file text, newline separated

    Returns:
        One dict per accepted row, keyed by normalized header
    """
    # Excel writes a byte order mark at the start of UTF-8 files
    content = content.removeprefix("\ufeff")
    lines = [
        line for line in content.split("\n")
        if line.strip() and not line.strip().startswith("#")
    ]
    if len(lines) < 2:
        return []

    headers = [normalize_header(h) for h in parse_csv_line(lines[0])]
    rows: list[dict[str, str]] = []
    dropped = 0

    for line in lines[1:]:
        values = parse_csv_line(line)
        row = {
            header: (values[index] if index < len(values) else "") or ""
            for index, header in enumerate(headers)
        }

        if row.get("type") and row["type"].lower() in CSV_DEVICE_TYPES:
            rows.append(row)
        else:
            dropped += 1

    if dropped:
        logger.info("Dropped %d CSV rows without a valid device type", dropped)
    return rows


def csv_row_to_device(
    row: dict[str, str],
    index: int,
    counter: int,
    grid_cols: int,
    start_x: float,
    start_y: float,
    snap_enabled: bool,
    grid_size: int = GRID_SIZE
) -> Optional[DeviceBase]:
    """
    Build a device from a parsed CSV row.

    Devices are laid out left to right, `grid_cols` per row, 160 apart.

    Args:
        row: Dict from parse_csv_content
        index: Position of the row in the import (drives layout and id)
        counter: Sequence number used in the default name
        grid_cols: Devices per layout row
        start_x: X of the first device
        start_y: Y of the first device
        snap_enabled: Snap each coordinate to the grid

    Returns:
        The device (not yet added to any state), or None if the row's type
        has no model
    """
    device_type = (row.get("type") or "").lower()
    if device_type not in CSV_DEVICE_TYPES:
        logger.debug("Skipping CSV row with type %r", row.get("type"))
        return None

    col = index % grid_cols
    row_num = index // grid_cols
    status = (row.get("status") or "").lower()

    fields: dict[str, Any] = {
        "id": f"dev{now_millis()}_{index}",
        "type": device_type,
        "name": row.get("name") or f"{device_type_name(device_type)} {counter}",
        "ip": row.get("ipaddress") or "",
        "mac": row.get("macaddress") or "",
        "manufacturer": row.get("manufacturer") or "",
        "os": row.get("os") or "",
        "model": row.get("model") or "",
        "serial": row.get("serialnumber") or "",
        "vlan": row.get("vlanid") or "",
        "status": status if status in VALID_STATUSES else DeviceStatus.ONLINE.value,
        "notes": row.get("notes") or "",
        "x": snap_to_grid_value(start_x + col * CSV_GRID_SPACING, snap_enabled, grid_size),
        "y": snap_to_grid_value(start_y + row_num * CSV_GRID_SPACING, snap_enabled, grid_size),
    }

    if device_type == "router":
        fields["connection_type"] = row.get("connectiontype") or ""
        fields["download_speed"] = row.get("downloadmbps") or ""
        fields["upload_speed"] = row.get("uploadmbps") or ""

    if device_type in ("switch", "firewall"):
        fields["ports"] = row.get("ports") or ""

    if device_type == "switch":
        fields["poe"] = (row.get("poe") or "").lower() in ("yes", "true")
        fields["assigned_vlans"] = []

    return device_class_for(device_type)(**fields)


def import_devices_from_csv(
    state: NetworkState,
    content: str,
    grid_cols: Optional[int] = None,
    start_x: Optional[float] = None,
    start_y: Optional[float] = None,
    snap_enabled: Optional[bool] = None
) -> list[DeviceBase]:
    """
    Parse a CSV file and append one device per accepted row.

    Each device advances `state.counter`. Layout arguments left as None
    come from the settings.

    Returns:
        The devices that were added, in file order
    """
    settings = get_settings()
    grid_cols = grid_cols or settings.csv_grid_cols
    start_x = settings.csv_start_x if start_x is None else start_x
    start_y = settings.csv_start_y if start_y is None else start_y
    snap_enabled = settings.snap_to_grid if snap_enabled is None else snap_enabled

    added: list[DeviceBase] = []
    for index, row in enumerate(parse_csv_content(content)):
        state.counter += 1
        device = csv_row_to_device(
            row, index, state.counter, grid_cols, start_x, start_y,
            snap_enabled, settings.grid_size,
        )
        if device is not None:
            state.devices.append(device)
            added.append(device)

    logger.info("Imported %d devices from CSV", len(added))
    return added


# --- Export ---

def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_csv_cell(cell: Any) -> str:
    """Quote a cell (doubling inner quotes) only if it holds a comma, quote or newline."""
    text = _stringify(cell)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def _cell(device: DeviceBase, attr: str) -> Any:
    return getattr(device, attr, None) or ""


def export_devices_to_csv(devices: Iterable[DeviceBase]) -> str:
    """
    Write the inventory sheet: one header line plus one line per device.

    Missing fields become empty cells; PoE is "yes" or empty.
    """
    lines = [",".join(CSV_EXPORT_HEADERS)]

    for d in devices:
        row = [
            _cell(d, "type"),
            _cell(d, "name"),
            _cell(d, "ip"),
            _cell(d, "mac"),
            _cell(d, "manufacturer"),
            _cell(d, "model"),
            _cell(d, "os"),
            _cell(d, "serial"),
            _cell(d, "ports"),
            "yes" if getattr(d, "poe", None) else "",
            _cell(d, "connection_type"),
            _cell(d, "download_speed"),
            _cell(d, "upload_speed"),
            _cell(d, "vlan"),
            _cell(d, "status"),
            _cell(d, "notes"),
        ]
        lines.append(",".join(escape_csv_cell(c) for c in row))

    return "\n".join(lines) + "\n"
