"""
netmapper - Network topology map core.

Entity models, editing operations, geometry and CSV/JSON interchange for a
network diagramming tool. The rendering layer calls into these functions
and owns the NetworkState for the length of an editing session.
"""

from .registry import (
    # Catalogs
    DEVICE_TYPES,
    ZONE_TYPES,
    MANUFACTURERS,
    CSV_DEVICE_TYPES,
    VALID_STATUSES,
    # Enums
    DeviceStatus,
    EdgePosition,
    ConnectionMedium,
)

from .models import (
    Device,
    DeviceBase,
    RouterDevice,
    SwitchDevice,
    FirewallDevice,
    AccessPointDevice,
    VMHostDevice,
    EndpointDevice,
    Zone,
    ZoneBase,
    CloudZone,
    OnPremZone,
    MdfZone,
    IdfZone,
    UpsZone,
    Connection,
    Vlan,
    Ssid,
    VirtualMachine,
    NetworkState,
)

from .state import (
    create_initial_state,
    clear_all_data,
    select_device,
    select_zone,
    selected_device,
    selected_zone,
    format_count,
)
from .devices import (
    create_device_data,
    delete_device_data,
    update_device_property,
    set_device_status,
    toggle_switch_vlan,
    toggle_ap_ssid,
    add_vm,
    remove_vm,
)
from .zones import create_zone_data, delete_zone_data, update_zone_property
from .connections import (
    add_connection,
    delete_connection,
    set_connection_type,
    get_device_connections,
    get_connected_devices,
)
from .networks import add_vlan, delete_vlan, get_vlan_name, add_ssid, delete_ssid
from .geometry import (
    Point,
    PanOffset,
    BoundingBox,
    calculate_connection_point,
    generate_connection_path,
    get_nearest_edge,
    clamp_zoom,
    calculate_zoom_pan,
    calculate_drop_position,
    snap_to_grid_value,
    calculate_bounding_box,
)
from .csv_io import (
    parse_csv_line,
    parse_csv_content,
    csv_row_to_device,
    import_devices_from_csv,
    escape_csv_cell,
    export_devices_to_csv,
)
from .json_io import (
    export_state_to_json,
    import_state_from_json,
    dumps_state,
    loads_state,
    save_state,
    load_state,
)
from .validation import validate_state, validation_summary, ValidationIssue, IssueSeverity
from .analysis import summarize_state, find_connected_components

__all__ = [
    # Registry
    "DEVICE_TYPES",
    "ZONE_TYPES",
    "MANUFACTURERS",
    "CSV_DEVICE_TYPES",
    "VALID_STATUSES",
    "DeviceStatus",
    "EdgePosition",
    "ConnectionMedium",
    # Models
    "Device",
    "DeviceBase",
    "RouterDevice",
    "SwitchDevice",
    "FirewallDevice",
    "AccessPointDevice",
    "VMHostDevice",
    "EndpointDevice",
    "Zone",
    "ZoneBase",
    "CloudZone",
    "OnPremZone",
    "MdfZone",
    "IdfZone",
    "UpsZone",
    "Connection",
    "Vlan",
    "Ssid",
    "VirtualMachine",
    "NetworkState",
    # State
    "create_initial_state",
    "clear_all_data",
    "select_device",
    "select_zone",
    "selected_device",
    "selected_zone",
    "format_count",
    # Devices
    "create_device_data",
    "delete_device_data",
    "update_device_property",
    "set_device_status",
    "toggle_switch_vlan",
    "toggle_ap_ssid",
    "add_vm",
    "remove_vm",
    # Zones
    "create_zone_data",
    "delete_zone_data",
    "update_zone_property",
    # Connections
    "add_connection",
    "delete_connection",
    "set_connection_type",
    "get_device_connections",
    "get_connected_devices",
    # VLANs / SSIDs
    "add_vlan",
    "delete_vlan",
    "get_vlan_name",
    "add_ssid",
    "delete_ssid",
    # Geometry
    "Point",
    "PanOffset",
    "BoundingBox",
    "calculate_connection_point",
    "generate_connection_path",
    "get_nearest_edge",
    "clamp_zoom",
    "calculate_zoom_pan",
    "calculate_drop_position",
    "snap_to_grid_value",
    "calculate_bounding_box",
    # CSV
    "parse_csv_line",
    "parse_csv_content",
    "csv_row_to_device",
    "import_devices_from_csv",
    "escape_csv_cell",
    "export_devices_to_csv",
    # JSON
    "export_state_to_json",
    "import_state_from_json",
    "dumps_state",
    "loads_state",
    "save_state",
    "load_state",
    # Validation & analysis
    "validate_state",
    "validation_summary",
    "ValidationIssue",
    "IssueSeverity",
    "summarize_state",
    "find_connected_components",
]
