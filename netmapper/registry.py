"""
Static catalogs for network map entities.

These tables are the single source of truth for:
- Device types (display name and icon)
- Zone types (display name, icon and outline color)
- Manufacturer suggestions per device type (input hints only)
- Device statuses, attachment edges and connection media

Everything here is read-only and shared process-wide.
"""

from enum import Enum
from types import MappingProxyType


class DeviceStatus(str, Enum):
    """Lifecycle status of a device."""
    ONLINE = "online"
    OFFLINE = "offline"
    WARNING = "warning"
    RETIRED = "retired"
    DECOMMISSIONED = "decommissioned"


class EdgePosition(str, Enum):
    """Edge of a device box that a connection attaches to."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class ConnectionMedium(str, Enum):
    """Physical medium of a connection."""
    WIRED = "wired"
    WIRELESS = "wireless"


DEVICE_TYPES = MappingProxyType({
    "desktop": MappingProxyType({"name": "Desktop", "icon": "🖥️"}),
    "laptop": MappingProxyType({"name": "Laptop", "icon": "💻"}),
    "cellphone": MappingProxyType({"name": "Cell Phone", "icon": "📱"}),
    "tablet": MappingProxyType({"name": "Tablet", "icon": "📲"}),
    "otherendpoint": MappingProxyType({"name": "Other Endpoint", "icon": "❓"}),
    "server": MappingProxyType({"name": "Server", "icon": "🖥️"}),
    "nas": MappingProxyType({"name": "NAS", "icon": "💾"}),
    "router": MappingProxyType({"name": "Router", "icon": "📡"}),
    "switch": MappingProxyType({"name": "Switch", "icon": "🔀"}),
    "firewall": MappingProxyType({"name": "Firewall", "icon": "🛡️"}),
    "ap": MappingProxyType({"name": "Access Point", "icon": "📶"}),
    "vmhost": MappingProxyType({"name": "VM Host", "icon": "🖥️🖥️"}),
    "vm": MappingProxyType({"name": "VM", "icon": "🖥️"}),
    "storage": MappingProxyType({"name": "Storage", "icon": "📦"}),
    "printer": MappingProxyType({"name": "Printer", "icon": "🖨️"}),
    "iot": MappingProxyType({"name": "IoT", "icon": "🌐"}),
    "phone": MappingProxyType({"name": "Desk Phone", "icon": "☎️"}),
    "camera": MappingProxyType({"name": "Security Camera", "icon": "📹"}),
})

ZONE_TYPES = MappingProxyType({
    "cloud": MappingProxyType({"name": "Cloud", "icon": "☁️", "color": "#3b82f6"}),
    "onprem": MappingProxyType({"name": "On-Prem", "icon": "🏢", "color": "#8b5cf6"}),
    "mdf": MappingProxyType({"name": "MDF", "icon": "", "color": "#22c55e"}),
    "idf": MappingProxyType({"name": "IDF", "icon": "", "color": "#f97316"}),
    "ups": MappingProxyType({"name": "UPS", "icon": "🔋", "color": "#eab308"}),
})

MANUFACTURERS = MappingProxyType({
    "desktop": ("Dell", "HP", "Lenovo", "Apple", "Asus", "Acer", "Microsoft",
                "Intel NUC", "Custom Build", "Other"),
    "laptop": ("Dell", "HP", "Lenovo", "Apple", "Asus", "Acer", "Microsoft",
               "Samsung", "MSI", "Razer", "Framework", "Other"),
    "cellphone": ("Apple", "Samsung", "Google", "OnePlus", "Motorola", "LG",
                  "Xiaomi", "Huawei", "Sony", "Nokia", "Other"),
    "tablet": ("Apple", "Samsung", "Microsoft", "Lenovo", "Amazon", "Google",
               "Huawei", "Asus", "Other"),
    "printer": ("HP", "Canon", "Epson", "Brother", "Xerox", "Lexmark", "Ricoh",
                "Kyocera", "Dell", "Samsung", "Konica Minolta", "Other"),
    "otherendpoint": ("Generic", "Custom", "Other"),
    "server": ("Dell", "HP/HPE", "Lenovo", "Supermicro", "Cisco", "IBM",
               "Fujitsu", "Intel", "Custom Build", "Other"),
    "vm": ("VMware", "Hyper-V", "Proxmox", "KVM", "VirtualBox", "Xen", "Other"),
})

# Types accepted by CSV import (standalone VMs are only created by hand)
CSV_DEVICE_TYPES = (
    "router", "firewall", "switch", "ap", "server", "vmhost", "nas",
    "desktop", "laptop", "cellphone", "tablet", "printer", "phone",
    "camera", "iot", "otherendpoint", "storage",
)

VALID_STATUSES = tuple(s.value for s in DeviceStatus)


def device_type_name(device_type: str, default: str = "Device") -> str:
    """Display name for a device type, or `default` for unknown types."""
    cfg = DEVICE_TYPES.get(device_type)
    return cfg["name"] if cfg else default


def manufacturer_suggestions(device_type: str) -> tuple[str, ...]:
    """Manufacturer hints for a device type (empty when there are none)."""
    return MANUFACTURERS.get(device_type, ())
