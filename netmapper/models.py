"""
Core data models for network maps.

These models define the canonical schema for a network map:
- Devices, as a tagged union on `type` (router, switch, firewall, access
  point, VM host, and plain endpoints)
- Zones, as a tagged union on `type` (cloud, on-prem, MDF, IDF, UPS)
- Connections between two devices (undirected for equality)
- VLANs, SSIDs and the VMs nested inside a VM host
- NetworkState, the single mutable aggregate for an editing session

Field Naming Convention:
- Python attributes are snake_case
- JSON serialization outputs the camelCase keys the browser tool writes
  (`fromPos`, `assignedVlans`, `panX`, ...); both spellings are accepted
  on input
- Connections use `from`/`to` on the wire (`from_id`/`to_id` in Python,
  since `from` is a Python keyword)
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from .registry import ConnectionMedium, DeviceStatus


class WireModel(BaseModel):
    """Base for entities that travel in exported JSON.

    Unknown keys are kept as extra attributes so ad hoc properties set by
    the editor survive a round trip.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_json_dict(self) -> dict:
        """Convert to a JSON-serializable dict with wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def set_property(self, key: str, value: Any) -> None:
        """Set a field by Python or wire name; unknown keys become extras."""
        fields = type(self).model_fields
        if key not in fields:
            for name, info in fields.items():
                if info.alias == key:
                    key = name
                    break
        setattr(self, key, value)


# --- Nested records ---

class VirtualMachine(WireModel):
    """A VM running on a VM host, addressed by its index in `vms`."""
    name: str
    status: str = DeviceStatus.ONLINE.value


class Vlan(WireModel):
    """A VLAN definition. `id` is unique within a state."""
    id: int
    name: str
    subnet: str
    gateway: str = ""


class Ssid(WireModel):
    """A wireless network. `name` is unique within a state."""
    name: str
    security: str = "WPA2-Personal"
    vlan: Union[int, str] = ""


# --- Devices ---

class DeviceBase(WireModel):
    """Fields shared by every device variant."""
    id: str
    type: str
    name: str
    ip: str = ""
    mac: str = ""
    status: str = DeviceStatus.ONLINE.value
    vlan: Union[int, str] = ""
    notes: str = ""
    manufacturer: str = ""
    os: str = ""
    # Set by CSV import
    model: Optional[str] = None
    serial: Optional[str] = None
    x: float = 0
    y: float = 0


class RouterDevice(DeviceBase):
    """Edge router with WAN link details."""
    type: Literal["router"] = "router"
    connection_type: Optional[str] = None
    download_speed: Optional[Union[int, str]] = None
    upload_speed: Optional[Union[int, str]] = None


class SwitchDevice(DeviceBase):
    """Switch with port count, PoE flag and the VLAN ids it carries."""
    type: Literal["switch"] = "switch"
    ports: Optional[Union[int, str]] = None
    poe: Optional[bool] = None
    assigned_vlans: Optional[list[Union[int, str]]] = None


class FirewallDevice(DeviceBase):
    type: Literal["firewall"] = "firewall"
    ports: Optional[Union[int, str]] = None


class AccessPointDevice(DeviceBase):
    """Access point broadcasting a subset of the state's SSIDs."""
    type: Literal["ap"] = "ap"
    ssids: Optional[list[str]] = None


class VMHostDevice(DeviceBase):
    """Hypervisor host. `vms` is always present on this variant only."""
    type: Literal["vmhost"] = "vmhost"
    vms: list[VirtualMachine] = Field(default_factory=list)

    @field_validator("vms", mode="before")
    @classmethod
    def null_vms_to_empty(cls, value: Any) -> Any:
        """Documents saved after a type change can carry `"vms": null`."""
        return [] if value is None else value


class EndpointDevice(DeviceBase):
    """Any device type without type-specific fields."""
    type: Literal[
        "desktop", "laptop", "cellphone", "tablet", "otherendpoint",
        "server", "nas", "vm", "storage", "printer", "iot", "phone", "camera",
    ]


Device = Annotated[
    Union[
        RouterDevice,
        SwitchDevice,
        FirewallDevice,
        AccessPointDevice,
        VMHostDevice,
        EndpointDevice,
    ],
    Field(discriminator="type"),
]

DEVICE_CLASSES: dict[str, type[DeviceBase]] = {
    "router": RouterDevice,
    "switch": SwitchDevice,
    "firewall": FirewallDevice,
    "ap": AccessPointDevice,
    "vmhost": VMHostDevice,
}


def device_class_for(device_type: str) -> type[DeviceBase]:
    """Get the model class for a device type."""
    return DEVICE_CLASSES.get(device_type, EndpointDevice)


# --- Zones ---

class ZoneBase(WireModel):
    """Fields shared by every zone variant."""
    id: str
    type: str
    name: str
    x: float = 0
    y: float = 0
    width: float = 200
    height: float = 150
    notes: str = ""


class CloudZone(ZoneBase):
    type: Literal["cloud"] = "cloud"
    provider: str = ""
    region: str = ""


class OnPremZone(ZoneBase):
    type: Literal["onprem"] = "onprem"
    location: str = ""


class MdfZone(ZoneBase):
    """Main distribution frame."""
    type: Literal["mdf"] = "mdf"
    location: str = ""


class IdfZone(ZoneBase):
    """Intermediate distribution frame, uplinked to an MDF."""
    type: Literal["idf"] = "idf"
    location: str = ""
    connected_mdf: str = Field(default="", alias="connectedMDF")


class UpsZone(ZoneBase):
    """Battery backup covering the devices drawn inside it."""
    type: Literal["ups"] = "ups"
    manufacturer: str = ""
    model: str = ""
    capacity: str = ""
    runtime: str = ""
    ip: str = ""


Zone = Annotated[
    Union[CloudZone, OnPremZone, MdfZone, IdfZone, UpsZone],
    Field(discriminator="type"),
]

ZONE_CLASSES: dict[str, type[ZoneBase]] = {
    "cloud": CloudZone,
    "onprem": OnPremZone,
    "mdf": MdfZone,
    "idf": IdfZone,
    "ups": UpsZone,
}


# --- Connections ---

class Connection(WireModel):
    """
    A link between two devices.

    Uses `from_id`/`to_id` in Python and `from`/`to` on the wire. The pair
    is unordered: (a, b) and (b, a) are the same connection.
    """
    id: str
    from_id: str = Field(alias="from")
    from_pos: Optional[str] = None  # "top", "bottom", "left", "right"
    to_id: str = Field(alias="to")
    to_pos: Optional[str] = None
    type: str = ConnectionMedium.WIRED.value

    def touches(self, device_id: str) -> bool:
        """Check if either end is attached to a device."""
        return self.from_id == device_id or self.to_id == device_id

    def joins(self, a: str, b: str) -> bool:
        """Check if this connection links the unordered pair {a, b}."""
        return (self.from_id == a and self.to_id == b) or (
            self.from_id == b and self.to_id == a
        )

    def other_end(self, device_id: str) -> str:
        """Get the id at the opposite end from `device_id`."""
        return self.to_id if self.from_id == device_id else self.from_id


# --- State ---

def default_vlans() -> list[Vlan]:
    return [
        Vlan(id=1, name="Default", subnet="192.168.1.0/24", gateway="192.168.1.1"),
        Vlan(id=10, name="Management", subnet="192.168.10.0/24", gateway="192.168.10.1"),
        Vlan(id=20, name="Servers", subnet="192.168.20.0/24", gateway="192.168.20.1"),
    ]


def default_config() -> dict[str, Any]:
    return {
        "dnsProvider": "DNS Filter",
        "dnsServer": "",
        "dnsPrimary": "8.8.8.8",
        "dnsSecondary": "8.8.4.4",
        "dhcpType": "Router",
        "dhcpDevice": "",
    }


class NetworkState(BaseModel):
    """
    The complete editing session.

    Selections are stored as ids and re-resolved on access, so deleting an
    entity can never leave a dangling reference behind.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    devices: list[Device] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    zones: list[Zone] = Field(default_factory=list)
    vlans: list[Vlan] = Field(default_factory=default_vlans)
    ssids: list[Ssid] = Field(default_factory=list)
    config: dict[str, Any] = Field(default_factory=default_config)
    selected: Optional[str] = None
    selected_zone: Optional[str] = None
    conn_type: str = ConnectionMedium.WIRED.value
    zoom: float = 1
    pan_x: float = 0
    pan_y: float = 0
    counter: int = 0
    zone_counter: int = 0

    def get_device(self, device_id: Optional[str]) -> Optional[DeviceBase]:
        """Get a device by ID (O(n) linear scan)."""
        for device in self.devices:
            if device.id == device_id:
                return device
        return None

    def get_zone(self, zone_id: Optional[str]) -> Optional[ZoneBase]:
        """Get a zone by ID (O(n) linear scan)."""
        for zone in self.zones:
            if zone.id == zone_id:
                return zone
        return None

    def get_connection(self, connection_id: str) -> Optional[Connection]:
        """Get a connection by ID (O(n) linear scan)."""
        for connection in self.connections:
            if connection.id == connection_id:
                return connection
        return None


DEVICE_ADAPTER: TypeAdapter = TypeAdapter(Device)
ZONE_ADAPTER: TypeAdapter = TypeAdapter(Zone)
