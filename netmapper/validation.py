"""
Network map validation - Check a state for structural issues.

The editing operations keep a state consistent on their own; these checks
are for documents loaded from JSON, which are accepted as-is.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import NetworkState


class IssueSeverity(str, Enum):
    """Severity levels for validation issues."""
    ERROR = "error"      # Invalid state, must be fixed
    WARNING = "warning"  # Potential problem, should review
    INFO = "info"        # Informational, may be intentional


@dataclass
class ValidationIssue:
    """A single validation issue found in a network map."""
    severity: IssueSeverity
    message: str
    device_id: str | None = None
    connection_id: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result = {
            "type": self.severity.value,
            "message": self.message
        }
        if self.device_id:
            result["device_id"] = self.device_id
        if self.connection_id:
            result["connection_id"] = self.connection_id
        return result


def validate_state(state: "NetworkState") -> list[ValidationIssue]:
    """
    Validate a network map and return a list of issues.

    Checks for:
    - Empty map - INFO
    - Connections referencing missing devices - ERROR
    - Self-connections - WARNING
    - Duplicate connections (either direction) - WARNING
    - Duplicate VLAN ids / SSID names - ERROR
    - Switch VLANs or AP SSIDs that are not defined - WARNING
    - Unconnected devices - WARNING

    Args:
        state: The state to validate

    Returns:
        List of ValidationIssue objects
    """
    issues: list[ValidationIssue] = []

    if not state.devices:
        issues.append(ValidationIssue(
            severity=IssueSeverity.INFO,
            message="Network map has no devices"
        ))

    device_ids = {d.id for d in state.devices}

    # Connection references
    seen_pairs: set[frozenset[str]] = set()
    connected: set[str] = set()
    for conn in state.connections:
        for end in (conn.from_id, conn.to_id):
            if end not in device_ids:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.ERROR,
                    message=f"Connection references non-existent device: {end}",
                    connection_id=conn.id
                ))
        connected.update((conn.from_id, conn.to_id))

        if conn.from_id == conn.to_id:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message="Self-connection (device linked to itself)",
                connection_id=conn.id,
                device_id=conn.from_id
            ))
            continue

        pair = frozenset((conn.from_id, conn.to_id))
        if pair in seen_pairs:
            issues.append(ValidationIssue(
                severity=IssueSeverity.WARNING,
                message=f"Duplicate connection between {conn.from_id} and {conn.to_id}",
                connection_id=conn.id
            ))
        else:
            seen_pairs.add(pair)

    # Unique keys
    for vlan_id, count in Counter(v.id for v in state.vlans).items():
        if count > 1:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"VLAN id {vlan_id} is defined {count} times"
            ))
    for ssid_name, count in Counter(s.name for s in state.ssids).items():
        if count > 1:
            issues.append(ValidationIssue(
                severity=IssueSeverity.ERROR,
                message=f"SSID {ssid_name!r} is defined {count} times"
            ))

    # Per-device references
    vlan_ids = {v.id for v in state.vlans}
    ssid_names = {s.name for s in state.ssids}
    for device in state.devices:
        for vlan_id in getattr(device, "assigned_vlans", None) or []:
            if vlan_id not in vlan_ids:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Switch carries undefined VLAN {vlan_id}",
                    device_id=device.id
                ))
        for ssid_name in getattr(device, "ssids", None) or []:
            if ssid_name not in ssid_names:
                issues.append(ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Access point broadcasts undefined SSID {ssid_name!r}",
                    device_id=device.id
                ))

    # Orphans
    orphans = [d for d in state.devices if d.id not in connected]
    if orphans and len(state.devices) > 1:
        labels = ", ".join(f"{d.name} ({d.id})" for d in orphans)
        issues.append(ValidationIssue(
            severity=IssueSeverity.WARNING,
            message=f"Unconnected devices: {labels}"
        ))

    return issues


def validation_summary(issues: list[ValidationIssue]) -> dict:
    """
    Create a summary of validation issues.

    Args:
        issues: List of validation issues

    Returns:
        Dictionary with counts by severity
    """
    return {
        "total": len(issues),
        "errors": len([i for i in issues if i.severity == IssueSeverity.ERROR]),
        "warnings": len([i for i in issues if i.severity == IssueSeverity.WARNING]),
        "info": len([i for i in issues if i.severity == IssueSeverity.INFO]),
        "valid": len([i for i in issues if i.severity == IssueSeverity.ERROR]) == 0
    }
