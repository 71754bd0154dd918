# FILE: ./ipsetgen/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


# ----------------------
# INPUT
# ----------------------


@dataclass
class IPReservation:
    hostname: str
    ip: str
    vip: bool = False
    deleted: bool = False


@dataclass
class RoleReservation:
    add_to_predictable_ips: bool
    reservations: List[IPReservation] = field(default_factory=list)


@dataclass
class NetworkSpec:
    name: str
    cidr: str
    allocation_start: str = ""
    allocation_end: str = ""
    gateway: str = ""
    vlan: int = 0
    role_reservations: Dict[str, RoleReservation] = field(default_factory=dict)


@dataclass
class MACReservationSet:
    # hostname -> network key -> MAC
    reservations: Dict[str, Dict[str, str]] = field(default_factory=dict)


# ----------------------
# OUTPUT
# ----------------------


@dataclass
class NetworkModel:
    name: str
    name_lower: str
    cidr: str  # e.g. 192.168.24.0/24
    net_addr: str  # e.g. 192.168.24.0
    cidr_suffix: int  # e.g. 24
    mtu: int
    allocation_start: str
    allocation_end: str
    gateway: str
    vlan: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "NameLower": self.name_lower,
            "Cidr": self.cidr,
            "NetAddr": self.net_addr,
            "CidrSuffix": self.cidr_suffix,
            "MTU": self.mtu,
            "AllocationStart": self.allocation_start,
            "AllocationEnd": self.allocation_end,
            "Gateway": self.gateway,
            "Vlan": self.vlan,
        }


@dataclass(frozen=True)
class IPModel:
    # ip_address:     192.168.24.9     (2001:db8:24::9)
    # ip_address_uri: 192.168.24.9     ([2001:db8:24::9])
    # ip_subnet:      192.168.24.9/24  (2001:db8:24::9/64)
    ip_addr: str
    ip_addr_uri: str
    ip_addr_subnet: str
    subnet: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "IPaddr": self.ip_addr,
            "IPAddrURI": self.ip_addr_uri,
            "IPAddrSubnet": self.ip_addr_subnet,
            "Subnet": self.subnet,
        }


@dataclass
class NodeModel:
    index: int
    hostname: str
    vip: bool
    ovn_static_bridge_mappings: Dict[str, str] = field(default_factory=dict)
    ip_addr: Dict[str, IPModel] = field(default_factory=dict)  # network key -> IP

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Index": self.index,
            "Hostname": self.hostname,
            "VIP": self.vip,
            "OVNStaticBridgeMappings": dict(self.ovn_static_bridge_mappings),
            "IPaddr": {k: ip.to_dict() for k, ip in self.ip_addr.items()},
        }


@dataclass
class RoleModel:
    name: str
    name_lower: str
    networks: Dict[str, NetworkModel] = field(default_factory=dict)
    nodes: Dict[str, NodeModel] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "NameLower": self.name_lower,
            "Networks": {k: n.to_dict() for k, n in self.networks.items()},
            "Nodes": {h: n.to_dict() for h, n in self.nodes.items()},
        }


def params_to_dict(params: Dict[str, Any]) -> Dict[str, Any]:
    """Plain-data copy of a build result, suitable for yaml/json dumping."""
    return {
        "RolesMap": {k: r.to_dict() for k, r in params.get("RolesMap", {}).items()},
        "NetworksMap": {k: n.to_dict() for k, n in params.get("NetworksMap", {}).items()},
    }
