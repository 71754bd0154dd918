# FILE: ./ipsetgen/generator.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from .addressing import cidr_parts, format_ip
from .errors import CidrParseError
from .macs import ovn_static_bridge_mappings
from .models import (
    MACReservationSet,
    NetworkModel,
    NetworkSpec,
    NodeModel,
    RoleModel,
    RoleReservation,
)
from .names import canonical_net_name, get_net_name

logger = logging.getLogger(__name__)

# TODO: take the MTU from the network spec once it carries one
DEFAULT_MTU = 1500


class NetworkRegistry:
    """Canonical network key -> NetworkModel. First registration wins."""

    def __init__(self) -> None:
        self.networks: Dict[str, NetworkModel] = {}

    def register(
        self,
        raw_name: str,
        cidr: str,
        mtu: int,
        allocation_start: str,
        allocation_end: str,
        gateway: str,
        vlan: int,
    ) -> NetworkModel:
        key = canonical_net_name(raw_name)
        existing = self.networks.get(key)
        if existing is not None:
            return existing

        net_addr, suffix = cidr_parts(cidr)
        network = NetworkModel(
            name=get_net_name(key),
            name_lower=key,
            cidr=cidr,
            net_addr=net_addr,
            cidr_suffix=suffix,
            mtu=mtu,
            allocation_start=allocation_start,
            allocation_end=allocation_end,
            gateway=gateway,
            vlan=vlan,
        )
        self.networks[key] = network
        logger.debug("registered network %s (%s)", key, cidr)
        return network


def _ensure_role(roles: Dict[str, RoleModel], role_name: str) -> RoleModel:
    role = roles.get(role_name)
    if role is None:
        role = RoleModel(name=role_name, name_lower=role_name.lower())
        roles[role_name] = role
        logger.debug("created role %s", role_name)
    return role


def _assemble_role(
    role: RoleModel,
    network: NetworkModel,
    group: RoleReservation,
    mac_list: List[MACReservationSet],
) -> None:
    key = network.name_lower
    role.networks.setdefault(key, network)

    # Index only counts live reservations, and only within this network pass.
    # A node keeps the index from whichever pass created it first.
    index = 0
    for res in group.reservations:
        if res.deleted:
            continue

        node = role.nodes.get(res.hostname)
        if node is None:
            node = NodeModel(
                index=index,
                hostname=res.hostname,
                vip=res.vip,
                ovn_static_bridge_mappings=ovn_static_bridge_mappings(res.hostname, mac_list),
            )
            role.nodes[res.hostname] = node
            logger.debug("role %s: node %s index %d", role.name, res.hostname, index)

        if key not in node.ip_addr:
            node.ip_addr[key] = format_ip(res.ip, network)

        index += 1


def build_config_params(
    net_list: Iterable[NetworkSpec],
    mac_list: Iterable[MACReservationSet],
) -> Dict[str, Any]:
    """
    Build the template parameters for the IP-set config map:

      RolesMap:    role name -> RoleModel (networks + hostname -> NodeModel)
      NetworksMap: canonical network key -> NetworkModel

    Networks are processed in input order, role groups in sorted role-name
    order. On a malformed CIDR a CidrParseError is raised carrying the
    partially built params in `partial`.
    """
    registry = NetworkRegistry()
    roles: Dict[str, RoleModel] = {}
    params: Dict[str, Any] = {
        "RolesMap": roles,
        "NetworksMap": registry.networks,
    }
    macs = list(mac_list)

    for osnet in net_list:
        try:
            network = registry.register(
                osnet.name,
                osnet.cidr,
                DEFAULT_MTU,
                osnet.allocation_start,
                osnet.allocation_end,
                osnet.gateway,
                osnet.vlan,
            )
        except CidrParseError as e:
            e.partial = params
            raise

        for role_name in sorted(osnet.role_reservations):
            group = osnet.role_reservations[role_name]
            if not group.add_to_predictable_ips:
                logger.debug("network %s: role %s not in predictable IPs, skipped", network.name_lower, role_name)
                continue

            role = _ensure_role(roles, role_name)
            _assemble_role(role, network, group, macs)

    return params
