# ./ipsetgen/parser.py
from __future__ import annotations

from typing import Any, Dict, List

from .errors import InputDocumentError
from .loader import get_items, get_required
from .models import IPReservation, MACReservationSet, NetworkSpec, RoleReservation


def _parse_reservations(role_name: str, raw: Any) -> List[IPReservation]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InputDocumentError(f"Invalid reservations for role {role_name} (expected list)", context=raw)

    out: List[IPReservation] = []
    for r in raw:
        ctx = {"role": role_name, "reservation": r}
        out.append(
            IPReservation(
                hostname=get_required(r, ["hostname"], "reservation hostname", context=ctx),
                ip=get_required(r, ["ip"], "reservation ip", context=ctx),
                vip=bool(r.get("vip", False)),
                deleted=bool(r.get("deleted", False)),
            )
        )
    return out


def parse_net_list(doc: Dict[str, Any]) -> List[NetworkSpec]:
    result: List[NetworkSpec] = []

    for item in get_items(doc, "network list"):
        name = get_required(item, ["metadata", "name"], "network name")
        spec = get_required(item, ["spec"], "network spec", context=item)
        if not isinstance(spec, dict):
            raise InputDocumentError(f"Invalid spec for network {name} (expected object)", context=item)
        status = item.get("status") or {}
        if not isinstance(status, dict):
            raise InputDocumentError(f"Invalid status for network {name} (expected object)", context=item)

        roles: Dict[str, RoleReservation] = {}
        for role_name, rr in (status.get("roleReservations") or {}).items():
            if not isinstance(rr, dict):
                raise InputDocumentError(
                    f"Invalid role reservation at {name}.status.roleReservations.{role_name}",
                    context=rr,
                )
            roles[role_name] = RoleReservation(
                add_to_predictable_ips=bool(rr.get("addToPredictableIPs", False)),
                reservations=_parse_reservations(role_name, rr.get("reservations")),
            )

        try:
            vlan = int(spec.get("vlan", 0) or 0)
        except (TypeError, ValueError):
            raise InputDocumentError(f"Invalid vlan for network {name}", context=item) from None

        result.append(
            NetworkSpec(
                name=name,
                cidr=get_required(spec, ["cidr"], f"cidr of network {name}", context=item),
                allocation_start=spec.get("allocationStart", ""),
                allocation_end=spec.get("allocationEnd", ""),
                gateway=spec.get("gateway", ""),
                vlan=vlan,
                role_reservations=roles,
            )
        )

    return result


def parse_mac_list(doc: Dict[str, Any]) -> List[MACReservationSet]:
    result: List[MACReservationSet] = []

    for item in get_items(doc, "MAC address list"):
        status = item.get("status") or {}
        if not isinstance(status, dict):
            raise InputDocumentError("Invalid MAC address list status (expected object)", context=item)
        reservations: Dict[str, Dict[str, str]] = {}
        for node, node_obj in (status.get("macReservations") or {}).items():
            if not isinstance(node_obj, dict):
                raise InputDocumentError(f"Invalid MAC reservation for node {node}", context=node_obj)
            reservations[node] = dict(node_obj.get("reservations") or {})
        result.append(MACReservationSet(reservations=reservations))

    return result
