# FILE: ./ipsetgen/macs.py
from __future__ import annotations

from typing import Dict, Iterable

from .models import MACReservationSet


def ovn_static_bridge_mappings(
    hostname: str, mac_list: Iterable[MACReservationSet]
) -> Dict[str, str]:
    """
    Collect the per-network MACs reserved for `hostname`.
    Sources are folded in order, so a later source wins for the same network.
    """
    mappings: Dict[str, str] = {}
    for mac_set in mac_list:
        node_macs = mac_set.reservations.get(hostname)
        if not node_macs:
            continue
        for net, mac in node_macs.items():
            mappings[net] = mac
    return mappings
