# FILE: ./ipsetgen/addressing.py
from __future__ import annotations

import ipaddress
import re
from typing import Tuple

from .errors import CidrParseError
from .models import IPModel, NetworkModel

# ASCII digits only; int() also takes "2_4", " 24" and non-ASCII digits
_PREFIX_RE = re.compile(r"[+-]?[0-9]+")


def cidr_parts(cidr: str) -> Tuple[str, int]:
    # "192.168.24.0/24" -> ("192.168.24.0", 24); the address part is not validated
    base, sep, suffix = cidr.rpartition("/")
    if not sep:
        base = cidr
    if not _PREFIX_RE.fullmatch(suffix):
        raise CidrParseError(cidr)
    return base, int(suffix)


def is_ipv6(addr: str) -> bool:
    try:
        ip = ipaddress.ip_address(addr)
    except ValueError:
        return False
    if ip.version != 6:
        return False
    # ::ffff:a.b.c.d is an IPv4 address
    return ip.ipv4_mapped is None


def ip_uri(addr: str) -> str:
    if is_ipv6(addr):
        return f"[{addr}]"
    return addr


def format_ip(addr: str, network: NetworkModel) -> IPModel:
    return IPModel(
        ip_addr=addr,
        ip_addr_uri=ip_uri(addr),
        ip_addr_subnet=f"{addr}/{network.cidr_suffix}",
        subnet=network.cidr,
    )
