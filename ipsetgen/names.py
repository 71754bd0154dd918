# FILE: ./ipsetgen/names.py
from __future__ import annotations

import logging
from typing import Dict

logger = logging.getLogger(__name__)

INTERNAL_API_NAME = "internal_api"
STORAGE_MGMT_NAME = "storage_mgmt"

# Object names can't contain '_', so these networks arrive without it.
_CANONICAL_NAMES: Dict[str, str] = {
    "internalapi": INTERNAL_API_NAME,
    "storagemgmt": STORAGE_MGMT_NAME,
}

NETWORK_DISPLAY_NAMES: Dict[str, str] = {
    "ctlplane": "Control",
    "internal_api": "InternalApi",
    "external": "External",
    "storage": "Storage",
    "storage_mgmt": "StorageMgmt",
    "tenant": "Tenant",
    "management": "Management",
}


def canonical_net_name(raw: str) -> str:
    return _CANONICAL_NAMES.get(raw, raw)


def get_net_name(key: str) -> str:
    """
    Display name for a canonical network key.
    Unknown keys give "" rather than an error; templates rely on that.
    """
    name = NETWORK_DISPLAY_NAMES.get(key)
    if name is None:
        logger.debug("no display name for network %r", key)
        return ""
    return name


def get_net_name_lower(key: str) -> str:
    return get_net_name(key).lower()
