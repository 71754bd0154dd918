# FILE: ./ipsetgen/errors.py
from __future__ import annotations

from typing import Any, Dict, Optional


class IPSetError(Exception):
    pass


class CidrParseError(IPSetError, ValueError):
    """Raised when a CIDR string has a non-integer prefix length.

    ``partial`` holds whatever config params were built before the failure.
    It is never complete and must not be rendered.
    """

    def __init__(self, cidr: str, partial: Optional[Dict[str, Any]] = None):
        super().__init__(f"invalid CIDR prefix length in {cidr!r}")
        self.cidr = cidr
        self.partial = partial


class InputDocumentError(IPSetError):
    def __init__(self, msg: str, context: Any = None):
        super().__init__(msg)
        self.context = context
