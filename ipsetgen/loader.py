# FILE: ./ipsetgen/loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import InputDocumentError


def load_document(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise InputDocumentError(f"Input document not found: {path}")
    with path.open() as f:
        if path.suffix == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise InputDocumentError(f"Input document is not an object: {path}")
    return data


def _fmt_path(path: List[str]) -> str:
    return ".".join(path) if path else "<root>"


def get_required(d: Dict[str, Any], path: List[str], desc: str, *, context: Any = None):
    cur: Any = d
    walked: List[str] = []
    for p in path:
        walked.append(p)
        if not isinstance(cur, dict) or p not in cur or cur[p] is None:
            raise InputDocumentError(
                f"Missing required field: {desc} at {_fmt_path(walked)}",
                context=context if context is not None else d,
            )
        cur = cur[p]
    return cur


def get_items(doc: Dict[str, Any], kind: str) -> List[Dict[str, Any]]:
    items = doc.get("items")
    if items is None:
        return []
    if not isinstance(items, list):
        raise InputDocumentError(f"Invalid {kind}: items is not a list", context=doc)
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise InputDocumentError(f"Invalid {kind} object at items.{i}", context=item)
    return items
