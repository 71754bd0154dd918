# FILE: ./ipsetgen/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import yaml

from .errors import CidrParseError, InputDocumentError
from .generator import build_config_params
from .loader import load_document
from .models import params_to_dict
from .parser import parse_mac_list, parse_net_list

DEFAULT_NET_LIST = "openstacknetlist.yaml"
DEFAULT_MAC_LIST = "openstackmacaddresslist.yaml"
DEFAULT_OUTPUT_FILE = "ipset-config.yaml"


def fail(msg: str, context: Any = None) -> None:
    print(f"[ipsetgen] ERROR: {msg}", file=sys.stderr)
    if context is not None:
        try:
            dumped = json.dumps(context, indent=2, sort_keys=True)
        except (TypeError, ValueError):
            dumped = str(context)
        print("[ipsetgen] CONTEXT:", file=sys.stderr)
        print(dumped, file=sys.stderr)
    sys.exit(1)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="ipsetgen",
        description="Render IP-set config map parameters from network and MAC reservation lists.",
    )
    p.add_argument("net_list", nargs="?", default=DEFAULT_NET_LIST)
    p.add_argument("mac_list", nargs="?", default=DEFAULT_MAC_LIST)
    p.add_argument("output", nargs="?", default=DEFAULT_OUTPUT_FILE, help="'-' for stdout")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        net_list = parse_net_list(load_document(Path(args.net_list)))
        mac_path = Path(args.mac_list)
        # no MAC reservations is a valid setup
        mac_list = parse_mac_list(load_document(mac_path)) if mac_path.exists() else []
    except InputDocumentError as e:
        fail(str(e), context=e.context)

    try:
        params = build_config_params(net_list, mac_list)
    except CidrParseError as e:
        fail(str(e))

    rendered = params_to_dict(params)

    if args.output == "-":
        yaml.dump(rendered, sys.stdout, sort_keys=False)
        return

    with Path(args.output).open("w") as f:
        yaml.dump(rendered, f, sort_keys=False)


if __name__ == "__main__":
    main()
