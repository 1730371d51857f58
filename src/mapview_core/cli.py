from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .attributes import XmlAttributeSource, import_options
from .codec import decode_options, encode_options
from .contracts.errors import MapViewError
from .contracts.options import options_payload


def _import(args: argparse.Namespace) -> int:
    source = XmlAttributeSource.from_path(args.layout, element=args.element)
    options = import_options(source, args.density)
    record = encode_options(options, versioned=args.versioned)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(record)
    print(f"Wrote {len(record)} bytes to {args.out}")
    return 0


def _inspect(args: argparse.Namespace) -> int:
    options = decode_options(args.record.read_bytes(), versioned=args.versioned)
    payload = options_payload(options)
    payload["fingerprint"] = options.fingerprint().sha256
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mapview", description="Map view options tools")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...).")
    subparsers = parser.add_subparsers(dest="command")

    import_parser = subparsers.add_parser("import", help="Import a layout file into a binary options record.")
    import_parser.add_argument("layout", type=Path, help="Layout XML holding the map view attributes.")
    import_parser.add_argument("--density", type=float, default=1.0, help="Display density (px per dp).")
    import_parser.add_argument("--element", default="MapView", help="Tag suffix of the element to read.")
    import_parser.add_argument("--out", required=True, type=Path, help="Output record path.")
    import_parser.add_argument("--versioned", action="store_true", help="Prefix the record with a version header.")

    inspect_parser = subparsers.add_parser("inspect", help="Decode a binary options record and print it as JSON.")
    inspect_parser.add_argument("record", type=Path, help="Record file produced by 'import'.")
    inspect_parser.add_argument("--versioned", action="store_true", help="Record carries a version header.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    handlers = {"import": _import, "inspect": _inspect}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 2
    try:
        return handler(args)
    except MapViewError as exc:
        print(f"error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
