from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, Sequence

from . import exceptions, io

SAMPLE_PACKAGE = "nem12lite.data"
SAMPLE_FILE = "SimpleNem12.csv"


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="nem12lite", description="Print total volume per NMI of a simple NEM12 file"
    )
    ap.add_argument("file", nargs="?", help="NEM12 CSV (default: bundled sample)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log each record")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file:
            reads = io.parse_file(args.file)
        else:
            reads = io.parse_resource(SAMPLE_PACKAGE, SAMPLE_FILE)
    except exceptions.Nem12Error as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for m in reads:
        print(f"Total volume for NMI {m.nmi} is {m.total_volume}")
    return 0
