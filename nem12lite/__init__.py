from . import (
    canon,
    exceptions,
    types,
    config,
    collect,
    records,
    parser,
    io,
    frames,
)
from .io import parse_file, parse_resource, parse_text
from .parser import parse_lines
from .types import EnergyUnit, MeterRead, MeterVolume, Quality

__all__ = [
    "canon",
    "exceptions",
    "types",
    "config",
    "collect",
    "records",
    "parser",
    "io",
    "frames",
    "parse_lines",
    "parse_file",
    "parse_resource",
    "parse_text",
    "EnergyUnit",
    "MeterRead",
    "MeterVolume",
    "Quality",
]
