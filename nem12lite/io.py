"""
Line sources for the parser: files on disk, packaged data files and
in-memory text. Each source is read once, fully, and closed before the
records are validated.
"""

from __future__ import annotations
import logging
from contextlib import contextmanager
from importlib import resources
from io import StringIO
from pathlib import Path
from typing import IO, Iterator, List, Optional

from . import exceptions
from .config import ParserConfig, default_config
from .parser import EventHook, parse_lines
from .types import MeterRead

log = logging.getLogger(__name__)


@contextmanager
def read_lines(path: str | Path, *, encoding: str) -> Iterator[IO[str]]:
    """Open a NEM12 file as text; the handle is closed on every exit path."""
    p = Path(path)
    if not p.is_file():
        raise exceptions.SourceError("File does not exist", value=str(p))
    try:
        f = p.open(encoding=encoding, newline=None)
    except OSError as e:
        raise exceptions.SourceError("Failed to open file", value=str(p)) from e
    with f:
        yield f


def _drain(handle: IO[str], label: str) -> List[str]:
    try:
        return handle.readlines()
    except UnicodeDecodeError as e:
        raise exceptions.SourceError("Failed to decode NEM12 text", value=label) from e


def parse_file(
    path: Optional[str | Path],
    *,
    config: Optional[ParserConfig] = None,
    on_event: Optional[EventHook] = None,
) -> List[MeterRead]:
    if path is None:
        raise exceptions.SourceError("Input file must not be None")
    cfg = config or default_config()
    log.info("Parsing NEM12 file %s", path)
    with read_lines(path, encoding=cfg.encoding) as handle:
        lines = _drain(handle, str(path))
    return parse_lines(lines, config=cfg, on_event=on_event)


def parse_resource(
    package: str,
    name: str,
    *,
    config: Optional[ParserConfig] = None,
    on_event: Optional[EventHook] = None,
) -> List[MeterRead]:
    """Parse a data file shipped inside an installed package."""
    cfg = config or default_config()
    label = f"{package}:{name}"
    try:
        resource = resources.files(package).joinpath(name)
    except ModuleNotFoundError as e:
        raise exceptions.SourceError("Resource package not found", value=package) from e
    if not resource.is_file():
        raise exceptions.SourceError("Resource not found", value=label)
    log.info("Parsing NEM12 resource %s", label)
    with resource.open("r", encoding=cfg.encoding) as handle:
        lines = _drain(handle, label)
    return parse_lines(lines, config=cfg, on_event=on_event)


def parse_text(
    text: str,
    *,
    config: Optional[ParserConfig] = None,
    on_event: Optional[EventHook] = None,
) -> List[MeterRead]:
    # same line breaks as file sources: \n, \r and \r\n only
    lines = StringIO(text, newline=None).readlines()
    return parse_lines(lines, config=config, on_event=on_event)
