"""
Record-routing state machine.

Walks classified records in file order, keeps the currently open meter
block and folds 300 volumes into it. Every rule violation aborts the
whole parse with a typed ``Nem12Error``.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from . import exceptions
from .collect import collect_lines
from .config import ParserConfig, default_config
from .records import Record
from .types import EventKind, MeterRead, ParseEvent, RecordType

log = logging.getLogger(__name__)

EventHook = Callable[[ParseEvent], None]


@dataclass
class Cursor:
    active: Optional[str] = None  # NMI key into ParseContext.reads
    line: int = 0
    total: int = 0  # non-blank lines in the input


@dataclass
class ParseContext:
    cursor: Cursor
    config: ParserConfig
    reads: Dict[str, MeterRead] = field(default_factory=dict)
    on_event: Optional[EventHook] = None

    def emit(self, kind: EventKind, **kwargs) -> None:
        event = ParseEvent(kind=kind, line=self.cursor.line, **kwargs)
        if self.config.log_transitions:
            log.debug("%s record at line %d: %s", kind, event.line, event)
        if self.on_event is not None:
            self.on_event(event)


def _on_header(rec: Record, ctx: ParseContext) -> None:
    exceptions.require(
        ctx.cursor.line == 1,
        "Record 100 must be the first record",
        exceptions.HeaderPositionError,
        line=rec.line,
    )
    ctx.emit("header")


def _on_meter(rec: Record, ctx: ParseContext) -> None:
    meter = rec.to_meter_read()
    exceptions.require(
        meter.nmi not in ctx.reads,
        "Duplicate 200 record for NMI",
        exceptions.DuplicateNmiError,
        line=rec.line,
        value=meter.nmi,
    )
    ctx.reads[meter.nmi] = meter
    ctx.cursor.active = meter.nmi
    ctx.emit("meter", nmi=meter.nmi)


def _on_volume(rec: Record, ctx: ParseContext) -> None:
    nmi = ctx.cursor.active
    if nmi is None:
        raise exceptions.OrphanVolumeError(
            "Record 300 found without an open 200 block", line=rec.line
        )
    day = rec.read_date()
    volume = rec.to_meter_volume()
    ctx.reads[nmi].append_volume(day, volume)
    ctx.emit("volume", nmi=nmi, date=day)


def _on_footer(rec: Record, ctx: ParseContext) -> None:
    exceptions.require(
        rec.line == ctx.cursor.total,
        "Record 900 must be the last non-blank record",
        exceptions.FooterPositionError,
        line=rec.line,
        value=rec.text,
    )
    ctx.cursor.active = None
    ctx.emit("footer")


_HANDLERS: Dict[RecordType, Callable[[Record, ParseContext], None]] = {
    RecordType.HEADER: _on_header,
    RecordType.METER: _on_meter,
    RecordType.VOLUME: _on_volume,
    RecordType.FOOTER: _on_footer,
}


def _route(rec: Record, ctx: ParseContext) -> None:
    try:
        handler = _HANDLERS[RecordType(rec.record_type)]
    except ValueError:
        raise exceptions.UnsupportedRecordTypeError(
            "Unsupported record type", line=rec.line, value=rec.record_type
        ) from None
    if ctx.cursor.line == 1 and handler is not _on_header:
        raise exceptions.HeaderPositionError(
            "First record must be 100", line=rec.line, value=rec.record_type
        )
    handler(rec, ctx)


def parse_lines(
    lines: Iterable[str],
    *,
    config: Optional[ParserConfig] = None,
    on_event: Optional[EventHook] = None,
) -> List[MeterRead]:
    """
    Parse simplified NEM12 text lines into one MeterRead per 200 block.

    - Blank lines are ignored; every other line is trimmed first.
    - Output order follows first appearance of each 200 record.
    - Raises a Nem12Error subclass on the first invalid record.
    """
    cfg = config or default_config()
    collected = collect_lines(lines)
    if cfg.log_transitions:
        log.debug(
            "Collected %d records from %d lines, last %r",
            len(collected.lines),
            collected.line_count,
            collected.last_line,
        )
    ctx = ParseContext(
        cursor=Cursor(total=len(collected.lines)),
        config=cfg,
        on_event=on_event,
    )

    for ordinal, (source_line, text) in enumerate(collected.lines, start=1):
        ctx.cursor.line = ordinal
        try:
            _route(Record.from_text(text, ordinal, source_line), ctx)
        except exceptions.Nem12Error as e:
            if e.source_line is None:
                e.source_line = source_line
            raise

    return list(ctx.reads.values())
