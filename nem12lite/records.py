from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Tuple

from . import canon, exceptions
from .types import EnergyUnit, MeterRead, MeterVolume, Quality


@dataclass(frozen=True)
class Record:
    """One classified line: record token, raw text and comma-split fields."""

    record_type: str
    text: str
    line: int
    fields: Tuple[str, ...]
    source_line: Optional[int] = None

    @classmethod
    def from_text(
        cls, text: str, line: int, source_line: Optional[int] = None
    ) -> "Record":
        # str.split keeps empty fields: "300,20250101,,A" -> 4 fields
        fields = tuple(text.split(canon.DELIMITER))
        exceptions.require(
            text != "",
            "Empty record",
            exceptions.MalformedRecordError,
            line=line,
        )
        return cls(fields[0], text, line, fields, source_line)

    def require_fields(self, count: int) -> None:
        exceptions.require(
            len(self.fields) == count,
            f"Record {self.record_type} expects {count} fields, got {len(self.fields)}",
            exceptions.MalformedRecordError,
            line=self.line,
            value=self.text,
        )

    def to_meter_read(self) -> MeterRead:
        self.require_fields(canon.METER_FIELDS)
        nmi = parse_nmi(self.fields[1], self.line)
        unit = parse_unit(self.fields[2], self.line)
        return MeterRead(nmi=nmi, energy_unit=unit)

    def read_date(self) -> date:
        self.require_fields(canon.VOLUME_FIELDS)
        return parse_date(self.fields[1], self.line)

    def to_meter_volume(self) -> MeterVolume:
        self.require_fields(canon.VOLUME_FIELDS)
        return MeterVolume(
            magnitude=parse_volume(self.fields[2], self.line),
            quality=parse_quality(self.fields[3], self.line),
        )


def parse_date(raw: str, line: Optional[int] = None) -> date:
    """yyyyMMdd, eight digits, must be a real calendar date."""
    if not canon.DATE_PATTERN.fullmatch(raw):
        raise exceptions.InvalidDateError("Invalid date", line=line, value=raw)
    try:
        return datetime.strptime(raw, canon.DATE_FORMAT).date()
    except ValueError as e:
        raise exceptions.InvalidDateError("Invalid date", line=line, value=raw) from e


def parse_volume(raw: str, line: Optional[int] = None) -> Decimal:
    exceptions.require(
        canon.DECIMAL_PATTERN.fullmatch(raw) is not None,
        "Invalid volume",
        exceptions.InvalidVolumeError,
        line=line,
        value=raw,
    )
    return Decimal(raw)


def parse_quality(raw: str, line: Optional[int] = None) -> Quality:
    try:
        return Quality(raw)
    except ValueError:
        raise exceptions.InvalidQualityError(
            "Invalid quality", line=line, value=raw
        ) from None


def parse_nmi(raw: str, line: Optional[int] = None) -> str:
    exceptions.require(
        len(raw) == canon.NMI_LENGTH,
        "Invalid NMI",
        exceptions.InvalidNmiError,
        line=line,
        value=raw,
    )
    return raw


def parse_unit(raw: str, line: Optional[int] = None) -> EnergyUnit:
    try:
        return EnergyUnit(raw.upper())
    except ValueError:
        raise exceptions.UnsupportedUnitError(
            "Unsupported unit", line=line, value=raw
        ) from None
