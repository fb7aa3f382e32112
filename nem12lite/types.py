from __future__ import annotations
from dataclasses import dataclass
from datetime import date
import decimal
from decimal import Decimal
from enum import Enum
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import canon

EventKind = Literal["header", "meter", "volume", "footer"]


class RecordType(str, Enum):
    HEADER = "100"
    METER = "200"
    VOLUME = "300"
    FOOTER = "900"


class EnergyUnit(str, Enum):
    KWH = "KWH"


class Quality(str, Enum):
    """A = Actual (measured), E = Estimate (inferred)."""

    A = "A"
    E = "E"

    @property
    def is_actual(self) -> bool:
        return self is Quality.A


class MeterVolume(BaseModel):
    """One day's reading for a meter."""

    model_config = ConfigDict(frozen=True)

    magnitude: Decimal
    quality: Quality


class MeterRead(BaseModel):
    """All volumes read for one NMI in a file.

    Attributes:
        nmi: National Metering Identifier (exactly 10 characters)
        energy_unit: Unit of every volume in this block
        volumes: Daily volumes keyed by read date, in file order
    """

    nmi: str = Field(min_length=canon.NMI_LENGTH, max_length=canon.NMI_LENGTH)
    energy_unit: EnergyUnit = EnergyUnit.KWH
    volumes: Dict[date, MeterVolume] = Field(default_factory=dict)

    @property
    def total_volume(self) -> Decimal:
        with decimal.localcontext() as ctx:
            # volumes are unbounded; the default 28-digit context rounds
            ctx.prec = decimal.MAX_PREC
            return sum((v.magnitude for v in self.volumes.values()), Decimal(0))

    def append_volume(self, day: date, volume: MeterVolume) -> None:
        self.volumes[day] = volume

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeterRead):
            return NotImplemented
        return (self.nmi, self.energy_unit) == (other.nmi, other.energy_unit)

    def __hash__(self) -> int:
        return hash((self.nmi, self.energy_unit))


@dataclass(frozen=True)
class ParseEvent:
    kind: EventKind
    line: int
    nmi: Optional[str] = None
    date: Optional[date] = None
