from __future__ import annotations
from typing import Iterable

import pandas as pd

from . import canon
from .types import MeterRead


def to_dataframe(reads: Iterable[MeterRead]) -> pd.DataFrame:
    """
    Flatten meter reads into a tidy frame, one row per (nmi, date).

    Columns: nmi, date, energy_unit, volume, quality

    Volumes stay as Decimal objects so sums remain exact.
    """
    rows = [
        {
            "nmi": m.nmi,
            "date": day,
            "energy_unit": m.energy_unit.value,
            "volume": v.magnitude,
            "quality": v.quality.value,
        }
        for m in reads
        for day, v in m.volumes.items()
    ]
    if not rows:
        return pd.DataFrame(columns=canon.TIDY_COLS)
    return pd.DataFrame(rows, columns=canon.TIDY_COLS)


def total_volumes(reads: Iterable[MeterRead]) -> pd.Series:
    """Exact total volume per NMI, in input order."""
    reads = list(reads)
    return pd.Series(
        [m.total_volume for m in reads],
        index=pd.Index([m.nmi for m in reads], name="nmi"),
        name="total_volume",
        dtype=object,
    )
