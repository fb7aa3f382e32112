from __future__ import annotations
import re
from typing import Final

DELIMITER: Final[str] = ","
NMI_LENGTH: Final[int] = 10
DATE_FORMAT: Final[str] = "%Y%m%d"
DEFAULT_ENCODING: Final[str] = "utf-8"

# Exact field counts per record type (including the record token)
METER_FIELDS: Final[int] = 3
VOLUME_FIELDS: Final[int] = 4

DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]{8}")
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+(\.[0-9]+)?")

TIDY_COLS: Final[list[str]] = ["nmi", "date", "energy_unit", "volume", "quality"]
