from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from . import exceptions


@dataclass(frozen=True)
class CollectedLines:
    """
    Non-blank, trimmed lines of one input.

    - lines: (source_line, text) pairs; source_line counts blank lines too
    - last_line: text of the final retained line (footer check)
    - line_count: physical lines read
    """

    lines: Tuple[Tuple[int, str], ...]
    last_line: str
    line_count: int


def collect_lines(raw_lines: Iterable[str]) -> CollectedLines:
    kept: list[tuple[int, str]] = []
    count = 0
    for count, raw in enumerate(raw_lines, start=1):
        text = raw.strip()
        if text:
            kept.append((count, text))

    last: Optional[str] = kept[-1][1] if kept else None
    if last is None:
        raise exceptions.EmptyInputError("Input contains no NEM12 records")
    return CollectedLines(lines=tuple(kept), last_line=last, line_count=count)
