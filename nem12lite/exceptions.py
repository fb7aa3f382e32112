from __future__ import annotations
from typing import Optional


class Nem12Error(ValueError):
    """Base class for every input rejection raised by nem12lite.

    line: 1-based ordinal over non-blank lines
    source_line: physical line in the input, blank lines included
    """

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        value: Optional[str] = None,
        source_line: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.value = value
        self.source_line = source_line

    def __str__(self) -> str:
        detail = self.message
        if self.value is not None:
            detail += f": {self.value!r}"
        if self.line is not None:
            where = f"line {self.line}"
            if self.source_line is not None and self.source_line != self.line:
                where += f", file line {self.source_line}"
            detail += f" ({where})"
        return detail


class SourceError(Nem12Error): ...


class EmptyInputError(Nem12Error): ...


class MalformedRecordError(Nem12Error): ...


class HeaderPositionError(Nem12Error): ...


class FooterPositionError(Nem12Error): ...


class OrphanVolumeError(Nem12Error): ...


class DuplicateNmiError(Nem12Error): ...


class InvalidNmiError(Nem12Error): ...


class UnsupportedUnitError(Nem12Error): ...


class InvalidDateError(Nem12Error): ...


class InvalidVolumeError(Nem12Error): ...


class InvalidQualityError(Nem12Error): ...


class UnsupportedRecordTypeError(Nem12Error): ...


def require(
    condition: bool,
    message: str,
    exc: type[Nem12Error] = Nem12Error,
    *,
    line: Optional[int] = None,
    value: Optional[str] = None,
) -> None:
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message, line=line, value=value)
