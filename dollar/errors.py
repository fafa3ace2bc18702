"""Exception hierarchy shared by the scanner and parser stages."""

from __future__ import annotations

from typing import Literal

Origin = Literal["scan", "parse"]


class DollarError(Exception):
    """Base error for every validation failure."""

    origin: Origin = "parse"

    def __init__(self, message: str, *, origin: Origin | None = None) -> None:
        super().__init__(message)
        self.message = message
        if origin is not None:
            self.origin = origin

    def __str__(self) -> str:
        return self.message


class ScanError(DollarError):
    """Lexical failure.

    No scanning rule raises this today; it is kept for lexical extensions such
    as rejecting unknown escape targets.
    """

    origin: Origin = "scan"


class ParseError(DollarError):
    """Structural failure, e.g. a dollar-expression missing its closing ``$$``."""

    @classmethod
    def from_scan_error(cls, exc: ScanError) -> ParseError:
        return cls(exc.message, origin=exc.origin)
