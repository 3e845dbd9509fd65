"""Exception types raised while reading, filtering and validating candidates."""

from __future__ import annotations


class PalcheckError(Exception):
    """Base class for all palcheck errors."""


class InvalidRecordError(PalcheckError, ValueError):
    """A candidate line could not be parsed into a record."""

    def __init__(self, message: str, *, source: str | None = None, line_no: int | None = None):
        self.source = source
        self.line_no = line_no
        where = ""
        if source is not None:
            where = f"{source}:{line_no}: " if line_no is not None else f"{source}: "
        super().__init__(f"{where}{message}")


class ValidationUnavailableError(PalcheckError, RuntimeError):
    """The digit service could not answer for one candidate."""


class InputSourceError(PalcheckError, OSError):
    """The results directory or one of its files cannot be read."""
