"""Candidate records: parsing, filtering and position arithmetic."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass

from .config import ValidatorConfig
from .errors import InvalidRecordError

MIN_FIELDS = 4
DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(slots=True)
class CandidateRecord:
    """One line of a results file."""

    field0: int
    field1: int
    raw_value: str
    size: int

    @property
    def pal(self) -> str:
        return self.raw_value.strip()

    @property
    def last_digit(self) -> str:
        return self.pal[-1:]


@dataclass(slots=True)
class ValidatedCandidate:
    """A filtered record together with its validation outcome."""

    size: int
    position: int
    pal: str
    position_validated: bool
    source: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a stable, serializable representation of this candidate."""
        return asdict(self)


def _parse_int(text: str, name: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InvalidRecordError(f"{name} is not an integer: {text.strip()!r}") from None


def parse_line(
    line: str, *, source: str | None = None, line_no: int | None = None
) -> CandidateRecord:
    """Parse ``<int>,<int>,<digits>,<size>[,...]`` into a CandidateRecord."""
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < MIN_FIELDS:
        raise InvalidRecordError(
            f"expected at least {MIN_FIELDS} fields, got {len(fields)}",
            source=source,
            line_no=line_no,
        )

    try:
        field0 = _parse_int(fields[0], "field0")
        field1 = _parse_int(fields[1], "field1")
        size = _parse_int(fields[3], "size")
    except InvalidRecordError as e:
        raise InvalidRecordError(str(e), source=source, line_no=line_no) from e

    raw_value = fields[2]
    digits = raw_value.strip()
    if not DIGITS_RE.fullmatch(digits):
        raise InvalidRecordError(
            f"value is not a digit string: {digits!r}", source=source, line_no=line_no
        )

    return CandidateRecord(field0=field0, field1=field1, raw_value=raw_value, size=size)


def passes_filter(record: CandidateRecord, config: ValidatorConfig) -> bool:
    """Return True if the record is large enough and ends in an allowed digit."""
    return record.size >= config.threshold and record.last_digit not in config.excluded_digits


def compute_position(field0: int, field1: int, size: int) -> int:
    """Return the 1-based digit position at which the candidate starts.

    ``field0`` is the offset of the scanned block and ``field1`` the centre of
    the palindrome inside it, so the first digit sits ``(size - 1) // 2``
    places before the centre.
    """
    return field0 + field1 - (size - 1) // 2 + 1
