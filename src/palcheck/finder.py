"""Search a block of pi digits for long odd-length palindromes.

Produces records in the same line format the validator consumes, so a
block written by :func:`write_candidates` can be fed straight back into
:func:`palcheck.scanner.scan_directory`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .records import CandidateRecord

DEFAULT_MIN_HALF_WIDTH = 9


def find_candidates(
    digits: str,
    block_start: int,
    *,
    offset: int = 1,
    min_half_width: int = DEFAULT_MIN_HALF_WIDTH,
) -> Iterator[CandidateRecord]:
    """Yield a record for every palindrome centred in ``digits``.

    The palindrome around centre ``i`` is grown outwards while the digits on
    both sides agree; it is kept when it reaches ``min_half_width`` and does
    not touch the first digit of the block.
    """
    n = len(digits)
    for i in range(offset, n - 1 - offset):
        half = offset
        while i - half >= 0 and i + half < n and digits[i - half] == digits[i + half]:
            half += 1

        if i - half > 0 and half >= min_half_width:
            pal = digits[i - half + 1 : i + half]
            yield CandidateRecord(field0=block_start, field1=i, raw_value=pal, size=len(pal))


def format_record(record: CandidateRecord) -> str:
    return f"{record.field0}, {record.field1}, {record.raw_value}, {record.size} \n"


def write_candidates(records: Iterable[CandidateRecord], outfile: Path) -> int:
    """Write records to ``outfile`` and return how many were written."""
    outfile.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with outfile.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(format_record(record))
            count += 1
    return count
