"""High-level orchestration: file discovery, parse, filter, validate, sort."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .config import ValidatorConfig
from .errors import InvalidRecordError, ValidationUnavailableError
from .records import (
    CandidateRecord,
    ValidatedCandidate,
    compute_position,
    parse_line,
    passes_filter,
)
from .sources import discover_files, iter_lines
from .validators import PiDigitsClient, validate_record

log = logging.getLogger(__name__)


def iter_records(path: Path) -> Iterator[CandidateRecord]:
    """Yield parsed records from a results file, skipping malformed lines."""
    for line_no, line in iter_lines(path):
        try:
            yield parse_line(line, source=path.name, line_no=line_no)
        except InvalidRecordError as e:
            log.warning("Skipping malformed record: %s", e)


def select_candidates(
    records: Iterable[CandidateRecord], config: ValidatorConfig
) -> list[CandidateRecord]:
    return [r for r in records if passes_filter(r, config)]


def _validate_or_mark(
    record: CandidateRecord, client: PiDigitsClient, source: str | None
) -> ValidatedCandidate:
    try:
        return validate_record(record, client, source=source)
    except ValidationUnavailableError as e:
        log.warning("Validation unavailable for %s: %s", source, e)
        return ValidatedCandidate(
            size=record.size,
            position=compute_position(record.field0, record.field1, record.size),
            pal=record.pal,
            position_validated=False,
            source=source,
            error=str(e),
        )


def sort_by_size(candidates: Iterable[ValidatedCandidate]) -> list[ValidatedCandidate]:
    """Return candidates ordered by size, largest first (stable for equal sizes)."""
    return sorted(candidates, key=lambda c: c.size, reverse=True)


def scan_file(
    path: str | Path,
    config: ValidatorConfig,
    client: PiDigitsClient,
) -> list[ValidatedCandidate]:
    """Validate every candidate in one file that passes the filter."""
    path = Path(path)
    selected = select_candidates(iter_records(path), config)
    log.info("%s: %d candidate(s) selected for validation", path.name, len(selected))
    return [_validate_or_mark(record, client, path.name) for record in selected]


def scan_directory(
    directory: str | Path,
    config: ValidatorConfig,
    *,
    client: PiDigitsClient | None = None,
) -> list[ValidatedCandidate]:
    """Run the whole pipeline over a results directory.

    Raises InputSourceError if the directory or one of its files cannot be
    read. Returns the validated candidates sorted by size, largest first.
    """
    files = discover_files(directory, config.pattern)
    if not files:
        log.warning("No files matching %r in %s", config.pattern, directory)

    owned = client is None
    if client is None:
        client = PiDigitsClient(config.api_url, timeout=config.timeout)

    try:
        results: list[ValidatedCandidate] = []
        for path in files:
            results.extend(scan_file(path, config, client))
    finally:
        if owned:
            client.close()

    return sort_by_size(results)
