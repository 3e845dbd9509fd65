"""Report generation utilities."""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from .records import ValidatedCandidate

REPORT_FIELDS = ("size", "position", "pal", "position_validated")


def format_entry(candidate: ValidatedCandidate) -> str:
    entry = {key: getattr(candidate, key) for key in REPORT_FIELDS}
    if candidate.error:
        entry["error"] = candidate.error
    return repr(entry)


def to_json(
    candidates: list[ValidatedCandidate], outfile: Path | None, return_as_string: bool = False
) -> str | None:
    payload = [c.to_dict() for c in candidates]
    json_str = json.dumps(payload, indent=2)

    if return_as_string or outfile is None:
        return json_str

    outfile.parent.mkdir(parents=True, exist_ok=True)
    outfile.write_text(json_str, encoding="utf-8")
    return None


def human_summary(candidates: list[ValidatedCandidate]) -> str:
    if not candidates:
        return "Validation Summary:\n- No candidates passed the filter"

    validated = sum(1 for c in candidates if c.position_validated)
    unavailable = sum(1 for c in candidates if c.error)
    mismatched = len(candidates) - validated - unavailable

    lines = [
        f"- candidates: {len(candidates)}",
        f"- validated: {validated}",
        f"- mismatched: {mismatched}",
        f"- unavailable: {unavailable}",
        f"- largest size: {max(c.size for c in candidates)}",
    ]
    return "Validation Summary:\n" + "\n".join(lines)


def to_frame(candidates: list[ValidatedCandidate]) -> pd.DataFrame:
    """Return the candidates as a DataFrame, preserving report order."""
    columns = [*REPORT_FIELDS, "source", "error"]
    return pd.DataFrame([c.to_dict() for c in candidates], columns=columns)
