"""Locating and reading candidate result files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .errors import InputSourceError


def discover_files(directory: str | Path, pattern: str = "*.txt") -> list[Path]:
    """Return the result files in ``directory`` matching ``pattern``, sorted by name."""
    root = Path(directory)
    if not root.exists():
        raise InputSourceError(f"Results directory does not exist: {root}")
    if not root.is_dir():
        raise InputSourceError(f"Results path is not a directory: {root}")

    try:
        matches = root.glob(pattern)
        return sorted(p for p in matches if p.is_file())
    except (ValueError, NotImplementedError) as e:
        raise InputSourceError(f"Invalid file pattern {pattern!r}: {e}") from e


def iter_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield ``(line_no, line)`` for every non-blank line of a results file."""
    try:
        with path.open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                if line.strip():
                    yield line_no, line
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(f"Cannot read results file {path}: {e}") from e
