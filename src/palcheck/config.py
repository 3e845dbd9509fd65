"""Validator configuration and the two named presets."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from pathlib import PurePath

DEFAULT_API_URL = "https://api.pi.delivery/v1/pi"
DEFAULT_TIMEOUT = 30.0

DIGIT_RE = re.compile(r"[0-9]")


def api_url_from_env() -> str:
    return os.environ.get("PALCHECK_API_URL", DEFAULT_API_URL)


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Which records get validated and where the digits come from."""

    threshold: int
    excluded_digits: frozenset[str]
    pattern: str = "*.txt"
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        # frozen: normalise in place so int digits still match str last digits
        object.__setattr__(self, "excluded_digits", parse_digit_set(self.excluded_digits))
        check_pattern(self.pattern)

    def with_overrides(self, **changes: object) -> ValidatorConfig:
        """Return a copy with every non-None keyword applied."""
        kept = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **kept)


def check_pattern(pattern: str) -> None:
    """Raise ValueError unless ``pattern`` is a non-empty glob relative to the results directory."""
    if not pattern or not pattern.strip():
        raise ValueError("File pattern must not be empty")
    if PurePath(pattern).is_absolute() or pattern.startswith(("/", "\\")):
        raise ValueError(f"File pattern must be relative to the results directory: {pattern!r}")


def parse_digit_set(value: object) -> frozenset[str]:
    """Accept "0,2,4", "024" or an iterable of digits/ints."""
    if isinstance(value, str):
        items = [ch for ch in value if not ch.isspace() and ch != ","]
    else:
        items = [str(v) for v in value]  # type: ignore[union-attr]

    for item in items:
        if not DIGIT_RE.fullmatch(item):
            raise ValueError(f"Excluded digits must be single decimal digits, got {item!r}")
    return frozenset(items)


PRESETS: dict[str, ValidatorConfig] = {
    "full": ValidatorConfig(
        threshold=25,
        excluded_digits=frozenset("024568"),
        pattern="*.txt",
    ),
    "batch": ValidatorConfig(
        threshold=19,
        excluded_digits=frozenset("02468"),
        pattern="batch-*.txt",
    ),
}


def get_preset(name: str) -> ValidatorConfig:
    """Return a named preset with the API URL taken from the environment."""
    try:
        preset = PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset {name!r} (expected one of: {known})") from None
    return replace(preset, api_url=api_url_from_env())
