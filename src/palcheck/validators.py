"""Validation of candidates against the remote digit-of-pi service."""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .errors import ValidationUnavailableError
from .records import CandidateRecord, ValidatedCandidate, compute_position

log = logging.getLogger(__name__)

NON_DIGIT_RE = re.compile(r"[^0-9]")


def digits_only(text: str) -> str:
    """Return only the digits in text."""
    return NON_DIGIT_RE.sub("", text)


class PiDigitsClient:
    """Thin wrapper around ``GET /v1/pi?start=&numberOfDigits=&radix=10``."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Any | None = None,
    ) -> None:
        self.api_url = api_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> PiDigitsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_digits(self, start: int, count: int) -> str:
        """Return ``count`` decimal digits of pi beginning at ``start``."""
        params = {"start": start, "numberOfDigits": count, "radix": 10}
        try:
            response = self.session.get(self.api_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ValidationUnavailableError(f"request for start={start} failed: {e}") from e

        if response.status_code != 200:
            raise ValidationUnavailableError(
                f"digit service returned HTTP {response.status_code} for start={start}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ValidationUnavailableError(f"invalid JSON for start={start}") from e

        content = body.get("content") if isinstance(body, dict) else None
        if not isinstance(content, str):
            raise ValidationUnavailableError(f"response for start={start} has no 'content'")
        return content


def validate_record(
    record: CandidateRecord,
    client: PiDigitsClient,
    *,
    source: str | None = None,
) -> ValidatedCandidate:
    """Fetch the digits at the record's position and compare them to its value.

    Raises ValidationUnavailableError if the service cannot answer.
    """
    position = compute_position(record.field0, record.field1, record.size)
    pal = record.pal
    content = client.fetch_digits(position, record.size)
    matched = content[: record.size] == pal
    log.debug("position=%d size=%d validated=%s", position, record.size, matched)
    return ValidatedCandidate(
        size=record.size,
        position=position,
        pal=pal,
        position_validated=matched,
        source=source,
    )
