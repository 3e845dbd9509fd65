"""Fake digit service used across the test modules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, *, bad_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self) -> Any:
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Answers each GET through ``handler(params)``; records every call."""

    def __init__(self, handler: Callable[[dict[str, Any]], FakeResponse]):
        self.handler = handler
        self.calls: list[tuple[str, dict[str, Any], float | None]] = []
        self.closed = False

    def get(self, url: str, params: dict[str, Any] | None = None, timeout: float | None = None):
        self.calls.append((url, dict(params or {}), timeout))
        return self.handler(dict(params or {}))

    def close(self) -> None:
        self.closed = True


def serve_digits(windows: dict[int, str]) -> Callable[[dict[str, Any]], FakeResponse]:
    """Handler returning ``windows[start]`` padded with zeros, as the API would."""

    def handler(params: dict[str, Any]) -> FakeResponse:
        start = params["start"]
        count = params["numberOfDigits"]
        content = windows.get(start, "")
        content = (content + "0" * count)[:count]
        return FakeResponse(200, {"content": content})

    return handler


def make_pal(size: int, last: str = "1") -> str:
    """Digit string of length ``size`` ending in ``last``."""
    return "3" * (size - 1) + last
