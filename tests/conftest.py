"""Shared fixtures for the digit service."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from helpers import FakeResponse, FakeSession

from palcheck.validators import PiDigitsClient


@pytest.fixture
def make_client() -> Callable[..., tuple[PiDigitsClient, FakeSession]]:
    def factory(handler: Callable[[dict[str, Any]], FakeResponse]):
        session = FakeSession(handler)
        return PiDigitsClient("https://digits.test/v1/pi", timeout=5.0, session=session), session

    return factory
