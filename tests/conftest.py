"""Shared fixtures for the NVP client tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
import requests
from nvp_payments.core.config import NvpConfig


@dataclass
class StubResponse:
    text: str
    status_code: int = 200


@dataclass
class StubSession:
    """Records posted requests and answers with a canned body."""

    body: str = "ACK=Success"
    status_code: int = 200
    error: Optional[Exception] = None
    calls: List[Dict[str, Any]] = field(default_factory=list)

    def post(self, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return StubResponse(text=self.body, status_code=self.status_code)


@pytest.fixture
def config() -> NvpConfig:
    return NvpConfig(
        user="merchant_api1.example.com",
        password="S3CRET",
        signature="sig-abc",
        api_url="https://api-3t.sandbox.paypal.com/nvp",
        timeout_seconds=5.0,
    )


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def failing_session() -> StubSession:
    return StubSession(error=requests.ConnectionError("connection refused"))


@pytest.fixture
def make_session() -> type[StubSession]:
    return StubSession
