from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from paygate import Environment, GatewayConfig, PaymentGateway
from paygate.core.xml_util import dict_from_xml


@dataclass
class FakeResponse:
    status_code: int
    text: str = ""

    @property
    def content(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    data: bytes
    timeout: Any
    verify: Any

    @property
    def body(self) -> str:
        return self.data.decode("utf-8")

    def parsed_body(self) -> Dict[str, Any]:
        return dict_from_xml(self.data)


@dataclass
class FakeSession:
    """Stands in for ``requests.Session``: records calls, replays queued responses."""

    responses: List[Any] = field(default_factory=list)
    requests: List[RecordedRequest] = field(default_factory=list)
    closed: bool = False

    def queue(self, status_code: int, text: str = "") -> None:
        self.responses.append(FakeResponse(status_code, text))

    def raise_next(self, exc: Exception) -> None:
        self.responses.append(exc)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        data: bytes = b"",
        timeout: Any = None,
        verify: Any = True,
    ) -> FakeResponse:
        self.requests.append(
            RecordedRequest(method, url, dict(headers or {}), data, timeout, verify)
        )
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(
        environment=Environment.Development,
        merchant_id="integration_merchant_id",
        public_key="integration_public_key",
        private_key="integration_private_key",
        timeout_seconds=30,
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def gateway(config: GatewayConfig, session: FakeSession) -> PaymentGateway:
    return PaymentGateway(config, session=session)


@pytest.fixture
def merchant_url(config: GatewayConfig) -> str:
    return config.base_merchant_url()
