import sys
from pathlib import Path
from typing import Optional

import httpx
import pytest

# Ensure local source package (src/esapi) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from esapi import CancellationToken, Config, RequestSpec  # noqa: E402


class RecordingTransport:
    """Transport double that records what it was asked to send."""

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b"{}",
        headers: Optional[dict[str, str]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = headers or {"Content-Type": "application/json"}
        self.error = error
        self.requests: list[RequestSpec] = []
        self.tokens: list[Optional[CancellationToken]] = []

    def perform(
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> httpx.Response:
        self.requests.append(request)
        self.tokens.append(cancel)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code, headers=self.headers, content=self.content
        )

    @property
    def last(self) -> RequestSpec:
        return self.requests[-1]


class AsyncRecordingTransport(RecordingTransport):
    async def perform(  # type: ignore[override]
        self, request: RequestSpec, *, cancel: Optional[CancellationToken] = None
    ) -> httpx.Response:
        return RecordingTransport.perform(self, request, cancel=cancel)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in ("ESAPI_URL", "ESAPI_TIMEOUT", "ESAPI_VERIFY", "ESAPI_API_VERSION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "http://test-es:9200"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def async_transport() -> AsyncRecordingTransport:
    return AsyncRecordingTransport()


@pytest.fixture
def transport_factory() -> type[RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def async_transport_factory() -> type[AsyncRecordingTransport]:
    return AsyncRecordingTransport


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
