from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from vocalware.client import VocalwareClient
from vocalware.config import ClientConfig
from vocalware.voice import Voice, default_catalog

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def voice() -> Voice:
    return default_catalog().get(lang="en", name="Kate")


@pytest.fixture
def config(voice: Voice) -> ClientConfig:
    return ClientConfig(account_id=1234, api_id=5678, secret_phrase="s3cret", voice=voice)


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(config: ClientConfig, requests_seen: List[httpx.Request]):
    def _make(handler: Handler) -> VocalwareClient:
        def recording(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http = httpx.Client(transport=httpx.MockTransport(recording))
        return VocalwareClient(config, http_client=http)

    return _make


def audio_response(body: bytes = b"ID3\x03fake-mp3", content_type: str = "audio/mpeg") -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body, headers={"content-type": content_type})

    return handler
