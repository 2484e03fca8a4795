from __future__ import annotations

import os

import pytest

from mastermind_client.adapters.mastermind.client import MastermindApiClient
from mastermind_client.config.settings import get_settings
from mastermind_client.infra.http import HttpClient, HttpClientConfig
from tests.helpers.fakes import BASE_URL, FakeMastermindServer, RecordingTransport


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Remove MASTERMIND_* do ambiente e limpa o cache de Settings."""
    for key in list(os.environ):
        if key.upper().startswith("MASTERMIND_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def server() -> FakeMastermindServer:
    return FakeMastermindServer()


@pytest.fixture
def api_client(server: FakeMastermindServer) -> MastermindApiClient:
    http = HttpClient(HttpClientConfig(timeout_seconds=1.0, transport=server.transport()))
    return MastermindApiClient(BASE_URL, http)
