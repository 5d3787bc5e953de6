from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from tokensupply.api.app import create_app
from tokensupply.settings import SupplySettings

TOKEN_ADDRESS = "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"
API_KEY = "test-api-key"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ETHERSCAN_API_KEY",
        "TOKEN_ADDRESS",
        "TOKEN_DECIMALS",
        "ETHERSCAN_API_URL",
        "EXPLORER_TIMEOUT",
        "SUPPLY_ENV_FILE",
        "SERVER_HOST",
        "SERVER_PORT",
        "LOG_LEVEL",
        "LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def token_address() -> str:
    return TOKEN_ADDRESS


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def settings(token_address: str, api_key: str) -> SupplySettings:
    return SupplySettings(
        etherscan_api_key=api_key,
        token_address=token_address,
        token_decimals=9,
    )


@pytest.fixture
def client(settings: SupplySettings) -> TestClient:
    return TestClient(create_app(settings))


def _make_response(payload=None, status_code: int = 200, text: str | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text if text is not None else str(payload)
    if payload is None:
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text or "", 0)
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def make_response():
    return _make_response
