"""Shared fixtures: a mocked requests.Session so no test touches the network."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from whmctl import WhmServer


def make_response(body: Any, status_code: int = 200) -> MagicMock:
    """Build a fake requests.Response. Non-str bodies are JSON-encoded."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def server(session: MagicMock) -> WhmServer:
    return WhmServer(host="whm.example.com", hash="secrethash", session=session)
