"""Shared pytest fixtures for the Gengo client tests."""

import json
from typing import Any
from unittest.mock import patch

import pytest
import requests

from gengo_lib import GengoClient

PUBLIC_KEY = "test-public-key"
PRIVATE_KEY = "test-private-key"
FIXED_TS = 1700000000


def make_response(
    status: int = 200, body: Any = None, url: str = "https://api.gengo.com/v2/x"
) -> requests.Response:
    """Build a ``requests.Response`` with a JSON (or raw text) body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    text = body if isinstance(body, str) else json.dumps(body)
    resp._content = text.encode("utf-8")
    return resp


@pytest.fixture
def ok_response():
    return make_response(200, {"opstat": "ok", "response": {"id": 42}})


@pytest.fixture
def gengo_client():
    """Sandbox client with a frozen clock."""
    client = GengoClient(PUBLIC_KEY, PRIVATE_KEY, sandbox=True)
    client.signer.clock = lambda: FIXED_TS
    yield client
    client.close()


@pytest.fixture
def transport(gengo_client, ok_response):
    """Mocked ``Session.request`` of ``gengo_client``; returns ``ok_response``."""
    with patch.object(
        gengo_client.http.session, "request", return_value=ok_response
    ) as mocked:
        yield mocked
