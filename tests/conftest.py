from unittest.mock import MagicMock, patch

import aiohttp
import pytest
from starlette.testclient import TestClient

from showfinder.main import app


def make_response_error(status=404, message="Not Found"):
    request_info = MagicMock()
    request_info.real_url = "http://api.tvmaze.com/shows/0/episodes"
    return aiohttp.ClientResponseError(request_info=request_info, history=(), status=status, message=message)


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise make_response_error(self.status)

    async def json(self):
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


# stands in for aiohttp.ClientSession and records every GET
class FakeSession:
    def __init__(self, payload=None, status=200):
        self.payload = payload if payload is not None else []
        self.status = status
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        return FakeResponse(self.payload, self.status)


@pytest.fixture
def client():
    with patch("showfinder.main.setup_logging"):
        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def lenient_client():
    # unhandled errors become 500 responses instead of being raised
    with patch("showfinder.main.setup_logging"):
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
