import httpx
import pytest

from tavus_mcp.client import TavusClient
from tavus_mcp.config import TavusSettings
from tavus_mcp.server import TavusMCPServer

API_URL = "https://tavusapi.test/v2"


class FakeTavus:
    """Stands in for the Tavus API behind an httpx.MockTransport"""

    def __init__(self):
        self.requests = []
        self.routes = {}
        self.failure = None

    def respond(self, method, path, status_code=200, json=None, content=None):
        self.routes[(method, path)] = (status_code, json, content)

    def fail_with(self, exc_type, message):
        self.failure = (exc_type, message)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failure is not None:
            exc_type, message = self.failure
            raise exc_type(message, request=request)

        path = request.url.path[len("/v2"):]
        status_code, body, content = self.routes.get(
            (request.method, path), (200, {"method": request.method, "path": path}, None)
        )
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return TavusSettings(api_key="test-key", api_url=API_URL)


@pytest.fixture
def fake_tavus():
    return FakeTavus()


@pytest.fixture
def client(settings, fake_tavus):
    return TavusClient(settings, transport=httpx.MockTransport(fake_tavus))


@pytest.fixture
def server(settings, client):
    return TavusMCPServer(settings, client=client)
