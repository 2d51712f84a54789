"""Pytest configuration and shared fixtures."""

import io

import httpx
import pytest
from rich.console import Console

from ghtools.core.api_client import APIClient
from ghtools.core.config import ClientConfig

ENTERPRISE_HOST = "github.example.com"
ENTERPRISE_BASE = "https://github.example.com/api/v3"


class StubPrompt:
    """Non-interactive stand-in for the terminal credential prompt."""

    def __init__(self, username: str = "", password: str = ""):
        self.username = username
        self.password = password
        self.asked = []

    def ask_username(self, default: str = "") -> str:
        self.asked.append(("username", default))
        return self.username or default

    def ask_password(self) -> str:
        self.asked.append(("password", None))
        return self.password


@pytest.fixture
def config():
    """Token-authenticated config for an Enterprise host."""
    return ClientConfig(host=ENTERPRISE_HOST, token="s3cr3t-token")


@pytest.fixture
def trace_buffer():
    """Buffer that receives the client's verbose trace."""
    return io.StringIO()


@pytest.fixture
def make_client(config, trace_buffer):
    """
    Build an APIClient whose HTTP traffic goes to ``handler``.

    The handler receives each httpx.Request and returns an httpx.Response.
    """
    clients = []

    def factory(handler, cfg=None, **kwargs):
        console = Console(file=trace_buffer, width=500, color_system=None, highlight=False)
        client = APIClient(
            cfg or config,
            transport=httpx.MockTransport(handler),
            console=console,
            **kwargs,
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def recorder():
    """Handler factory recording requests and replaying canned responses by URL."""

    class Recorder:
        def __init__(self):
            self.requests = []
            self.routes = {}

        def add(self, url, status=200, json=None, text=None, headers=None):
            self.routes[url] = (status, json, text, headers or {})

        def __call__(self, request):
            self.requests.append(request)
            status, json_data, text, headers = self.routes[str(request.url)]
            if json_data is not None:
                return httpx.Response(status, json=json_data, headers=headers)
            return httpx.Response(status, text=text or "", headers=headers)

    return Recorder()


@pytest.fixture
def stub_prompt():
    """The StubPrompt class, for tests that need scripted credentials."""
    return StubPrompt
