import pytest
from fastapi.testclient import TestClient

from greeter.config import Settings
from greeter.main import create_app
from greeter.page import HostInfo


HOST_INFO = HostInfo(hostname="web-7f9c", platform="linux", runtime="Python 3.12.1")


@pytest.fixture
def make_client():
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(Settings(**overrides), HOST_INFO))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
