import pytest
from pydantic import ValidationError

from greeter.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.port == 8080
    assert settings.message == "Hello from EKS!"
    assert settings.host == "0.0.0.0"


def test_reads_environment():
    settings = Settings.from_env({"PORT": "9090", "MESSAGE": "Foo", "HOST": "127.0.0.1"})
    assert settings.port == 9090
    assert settings.message == "Foo"
    assert settings.host == "127.0.0.1"


def test_empty_values_fall_back():
    settings = Settings.from_env({"PORT": "", "MESSAGE": ""})
    assert settings.port == 8080
    assert settings.message == "Hello from EKS!"


def test_process_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9191")
    monkeypatch.delenv("MESSAGE", raising=False)
    settings = Settings.from_env()
    assert settings.port == 9191
    assert settings.message == "Hello from EKS!"


@pytest.mark.parametrize("port", ["http", "-1", "70000", "80.5"])
def test_invalid_port(port):
    with pytest.raises(ValidationError):
        Settings.from_env({"PORT": port})


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.message = "changed"


def test_app_does_not_read_environment(make_client, monkeypatch):
    client = make_client(message="Configured")
    monkeypatch.setenv("MESSAGE", "From env")
    text = client.get("/").text
    assert "Configured" in text
    assert "From env" not in text
