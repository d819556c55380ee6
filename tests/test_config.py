import pytest
from pydantic import ValidationError

from tavus_mcp.config import DEFAULT_API_URL, ConfigError, TavusSettings


def test_missing_api_key_refuses_to_configure():
    with pytest.raises(ConfigError, match="TAVUS_API_KEY"):
        TavusSettings.from_env({})


def test_blank_api_key_refuses_to_configure():
    with pytest.raises(ConfigError):
        TavusSettings.from_env({"TAVUS_API_KEY": "   "})


def test_defaults():
    settings = TavusSettings.from_env({"TAVUS_API_KEY": "secret"})

    assert settings.api_key == "secret"
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout == 30.0
    assert settings.transport == "stdio"
    assert settings.log_level == "INFO"


def test_overrides():
    settings = TavusSettings.from_env({
        "TAVUS_API_KEY": "secret",
        "TAVUS_API_URL": "http://localhost:9000/v2/",
        "API_TIMEOUT": "5",
        "MCP_TRANSPORT": "HTTP",
        "MCP_HTTP_PORT": "8080",
        "LOG_LEVEL": "debug",
    })

    assert settings.api_url == "http://localhost:9000/v2"
    assert settings.timeout == 5.0
    assert settings.transport == "http"
    assert settings.http_port == 8080
    assert settings.log_level == "DEBUG"


def test_unknown_transport_is_rejected():
    with pytest.raises(ConfigError, match="MCP_TRANSPORT"):
        TavusSettings.from_env({"TAVUS_API_KEY": "secret", "MCP_TRANSPORT": "carrier-pigeon"})


def test_bad_number_is_rejected():
    with pytest.raises(ConfigError):
        TavusSettings.from_env({"TAVUS_API_KEY": "secret", "API_TIMEOUT": "soon"})


def test_settings_are_immutable():
    settings = TavusSettings(api_key="secret")

    with pytest.raises(ValidationError):
        settings.api_key = "other"


def test_entry_point_exits_without_api_key(monkeypatch):
    from tavus_mcp import __main__ as entry

    monkeypatch.delenv("TAVUS_API_KEY", raising=False)

    def never_called(*args, **kwargs):
        raise AssertionError("server must not start")

    monkeypatch.setattr(entry, "TavusMCPServer", never_called)

    with pytest.raises(SystemExit) as exc_info:
        entry.run()

    assert exc_info.value.code == 1


def test_entry_point_logs_missing_key_in_standard_format(monkeypatch):
    import logging

    from tavus_mcp import __main__ as entry

    monkeypatch.delenv("TAVUS_API_KEY", raising=False)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    with pytest.raises(SystemExit):
        entry.run()

    assert calls[0]["format"] == entry.LOG_FORMAT
    assert entry.LOG_FORMAT == '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
