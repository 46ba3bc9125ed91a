from __future__ import annotations

import os
import sys
import types

import pytest

from routecall.support import Config, EnvHelper


@pytest.fixture
def app_config_module(monkeypatch):
    package = types.ModuleType("config")
    package.__path__ = []
    module = types.ModuleType("config.app")
    module.URL_TOKEN_SOURCE = "seeded"
    module.SERVICES = {"Cdn": {"Host": "cdn.example.com"}}
    monkeypatch.setitem(sys.modules, "config", package)
    monkeypatch.setitem(sys.modules, "config.app", module)
    Config.reload()
    yield module
    Config.reload()


def test_default_when_missing() -> None:
    assert Config.get("app.URL_TOKEN_SOURCE", "secure") == "secure"
    assert Config.has("app.URL_TOKEN_SOURCE") is False


def test_runtime_override_is_case_insensitive() -> None:
    Config.set("APP.Url_Token_Source", "seeded")
    assert Config.get("app.url_token_source") == "seeded"
    assert Config.has("app.URL_TOKEN_SOURCE")

    Config.clear_runtime_overrides()
    assert Config.get("app.URL_TOKEN_SOURCE") is None


def test_reads_config_module(app_config_module) -> None:
    assert Config.get("app.url_token_source") == "seeded"
    assert Config.get("app.services.cdn.host") == "cdn.example.com"
    assert Config.get("app.services.cdn.port", 443) == 443
    assert Config.all("app") is app_config_module


def test_override_beats_config_module(app_config_module) -> None:
    Config.set("app.URL_TOKEN_SOURCE", "secure")
    assert Config.get("app.URL_TOKEN_SOURCE") == "secure"


def test_environment_fallback(monkeypatch) -> None:
    monkeypatch.setenv("APP_URL_TOKEN_SEED", "12")
    assert Config.get("app.URL_TOKEN_SEED") == "12"


def test_config_module_beats_environment(app_config_module, monkeypatch) -> None:
    monkeypatch.setenv("APP_URL_TOKEN_SOURCE", "secure")
    assert Config.get("app.URL_TOKEN_SOURCE") == "seeded"


def test_dotenv_file_is_loaded(tmp_path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("HTTP_REDIRECT_STATUS=308\n")

    EnvHelper.reset()
    assert EnvHelper.load(env_file) is True
    try:
        assert Config.get("http.REDIRECT_STATUS") == "308"
    finally:
        os.environ.pop("HTTP_REDIRECT_STATUS", None)
