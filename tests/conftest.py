from __future__ import annotations

from types import SimpleNamespace

import pytest

from routecall.http import tokens
from routecall.support import Config, EnvHelper


@pytest.fixture(autouse=True)
def clean_state(monkeypatch, tmp_path):
    """Isolate config, environment and the process-wide token source."""
    for name in ("APP_URL_TOKEN_SOURCE", "APP_URL_TOKEN_SEED", "HTTP_REDIRECT_STATUS", "APP_APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    EnvHelper.reset()
    EnvHelper.initialize(tmp_path / ".env")
    Config.clear_runtime_overrides()
    Config.reload()
    tokens.reset_token_source()
    yield
    Config.clear_runtime_overrides()
    tokens.reset_token_source()
    EnvHelper.reset()


class FixedTokenSource(tokens.TokenSource):
    def __init__(self, *values: int):
        self.values = list(values)
        self.calls = 0

    def next_token(self) -> int:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_tokens():
    return FixedTokenSource


@pytest.fixture
def sanic_like_request():
    def build(scheme: str = "http", host: str = "example.com"):
        return SimpleNamespace(scheme=scheme, host=host)

    return build
