from __future__ import annotations

import threading

import pytest

from routecall.exceptions import InvalidArgumentException
from routecall.http import tokens
from routecall.support import Config

LOWER = -(2**63)
UPPER = 2**63 - 1


def test_secure_source_stays_in_signed_64_bit_range() -> None:
    source = tokens.SecureTokenSource()
    values = [source.next_token() for _ in range(2000)]
    assert all(LOWER <= value <= UPPER for value in values)
    assert any(value < 0 for value in values)
    assert any(value > 0 for value in values)


def test_seeded_source_is_reproducible() -> None:
    first = tokens.SeededTokenSource(42)
    second = tokens.SeededTokenSource(42)
    assert [first.next_token() for _ in range(10)] == [second.next_token() for _ in range(10)]


def test_seeded_source_is_safe_across_threads() -> None:
    source = tokens.SeededTokenSource(7)
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        produced = [source.next_token() for _ in range(250)]
        with lock:
            results.extend(produced)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected = tokens.SeededTokenSource(7)
    assert sorted(results) == sorted(expected.next_token() for _ in range(2000))


def test_uniquify_separator_selection(fixed_tokens) -> None:
    source = fixed_tokens(11, 22)
    assert tokens.uniquify("/a", source) == "/a?11"
    assert tokens.uniquify("/a?b=c", source) == "/a?b=c&22"


def test_uniquify_on_empty_url(fixed_tokens) -> None:
    assert tokens.uniquify("", fixed_tokens(3)) == "?3"


def test_uniquify_rejects_none() -> None:
    with pytest.raises(InvalidArgumentException):
        tokens.uniquify(None)


def test_default_source_is_secure() -> None:
    assert isinstance(tokens.get_token_source(), tokens.SecureTokenSource)
    assert tokens.get_token_source() is tokens.get_token_source()


def test_default_source_follows_config() -> None:
    Config.set("app.URL_TOKEN_SOURCE", "seeded")
    Config.set("app.URL_TOKEN_SEED", 99)

    source = tokens.get_token_source()
    assert isinstance(source, tokens.SeededTokenSource)
    assert source.seed == 99


def test_default_source_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_URL_TOKEN_SOURCE", "seeded")
    monkeypatch.setenv("APP_URL_TOKEN_SEED", "5")

    source = tokens.get_token_source()
    assert isinstance(source, tokens.SeededTokenSource)
    assert source.seed == 5


def test_unknown_source_name_is_rejected() -> None:
    Config.set("app.URL_TOKEN_SOURCE", "dice")
    with pytest.raises(InvalidArgumentException):
        tokens.get_token_source()


def test_non_integer_seed_is_rejected() -> None:
    with pytest.raises(InvalidArgumentException):
        tokens.make_token_source("seeded", "abc")


def test_set_token_source_replaces_default(fixed_tokens) -> None:
    source = fixed_tokens(1)
    tokens.set_token_source(source)
    assert tokens.get_token_source() is source
    assert tokens.uniquify("/x") == "/x?1"

    tokens.reset_token_source()
    assert tokens.get_token_source() is not source


def test_set_token_source_rejects_other_types() -> None:
    with pytest.raises(InvalidArgumentException):
        tokens.set_token_source(lambda: 1)
