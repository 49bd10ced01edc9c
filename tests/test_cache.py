import time

import pytest

from pokedex_cli.cache import Cache


@pytest.mark.parametrize(
    ("key", "val"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, val):
    with Cache(5.0) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_get_missing_key_returns_none():
    with Cache(5.0) as cache:
        assert cache.get("https://example.com") is None


def test_add_replaces_existing_value():
    with Cache(5.0) as cache:
        cache.add("https://example.com", b"testdata")
        cache.add("https://example.com", b"moretestdata")
        assert cache.get("https://example.com") == b"moretestdata"


def test_reap_loop():
    base_time = 0.005
    with Cache(base_time) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"

        deadline = time.monotonic() + 2.0
        while cache.get("https://example.com") is not None and time.monotonic() < deadline:
            time.sleep(base_time)

        assert cache.get("https://example.com") is None


def test_closed_cache_keeps_entries():
    cache = Cache(0.005)
    cache.close()
    cache.add("https://example.com", b"testdata")
    time.sleep(0.05)
    assert cache.get("https://example.com") == b"testdata"


@pytest.mark.parametrize("interval", [0, -1.0])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)