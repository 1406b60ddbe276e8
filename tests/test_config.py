"""Tests for subscriber configuration."""

import dataclasses

import pytest

from hubabuba import Config


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()
        assert config.url == "http://localhost:3000/hubabuba"
        assert config.callback_path == "/hubabuba"
        assert config.lease_seconds == 86400
        assert config.verification({"id": "1"}) is True
        assert config.timeout_tuple == (5, 20)

    def test_callback_url_parsed_once(self) -> None:
        config = Config(url="https://www.myhost.com/push/cb?x=1")
        assert config.callback_url.netloc == "www.myhost.com"
        assert config.callback_path == "/push/cb"

    def test_root_url_path(self) -> None:
        assert Config(url="http://myhost.com").callback_path == "/"

    def test_immutable(self) -> None:
        config = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.url = "http://other/"  # type: ignore[misc]

    def test_single_timeout(self) -> None:
        assert Config(timeout=10).timeout_tuple == (10, 10)


class TestConfigFromEnv:
    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("HUBABUBA_CALLBACK_URL", "https://env.example/cb")
        monkeypatch.setenv("HUBABUBA_LEASE_SECONDS", "3600")
        monkeypatch.setenv("HUBABUBA_SYNC_REQUESTS", "true")

        config = Config.from_env()

        assert config.url == "https://env.example/cb"
        assert config.lease_seconds == 3600
        assert config.sync_requests is True

    def test_overrides_win(self, monkeypatch) -> None:
        monkeypatch.setenv("HUBABUBA_LEASE_SECONDS", "3600")
        assert Config.from_env(lease_seconds=60).lease_seconds == 60

    def test_empty_environment(self, monkeypatch) -> None:
        for name in ("HUBABUBA_CALLBACK_URL", "HUBABUBA_LEASE_SECONDS", "HUBABUBA_SYNC_REQUESTS"):
            monkeypatch.delenv(name, raising=False)
        assert Config.from_env() == Config()
