"""Tests for web configuration."""

import pytest
from framewar.web.config import ConfigError, WebConfig


class TestWebConfig:
    def test_defaults(self):
        config = WebConfig.from_env({})

        assert config.seed is None
        assert config.base_path == "/api"
        assert config.rate_limit == "120/minute"
        assert config.cors_origins == ["http://localhost:5173"]

    def test_reads_environment(self):
        config = WebConfig.from_env({
            "FRAMEWAR_SEED": "42",
            "FRAMEWAR_BASE_PATH": "frames/",
            "FRAMEWAR_RATE_LIMIT": "10/second",
            "FRAMEWAR_CORS_ORIGINS": "https://a.example, https://b.example",
        })

        assert config.seed == 42
        assert config.base_path == "/frames"
        assert config.rate_limit == "10/second"
        assert config.cors_origins == ["https://a.example", "https://b.example"]

    def test_rejects_bad_seed(self):
        with pytest.raises(ConfigError, match="FRAMEWAR_SEED"):
            WebConfig.from_env({"FRAMEWAR_SEED": "abc"})

    def test_root_base_path(self):
        assert WebConfig(base_path="/").base_path == ""

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("FRAMEWAR_SEED", "9")

        assert WebConfig.from_env().seed == 9
