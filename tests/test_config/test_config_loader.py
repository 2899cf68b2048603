"""Tests for ConfigLoader: YAML layering, env overrides and validation."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from market_stats.config import ConfigLoader, ConfigState, get_config
from market_stats.ingestion.config.value_objects import QuoteApiConfig

REPO_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

ENV_VARS = (
    "QUOTE_API_BASE_URL",
    "QUOTE_API_COOKIE",
    "QUOTE_API_USER_AGENT",
    "LOG_LEVEL",
    "LOG_JSON",
    "MARKET_STATS_ENV",
    "MARKET_STATS_CONFIG_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_yaml(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


@pytest.fixture
def config_dir(tmp_path):
    write_yaml(
        tmp_path / "quote_api.yaml",
        {
            "quote_api": {
                "base_url": "https://quotes.example.com/v8/finance/chart/",
                "headers": {"accept": "*/*", "user-agent": "from-yaml"},
                "lookback_days": 200,
            }
        },
    )
    write_yaml(tmp_path / "retry.yaml", {"retry": {"max_attempts": 5, "delay_seconds": 0.5}})
    write_yaml(tmp_path / "env" / "test.yaml", {"logging": {"level": "DEBUG", "json_logs": False}})
    return tmp_path


class TestConfigLoader:
    def test_defaults_without_files(self, tmp_path):
        state = ConfigLoader(config_dir=tmp_path / "missing", env="dev").load()

        assert isinstance(state, ConfigState)
        assert state.quote_api.base_url == "https://query1.finance.yahoo.com/v8/finance/chart"
        assert state.retry.max_attempts == 15
        assert state.retry.delay_seconds == 1.5
        assert state.retry.timeout_seconds == 5.0
        assert state.quote_api.lookback_days == 365
        assert "cookie" not in state.quote_api.headers

    def test_yaml_layers_merge(self, config_dir):
        state = ConfigLoader(config_dir=config_dir, env="test").load()

        assert state.env == "test"
        assert state.quote_api.base_url == "https://quotes.example.com/v8/finance/chart"
        assert state.quote_api.headers["user-agent"] == "from-yaml"
        assert state.quote_api.lookback_days == 200
        assert state.retry.max_attempts == 5
        assert state.retry.timeout_seconds == 5.0
        assert state.logging.level == "DEBUG"
        assert state.logging.json_logs is False

    def test_env_overrides(self, config_dir, monkeypatch):
        monkeypatch.setenv("QUOTE_API_COOKIE", "A3=d=AQABBA")
        monkeypatch.setenv("QUOTE_API_USER_AGENT", "from-env")
        monkeypatch.setenv("QUOTE_API_BASE_URL", "http://localhost:9000/chart")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_JSON", "true")

        state = ConfigLoader(config_dir=config_dir, env="test").load()

        assert state.quote_api.headers == {
            "accept": "*/*",
            "user-agent": "from-env",
            "cookie": "A3=d=AQABBA",
        }
        assert state.quote_api.base_url == "http://localhost:9000/chart"
        assert state.logging.level == "WARNING"
        assert state.logging.json_logs is True

    def test_env_selected_from_environment(self, config_dir, monkeypatch):
        monkeypatch.setenv("MARKET_STATS_ENV", "test")
        assert ConfigLoader(config_dir=config_dir).load().logging.level == "DEBUG"

    def test_invalid_base_url(self, tmp_path):
        write_yaml(tmp_path / "quote_api.yaml", {"quote_api": {"base_url": "ftp://quotes"}})
        with pytest.raises(ValidationError):
            ConfigLoader(config_dir=tmp_path, env="dev").load()

    def test_unsupported_interval(self, tmp_path):
        write_yaml(tmp_path / "quote_api.yaml", {"quote_api": {"interval": "1h"}})
        with pytest.raises(ValidationError):
            ConfigLoader(config_dir=tmp_path, env="dev").load()

    def test_attempt_budget_bounds(self, tmp_path):
        write_yaml(tmp_path / "retry.yaml", {"retry": {"max_attempts": 0}})
        with pytest.raises(ValidationError):
            ConfigLoader(config_dir=tmp_path, env="dev").load()

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "retry.yaml").write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a mapping"):
            ConfigLoader(config_dir=tmp_path, env="dev").load()


def test_repository_config_loads():
    state = get_config(str(REPO_CONFIG_DIR))

    assert state.retry.max_attempts == 15
    assert state.api.port == 8000
    assert state.quote_api.extra_params["events"] == "div|split|earn"


def test_quote_api_config_from_state(config_dir):
    state = ConfigLoader(config_dir=config_dir, env="test").load()
    config = QuoteApiConfig.from_state(state)

    assert config.base_url == "https://quotes.example.com/v8/finance/chart"
    assert config.lookback_days == 200
    assert config.retry_config.max_attempts == 5
    assert config.retry_config.delay_seconds == 0.5
    assert config.http_config.timeout == 5.0
