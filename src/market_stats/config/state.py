"""
Unified configuration state for market-stats.

This module provides a single source of truth for all application configuration,
combining hierarchical YAML files with environment overrides, type validation,
and sensible defaults. Upstream request headers (including any cookie/session
material) are configuration, never source constants.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class QuoteApiSettings(BaseModel):
    """Quote-chart API configuration."""

    base_url: str = Field(default="https://query1.finance.yahoo.com/v8/finance/chart")
    headers: dict[str, str] = Field(default_factory=lambda: {"accept": "*/*"})
    lookback_days: int = Field(default=365, ge=1, le=3650)
    interval: str = Field(default="1d")
    extra_params: dict[str, str] = Field(
        default_factory=lambda: {
            "includePrePost": "true",
            "events": "div|split|earn",
            "lang": "en-US",
            "region": "US",
        }
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip whitespace and trailing slash; require an http(s) scheme."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("Quote API base URL must start with http:// or https://")
        return v

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: str) -> str:
        """Only daily bars are supported."""
        if v != "1d":
            raise ValueError(f"Unsupported interval: {v}")
        return v

    class Config:
        extra = "allow"


class RetrySettings(BaseModel):
    """Retry behaviour of the request executor."""

    max_attempts: int = Field(default=15, ge=1, le=100)
    delay_seconds: float = Field(default=1.5, ge=0.0)
    timeout_seconds: float = Field(default=5.0, gt=0.0)

    class Config:
        extra = "allow"


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)

    class Config:
        extra = "allow"


class ApiSettings(BaseModel):
    """HTTP façade bind address."""

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    class Config:
        extra = "allow"


class ConfigState(BaseModel):
    """
    Root configuration state - single source of truth for all app config.
    """

    quote_api: QuoteApiSettings = Field(default_factory=QuoteApiSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)

    # Environment metadata
    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")

    class Config:
        extra = "allow"


# =============================================================================
# CONFIG LOADER - Clean, Validated Loading
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration from hierarchical YAML files.

    Merges:
      1. Global defaults (hardcoded)
      2. YAML files from config_dir
      3. Environment-specific YAML (env/<env>.yaml)
      4. Environment variable overrides
    """

    CONFIG_FILES = ("quote_api.yaml", "retry.yaml", "logging.yaml", "api.yaml")

    def __init__(self, config_dir: str | Path = "./config", env: str | None = None):
        self.config_dir = Path(config_dir)
        self._yaml_cache: dict[Path, Any] = {}
        self.env = env or os.getenv("MARKET_STATS_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file with caching."""
        if path in self._yaml_cache:
            return self._yaml_cache[path]

        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        self._yaml_cache[path] = data
        logger.debug(f"Loaded config: {path}")
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        quote_api = config.setdefault("quote_api", {})

        if base_url := os.getenv("QUOTE_API_BASE_URL"):
            quote_api["base_url"] = base_url

        headers = dict(quote_api.get("headers") or {})
        if cookie := os.getenv("QUOTE_API_COOKIE"):
            headers["cookie"] = cookie
        if user_agent := os.getenv("QUOTE_API_USER_AGENT"):
            headers["user-agent"] = user_agent
        if headers:
            quote_api["headers"] = headers

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        if log_json := os.getenv("LOG_JSON"):
            config.setdefault("logging", {})["json_logs"] = log_json.strip().lower() in (
                "1",
                "true",
                "yes",
            )

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Returns:
            ConfigState: Validated configuration object

        Raises:
            pydantic.ValidationError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {self.config_dir} (env: {self.env})")

        config: dict[str, Any] = {}

        for config_file in self.CONFIG_FILES:
            file_config = self._load_yaml(self.config_dir / config_file)
            config = self._merge_dicts(config, file_config)

        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)

        config = self._apply_env_overrides(config)

        state = ConfigState(env=self.env, config_dir=str(self.config_dir), **config)
        logger.info(
            f"Configuration loaded: base_url={state.quote_api.base_url}, "
            f"headers={len(state.quote_api.headers)}, "
            f"max_attempts={state.retry.max_attempts}"
        )
        return state


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================


def get_config(config_dir: str | None = None) -> ConfigState:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to $MARKET_STATS_CONFIG_DIR or ./config

    Returns:
        ConfigState: Validated configuration object
    """
    if config_dir is None:
        config_dir = os.getenv("MARKET_STATS_CONFIG_DIR", "./config")
        if not Path(config_dir).exists():
            logger.warning(f"Config directory not found at {config_dir}, using defaults")

    loader = ConfigLoader(config_dir=config_dir)
    return loader.load()


__all__ = [
    "ApiSettings",
    "ConfigLoader",
    "ConfigState",
    "LoggingSettings",
    "QuoteApiSettings",
    "RetrySettings",
    "get_config",
]
