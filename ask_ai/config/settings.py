"""
Unified configuration management for the Ask AI action.

These are operator-level settings of the package. The action's own fields
(URL, key, model, prompts...) come from the host, never from here.

Supports loading from:
- Environment variables
- YAML config files (askai.yaml)
- Programmatic overrides

Priority (highest to lowest):
1. Programmatic overrides
2. YAML config files
3. Environment variables
4. Default values

Usage:
    from ask_ai.config import settings

    settings.http.timeout
    settings.log.level

    settings.reload()
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# =============================================================================
# Configuration Dataclasses
# =============================================================================

@dataclass
class HttpSettings:
    """HTTP client configuration. A timeout of None keeps the client's default."""
    timeout: Optional[float] = None


@dataclass
class LogSettings:
    """Logging configuration."""
    level: str = "INFO"
    json_format: bool = False


@dataclass
class Settings:
    """
    Main settings container.

    Provides unified access to all configuration.
    """
    http: HttpSettings = field(default_factory=HttpSettings)
    log: LogSettings = field(default_factory=LogSettings)

    # Internal state
    _config_file: Optional[Path] = None
    _env_prefix: str = "ASKAI_"

    def __post_init__(self):
        """Load configuration after initialization."""
        self._load_from_env()
        self._load_from_yaml()

    def _load_from_env(self):
        """Load settings from environment variables."""
        prefix = self._env_prefix

        if val := os.getenv(f"{prefix}HTTP_TIMEOUT"):
            self.http.timeout = float(val)

        if val := os.getenv(f"{prefix}LOG_LEVEL"):
            self.log.level = val.upper()
        if val := os.getenv(f"{prefix}LOG_JSON"):
            self.log.json_format = val.lower() in ("true", "1", "yes")

    def _load_from_yaml(self):
        """Load settings from the first YAML config file found."""
        search_paths = [
            Path.cwd() / "askai.yaml",
            Path.cwd() / "askai.yml",
            Path.home() / ".askai" / "config.yaml",
        ]

        for config_path in search_paths:
            if config_path.exists():
                self._config_file = config_path
                self._apply_yaml_config(config_path)
                break

    def _apply_yaml_config(self, path: Path):
        """Apply config from YAML file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if http := data.get("http"):
            for key, val in http.items():
                if hasattr(self.http, key):
                    setattr(self.http, key, val)

        if log := data.get("log"):
            for key, val in log.items():
                if hasattr(self.log, key):
                    setattr(self.log, key, val)

    def reload(self):
        """Reload configuration from all sources."""
        self.http = HttpSettings()
        self.log = LogSettings()
        self._config_file = None

        self._load_from_env()
        self._load_from_yaml()

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return {
            "http": {
                "timeout": self.http.timeout,
            },
            "log": {
                "level": self.log.level,
                "json_format": self.log.json_format,
            },
        }

    def __repr__(self) -> str:
        return f"Settings(config_file={self._config_file})"


# =============================================================================
# Global Settings Instance
# =============================================================================

settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def configure(**kwargs):
    """
    Configure settings programmatically.

    Args:
        **kwargs: Settings to override in format "section_key=value"

    Example:
        configure(http_timeout=30.0, log_level="DEBUG")
    """
    for key, value in kwargs.items():
        parts = key.split("_", 1)
        if len(parts) == 2:
            section, attr = parts
            if hasattr(settings, section):
                section_obj = getattr(settings, section)
                if hasattr(section_obj, attr):
                    setattr(section_obj, attr, value)
