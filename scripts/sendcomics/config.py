"""
Configuration management for SendComics.

Handles loading and accessing configuration from YAML files and environment variables.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class Config:
    """Configuration manager for the comic digest mailer."""

    # Default configuration values
    DEFAULTS: Dict[str, Any] = {
        "paths": {
            "base_dir": None,  # Set dynamically
            "logs": "logs",
        },
        # Subscription text, e.g. "me@example.com: dilbert, foxtrot; you@example.com: xkcd"
        "subscriptions": "",
        "mail": {
            "sender": "comics@blairconrad.com",
            "subject": "Comics for {weekday}, {month} {day}, {year}",
            "smtp_server": "smtp.gmail.com",
            "smtp_port": 587,
            "use_tls": True,
        },
        "fetch": {
            "timeout": 30,
            "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_enabled": True,
        },
    }

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}
    _base_dir: Optional[Path] = None

    def __new__(cls) -> "Config":
        """Singleton pattern to ensure single configuration instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration if not already done."""
        if self._initialized:
            return
        self._initialized = True
        self._config = copy.deepcopy(self.DEFAULTS)
        self._base_dir = self._find_base_dir()
        self._load_config_file()

    def _find_base_dir(self) -> Path:
        """Find the base directory of the SendComics installation."""
        # Check environment variable first
        env_base = os.environ.get("SENDCOMICS_BASE_DIR")
        if env_base:
            return Path(env_base)

        # scripts/sendcomics/config.py -> scripts/sendcomics -> scripts -> base
        current_file = Path(__file__).resolve()
        return current_file.parent.parent.parent

    def _load_config_file(self) -> None:
        """Load configuration from YAML file if it exists."""
        config_path = self._base_dir / "config" / "config.yaml"
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
                self._merge_config(file_config)

        self._config["paths"]["base_dir"] = str(self._base_dir)

    def _merge_config(self, new_config: Dict[str, Any]) -> None:
        """Deep merge new configuration into existing configuration."""
        for key, value in new_config.items():
            if key in self._config and isinstance(self._config[key], dict) and isinstance(value, dict):
                self._config[key].update(value)
            else:
                self._config[key] = value

    @property
    def base_dir(self) -> Path:
        """Get the base directory path."""
        return self._base_dir

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self._base_dir / self._config["paths"]["logs"]

    @property
    def subscriptions_text(self) -> str:
        """Get the raw subscription text, preferring the environment."""
        env_text = os.environ.get("SENDCOMICS_SUBSCRIPTIONS")
        if env_text:
            return env_text
        return self._config.get("subscriptions") or ""

    @property
    def sender(self) -> str:
        """Get the address digests are sent from."""
        return self._config["mail"]["sender"]

    @property
    def smtp_username(self) -> Optional[str]:
        return os.environ.get("SMTP_USERNAME")

    @property
    def smtp_password(self) -> Optional[str]:
        return os.environ.get("SMTP_PASSWORD")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports dot notation for nested keys (e.g., 'mail.smtp_port').
        """
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = copy.deepcopy(self.DEFAULTS)
        self._load_config_file()


# Global configuration instance
config = Config()
