"""
Configuration management for viewkit using Pydantic for schema validation.
"""

import json
import os
import logging
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, ValidationError


class ViewkitConfig(BaseModel):
    """Pydantic model for the global view defaults"""

    root: str = Field(default=".", description="Default templates root path")
    layout: Optional[str] = Field(
        default=None, description="Default layout applied to views at load time"
    )
    namespace: Optional[str] = Field(
        default=None,
        description="Module prefix dropped from view names, e.g. \"app.views\"",
    )

    model_config = {
        # Allow extra fields so applications can keep their own keys alongside
        "extra": "allow"
    }


class ConfigManager:
    """Configuration manager for viewkit"""

    # Class variable for singleton pattern
    _instance = None
    # Track instances by config path to support testing with different paths
    _instances_by_path: Dict[str, "ConfigManager"] = {}

    @classmethod
    def _resolve_config_path(cls, config_path: Optional[str] = None) -> str:
        """Resolve configuration file path with precedence: parameter > VIEWKIT_CONFIG_PATH > default.

        Args:
            config_path: Explicit path provided by caller

        Returns:
            Resolved configuration file path
        """
        if config_path is not None:
            return config_path

        env_path = os.getenv("VIEWKIT_CONFIG_PATH")
        if env_path is not None:
            return env_path

        return os.path.join(os.path.expanduser("~"), ".viewkit.json")

    def __new__(cls, config_path: Optional[str] = None):
        """Singleton per resolved config path."""
        config_path = cls._resolve_config_path(config_path)

        if config_path in cls._instances_by_path:
            return cls._instances_by_path[config_path]

        instance = super(ConfigManager, cls).__new__(cls)
        if cls._instance is None:
            cls._instance = instance
        cls._instances_by_path[config_path] = instance
        instance._initialized = False
        return instance

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config manager with optional custom path"""
        if getattr(self, "_initialized", False):
            return

        self.config_path = self._resolve_config_path(config_path)
        self._config: Optional[ViewkitConfig] = None
        self._initialized = True

    def load(self) -> ViewkitConfig:
        """Load configuration from file, then apply environment overrides"""
        config_data: Dict[str, Any] = {}
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, "r") as f:
                    config_data = json.load(f)
                    logging.debug(f"Loaded view configuration from {self.config_path}")
            except json.JSONDecodeError:
                logging.error("Config file is corrupted. Using default config.")
            except OSError as e:
                logging.error(f"Error loading config: {e}")

        if not isinstance(config_data, dict):
            logging.error("Config file must contain a JSON object. Using default config.")
            config_data = {}

        env_mappings = {
            "root": "VIEWKIT_ROOT",
            "layout": "VIEWKIT_LAYOUT",
            "namespace": "VIEWKIT_NAMESPACE",
        }

        for field, env_var in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                config_data[field] = value
                logging.debug(f"Using {field} from environment variable {env_var}")

        try:
            self._config = ViewkitConfig(**config_data)
        except ValidationError as e:
            logging.error(f"Invalid view configuration, using defaults: {e}")
            self._config = ViewkitConfig()
        return self._config

    def save(self) -> bool:
        """Save configuration to file"""
        if not self._config:
            return False

        try:
            directory = os.path.dirname(self.config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self.config_path, "w") as f:
                json.dump(self._config.model_dump(), f, indent=2)
            logging.debug(f"Saved view configuration to {self.config_path}")
            return True
        except OSError as e:
            logging.error(f"Error saving config: {e}")
            return False

    def get_config(self) -> ViewkitConfig:
        """Get current configuration, loading it on first use"""
        if self._config is None:
            return self.load()
        return self._config

    def update(self, **kwargs) -> bool:
        """Update configuration values and persist them"""
        config = self.get_config()
        for key, value in kwargs.items():
            setattr(config, key, value)
        return self.save()


def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Return the ConfigManager for the resolved config path."""
    return ConfigManager(config_path)
