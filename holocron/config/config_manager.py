"""
Centralized Configuration Management System

This module provides the configuration system for Holocron. It:
- Centralizes all configuration settings
- Supports environment-specific overrides
- Validates configuration on load
- Provides type-safe access to configuration values
"""

import os
import json
import yaml
import logging
from typing import Any, Dict, Optional, Union
from pathlib import Path
from dataclasses import dataclass, field
from enum import Enum
import threading


class Environment(Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DeleteStrategyType(Enum):
    SWAP = "swap"
    STABLE = "stable"


@dataclass
class StoreConfig:
    """Vector store configuration"""

    delete_strategy: DeleteStrategyType = DeleteStrategyType.SWAP


@dataclass
class LoggingConfig:
    """Logging configuration"""

    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    enable_console: bool = True


@dataclass
class AppConfig:
    """Main application configuration"""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""

    pass


def _to_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class ConfigManager:
    """
    Centralized configuration manager with support for:
    - Environment-specific configurations
    - Configuration validation
    - Dynamic configuration updates
    """

    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    # Enum-typed fields that may arrive as plain strings from files
    _ENUM_FIELDS = {
        "environment": lambda x: Environment(x.lower()),
        "logging.level": lambda x: LogLevel(x.upper()),
        "store.delete_strategy": lambda x: DeleteStrategyType(x.lower()),
    }

    def __new__(cls, *args, **kwargs):
        """Singleton pattern implementation"""
        if not cls._instance:
            with cls._lock:
                if not cls._instance:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        # Avoid re-initialization in singleton
        if hasattr(self, "_initialized"):
            return

        self._initialized = True
        if config_dir:
            self.config_dir = Path(config_dir)
        elif os.getenv("HOLOCRON_CONFIG_DIR"):
            self.config_dir = Path(os.environ["HOLOCRON_CONFIG_DIR"])
        else:
            # Look for config directory relative to project root
            project_root = Path(__file__).parent.parent.parent
            self.config_dir = project_root / "config"

        self.config: AppConfig = AppConfig()
        self.logger = logging.getLogger(__name__)

        self._load_configuration()

    def _load_configuration(self):
        """Load configuration from multiple sources in priority order"""
        # 1. Defaults
        self.config = AppConfig()

        # 2. Base configuration file
        self._load_from_file("config.yaml")
        self._load_from_file("config.json")

        # 3. Environment-specific configuration
        env = os.getenv("HOLOCRON_ENVIRONMENT", self.config.environment.value).lower()
        self._load_from_file(f"environments/config.{env}.yaml")
        self._load_from_file(f"environments/config.{env}.json")

        # 4. Environment variables (highest priority)
        self._load_from_environment()

        self._validate_configuration()

    def _load_from_file(self, filename: str):
        """Load configuration from YAML/JSON file"""
        file_path = self.config_dir / filename
        if not file_path.exists():
            return

        try:
            with open(file_path, "r") as f:
                if filename.endswith(".yaml") or filename.endswith(".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            self.logger.warning(f"Failed to load configuration from {filename}: {e}")
            return

        if data:
            self._update_config_from_dict(data)
            self.logger.info(f"Loaded configuration from {filename}")

    def _load_from_environment(self):
        """Load configuration from environment variables"""
        env_mappings = {
            "HOLOCRON_ENVIRONMENT": ("environment", lambda x: Environment(x.lower())),
            "HOLOCRON_DEBUG": ("debug", _to_bool),
            "HOLOCRON_DELETE_STRATEGY": (
                "store.delete_strategy",
                lambda x: DeleteStrategyType(x.lower()),
            ),
            "HOLOCRON_LOG_LEVEL": ("logging.level", lambda x: LogLevel(x.upper())),
            "HOLOCRON_LOG_FORMAT": ("logging.format", str),
            "HOLOCRON_LOG_FILE": ("logging.file_path", str),
        }

        for env_var, (config_path, converter) in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                try:
                    self._set_nested_attr(self.config, config_path, converter(value))
                except (ValueError, TypeError) as e:
                    self.logger.warning(f"Invalid value for {env_var}: {value}, error: {e}")

    def _update_config_from_dict(self, data: Dict[str, Any], prefix: str = ""):
        """Update configuration from dictionary recursively"""
        for key, value in data.items():
            config_path = f"{prefix}.{key}" if prefix else key

            if isinstance(value, dict):
                self._update_config_from_dict(value, config_path)
                continue

            try:
                if config_path in self._ENUM_FIELDS and isinstance(value, str):
                    value = self._ENUM_FIELDS[config_path](value)
                self._set_nested_attr(self.config, config_path, value)
            except AttributeError:
                self.logger.warning(f"Unknown configuration key: {config_path}")
            except ValueError as e:
                self.logger.warning(f"Invalid value for {config_path}: {value}, error: {e}")

    def _set_nested_attr(self, obj: Any, path: str, value: Any):
        """Set nested attribute using dot notation"""
        parts = path.split(".")
        for part in parts[:-1]:
            obj = getattr(obj, part)
        if not hasattr(obj, parts[-1]):
            raise AttributeError(parts[-1])
        setattr(obj, parts[-1], value)

    def _validate_configuration(self):
        """Validate configuration settings"""
        errors = []

        if not isinstance(self.config.store.delete_strategy, DeleteStrategyType):
            errors.append(
                f"store.delete_strategy must be one of "
                f"{[s.value for s in DeleteStrategyType]}"
            )

        if not isinstance(self.config.logging.level, LogLevel):
            errors.append(f"logging.level must be one of {[l.value for l in LogLevel]}")

        if self.config.logging.max_file_size <= 0:
            errors.append("logging.max_file_size must be positive")

        if self.config.logging.backup_count < 0:
            errors.append("logging.backup_count must not be negative")

        if errors:
            raise ConfigValidationError(f"Configuration validation failed: {'; '.join(errors)}")

        self.logger.debug("Configuration validation passed")

    def reload_configuration(self):
        """Reload configuration from all sources"""
        try:
            self._load_configuration()
            self.logger.info("Configuration reloaded successfully")
        except ConfigValidationError as e:
            self.logger.error(f"Failed to reload configuration: {e}")
            raise

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        try:
            obj = self.config
            for part in path.split("."):
                obj = getattr(obj, part)
            return obj
        except AttributeError:
            return default

    def set(self, path: str, value: Any):
        """Set configuration value using dot notation"""
        if path in self._ENUM_FIELDS and isinstance(value, str):
            value = self._ENUM_FIELDS[path](value)
        previous = self.get(path)
        self._set_nested_attr(self.config, path, value)
        try:
            self._validate_configuration()
        except ConfigValidationError:
            self._set_nested_attr(self.config, path, previous)
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""

        def _asdict_recursive(obj):
            if hasattr(obj, "__dict__"):
                result = {}
                for key, value in obj.__dict__.items():
                    if isinstance(value, Enum):
                        result[key] = value.value
                    elif hasattr(value, "__dict__"):
                        result[key] = _asdict_recursive(value)
                    else:
                        result[key] = value
                return result
            return obj

        return _asdict_recursive(self.config)

    def save_to_file(self, filename: str, format: str = "yaml"):
        """Save current configuration to file"""
        file_path = self.config_dir / filename
        config_dict = self.to_dict()

        with open(file_path, "w") as f:
            if format.lower() == "yaml":
                yaml.dump(config_dict, f, default_flow_style=False, indent=2)
            else:
                json.dump(config_dict, f, indent=2)

        self.logger.info(f"Configuration saved to {filename}")

    def get_vector_store_config(self) -> Dict[str, Any]:
        """
        Get the configuration dictionary accepted by VectorStore.

        Returns:
            Dictionary with store settings
        """
        return {"delete_strategy": self.config.store.delete_strategy.value}


# Global configuration instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the global configuration manager instance"""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def init_config(config_dir: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Initialize the global configuration manager"""
    global _config_manager
    ConfigManager._instance = None
    _config_manager = ConfigManager(config_dir)
    return _config_manager
