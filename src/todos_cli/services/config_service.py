"""Configuration service for managing Todos CLI configuration.

This module provides the ConfigService class, which loads and saves
``config.json`` in the user config directory and builds the storage
strategy the configuration asks for.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir

from todos_cli.models.config_models import AppConfig
from todos_cli.models.storage_strategy import (
    StorageStrategyContext,
    create_storage_strategy,
)
from todos_cli.utils.logger import get_logger


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("todos_cli"))
        self.config_path = self.config_dir / "config.json"

        self._config: AppConfig | None = None
        self._storage_strategy_context: StorageStrategyContext | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def storage_strategy_context(self) -> StorageStrategyContext:
        """Get a StorageStrategyContext based on the current configuration."""
        if self._storage_strategy_context is None:
            strategy = create_storage_strategy(self.config.storage)
            self._storage_strategy_context = StorageStrategyContext(strategy)
            get_logger().info("using %s storage", strategy.storage_type)
        return self._storage_strategy_context

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: write the defaults out so users can edit them
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the shared ConfigService instance."""
    return ConfigService()
