"""Configuration service for loading .vaultboard.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import VaultboardConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching vault configuration."""

    CONFIG_FILE = ".vaultboard.yml"

    def __init__(self, vault_root: Path) -> None:
        """Initialize the config service.

        Args:
            vault_root: Path to the vault being scanned
        """
        self.vault_root = vault_root
        self._config: VaultboardConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        """Location of the config file inside the vault."""
        return self.vault_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> VaultboardConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> VaultboardConfig:
        """Load configuration from file or return default."""
        self._config_error = None

        if not self.config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return VaultboardConfig.default()

        try:
            with self.config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            return self._fallback(f"Invalid YAML in {self.CONFIG_FILE}: {e}")
        except OSError as e:
            return self._fallback(f"Error reading {self.CONFIG_FILE}: {e}")

        if data is None:
            return self._fallback(f"{self.CONFIG_FILE} is empty")
        if not isinstance(data, dict):
            return self._fallback(f"{self.CONFIG_FILE} must contain a mapping")

        try:
            config = VaultboardConfig(**data)
        except ValidationError as e:
            return self._fallback(f"Invalid {self.CONFIG_FILE}: {e}")

        logger.info("Loaded %s", self.config_path)
        return config

    def _fallback(self, error: str) -> VaultboardConfig:
        """Record a config error and return defaults."""
        self._config_error = error
        logger.warning(error)
        return VaultboardConfig.default()
