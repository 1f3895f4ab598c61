"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import PROJECT_CONFIG_FILE, ENV_CONFIG_PATH
from ..models.config import ToolConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Loads .asset-tool.yaml for a project"""

    def __init__(self, project_root: Path, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Project root directory
            config_path: Explicit configuration file; falls back to
                $ASSET_TOOL_CONFIG, then to .asset-tool.yaml in the root
        """
        self.project_root = Path(project_root)
        if config_path is None and os.environ.get(ENV_CONFIG_PATH):
            config_path = Path(os.environ[ENV_CONFIG_PATH])
        self.config_path = Path(config_path) if config_path else self.project_root / PROJECT_CONFIG_FILE
        self._config: Optional[ToolConfig] = None

    @property
    def config(self) -> ToolConfig:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def load_config(self) -> ToolConfig:
        """Load configuration from file

        A missing file is not an error: every setting has a default.

        Returns:
            Loaded configuration
        """
        if not self.config_path.exists():
            logger.debug("No %s found, using defaults", self.config_path)
            self._config = ToolConfig()
            return self._config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")

        try:
            self._config = ToolConfig.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

        logger.debug("Loaded configuration from %s", self.config_path)
        return self._config

