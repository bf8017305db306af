"""
Configuration loader for EXTALLY
Handles loading of the optional YAML configuration file
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from .logger import get_logger

logger = get_logger("extally.config")

DEFAULT_CONFIG_NAME = "extally.yml"

DEFAULTS: Dict[str, Any] = {
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
    'report': {
        'table': False,
    },
}


class ConfigError(Exception):
    """An explicitly requested configuration file is missing or invalid."""


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass
class ConfigLoader:
    """Configuration for an extally run

    An explicit path must exist and parse. Without one, extally.yml in the
    working directory is used when present, otherwise the defaults. The
    implicit file only affects logging so the plain report stays the default.
    """

    config_path: Optional[Path] = None
    search_dir: Path = field(default_factory=Path.cwd)
    config: Dict[str, Any] = field(default_factory=dict, init=False)
    source: Optional[Path] = field(default=None, init=False)

    def __post_init__(self):
        self.load()

    def load(self) -> None:
        """Load configuration, falling back to the defaults"""
        if self.config_path is not None:
            path = Path(self.config_path)
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            try:
                self.config = _merge(DEFAULTS, self._read(path))
            except (yaml.YAMLError, OSError, ValueError) as e:
                raise ConfigError(f"Error loading config {path}: {e}") from e
            self.source = path
            logger.info(f"Loaded config from {path}")
            return

        path = self.search_dir / DEFAULT_CONFIG_NAME
        if not path.is_file():
            logger.debug(f"No config file found at {path}")
            self.config = copy.deepcopy(DEFAULTS)
            return

        try:
            self.config = _merge(DEFAULTS, self._read(path))
            self.source = path
            logger.info(f"Loaded config from {path}")
        except (yaml.YAMLError, OSError, ValueError) as e:
            logger.warning(f"Ignoring invalid config {path}: {e}")
            self.config = copy.deepcopy(DEFAULTS)

        logger.debug(f"Config keys: {list(self.config.keys())}")

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        return data

    def get(self, key: str = None, default: Any = None) -> Any:
        """Get a configuration value, using dot notation for nested keys (e.g. 'logging.level')"""
        if key is None:
            return self.config

        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                logger.debug(f"Config key '{key}' not found, using default: {default}")
                return default

        return value

    @property
    def log_level(self) -> str:
        return str(self.get('logging.level', 'WARNING'))

    @property
    def log_file(self) -> Optional[str]:
        value = self.get('logging.file')
        return str(value) if value else None

    @property
    def table(self) -> bool:
        """Table output, honored only from a config passed explicitly"""
        if self.config_path is None:
            return False
        return bool(self.get('report.table', False))
