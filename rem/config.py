"""
Configuration for rem

Settings come from three layers, later ones winning:
- built-in defaults
- an optional YAML config file (~/.rem/config.yaml or $REM_CLI_CONFIG)
- environment variables

The note engine never reads the environment itself; the CLI resolves a
RemConfig once and hands the resolved values to it.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

NOTES_FILE_NAME = "rem_notes.txt"

ENV_NOTES_PATH = "REM_CLI_NOTES_PATH"
ENV_CONFIG_PATH = "REM_CLI_CONFIG"
ENV_LOG_DIR = "REM_CLI_LOG_DIR"
ENV_LOG_LEVEL = "REM_CLI_LOG_LEVEL"
ENV_EDITOR = "EDITOR"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _home(environ: Mapping[str, str]) -> Path:
    home = environ.get("HOME")
    return Path(home) if home else Path.home()


@dataclass
class RemConfig:
    """Resolved settings for one run of the tool"""
    notes_path: Optional[str] = None
    editor: Optional[str] = None
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    def validate(self) -> List[str]:
        """Validate configuration"""
        errors = []

        if not self.notes_path:
            errors.append("notes_path cannot be empty")

        if str(self.log_level or "").upper() not in LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level}"
            )

        return errors

    def apply_env_overrides(self, environ: Mapping[str, str]) -> None:
        """Apply environment variable overrides"""
        if val := environ.get(ENV_NOTES_PATH):
            self.notes_path = val
        if val := environ.get(ENV_EDITOR):
            self.editor = val
        if val := environ.get(ENV_LOG_DIR):
            self.log_dir = val
        if val := environ.get(ENV_LOG_LEVEL):
            self.log_level = val.upper()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RemConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


class ConfigManager:
    """Loads and saves the rem configuration"""

    @staticmethod
    def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
        environ = os.environ if environ is None else environ
        return _home(environ) / ".rem" / "config.yaml"

    @staticmethod
    def default_notes_path(environ: Optional[Mapping[str, str]] = None) -> Path:
        environ = os.environ if environ is None else environ
        return _home(environ) / NOTES_FILE_NAME

    @staticmethod
    def default_log_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
        environ = os.environ if environ is None else environ
        return _home(environ) / ".rem" / "logs"

    @staticmethod
    def load(path: Optional[Union[str, Path]] = None,
             environ: Optional[Mapping[str, str]] = None) -> RemConfig:
        """Load configuration from file and environment"""
        environ = os.environ if environ is None else environ

        if path:
            config_path = Path(path)
        elif environ.get(ENV_CONFIG_PATH):
            config_path = Path(environ[ENV_CONFIG_PATH])
        else:
            config_path = ConfigManager.default_config_path(environ)
        config_path = config_path.expanduser()

        config = RemConfig()
        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise ValueError("config file must contain a mapping")
                config = RemConfig.from_dict(data)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
                logger.warning("Using default configuration")
                config = RemConfig()

        config.apply_env_overrides(environ)

        if not config.notes_path:
            config.notes_path = str(ConfigManager.default_notes_path(environ))
        if not config.log_dir:
            config.log_dir = str(ConfigManager.default_log_dir(environ))

        config.notes_path = str(Path(str(config.notes_path)).expanduser())
        config.log_dir = str(Path(str(config.log_dir)).expanduser())
        config.log_level = str(config.log_level or "INFO").upper()

        errors = config.validate()
        if errors:
            logger.warning("Configuration has validation errors:")
            for error in errors:
                logger.warning(f"  - {error}")
            if config.log_level not in LOG_LEVELS:
                config.log_level = "INFO"

        return config

    @staticmethod
    def save(config: RemConfig, path: Optional[Union[str, Path]] = None) -> Path:
        """Save configuration to a YAML file"""
        config_path = Path(path) if path else ConfigManager.default_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(
                config.to_dict(), f,
                default_flow_style=False,
                sort_keys=False
            )

        logger.info(f"Configuration saved to {config_path}")
        return config_path
