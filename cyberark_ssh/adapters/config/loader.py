"""
Configuration loader with priority: CLI > env > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import (
    DEFAULT_CONFIG_PATH,
    CONFIG_PATH_ENV,
    ENV_PREFIX,
    PROG_NAME,
)
from ...core.exceptions import ConfigMissingError, ConfigInvalidError
from ...core.logging import get_logger
from ...domain.models import Config

logger = get_logger(__name__)


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """
    Determine the configuration file path.

    Priority: explicit path > CYBERARK_SSH_CONFIG > ~/.cyberark-ssh.toml
    """
    if path is None:
        env_path = os.getenv(CONFIG_PATH_ENV)
        path = Path(env_path) if env_path else Path(DEFAULT_CONFIG_PATH)
    return path.expanduser()


class ConfigLoader:
    """Configuration loader with priority support"""

    def __init__(self):
        self._env_prefix = ENV_PREFIX

    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigMissingError(
                f"cannot read config {path}: file not found\n"
                f"Run '{PROG_NAME} init' to create a sample config"
            )

        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigInvalidError(f"cannot parse config {path}: {e}") from e
        except OSError as e:
            raise ConfigMissingError(
                f"cannot read config {path}: {e}\n"
                f"Run '{PROG_NAME} init' to create a sample config"
            ) from e

    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}

        # Map environment variables to config keys
        env_mappings = {
            f"{self._env_prefix}USER": "user",
            f"{self._env_prefix}HOST": "cyberark_host",
            f"{self._env_prefix}PORT": "port",
            f"{self._env_prefix}DEFAULT_VAULT": "default_vault",
            f"{self._env_prefix}DEFAULT_ACCOUNT": "default_account",
            f"{self._env_prefix}DEFAULT_DOMAIN": "default_domain",
        }

        for env_key, config_key in env_mappings.items():
            value = os.getenv(env_key)
            if value:
                config[config_key] = self._convert_value(config_key, value)

        return config

    def _convert_value(self, key: str, value: str) -> Any:
        """Convert string value to the type the key expects"""
        if key != "port":
            return value
        try:
            return int(value)
        except ValueError:
            raise ConfigInvalidError(
                f"{self._env_prefix}PORT must be an integer, got {value!r}"
            ) from None

    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones key by key; tables such as
        [servers] are replaced, not merged.
        """
        result = {}

        for config in configs:
            result.update(config)

        return result

    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: CLI > env > TOML > defaults

        Args:
            toml_path: Path to TOML configuration file
            cli_overrides: CLI parameter overrides
            use_env: Whether to load from environment variables

        Returns:
            Merged configuration dictionary
        """
        configs = []

        # 1. Load TOML
        path = resolve_config_path(toml_path)
        logger.debug("loading config from %s", path)
        configs.append(self.load_toml(path))

        # 2. Load environment variables
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)

        # 3. Apply CLI overrides (highest priority)
        if cli_overrides:
            configs.append({k: v for k, v in cli_overrides.items() if v is not None})

        # Merge all configs
        return self.merge_configs(*configs)


def load_config(
    path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
    use_env: bool = True,
) -> Config:
    """
    Load and validate the configuration.

    Raises:
        ConfigMissingError: If the file does not exist
        ConfigInvalidError: If the file cannot be parsed or is incomplete
    """
    config_path = resolve_config_path(path)
    data = ConfigLoader().load(toml_path=config_path, cli_overrides=cli_overrides, use_env=use_env)
    return Config.from_dict(data, source=config_path)
