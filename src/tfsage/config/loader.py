"""Settings loader merging defaults, YAML files and environment variables."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from tfsage.exceptions import ConfigError
from tfsage.lib.paths import get_config_file, get_project_config_file

DEFAULT_CONFIG = {
    "terraform": {
        "binary": "terraform",
    },
    "template": {
        "name": "main.tpl",
    },
}

ENV_PREFIX = "TFSAGE_"


class ConfigLoader:
    """
    Load and merge tfsage settings from multiple sources.

    Merge order (lowest to highest priority):
    1. Built-in defaults
    2. User settings (~/.config/terraform-sage/config.yaml)
    3. Project settings (<project>/tfsage.yaml)
    4. Environment variables (TFSAGE_*)

    Attributes
    ----------
    project_dir : Path
        Project directory holding tfsage.yaml.
    config_path : Path
        Path to the user settings file.
    """

    def __init__(
        self,
        project_dir: str | Path = ".",
        config_path: Path | None = None,
    ):
        """
        Initialize settings loader.

        Parameters
        ----------
        project_dir : str or Path, optional
            Project directory, by default the current directory.
        config_path : Path or None, optional
            Path to the user settings file. If None, uses the XDG location,
            by default None.
        """
        self.project_dir = Path(project_dir)
        self.config_path = Path(config_path) if config_path else get_config_file()

    def _load_yaml_file(self, path: Path) -> dict:
        """
        Load and parse a YAML settings file.

        Parameters
        ----------
        path : Path
            Path to YAML file to load.

        Returns
        -------
        dict
            Parsed YAML content, or empty dict if file doesn't exist.

        Raises
        ------
        ConfigError
            If the file contains invalid YAML or is not a mapping.
        """
        if not path.exists():
            return {}

        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return content

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """
        Deep merge two dictionaries recursively.

        Nested dictionaries are merged recursively. For non-dict values,
        the override value replaces the base value.
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: dict) -> dict:
        """
        Apply environment variable overrides to settings.

        Variable names are converted from TFSAGE_SECTION_KEY format to
        nested dictionary paths, e.g. TFSAGE_TERRAFORM_BINARY sets
        ``terraform.binary``.

        Raises
        ------
        ConfigError
            If a variable would replace a section with a value, or a value
            with a section.
        """
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            key_path = env_key[len(ENV_PREFIX) :].lower().split("_")

            current = config
            for key in key_path[:-1]:
                if key not in current:
                    current[key] = {}
                elif not isinstance(current[key], dict):
                    raise ConfigError(f"{env_key} conflicts with setting '{key}', which is not a section")
                current = current[key]

            if isinstance(current.get(key_path[-1]), dict):
                raise ConfigError(f"{env_key} cannot replace settings section '{key_path[-1]}'")

            current[key_path[-1]] = env_value

        return config

    def load(self) -> dict:
        """
        Load and merge settings from all sources.

        Returns
        -------
        dict
            Merged settings dictionary with metadata section.
        """
        config = copy.deepcopy(DEFAULT_CONFIG)

        config = self._deep_merge(config, self._load_yaml_file(self.config_path))

        project_config = get_project_config_file(self.project_dir)
        config = self._deep_merge(config, self._load_yaml_file(project_config))

        config = self._apply_env_overrides(config)

        config["_meta"] = {
            "config_sources": self._get_loaded_sources(),
        }

        return config

    def _get_loaded_sources(self) -> list[str]:
        sources = []

        if self.config_path.exists():
            sources.append(str(self.config_path))

        project_config = get_project_config_file(self.project_dir)
        if project_config.exists():
            sources.append(str(project_config))

        return sources


def get_config_value(config: dict, key_path: str, default: Any = None) -> Any:
    """
    Get settings value using dot notation path.

    Parameters
    ----------
    config : dict
        Settings dictionary to query.
    key_path : str
        Key path in dot notation (e.g., "terraform.binary").
    default : Any, optional
        Default value to return if key doesn't exist, by default None.

    Returns
    -------
    Any
        Settings value if found, default value otherwise.

    Examples
    --------
    >>> config = {"terraform": {"binary": "tofu"}}
    >>> get_config_value(config, "terraform.binary")
    'tofu'
    >>> get_config_value(config, "nonexistent.key", "default")
    'default'
    """
    keys = key_path.split(".")
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
