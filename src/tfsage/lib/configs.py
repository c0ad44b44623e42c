"""Discovery and validation of environment configurations."""

import logging
from dataclasses import dataclass
from pathlib import Path

from tfsage.exceptions import InvalidConfigError, SageIOError
from tfsage.lib.paths import CONFIG_DIRECTORY_NAME
from tfsage.lib.scanner import list_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """
    A named environment found under configs/.

    Attributes
    ----------
    name : str
        Environment name (e.g. "dev", "staging").
    path : Path
        Directory holding the environment's variable files.
    """

    name: str
    path: Path


def resolve_configurations(directory: str | Path) -> dict[str, Configuration]:
    """
    Discover configurations under the configs/ directory of a project.

    Every subdirectory of ``<directory>/configs`` is one configuration.
    A project without a configs/ directory has no configurations.

    Parameters
    ----------
    directory : str or Path
        Project directory holding the Terraform files.

    Returns
    -------
    dict[str, Configuration]
        Configurations keyed by name.

    Raises
    ------
    SageIOError
        If the project directory cannot be listed.
    """
    configs = {}

    config_dirs = [
        entry
        for entry in list_entries(directory)
        if entry.is_dir() and entry.name == CONFIG_DIRECTORY_NAME
    ]

    for config_dir in config_dirs:
        try:
            entries = list_entries(config_dir.path)
        except SageIOError as e:
            logger.debug(f"Skipping unreadable configs directory: {e}")
            continue

        for entry in entries:
            if entry.is_dir():
                configs[entry.name] = Configuration(name=entry.name, path=entry.path)

    logger.debug(f"Resolved {len(configs)} configuration(s) in {directory}")
    return configs


def validate_config(name: str, configs: dict[str, Configuration]) -> None:
    """
    Check that a configuration name is present in the resolved set.

    Parameters
    ----------
    name : str
        Requested configuration name.
    configs : dict[str, Configuration]
        Result of resolve_configurations().

    Raises
    ------
    InvalidConfigError
        If no configuration with that name exists.
    """
    if name not in configs:
        raise InvalidConfigError(f"Configuration with {name} name was not found.")
