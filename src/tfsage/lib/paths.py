"""Path conventions for tfsage settings and project layout."""

import os
from pathlib import Path

CONFIG_DIRECTORY_NAME = "configs"
CONTEXT_FILE_NAME = "context.toml"
PROJECT_CONFIG_FILE_NAME = "tfsage.yaml"


def get_config_dir() -> Path:
    """
    Get the settings directory following XDG Base Directory spec.

    Returns
    -------
    Path
        Path to ~/.config/terraform-sage/ or $XDG_CONFIG_HOME/terraform-sage/.
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"

    return base / "terraform-sage"


def get_config_file() -> Path:
    """
    Get path to the user settings file.

    Returns
    -------
    Path
        Path to config.yaml in the settings directory.
    """
    return get_config_dir() / "config.yaml"


def get_project_config_file(directory: str | Path) -> Path:
    """
    Get path to the project-local settings file.

    Parameters
    ----------
    directory : str or Path
        Project directory holding the Terraform files.

    Returns
    -------
    Path
        Path to tfsage.yaml in the project directory.
    """
    return Path(directory) / PROJECT_CONFIG_FILE_NAME


def get_configs_dir(directory: str | Path) -> Path:
    """Get path to the configs/ directory of a project."""
    return Path(directory) / CONFIG_DIRECTORY_NAME


def get_context_file(directory: str | Path) -> Path:
    """
    Get path to the template context file of a project.

    Parameters
    ----------
    directory : str or Path
        Project directory holding the Terraform files.

    Returns
    -------
    Path
        Path to configs/context.toml in the project directory.
    """
    return get_configs_dir(directory) / CONTEXT_FILE_NAME
