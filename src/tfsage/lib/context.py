"""Template context loading from configs/context.toml."""

import logging
import tomllib
from pathlib import Path

from tfsage.lib.paths import get_context_file

logger = logging.getLogger(__name__)


def load_context(directory: str | Path, config_name: str) -> dict[str, str]:
    """
    Load template variables defined for one configuration.

    The context file is a table of tables, one table per configuration
    name. Only string values of the matching table are returned.

    Missing, unreadable or malformed files give an empty context; the
    context is optional and never fails rendering.

    Parameters
    ----------
    directory : str or Path
        Project directory holding the Terraform files.
    config_name : str
        Configuration whose table should be read.

    Returns
    -------
    dict[str, str]
        Flat mapping of variable name to string value.

    Examples
    --------
    Given configs/context.toml::

        [dev]
        region = "us-east-1"
        replicas = 2

    >>> load_context(".", "dev")
    {'region': 'us-east-1'}
    """
    context_file = get_context_file(directory)

    try:
        raw_data = context_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"No template context loaded from {context_file}: {e}")
        return {}

    try:
        document = tomllib.loads(raw_data)
    except tomllib.TOMLDecodeError as e:
        logger.debug(f"Ignoring malformed context file {context_file}: {e}")
        return {}

    table = document.get(config_name)
    if not isinstance(table, dict):
        logger.debug(f"No context table for '{config_name}' in {context_file}")
        return {}

    return {key: value for key, value in table.items() if isinstance(value, str)}
