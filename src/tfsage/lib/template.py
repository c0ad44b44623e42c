"""Rendering of environment-specific Terraform modules from templates."""

import logging
from pathlib import Path

import pystache
from pystache.parser import ParsingError

from tfsage.exceptions import SageIOError, TemplateRenderError
from tfsage.lib.context import load_context
from tfsage.lib.output import Notifier, get_notifier

logger = logging.getLogger(__name__)

CONFIG_TEMPLATE_PARAM = "CONFIG_NAME"
DEFAULT_TEMPLATE_NAME = "main.tpl"


def generate_file_name(config_name: str) -> str:
    """
    Build the default file name of a generated module.

    Parameters
    ----------
    config_name : str
        Configuration the module is rendered for.

    Returns
    -------
    str
        File name in the form ``main-<config_name>.tf``.
    """
    return f"main-{config_name}.tf"


def _create_renderer() -> pystache.Renderer:
    # Values are written verbatim, Terraform is not HTML
    return pystache.Renderer(escape=lambda value: value, missing_tags="ignore")

def render_template(
    template_path: str | Path,
    output_path: str | Path,
    config_name: str,
    context: dict[str, str],
    notifier: Notifier | None = None,
) -> Path:
    """
    Render a template for one configuration and write the result.

    The ``CONFIG_NAME`` variable always holds ``config_name``, even when
    ``context`` defines a key with the same name. Placeholders follow
    Mustache syntax and names missing from the context render as empty.

    Parameters
    ----------
    template_path : str or Path
        Template file to read.
    output_path : str or Path
        File to create or truncate with the rendered text.
    config_name : str
        Configuration the module is rendered for.
    context : dict[str, str]
        Variables loaded for the configuration.
    notifier : Notifier, optional
        Sink for progress notices.

    Returns
    -------
    Path
        Path of the written module.

    Raises
    ------
    SageIOError
        If the template cannot be read or the output cannot be written.
    TemplateRenderError
        If the template has unbalanced section tags.
    """
    notifier = get_notifier(notifier)
    template_path = Path(template_path)
    output_path = Path(output_path)

    try:
        template_text = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SageIOError(f"Cannot read template: {e}", path=template_path) from e

    variables = dict(context)
    variables[CONFIG_TEMPLATE_PARAM] = config_name

    notifier.info("Generating Terraform file...")
    logger.debug(f"Rendering {template_path} with variables: {sorted(variables)}")

    try:
        module = _create_renderer().render(template_text, variables)
    except ParsingError as e:
        raise TemplateRenderError(f"Template rendering error: {e}", filename=output_path) from e

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(module)
    except OSError as e:
        raise SageIOError(f"Cannot write module: {e.strerror or e}", path=output_path) from e

    notifier.info(f"New Terraform file was created by path: {output_path}")
    return output_path


def generate_module(
    directory: str | Path,
    config_name: str,
    template_name: str = DEFAULT_TEMPLATE_NAME,
    out_name: str | None = None,
    notifier: Notifier | None = None,
) -> Path:
    """
    Render the project template for a configuration.

    Template and output names are resolved against ``directory``.

    Parameters
    ----------
    directory : str or Path
        Project directory holding the Terraform files.
    config_name : str
        Configuration the module is rendered for.
    template_name : str, optional
        Template file name, by default "main.tpl".
    out_name : str, optional
        Output file name, by default ``main-<config_name>.tf``.
    notifier : Notifier, optional
        Sink for progress notices.

    Returns
    -------
    Path
        Path of the written module.
    """
    directory = Path(directory)
    out_name = out_name or generate_file_name(config_name)
    context = load_context(directory, config_name)

    return render_template(
        directory / template_name,
        directory / out_name,
        config_name,
        context,
        notifier=notifier,
    )
