"""Pipeline shared by the terraform commands."""

import logging
from dataclasses import dataclass
from pathlib import Path

from tfsage.lib.configs import Configuration, resolve_configurations, validate_config
from tfsage.lib.output import Notifier, get_notifier
from tfsage.lib.template import DEFAULT_TEMPLATE_NAME, generate_file_name, generate_module
from tfsage.lib.terraform import (
    DEFAULT_TERRAFORM_BINARY,
    TerraformInvocation,
    TerraformSubcommand,
    build_command_args,
    build_init_args,
    build_output_args,
    delete_generated_module,
    run_terraform,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleOptions:
    """
    Options shared by every terraform command.

    Attributes
    ----------
    config_name : str
        Configuration to run against.
    directory : Path
        Terraform working directory.
    target : Path or None
        Existing module to use instead of rendering the template.
    template_name : str
        Template file name inside ``directory``.
    out_name : str or None
        Rendered module file name inside ``directory``.
    cleanup : bool
        Delete the used module after Terraform exits.
    extra : tuple[str, ...]
        Raw trailing tokens from the command line.
    capture : bool
        Capture Terraform output of non-interactive subcommands.
    """

    config_name: str
    directory: Path = Path(".")
    target: Path | None = None
    template_name: str = DEFAULT_TEMPLATE_NAME
    out_name: str | None = None
    cleanup: bool = False
    extra: tuple[str, ...] = ()
    capture: bool = False

    def module_path(self) -> Path:
        """Module Terraform runs against: the target, or the rendered file."""
        if self.target is not None:
            return self.target
        return self.directory / (self.out_name or generate_file_name(self.config_name))


def build_invocation(
    subcommand: TerraformSubcommand,
    configuration: Configuration,
    options: ModuleOptions,
) -> TerraformInvocation:
    """
    Build the Terraform call for a subcommand.

    Parameters
    ----------
    subcommand : TerraformSubcommand
        Subcommand to run.
    configuration : Configuration
        Validated configuration whose variable files are passed.
    options : ModuleOptions
        Command options.

    Returns
    -------
    TerraformInvocation
        Invocation ready to run.
    """
    extra = list(options.extra)

    if subcommand is TerraformSubcommand.INIT:
        arguments = build_init_args(options.directory, extra)
    elif subcommand is TerraformSubcommand.OUTPUT:
        arguments = build_output_args(extra)
    else:
        arguments = build_command_args(configuration.path, options.directory, extra)

    return TerraformInvocation(
        subcommand=subcommand,
        arguments=tuple(arguments),
        interactive=subcommand.interactive,
        # Captured output would hide Terraform's confirmation prompts
        capture=options.capture and not subcommand.interactive,
    )


def resolve_configuration(options: ModuleOptions) -> Configuration:
    """
    Resolve and validate the configuration named in the options.

    Raises
    ------
    SageIOError
        If the working directory cannot be listed.
    InvalidConfigError
        If the configuration does not exist.
    """
    configs = resolve_configurations(options.directory)
    validate_config(options.config_name, configs)
    return configs[options.config_name]


def execute_terraform_command(
    subcommand: TerraformSubcommand,
    options: ModuleOptions,
    binary: str = DEFAULT_TERRAFORM_BINARY,
    notifier: Notifier | None = None,
) -> int:
    """
    Run one terraform command end to end.

    Resolves the configuration, renders the module unless a target is
    given, runs Terraform and deletes the used module when ``cleanup`` is
    set. A failure at any step stops the pipeline; a module rendered before
    a failed Terraform spawn stays on disk.

    Parameters
    ----------
    subcommand : TerraformSubcommand
        Subcommand to run.
    options : ModuleOptions
        Command options.
    binary : str, optional
        Terraform executable, by default "terraform".
    notifier : Notifier, optional
        Sink for progress notices.

    Returns
    -------
    int
        Exit status of the Terraform process.

    Raises
    ------
    InvalidConfigError
        If the configuration does not exist.
    SageIOError
        On filesystem failures.
    TemplateRenderError
        If the template cannot be rendered.
    TerraformError
        If Terraform cannot be spawned.
    """
    notifier = get_notifier(notifier)
    configuration = resolve_configuration(options)

    if options.target is not None:
        module = options.target
        logger.debug(f"Using explicit target module {module}")
    else:
        module = generate_module(
            options.directory,
            options.config_name,
            template_name=options.template_name,
            out_name=options.out_name,
            notifier=notifier,
        )

    invocation = build_invocation(subcommand, configuration, options)
    status = run_terraform(invocation, binary=binary, notifier=notifier)

    if options.cleanup:
        delete_generated_module(module, notifier=notifier)

    return status
