"""Handlers for terraform commands."""

from pathlib import Path

from tfsage.exceptions import SageError
from tfsage.lib.command_helpers import (
    CommandContext,
    get_notifier_from_ctx,
    get_template_name,
    get_terraform_binary,
    handle_dry_run,
)
from tfsage.lib.formatters import format_command
from tfsage.lib.terraform import TerraformSubcommand

from .operations import ModuleOptions, build_invocation, execute_terraform_command, resolve_configuration


def build_options(ctx: CommandContext) -> ModuleOptions:
    """Build module options from parsed arguments and settings.

    Parameters
    ----------
    ctx : CommandContext
        Command context

    Returns
    -------
    ModuleOptions
        Options for the terraform pipeline
    """
    args = ctx["args"]
    target = getattr(args, "target", None)

    return ModuleOptions(
        config_name=args.config,
        directory=Path(args.directory),
        target=Path(target) if target else None,
        template_name=get_template_name(ctx),
        out_name=getattr(args, "out", None),
        cleanup=bool(getattr(args, "cleanup", False)),
        extra=tuple(getattr(args, "extra", None) or ()),
        capture=bool(getattr(args, "capture_output", False)),
    )


def handle(ctx: CommandContext) -> int:
    """Handle init, plan, apply, destroy and output commands.

    Parameters
    ----------
    ctx : CommandContext
        Command context

    Returns
    -------
    int
        Exit code
    """
    args = ctx["args"]
    notifier = get_notifier_from_ctx(ctx)

    try:
        subcommand = TerraformSubcommand(args.command)
    except ValueError:
        notifier.error(f"Unknown command: {args.command}")
        return 1

    options = build_options(ctx)
    binary = get_terraform_binary(ctx)

    try:
        if ctx.get("dry_run"):
            return handle_dry_run_command(ctx, subcommand, options, binary)

        status = execute_terraform_command(subcommand, options, binary=binary, notifier=notifier)
    except SageError as e:
        notifier.error(str(e))
        return 1

    # Terraform reports its own failures on the inherited streams
    if status != 0:
        notifier.warning(f"terraform {subcommand.value} exited with status {status}")

    notifier.success("Done.")
    return 0


def handle_dry_run_command(
    ctx: CommandContext,
    subcommand: TerraformSubcommand,
    options: ModuleOptions,
    binary: str,
) -> int:
    """Describe a terraform command without rendering or running anything.

    Parameters
    ----------
    ctx : CommandContext
        Command context
    subcommand : TerraformSubcommand
        Subcommand to describe
    options : ModuleOptions
        Options for the terraform pipeline
    binary : str
        Terraform executable

    Returns
    -------
    int
        Exit code
    """
    configuration = resolve_configuration(options)
    invocation = build_invocation(subcommand, configuration, options)

    details = {
        "configuration": configuration.path,
        "module": options.module_path(),
        "rendered": "no (explicit target)" if options.target else f"yes, from {options.template_name}",
        "interactive": invocation.interactive,
        "cleanup": options.cleanup,
    }
    handle_dry_run(ctx, f"Run {format_command(invocation.command(binary))}", details)
    return 0
