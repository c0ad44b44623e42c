"""Handler for generate command."""

from pathlib import Path

from tfsage.exceptions import SageError
from tfsage.lib.command_helpers import (
    CommandContext,
    get_notifier_from_ctx,
    get_template_name,
    handle_dry_run,
)
from tfsage.lib.configs import resolve_configurations, validate_config
from tfsage.lib.template import generate_file_name, generate_module


def handle(ctx: CommandContext) -> int:
    """Handle generate command.

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
    template_name = get_template_name(ctx)

    try:
        configs = resolve_configurations(args.directory)
        validate_config(args.config, configs)

        out_name = args.out or generate_file_name(args.config)
        if handle_dry_run(
            ctx,
            f"Render {template_name} for '{args.config}'",
            {"output": Path(args.directory) / out_name},
        ):
            return 0

        generate_module(
            args.directory,
            args.config,
            template_name=template_name,
            out_name=out_name,
            notifier=notifier,
        )
    except SageError as e:
        notifier.error(str(e))
        return 1

    notifier.success("Done.")
    return 0
