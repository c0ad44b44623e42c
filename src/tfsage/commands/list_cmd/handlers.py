"""Handler for list command."""

from tfsage.exceptions import SageError
from tfsage.lib.command_helpers import CommandContext, get_notifier_from_ctx
from tfsage.lib.configs import resolve_configurations


def handle(ctx: CommandContext) -> int:
    """Handle list command.

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
        configs = resolve_configurations(args.directory)
    except SageError as e:
        notifier.error(str(e))
        return 1

    if configs:
        notifier.info("Available configurations:")
        for name in sorted(configs):
            notifier.info(f"- {name}")
    else:
        notifier.warning("Configurations were not found.")

    notifier.success("Done.")
    return 0
