"""
Command Helper Functions.

This module provides common helper functions used across tfsage commands to
reduce code duplication and ensure consistent behavior.

Functions
---------
get_notifier_from_ctx : Get the notifier stored in the command context
handle_dry_run : Handle dry-run mode with consistent messaging
get_terraform_binary : Get the Terraform executable from settings
get_template_name : Get the template file name from args or settings
"""

from typing import TypedDict

from tfsage.config.loader import get_config_value
from tfsage.lib.output import Notifier
from tfsage.lib.template import DEFAULT_TEMPLATE_NAME
from tfsage.lib.terraform import DEFAULT_TERRAFORM_BINARY


class CommandContext(TypedDict):
    """
    Type-safe command context dictionary.

    Attributes
    ----------
    config : dict
        Loaded settings dictionary.
    verbose : bool
        Enable verbose output.
    quiet : bool
        Suppress informational output.
    dry_run : bool
        Simulate actions without executing them.
    notifier : Notifier
        Sink for user-facing notices.
    args : argparse.Namespace
        Parsed command-line arguments.
    """

    config: dict
    verbose: bool
    quiet: bool
    dry_run: bool
    notifier: Notifier
    args: object  # argparse.Namespace


def get_notifier_from_ctx(ctx: CommandContext) -> Notifier:
    """Get the context notifier, creating one that honours ``quiet``."""
    notifier = ctx.get("notifier")
    if notifier is None:
        notifier = Notifier(quiet=ctx.get("quiet", False))
    return notifier


def handle_dry_run(ctx: CommandContext, message: str, details: dict = None) -> bool:
    """
    Handle dry-run mode with consistent messaging.

    Parameters
    ----------
    ctx : CommandContext
        Command context dictionary.
    message : str
        Main action description (e.g., "Run terraform plan").
    details : dict, optional
        Additional details to display.

    Returns
    -------
    bool
        True if in dry-run mode (caller should return early), False otherwise.

    Examples
    --------
    >>> if handle_dry_run(ctx, "Render main.tpl", {"config": "dev"}):
    ...     return 0
    """
    if not ctx.get("dry_run"):
        return False

    notifier = get_notifier_from_ctx(ctx)
    notifier.info(f"DRY RUN: {message}")

    if details:
        for key, value in details.items():
            notifier.info(f"  {key}: {value}")

    return True


def get_terraform_binary(ctx: CommandContext) -> str:
    """Get the Terraform executable configured in settings."""
    return get_config_value(ctx.get("config") or {}, "terraform.binary", DEFAULT_TERRAFORM_BINARY)


def get_template_name(ctx: CommandContext) -> str:
    """Get the template name from ``--template``, falling back to settings."""
    template = getattr(ctx["args"], "template", None)
    if template:
        return template
    return get_config_value(ctx.get("config") or {}, "template.name", DEFAULT_TEMPLATE_NAME)
