"""Main CLI entry point for tfsage."""

import argparse
import logging
import sys
from pathlib import Path

from tfsage import __version__
from tfsage.config.loader import ConfigLoader, get_config_value
from tfsage.exceptions import ConfigError
from tfsage.lib.formatters import CapitalizedHelpFormatter, create_subparsers
from tfsage.lib.logger import setup_logger
from tfsage.lib.output import Notifier, set_color_enabled

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser with all commands registered.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser with all commands registered.
    """
    parser = argparse.ArgumentParser(
        prog="tfsage",
        description="Render per-environment Terraform modules and run Terraform against them",
        formatter_class=CapitalizedHelpFormatter,
    )

    # Global options
    parser.add_argument("--version", "-v", action="version", version=f"tfsage {__version__}")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Settings file path (default: ~/.config/terraform-sage/config.yaml)",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", "-q", action="store_true", help="Quiet mode (errors only)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would happen")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")

    parser._optionals.title = "Options"

    subparsers = create_subparsers(parser, "command")

    from tfsage.commands import generate, list_cmd, terraform

    list_cmd.register_parser(subparsers)
    generate.register_parser(subparsers)
    terraform.register_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point for the tfsage command.

    Parses command-line arguments, loads settings, creates command context,
    and routes execution to the appropriate command handler.

    Parameters
    ----------
    argv : list[str], optional
        Arguments to parse, by default ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code: 0 for success, 1 for command failure, 2 for settings error,
        130 for keyboard interrupt.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        set_color_enabled(False)

    if not args.command:
        parser.print_help()
        return 1

    notifier = Notifier(quiet=args.quiet)

    try:
        config = ConfigLoader(
            project_dir=getattr(args, "directory", "."),
            config_path=args.config,
        ).load()
    except Exception as e:
        notifier.error(f"Failed to load settings: {e}")
        return 2

    log_level = "DEBUG" if args.verbose else get_config_value(config, "logging.level")
    try:
        setup_logger("tfsage", level=log_level)
    except ConfigError as e:
        notifier.error(f"Failed to load settings: {e}")
        return 2
    logger.debug(f"Settings loaded from: {config['_meta']['config_sources']}")

    ctx = {
        "config": config,
        "verbose": args.verbose,
        "quiet": args.quiet,
        "dry_run": args.dry_run,
        "notifier": notifier,
        "args": args,
    }

    try:
        if args.command == "list":
            from tfsage.commands import list_cmd

            return list_cmd.handle(ctx)
        elif args.command == "generate":
            from tfsage.commands import generate

            return generate.handle(ctx)
        elif args.command in ("init", "plan", "apply", "destroy", "output"):
            from tfsage.commands import terraform

            return terraform.handle(ctx)
        else:
            notifier.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        print()
        return 130
    except Exception as e:
        notifier.error(f"Command failed: {e}")
        if ctx["verbose"]:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
