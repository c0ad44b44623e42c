"""
Argparse formatting helpers.

Classes
-------
CapitalizedHelpFormatter : Custom argparse formatter with capitalized section titles

Functions
---------
create_subparsers : Create subparsers that apply the same formatting to every child
format_command : Render a command line for display
"""

import argparse
import shlex


class CapitalizedHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Custom help formatter that capitalizes section titles.

    Extends RawDescriptionHelpFormatter to:
    - Capitalize "usage:" to "Usage:"
    - Add newline after usage for better readability
    - Preserve raw formatting for description text
    """

    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage:\n  "
        return super().add_usage(usage, actions, groups, prefix)


def create_subparsers(parser: argparse.ArgumentParser, dest: str, **kwargs) -> argparse._SubParsersAction:
    """
    Create subparsers with consistent formatting applied automatically.

    Every parser added through the returned object uses
    CapitalizedHelpFormatter and an "Options" title instead of "options".

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parent parser to add subparsers to
    dest : str
        Destination attribute name for storing the subcommand
    **kwargs
        Additional arguments passed to add_subparsers()

    Returns
    -------
    argparse._SubParsersAction
        Subparsers object with formatting applied
    """
    defaults = {
        "help": "Available commands",
        "title": "Commands",
    }
    defaults.update(kwargs)

    subparsers = parser.add_subparsers(dest=dest, **defaults)

    original_add_parser = subparsers.add_parser

    def custom_add_parser(*args, **parse_kwargs):
        if "formatter_class" not in parse_kwargs:
            parse_kwargs["formatter_class"] = CapitalizedHelpFormatter
        subparser = original_add_parser(*args, **parse_kwargs)
        subparser._optionals.title = "Options"
        return subparser

    subparsers.add_parser = custom_add_parser

    return subparsers


def format_command(cmd: list[str]) -> str:
    """Join a command and its arguments into a shell-quoted string."""
    return shlex.join(cmd)
