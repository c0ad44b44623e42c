"""Argument parser for list command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the list command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "list",
        help="Show available configurations",
        description="List the configurations found in the configs/ directory",
    )

    parser.add_argument(
        "--dir",
        "-d",
        dest="directory",
        default=".",
        metavar="DIR",
        help="Path to directory with Terraform files (default: .)",
    )
