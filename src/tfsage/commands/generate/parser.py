"""Argument parser for generate command."""

import argparse


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the generate command parser.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate Terraform module from template",
        description="Render the template for a configuration into a Terraform module",
    )

    parser.add_argument(
        "--dir",
        "-d",
        dest="directory",
        default=".",
        metavar="DIR",
        help="Path to directory with Terraform files (default: .)",
    )

    parser.add_argument(
        "--template",
        metavar="NAME",
        help="Template file name (default: main.tpl)",
    )

    parser.add_argument(
        "--out",
        "-o",
        metavar="NAME",
        help="Output file name (default: main-<config>.tf)",
    )

    parser.add_argument(
        "config",
        help="Configuration name (a directory under configs/)",
    )
