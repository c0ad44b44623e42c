"""Argument parser for terraform commands."""

import argparse

from tfsage.lib.terraform import TerraformSubcommand

TERRAFORM_COMMANDS = {
    TerraformSubcommand.INIT: "Initialize Terraform",
    TerraformSubcommand.PLAN: "Plan infrastructure changes",
    TerraformSubcommand.APPLY: "Apply infrastructure changes",
    TerraformSubcommand.DESTROY: "Destroy infrastructure",
    TerraformSubcommand.OUTPUT: "Show Terraform outputs",
}


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register one parser per wrapped Terraform subcommand.

    Parameters
    ----------
    subparsers : argparse._SubParsersAction
        Subparser action from main parser
    """
    for subcommand, help_text in TERRAFORM_COMMANDS.items():
        parser = subparsers.add_parser(
            subcommand.value,
            help=help_text,
            description=(
                f"{help_text} for a configuration.\n\n"
                "Options must come before CONFIG; every token after CONFIG is\n"
                "passed to Terraform, the first one being the Terraform\n"
                f"subcommand name (e.g. `{subcommand.value} -d env dev {subcommand.value} -lock=false`)."
            ),
        )
        _add_module_arguments(parser)


def _add_module_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dir",
        "-d",
        dest="directory",
        default=".",
        metavar="DIR",
        help="Path to directory with Terraform files (default: .)",
    )

    parser.add_argument(
        "--target",
        "-t",
        metavar="PATH",
        help="Use an existing module instead of rendering the template",
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
        "--cleanup",
        action="store_true",
        help="Delete the used module after Terraform exits",
    )

    parser.add_argument(
        "--capture-output",
        action="store_true",
        help="Capture Terraform output and print it after the process exits",
    )

    parser.add_argument(
        "config",
        help="Configuration name (a directory under configs/)",
    )

    parser.add_argument(
        "extra",
        nargs=argparse.REMAINDER,
        help="Terraform subcommand name followed by arguments passed to Terraform",
    )
