"""Terraform argument construction and process execution."""

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tfsage.exceptions import SageIOError, TerraformError
from tfsage.lib.formatters import format_command
from tfsage.lib.output import Notifier, get_notifier
from tfsage.lib.scanner import get_extension, list_entries

logger = logging.getLogger(__name__)

DEFAULT_TERRAFORM_BINARY = "terraform"
VAR_FILE_EXTENSIONS = ("tf", "tfvars")
# Files starting with this prefix are generated outputs, not variable inputs
EXCLUDED_VAR_FILE_PREFIX = "out"


class TerraformSubcommand(str, Enum):
    """Terraform subcommands wrapped by tfsage."""

    INIT = "init"
    PLAN = "plan"
    APPLY = "apply"
    DESTROY = "destroy"
    OUTPUT = "output"

    @property
    def interactive(self) -> bool:
        """Whether Terraform may prompt the user for confirmation."""
        return self in (TerraformSubcommand.PLAN, TerraformSubcommand.APPLY, TerraformSubcommand.DESTROY)


@dataclass(frozen=True)
class TerraformInvocation:
    """
    One Terraform call.

    Attributes
    ----------
    subcommand : TerraformSubcommand
        Subcommand to run.
    arguments : tuple[str, ...]
        Arguments passed after the subcommand.
    interactive : bool
        Connect Terraform's stdin to the invoking terminal.
    capture : bool
        Capture stdout/stderr and print them after Terraform exits,
        instead of streaming them live.
    """

    subcommand: TerraformSubcommand
    arguments: tuple[str, ...] = ()
    interactive: bool = False
    capture: bool = False

    def command(self, binary: str = DEFAULT_TERRAFORM_BINARY) -> list[str]:
        """Full command line for this invocation."""
        return [binary, self.subcommand.value, *self.arguments]


def extract_terraform_arguments(extra: list[str]) -> list[str]:
    """
    Extract passthrough arguments typed after the configuration name.

    The first token is the Terraform subcommand name typed by the user and
    is not forwarded.

    Parameters
    ----------
    extra : list[str]
        Raw trailing tokens from the command line.

    Returns
    -------
    list[str]
        Every token but the first, or an empty list.
    """
    if len(extra) > 1:
        return list(extra[1:])
    return []


def build_init_args(directory: str | Path, extra: list[str]) -> list[str]:
    """Build arguments for ``terraform init``: passthrough, then the directory."""
    args = extract_terraform_arguments(extra)
    args.append(str(directory))
    return args


def build_output_args(extra: list[str]) -> list[str]:
    """Build arguments for ``terraform output``: passthrough only."""
    return extract_terraform_arguments(extra)


def build_command_args(
    config_directory: str | Path,
    directory: str | Path,
    extra: list[str],
) -> list[str]:
    """
    Build arguments for ``terraform plan``, ``apply`` and ``destroy``.

    Every variable file of the configuration directory is passed with
    ``-var-file=``, unless the user already passed the same flag.

    Parameters
    ----------
    config_directory : str or Path
        Directory of the configuration (configs/<name>).
    directory : str or Path
        Terraform working directory, appended as last argument.
    extra : list[str]
        Raw trailing tokens from the command line.

    Returns
    -------
    list[str]
        Ordered argument list.

    Raises
    ------
    SageIOError
        If the configuration directory cannot be listed.
    """
    args = extract_terraform_arguments(extra)
    passthrough = set(args)

    for entry in list_entries(config_directory):
        if entry.name.startswith(EXCLUDED_VAR_FILE_PREFIX):
            continue
        if get_extension(entry.name) not in VAR_FILE_EXTENSIONS:
            continue
        if not entry.is_file():
            continue

        var_file_arg = f"-var-file={entry.path}"
        if var_file_arg not in passthrough:
            args.append(var_file_arg)

    args.append(str(directory))
    return args


def run_terraform(
    invocation: TerraformInvocation,
    binary: str = DEFAULT_TERRAFORM_BINARY,
    notifier: Notifier | None = None,
) -> int:
    """
    Run Terraform and wait for it to exit.

    Parameters
    ----------
    invocation : TerraformInvocation
        Subcommand, arguments and stdio wiring.
    binary : str, optional
        Terraform executable, by default "terraform".
    notifier : Notifier, optional
        Sink for progress notices.

    Returns
    -------
    int
        Exit status of the Terraform process. A non-zero status is returned
        as is, not raised.

    Raises
    ------
    TerraformError
        If the process cannot be spawned.
    """
    notifier = get_notifier(notifier)
    cmd = invocation.command(binary)

    notifier.info(f"Executing command: `{format_command(cmd)}`")
    logger.debug(f"Running {cmd} (interactive={invocation.interactive}, capture={invocation.capture})")

    stdin = None if invocation.interactive else subprocess.DEVNULL

    try:
        if invocation.capture:
            result = subprocess.run(
                cmd,
                stdin=stdin,
                capture_output=True,
                text=True,
                check=False,
            )
        else:
            result = subprocess.run(cmd, stdin=stdin, check=False)
    except OSError as e:
        raise TerraformError(
            f"Failed to run terraform: {e.strerror or e}",
            command=invocation.subcommand.value,
        ) from e

    if invocation.capture:
        notifier.info("Terraform output:")
        if result.stdout:
            print(result.stdout, end="")
        if result.stderr:
            print(result.stderr, file=sys.stderr)

    logger.debug(f"terraform {invocation.subcommand.value} exited with status {result.returncode}")
    return result.returncode


def delete_generated_module(path: str | Path, notifier: Notifier | None = None) -> None:
    """
    Delete a module generated for a Terraform run.

    Parameters
    ----------
    path : str or Path
        Module file to delete.
    notifier : Notifier, optional
        Sink for the warning notice printed before deletion.

    Raises
    ------
    SageIOError
        If the file cannot be deleted.
    """
    notifier = get_notifier(notifier)
    notifier.warning(f"Deleting {path} file after execution...")

    try:
        Path(path).unlink()
    except OSError as e:
        raise SageIOError(f"Cannot delete module: {e.strerror or e}", path=path) from e
