"""Directory listing helpers used for configuration and variable file discovery."""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from tfsage.exceptions import SageIOError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One entry of a listed directory.

    Metadata is queried lazily on each call, and a failed query is reported
    as a negative answer rather than an error.

    Attributes
    ----------
    name : str
        Entry name without parent directory.
    path : Path
        Full path to the entry.
    """

    name: str
    path: Path

    def _mode(self) -> int | None:
        try:
            return os.stat(self.path).st_mode
        except OSError as e:
            logger.debug(f"Cannot stat {self.path}: {e}")
            return None

    def is_dir(self) -> bool:
        mode = self._mode()
        return mode is not None and stat.S_ISDIR(mode)

    def is_file(self) -> bool:
        mode = self._mode()
        return mode is not None and stat.S_ISREG(mode)


def get_extension(filename: str) -> str:
    """
    Get file extension without the leading dot.

    Parameters
    ----------
    filename : str
        File name or path.

    Returns
    -------
    str
        Extension (e.g. "tfvars"), or empty string if the name has none.
    """
    return Path(filename).suffix.lstrip(".")


def list_entries(path: str | Path) -> list[DirectoryEntry]:
    """
    List the entries of a directory.

    Parameters
    ----------
    path : str or Path
        Directory to list.

    Returns
    -------
    list[DirectoryEntry]
        Entries sorted by name.

    Raises
    ------
    SageIOError
        If the path does not exist, is not a directory or cannot be read.
    """
    directory = Path(path)
    try:
        names = os.listdir(directory)
    except OSError as e:
        raise SageIOError(f"Cannot list directory: {e.strerror or e}", path=directory) from e

    return [DirectoryEntry(name=name, path=directory / name) for name in sorted(names)]
