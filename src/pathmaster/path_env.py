"""Access to the PATH of the running process."""

import os

from collections.abc import MutableMapping, Sequence
from pathlib import Path


def get_path_entries(environ: MutableMapping[str, str] | None = None) -> list[Path]:
    """
    Get the current PATH entries in order.

    Empty segments (``::`` or a trailing colon) are dropped.

    Args:
        environ: Environment mapping to read (default: os.environ)

    Returns:
        Ordered list of PATH entries
    """
    if environ is None:
        environ = os.environ

    return [Path(p) for p in environ.get("PATH", "").split(os.pathsep) if p]


def format_path_value(entries: Sequence[Path | str]) -> str:
    """Join entries into a PATH string."""
    return os.pathsep.join(str(entry) for entry in entries)


def set_path_entries(
    entries: Sequence[Path | str], environ: MutableMapping[str, str] | None = None
) -> None:
    """
    Replace PATH for this process and its children.

    A process cannot change its parent shell's environment, so the calling
    shell only picks the new value up from its startup file.
    """
    if environ is None:
        environ = os.environ

    environ["PATH"] = format_path_value(entries)


def is_valid_path_entry(entry: Path | str) -> bool:
    """Check whether a PATH entry points at an existing directory."""
    return Path(entry).expanduser().is_dir()


def find_invalid_entries(entries: Sequence[Path]) -> list[Path]:
    """Get the entries that fail is_valid_path_entry, in order."""
    return [entry for entry in entries if not is_valid_path_entry(entry)]
