"""Bash handler: ~/.bashrc with ~/.bash_profile and ~/.profile as fallbacks."""

import re

from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import HandlerMetadata, ShellKind


class BashHandler(ShellHandler):
    """Handler for bash. Adds ``declare -x`` and ``PATH+=`` to the POSIX forms."""

    extraction_pattern = re.compile(
        r"""\b(?:(?:export|declare\s+-g?x)\s+)?PATH=["']?([^"']+)["']?"""
    )
    # PATH+= appends cannot be parsed, but they are still dropped on rewrite
    detection_pattern = re.compile(r"\b(?:(?:export|declare\s+-g?x)\s+)?PATH\+?=")

    def get_metadata(self) -> HandlerMetadata:
        return HandlerMetadata(
            shell_kind=ShellKind.BASH,
            display_name="Bash",
            config_files=[".bashrc", ".bash_profile", ".profile"],
        )
