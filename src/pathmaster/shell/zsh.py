"""Zsh handler: ~/.zshrc with ~/.zprofile and ~/.zshenv as fallbacks."""

import re

from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import HandlerMetadata, ShellKind


class ZshHandler(ShellHandler):
    """
    Handler for zsh.

    Zsh mirrors PATH in the lowercase ``path`` array. Single-line array
    assignments such as ``path=(/usr/bin $path)`` are removed on rewrite but
    their entries are not parsed.
    """

    extraction_pattern = re.compile(
        r"""\b(?:(?:export|typeset\s+-x)\s+)?PATH=["']?([^"']+)["']?"""
    )
    detection_pattern = re.compile(
        r"\b(?:(?:export|typeset\s+-x)\s+)?(?:PATH\+?=|path\+?=\()"
    )

    def get_metadata(self) -> HandlerMetadata:
        return HandlerMetadata(
            shell_kind=ShellKind.ZSH,
            display_name="Zsh",
            config_files=[".zshrc", ".zprofile", ".zshenv"],
        )
