"""
Korn Shell Handler

Edits ~/.kshrc, falling back to ~/.profile or ~/.ksh_profile when the user has
no .kshrc but does have one of those. Besides ``PATH=`` and ``export PATH=``
it understands ksh's ``typeset -x PATH=``.
"""

import re

from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import HandlerMetadata, ShellKind


class KshHandler(ShellHandler):
    """Handler for the Korn shell. Parsed entries are deduplicated."""

    extraction_pattern = re.compile(
        r"""\b(?:(?:export|typeset\s+-x)\s+)?PATH=["']?([^"']+)["']?"""
    )
    detection_pattern = re.compile(r"\b(?:(?:export|typeset\s+-x)\s+)?PATH=")

    def get_metadata(self) -> HandlerMetadata:
        return HandlerMetadata(
            shell_kind=ShellKind.KSH,
            display_name="Korn shell",
            config_files=[".kshrc", ".profile", ".ksh_profile"],
            deduplicates=True,
        )
