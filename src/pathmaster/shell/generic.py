"""
Generic POSIX Shell Handler

Edits ~/.profile, the startup file read by sh, dash and any login shell that
honours the POSIX profile. Recognizes ``PATH=`` and ``export PATH=``.
"""

import re

from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import HandlerMetadata, ShellKind


class GenericHandler(ShellHandler):
    """Handler for POSIX profile scripts. Parsed entries keep duplicates."""

    extraction_pattern = re.compile(r"""\b(?:export\s+)?PATH=["']?([^"']+)["']?""")
    detection_pattern = re.compile(r"\b(?:export\s+)?PATH=")

    def get_metadata(self) -> HandlerMetadata:
        return HandlerMetadata(
            shell_kind=ShellKind.GENERIC,
            display_name="POSIX sh",
            config_files=[".profile"],
        )
