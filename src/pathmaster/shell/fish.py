"""
Fish Shell Handler

Fish does not use ``VAR=value`` syntax. PATH is a list variable set with
``set -gx PATH /a /b``, and elements are separated by whitespace rather than
colons.
"""

import re
import shlex

from collections.abc import Sequence
from pathlib import Path

from pathmaster.constants import PATH_SEPARATOR
from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import HandlerMetadata, ShellKind


class FishHandler(ShellHandler):
    """Handler for fish's config.fish. Parsed entries are deduplicated."""

    extraction_pattern = re.compile(r"^set\s+(?:-[a-zA-Z]+\s+)*PATH\s+(.+)$")
    detection_pattern = re.compile(r"\bset\s+(?:-[a-zA-Z]+\s+)*PATH(?:\s|$)")

    def get_metadata(self) -> HandlerMetadata:
        return HandlerMetadata(
            shell_kind=ShellKind.FISH,
            display_name="fish",
            config_files=[".config/fish/config.fish"],
            deduplicates=True,
        )

    def extract_values(self, line: str) -> list[str]:
        match = self.extraction_pattern.match(line)
        if not match:
            return []

        try:
            tokens = shlex.split(match.group(1), comments=True)
        except ValueError:
            # Unbalanced quotes: fall back to plain whitespace splitting
            tokens = match.group(1).split()

        values = []
        for token in tokens:
            values.extend(token.split(PATH_SEPARATOR))
        return values

    def format_assignment(self, entries: Sequence[Path | str]) -> str:
        paths = " ".join(f'"{entry}"' for entry in entries)
        return f"set -gx PATH {paths}"
