"""
Abstract Shell Handler Interface

This module defines the base class that every shell dialect handler must
implement. A handler knows where its shell keeps its startup file, how PATH
assignments look in that dialect, and how to render a replacement.

Key Principle: a new dialect only needs to inherit from ShellHandler, supply
its metadata and regex patterns, and override formatting if its syntax is not
POSIX. Reading, rewriting and saving the file are shared.

Matching is line-oriented. An assignment split across lines, built with
unusual quoting, or computed through another mechanism is not recognized and
is left untouched.
"""

import logging
import os
import re
import shutil

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from re import Pattern
from typing import ClassVar

from pathmaster.constants import (
    MARKER_COMMENT_PREFIX,
    PATH_SEPARATOR,
    TIMESTAMP_FORMAT,
    TOOL_NAME,
)
from pathmaster.shell.types import (
    HandlerMetadata,
    ModificationType,
    PathModification,
    ShellKind,
)

logger = logging.getLogger(__name__)

MARKER_PATTERN = re.compile(
    rf"^{re.escape(MARKER_COMMENT_PREFIX)} \d{{4}}-\d{{2}}-\d{{2}} \d{{2}}:\d{{2}}:\d{{2}}$"
)


def split_lines(content: str) -> list[str]:
    """
    Split config text on newlines only.

    Unlike str.splitlines(), form feeds and Unicode line separators stay
    inside their line. A trailing newline does not produce an empty line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class ShellHandler(ABC):
    """
    Abstract base class for all shell dialect handlers.

    Subclasses provide two regular expressions:

    - ``extraction_pattern``: searched in a trimmed line (so guarded forms
      like ``[ -d ~/bin ] && export PATH=...`` are parsed too),
      group 1 captures the assigned value so it can be split into entries.
    - ``detection_pattern``: searched in the raw line, only answers whether
      the line assigns PATH. It must accept every keyword the extraction
      pattern accepts, so a line that cannot be parsed is still removed.

    Usage Example:
        class DashHandler(ShellHandler):
            extraction_pattern = re.compile(r"\\b(?:export\\s+)?PATH=(.+)")
            detection_pattern = re.compile(r"\\bPATH=")

            def get_metadata(self):
                return HandlerMetadata(
                    shell_kind=ShellKind.GENERIC,
                    display_name="dash",
                    config_files=[".profile"],
                )
    """

    extraction_pattern: ClassVar[Pattern[str]]
    detection_pattern: ClassVar[Pattern[str]]

    def __init__(
        self, home: Path | None = None, config_path: Path | None = None
    ) -> None:
        """
        Initialize the handler.

        Args:
            home: Home directory the config files live in. When omitted,
                Path.home() is looked up on every use.
            config_path: Explicit config file. Pins the location and disables
                the fallback search.
        """
        self._home = Path(home) if home is not None else None
        self._config_path = Path(config_path) if config_path is not None else None
        self._metadata = self.get_metadata()

    @property
    def home(self) -> Path:
        """Home directory used for config files and ``~`` expansion."""
        return self._home if self._home is not None else Path.home()

    @abstractmethod
    def get_metadata(self) -> HandlerMetadata:
        """
        Return metadata about this handler.

        Example:
            return HandlerMetadata(
                shell_kind=ShellKind.KSH,
                display_name="Korn shell",
                config_files=[".kshrc", ".profile", ".ksh_profile"],
                deduplicates=True,
            )
        """
        pass

    def get_shell_type(self) -> ShellKind:
        """Return the dialect this handler serves."""
        return self._metadata.shell_kind

    def get_config_candidates(self) -> list[Path]:
        """Get the primary config file followed by its fallbacks."""
        return [self.home / name for name in self._metadata.config_files]

    def get_config_path(self) -> Path:
        """
        Resolve the config file this handler reads and writes.

        The primary file wins when it exists. Otherwise the first existing
        fallback is used, so the file the shell actually sources gets edited.
        When nothing exists the primary is returned as the file to create.

        Returns:
            Path to the shell startup file
        """
        if self._config_path is not None:
            return self._config_path

        primary, *fallbacks = self.get_config_candidates()
        if not primary.exists():
            for fallback in fallbacks:
                if fallback.exists():
                    logger.debug(f"{primary} not found, using fallback {fallback}")
                    return fallback
        return primary

    def parse_path_entries(self, content: str) -> list[Path]:
        """
        Extract PATH entries from every assignment in the content.

        Segments that reference a shell variable (``$PATH``, ``$HOME/bin``)
        are skipped. A leading ``~`` is expanded against the handler's home.

        Args:
            content: Full text of a shell config file

        Returns:
            Entries in the order first encountered. Deduplicated when the
            dialect's metadata asks for it.
        """
        entries: list[Path] = []
        seen: set[Path] = set()

        for line in split_lines(content):
            for value in self.extract_values(line.strip()):
                if not value or value.startswith("$"):
                    continue

                entry = self._expand_home(value)
                if self._metadata.deduplicates:
                    if entry in seen:
                        continue
                    seen.add(entry)
                entries.append(entry)

        return entries

    def extract_values(self, line: str) -> list[str]:
        """Split the value of a PATH assignment on a trimmed line into segments."""
        match = self.extraction_pattern.search(line)
        if not match:
            return []
        return match.group(1).split(PATH_SEPARATOR)

    def format_path_export(self, entries: Sequence[Path | str]) -> str:
        """
        Render the block appended to the config file.

        The block is a blank line, a comment naming the tool with a local
        timestamp, and one assignment statement, ending in a newline.
        """
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        return (
            f"\n{MARKER_COMMENT_PREFIX} {timestamp}\n"
            f"{self.format_assignment(entries)}\n"
        )

    def format_assignment(self, entries: Sequence[Path | str]) -> str:
        """Render the assignment statement in POSIX syntax."""
        paths = PATH_SEPARATOR.join(str(entry) for entry in entries)
        return f'export PATH="{paths}"'

    def detect_path_modifications(self, content: str) -> list[PathModification]:
        """
        Find every line that assigns PATH.

        Lines are matched untrimmed. Comment lines left by earlier pathmaster
        runs are reported as markers so they are replaced along with the
        assignment they introduced.
        """
        modifications = []

        for line_number, line in enumerate(split_lines(content), start=1):
            if self.detection_pattern.search(line):
                modification_type = ModificationType.ASSIGNMENT
            elif MARKER_PATTERN.match(line):
                modification_type = ModificationType.MARKER
            else:
                continue

            modifications.append(
                PathModification(
                    line_number=line_number,
                    content=line,
                    modification_type=modification_type,
                )
            )

        return modifications

    def update_path_in_config(self, content: str, entries: Sequence[Path | str]) -> str:
        """
        Replace PATH assignments in the content with a single fresh block.

        Every detected line is dropped, all other lines are kept in order,
        and the rendered block is appended. Performs no I/O.
        """
        modified_lines = {
            m.line_number for m in self.detect_path_modifications(content)
        }

        kept = [
            line
            for line_number, line in enumerate(split_lines(content), start=1)
            if line_number not in modified_lines
        ]

        return "\n".join(kept) + self.format_path_export(entries)

    def update_config(self, entries: Sequence[Path | str]) -> Path:
        """
        Rewrite the config file so it exports the given entries.

        A missing file is treated as empty and created. The new content is
        written to a temp file next to the target and renamed over it.

        Args:
            entries: Final ordered PATH entries

        Returns:
            Path of the file that was written

        Raises:
            ShellConfigError: If the file cannot be read or written
        """
        config_path = self.get_config_path()

        try:
            content = config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"{config_path} does not exist, it will be created")
            content = ""
        except (OSError, UnicodeDecodeError) as e:
            raise ShellConfigError(
                f"Cannot read {config_path}: {e}", handler=self, path=config_path
            ) from e

        updated = self.update_path_in_config(content, entries)

        # Write through symlinks so dotfile managers keep their links
        target = config_path.resolve() if config_path.is_symlink() else config_path
        temp_path = target.with_name(f"{target.name}.{TOOL_NAME}.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(updated)

            if target.exists():
                shutil.copymode(target, temp_path)

            os.replace(temp_path, target)

        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ShellConfigError(
                f"Cannot write {target}: {e}", handler=self, path=target
            ) from e

        logger.info(f"Updated PATH in {target} ({len(entries)} entries)")
        return target

    def _expand_home(self, value: str) -> Path:
        if value == "~":
            return self.home
        if value.startswith("~/"):
            return self.home / value[2:]
        return Path(value)

    @property
    def metadata(self) -> HandlerMetadata:
        """Get handler metadata."""
        return self._metadata

    @property
    def shell_kind(self) -> ShellKind:
        """Get the dialect this handler serves."""
        return self._metadata.shell_kind

    @property
    def display_name(self) -> str:
        """Get human-readable shell name."""
        return self._metadata.display_name

    def __str__(self) -> str:
        """String representation of handler."""
        return f"{self.shell_kind.value} ({self.display_name})"

    def __repr__(self) -> str:
        """Developer representation of handler."""
        return f"<{self.__class__.__name__} shell={self.shell_kind.value} home={self.home}>"


class ShellConfigError(Exception):
    """Raised when a shell config file cannot be read or written."""

    def __init__(
        self,
        message: str,
        handler: ShellHandler | None = None,
        path: Path | None = None,
    ):
        super().__init__(message)
        self.handler = handler
        self.path = path
