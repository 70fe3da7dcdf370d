"""
Shell Handler Registry

Central registry for all shell handlers. Maps a ShellKind to the one handler
responsible for it and falls back to the generic POSIX handler when asked for
a dialect nobody registered.

Key Features:
- Explicit registration (see register_all.py)
- Lookup by ShellKind, with or without fallback
- Shell detection from the $SHELL environment variable
"""

import logging
import os

from pathlib import Path

from pathmaster.shell.base import ShellHandler
from pathmaster.shell.types import ShellKind

logger = logging.getLogger(__name__)

# Executable basenames mapped to the dialect whose config syntax they read
SHELL_NAME_MAP: dict[str, ShellKind] = {
    "sh": ShellKind.GENERIC,
    "dash": ShellKind.GENERIC,
    "ash": ShellKind.GENERIC,
    "ksh": ShellKind.KSH,
    "ksh93": ShellKind.KSH,
    "mksh": ShellKind.KSH,
    "pdksh": ShellKind.KSH,
    "bash": ShellKind.BASH,
    "zsh": ShellKind.ZSH,
    "fish": ShellKind.FISH,
}


class UnsupportedShellError(Exception):
    """Raised when no handler is registered for a shell kind."""

    def __init__(self, message: str, shell_kind: ShellKind | str | None = None):
        super().__init__(message)
        self.shell_kind = shell_kind


def detect_shell_kind(shell_path: str | None = None) -> ShellKind | None:
    """
    Detect the user's shell dialect from a shell executable path.

    Args:
        shell_path: Path to the shell binary (default: $SHELL)

    Returns:
        Matching ShellKind, or None if the shell is unknown or unset
    """
    if shell_path is None:
        shell_path = os.environ.get("SHELL", "")

    name = Path(shell_path).name
    if not name:
        return None

    # Login shells are sometimes reported as "-bash"
    kind = SHELL_NAME_MAP.get(name.lstrip("-"))
    if kind is None:
        logger.debug(f"Unrecognized shell: {shell_path}")
    return kind


class HandlerRegistry:
    """
    Registry of shell handlers, one per ShellKind.

    Usage:
        registry = HandlerRegistry()
        registry.register(GenericHandler())
        registry.register(KshHandler())

        handler = registry.resolve_handler(detect_shell_kind())
        handler.update_config(entries)
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._handlers: dict[ShellKind, ShellHandler] = {}

    def register(self, handler: ShellHandler) -> None:
        """
        Register a handler for its shell kind.

        Raises:
            ValueError: If a handler for the same kind is already registered
        """
        kind = handler.get_shell_type()

        if kind in self._handlers:
            existing = self._handlers[kind]
            raise ValueError(
                f"Shell '{kind.value}' already registered by {existing.__class__.__name__}"
            )

        self._handlers[kind] = handler
        logger.debug(f"Registered shell handler: {handler}")

    def unregister(self, kind: ShellKind) -> bool:
        """
        Unregister the handler for a shell kind.

        Returns:
            True if a handler was removed, False if none was registered
        """
        if kind not in self._handlers:
            return False

        del self._handlers[kind]
        logger.debug(f"Unregistered shell handler: {kind.value}")
        return True

    def get_handler(self, kind: ShellKind | str) -> ShellHandler:
        """
        Get the handler for a shell kind.

        Args:
            kind: ShellKind or its string value (e.g. "ksh")

        Raises:
            UnsupportedShellError: If the kind is unknown or has no handler
        """
        try:
            shell_kind = ShellKind(kind)
        except ValueError:
            raise UnsupportedShellError(
                f"Unknown shell kind: {kind}", shell_kind=kind
            ) from None

        handler = self._handlers.get(shell_kind)
        if handler is None:
            raise UnsupportedShellError(
                f"No handler registered for shell '{shell_kind.value}'",
                shell_kind=shell_kind,
            )
        return handler

    def resolve_handler(self, kind: ShellKind | str | None = None) -> ShellHandler:
        """
        Get the handler for a shell kind, falling back to the generic handler.

        Args:
            kind: Requested ShellKind; None means "detect from $SHELL"

        Returns:
            The matching handler, or the generic handler if there is none

        Raises:
            UnsupportedShellError: If not even the generic handler is registered
        """
        if kind is None:
            kind = detect_shell_kind()

        if kind is not None:
            try:
                return self.get_handler(kind)
            except UnsupportedShellError as e:
                logger.info(f"{e}; falling back to generic handler")

        return self.get_handler(ShellKind.GENERIC)

    def list_handlers(self) -> list[ShellHandler]:
        """Get all registered handlers in registration order."""
        return list(self._handlers.values())

    def list_shell_kinds(self) -> list[ShellKind]:
        """Get all shell kinds with a registered handler."""
        return list(self._handlers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._handlers

    def __len__(self) -> int:
        """Return number of registered handlers."""
        return len(self._handlers)

    def __repr__(self) -> str:
        """Developer representation."""
        kinds = ", ".join(k.value for k in self._handlers)
        return f"<HandlerRegistry shells=[{kinds}]>"


# Global registry instance, populated by register_all_handlers()
handler_registry = HandlerRegistry()
