"""
Shell config update orchestration.

Picks the handler for the active shell and rewrites its startup file. A
failed rewrite is reported in the result rather than raised, because the
PATH change for the running session has already been applied by then.
"""

import logging

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from pathmaster.config import get_configured_shell
from pathmaster.shell.base import ShellConfigError, ShellHandler
from pathmaster.shell.register_all import register_all_handlers
from pathmaster.shell.registry import HandlerRegistry, handler_registry
from pathmaster.shell.types import ShellKind

logger = logging.getLogger(__name__)


class ConfigUpdateResult(BaseModel):
    """Outcome of rewriting a shell config file."""

    shell_kind: ShellKind = Field(description="Dialect of the handler used")
    config_path: Path = Field(description="Config file that was targeted")
    success: bool = Field(description="Whether the file was written")
    error: str | None = Field(default=None, description="Failure message")


def get_shell_handler(
    shell: ShellKind | str | None = None,
    registry: HandlerRegistry | None = None,
) -> ShellHandler:
    """
    Resolve the handler for the active shell.

    Precedence: explicit shell > config file [shell] kind > $SHELL detection.
    Unsupported shells fall back to the generic handler.

    Args:
        shell: Explicit shell kind (e.g. from --shell)
        registry: Registry to look in (default: the global registry)

    Returns:
        ShellHandler to use for this run
    """
    if registry is None:
        registry = register_all_handlers(handler_registry)

    if shell is None:
        shell = get_configured_shell()

    handler = registry.resolve_handler(shell)
    logger.debug(f"Using shell handler {handler!r}")
    return handler


def update_shell_config(
    entries: Sequence[Path], handler: ShellHandler
) -> ConfigUpdateResult:
    """
    Rewrite the handler's config file so it exports the given entries.

    Args:
        entries: Final ordered PATH entries
        handler: Handler for the active shell

    Returns:
        ConfigUpdateResult; success is False if the file could not be
        read or written
    """
    config_path = handler.get_config_path()

    try:
        written = handler.update_config(entries)
    except ShellConfigError as e:
        logger.error(f"Error updating shell configuration: {e}")
        return ConfigUpdateResult(
            shell_kind=handler.get_shell_type(),
            config_path=e.path or config_path,
            success=False,
            error=str(e),
        )

    return ConfigUpdateResult(
        shell_kind=handler.get_shell_type(),
        config_path=written,
        success=True,
    )
