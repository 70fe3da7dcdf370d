"""Shell dialect handlers for reading and rewriting PATH in startup files."""

from .base import ShellConfigError, ShellHandler
from .registry import (
    HandlerRegistry,
    UnsupportedShellError,
    detect_shell_kind,
    handler_registry,
)
from .types import HandlerMetadata, ModificationType, PathModification, ShellKind

__all__ = [
    "ShellConfigError",
    "ShellHandler",
    "HandlerRegistry",
    "UnsupportedShellError",
    "detect_shell_kind",
    "handler_registry",
    "HandlerMetadata",
    "ModificationType",
    "PathModification",
    "ShellKind",
]
