"""Shell dialect type definitions."""

from enum import Enum

from pydantic import BaseModel, Field


class ShellKind(str, Enum):
    """Shell dialects pathmaster knows how to edit."""

    GENERIC = "generic"  # POSIX sh profile
    KSH = "ksh"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"


class ModificationType(str, Enum):
    """Classification of a config line that touches PATH."""

    ASSIGNMENT = "assignment"
    MARKER = "marker"  # Comment line written by a previous pathmaster run


class PathModification(BaseModel):
    """A single line in a shell config file that assigns PATH."""

    line_number: int = Field(ge=1, description="1-based line number")
    content: str = Field(description="Raw line text")
    modification_type: ModificationType = Field(
        default=ModificationType.ASSIGNMENT, description="Kind of modification"
    )


class HandlerMetadata(BaseModel):
    """Metadata about a shell handler implementation."""

    shell_kind: ShellKind = Field(description="Dialect served by the handler")
    display_name: str = Field(description="Human-readable shell name")
    config_files: list[str] = Field(
        description="Config files relative to home, in priority order"
    )
    deduplicates: bool = Field(
        default=False, description="Whether parsed entries are deduplicated"
    )
