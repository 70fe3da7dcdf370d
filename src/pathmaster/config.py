"""
Settings for pathmaster.

Settings live in ~/.pathmaster/config.toml:

    [shell]
    kind = "ksh"

    [backup]
    directory = "~/path-backups"

    [logging]
    enabled = true
    level = "DEBUG"
"""

import logging
import os
import tomllib

from pathlib import Path
from typing import Any

import tomli_w

from pathmaster.constants import APP_DIR_NAME, BACKUP_DIR_NAME, CONFIG_FILE_NAME

logger = logging.getLogger(__name__)


def get_app_dir() -> Path:
    """Return ~/.pathmaster, where settings, logs and backups are kept."""
    return Path.home() / APP_DIR_NAME


def get_config_path() -> Path:
    """Return the location of config.toml."""
    return get_app_dir() / CONFIG_FILE_NAME


def load_config() -> dict[str, Any]:
    """
    Read config.toml.

    Returns:
        Parsed settings. A missing or unparsable file yields an empty dict;
        the parse error is logged so the user can fix the file.
    """
    config_path = get_config_path()

    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {config_path}: {e}")
        return {}


def save_config(config: dict[str, Any]) -> None:
    """
    Write config.toml atomically.

    The settings are dumped to a sibling temp file which is then renamed over
    the real one, so a crash never leaves a half-written file.

    Raises:
        PermissionError: If ~/.pathmaster cannot be created
        OSError: If the file cannot be written
    """
    config_path = get_config_path()

    try:
        os.makedirs(config_path.parent, exist_ok=True)
    except PermissionError as e:
        raise PermissionError(
            f"Cannot create settings directory {config_path.parent}: {e}"
        ) from e

    temp_path = config_path.with_name(f"{config_path.name}.tmp")
    try:
        with open(temp_path, "wb") as f:
            tomli_w.dump(config, f)
        os.replace(temp_path, config_path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def _get_setting(section: str, key: str) -> Any:
    value = load_config().get(section, {})
    return value.get(key) if isinstance(value, dict) else None


def _remove_setting(section: str, key: str) -> None:
    """Drop one key, pruning the section and the file once they are empty."""
    config = load_config()
    values = config.get(section)

    if not isinstance(values, dict) or key not in values:
        return

    del values[key]
    if not values:
        del config[section]

    if config:
        save_config(config)
    else:
        get_config_path().unlink(missing_ok=True)


def get_configured_shell() -> str | None:
    """Return the [shell] kind override, or None to auto-detect."""
    kind = _get_setting("shell", "kind")
    return str(kind) if kind else None


def set_configured_shell(kind: str) -> None:
    """Store a [shell] kind override."""
    config = load_config()
    config.setdefault("shell", {})["kind"] = kind
    save_config(config)


def unset_configured_shell() -> None:
    """Remove the [shell] kind override."""
    _remove_setting("shell", "kind")


def get_backup_dir() -> Path:
    """Return [backup] directory, defaulting to ~/.pathmaster/backups."""
    configured = _get_setting("backup", "directory")
    if configured:
        return Path(configured).expanduser()
    return get_app_dir() / BACKUP_DIR_NAME


def get_logging_settings() -> dict[str, Any]:
    """Return the [logging] table, or an empty dict."""
    settings = load_config().get("logging", {})
    return settings if isinstance(settings, dict) else {}
