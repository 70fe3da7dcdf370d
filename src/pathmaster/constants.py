"""Constants shared across pathmaster."""

TOOL_NAME = "pathmaster"

# ============================================================================
# Filesystem layout (relative to the user's home directory)
# ============================================================================

APP_DIR_NAME = ".pathmaster"
CONFIG_FILE_NAME = "config.toml"
BACKUP_DIR_NAME = "backups"
LOG_DIR_NAME = "logs"

DEFAULT_LOG_FILE = "pathmaster.log"
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_MAX_SIZE_MB = 10

# ============================================================================
# Shell config rendering
# ============================================================================

PATH_SEPARATOR = ":"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MARKER_COMMENT_PREFIX = f"# Updated by {TOOL_NAME} on"

# ============================================================================
# Backups
# ============================================================================

BACKUP_FILE_PREFIX = "backup_"
BACKUP_FILE_TIME_FORMAT = "%Y%m%d_%H%M%S_%f"
