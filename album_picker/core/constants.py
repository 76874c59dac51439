# album_picker/core/constants.py
from pathlib import Path

SCRIPT_VERSION = "1.3.0"

# --- Configuration Files ---
CONFIG_FILENAME_LOCAL = "album_picker.conf"
CONFIG_FILENAME_USER = "config.ini"
CONFIG_DIR_USER = Path.home() / ".config" / "album-picker"

# --- Configuration Defaults ---
DEFAULT_LAUNCHER_EXECUTABLE = "vlc"
DEFAULT_LAUNCHER_ARGS = '"$(source)"'
DEFAULT_PLAYLIST_PATTERNS = ["*.m3u", "*.m3u8"]
DEFAULT_PICK_MODE = "confirm" # or "random"
DEFAULT_LOG_FILE_NAME = "album_picker.log"
DEFAULT_LOG_MODE = "overwrite"
DEFAULT_LOG_LEVEL = "INFO"

# Both spellings are substituted; $(folder) predates playlist-file support.
SOURCE_PLACEHOLDERS = ("$(source)", "$(folder)")
