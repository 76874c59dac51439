# album_picker/core/settings.py
import configparser
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from album_picker.core import constants


# Initialize config parser with a list converter
def parse_list(value):
    # Split by comma or whitespace, filter empty strings
    return [item.strip() for item in re.split(r'[,\s]+', value) if item.strip()]


def new_config_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        interpolation=None,
        converters={'list': parse_list}
    )


def get_config(config, section, option, fallback=None, expected_type=str):
    """
    Retrieves a value from a loaded configparser object. Handles type conversion and fallbacks.
    """
    try:
        if expected_type == bool:
            return config.getboolean(section, option)
        elif expected_type == int:
            return config.getint(section, option)
        elif expected_type == list:
            value = config.getlist(section, option)
            return value if value else fallback
        else:
            value = config.get(section, option, fallback=None)
            if value == "":
                logging.debug(f"Config: [{section}] {option} is empty. Using fallback: {fallback}")
                return fallback
            elif value is None:
                return fallback
            return value
    except (configparser.NoSectionError, configparser.NoOptionError):
        return fallback
    except ValueError as e:
        raw_value_for_log = config.get(section, option, raw=True, fallback="[Could not retrieve raw value]")
        logging.warning(f"Config Error: Invalid value for [{section}] {option} = '{raw_value_for_log}'. "
                        f"Could not convert to {expected_type.__name__}. Using fallback: {fallback}. Error: {e}")
        return fallback


@dataclass
class Settings:
    executable: Optional[str] = None
    args: str = constants.DEFAULT_LAUNCHER_ARGS
    album_dir: Optional[str] = None
    playlist_patterns: list = field(default_factory=lambda: list(constants.DEFAULT_PLAYLIST_PATTERNS))
    mode: str = constants.DEFAULT_PICK_MODE
    log_file: Optional[str] = None
    log_mode: str = constants.DEFAULT_LOG_MODE
    log_level: str = constants.DEFAULT_LOG_LEVEL
    loaded_files: list = field(default_factory=list)

    @property
    def is_launchable(self) -> bool:
        return bool(self.executable and self.executable.strip())


def default_config_paths() -> list[Path]:
    """Local file first, then the per-user file; later files override earlier ones."""
    return [Path.cwd() / constants.CONFIG_FILENAME_LOCAL,
            constants.CONFIG_DIR_USER / constants.CONFIG_FILENAME_USER]


def load_settings(paths=None) -> Settings:
    config = new_config_parser()
    paths = list(paths) if paths is not None else default_config_paths()
    try:
        loaded_files = config.read([str(p) for p in paths], encoding="utf-8")
    except configparser.Error as e:
        logging.warning(f"Config Error: Could not parse config files {paths}: {e}. Using defaults.")
        loaded_files = []
        config = new_config_parser()

    mode = get_config(config, "Picker", "mode", constants.DEFAULT_PICK_MODE).lower()
    if mode not in ("confirm", "random"):
        logging.warning(f"Config Error: [Picker] mode = '{mode}' is not 'confirm' or 'random'. Using '{constants.DEFAULT_PICK_MODE}'.")
        mode = constants.DEFAULT_PICK_MODE

    return Settings(
        executable=get_config(config, "Launcher", "executable"),
        args=get_config(config, "Launcher", "args", constants.DEFAULT_LAUNCHER_ARGS),
        album_dir=get_config(config, "Paths", "album_dir"),
        playlist_patterns=get_config(config, "Picker", "playlist_patterns", list(constants.DEFAULT_PLAYLIST_PATTERNS), list),
        mode=mode,
        log_file=get_config(config, "Logging", "log_file"),
        log_mode=get_config(config, "Logging", "log_mode", constants.DEFAULT_LOG_MODE),
        log_level=get_config(config, "Logging", "log_level", constants.DEFAULT_LOG_LEVEL),
        loaded_files=loaded_files,
    )


def write_default_config(path: Path) -> Path:
    """Writes an example config the user can edit. Existing files are left untouched."""
    path = Path(path)
    if path.exists():
        return path
    config = new_config_parser()
    config["Launcher"] = {
        "executable": constants.DEFAULT_LAUNCHER_EXECUTABLE,
        "args": constants.DEFAULT_LAUNCHER_ARGS,
    }
    config["Paths"] = {"album_dir": ""}
    config["Picker"] = {
        "playlist_patterns": ", ".join(constants.DEFAULT_PLAYLIST_PATTERNS),
        "mode": constants.DEFAULT_PICK_MODE,
    }
    config["Logging"] = {
        "log_file": "",
        "log_mode": constants.DEFAULT_LOG_MODE,
        "log_level": constants.DEFAULT_LOG_LEVEL,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        config.write(f)
    logging.info(f"Config: Wrote default config to {path}")
    return path
