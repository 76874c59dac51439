# album_picker/utils/logging_setup.py
import logging
import sys
import os
from pathlib import Path
from album_picker.ui.cli_interface import colorize, Colors

LOG_LEVEL_MAP = {'DEBUG': logging.DEBUG, 'INFO': logging.INFO, 'WARNING': logging.WARNING, 'ERROR': logging.ERROR}

def setup_logging(log_file_path: Path, log_mode: str, log_level: str = "INFO") -> bool:
    """Configures logging to file and console. Returns False if no log file could be opened."""
    filemode = 'a' if log_mode == 'append' else 'w'
    log_file_str = ""
    try:
        log_parent_dir = log_file_path.parent
        log_parent_dir.mkdir(parents=True, exist_ok=True)
        log_file_str = str(log_file_path)
        if not os.access(log_parent_dir, os.W_OK):
             raise PermissionError(f"No write permission for log directory: {log_parent_dir}")
    except OSError as e:
        print(colorize(f"Error preparing log file path {log_file_path}: {e}", Colors.RED), file=sys.stderr)
        fallback_path = Path.cwd() / log_file_path.name
        log_file_str = str(fallback_path)
        print(colorize(f"Attempting to log to fallback path: {log_file_str}", Colors.YELLOW), file=sys.stderr)
        if not os.access(fallback_path.parent, os.W_OK):
             print(colorize(f"ERROR: No write permission for fallback log directory either: {fallback_path.parent}", Colors.RED), file=sys.stderr)
             return False

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
        filename=log_file_str,
        filemode=filemode,
        force=True
    )
    # File level is filtered on the root logger; the console stays at WARNING.
    logging.getLogger().setLevel(LOG_LEVEL_MAP.get(log_level.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    formatter = logging.Formatter(f'{Colors.YELLOW}%(levelname)s:{Colors.RESET} [%(funcName)s] %(message)s')
    console_handler.setFormatter(formatter)
    logger = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) and h.stream == sys.stderr for h in logger.handlers):
         logger.addHandler(console_handler)
    return True
