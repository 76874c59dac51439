# album_picker/ui/argument_parser.py
import argparse
from pathlib import Path
from album_picker.core import constants
from .cli_interface import Colors

def parse_arguments(argv_list=None):
    parser = argparse.ArgumentParser(
        description=f"{Colors.BOLD}Pick an album folder or playlist at random (or by name) and open it in your player.{Colors.RESET}",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("root", nargs='?', default=None,
                        help="Folder holding one sub-folder per album. Cfg: Paths.album_dir, Def: current directory")
    parser.add_argument("-b", "--back", type=int, nargs='?', const=1, default=None, metavar="N",
                        help="Start N parent folders above the root (no value = 1).")

    # --- Pick Mode Group ---
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-r", "--random", action="store_true", default=None,
                            help=f"Pick one folder at random without asking. Cfg: Picker.mode, Def: {constants.DEFAULT_PICK_MODE}")
    mode_group.add_argument("-q", "--query", type=str, default=None,
                            help="Pick the folder whose name best matches QUERY, without prompting.")
    mode_group.add_argument("-p", "--playlist-query", type=str, default=None,
                            help="Pick the playlist file (searched recursively) whose name best matches PLAYLIST_QUERY.")

    parser.add_argument("--seed", type=int, default=None, help="Seed for the random draws (for repeatable sessions).")
    parser.add_argument("-n", "--no-launch", action="store_true",
                        help="Print the chosen path instead of starting the player.")
    parser.add_argument("--config", type=Path, default=None,
                        help=f"Config file to read instead of ./{constants.CONFIG_FILENAME_LOCAL} and "
                             f"{constants.CONFIG_DIR_USER / constants.CONFIG_FILENAME_USER}")
    parser.add_argument("--log-file", type=Path, default=None,
                        help=f"Log file path. Cfg: Logging.log_file, Def: {constants.CONFIG_DIR_USER / constants.DEFAULT_LOG_FILE_NAME}")
    parser.add_argument("--log-mode", choices=['append', 'overwrite'], default=None,
                        help=f"Log file mode. Cfg: Logging.log_mode, Def: {constants.DEFAULT_LOG_MODE}")
    parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default=None,
                        help=f"Log level for file. Cfg: Logging.log_level, Def: {constants.DEFAULT_LOG_LEVEL}")
    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'%(prog)s {constants.SCRIPT_VERSION}',
        help="Show program's version number and exit."
    )

    if argv_list is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(argv_list)

    if args.back is not None and args.back < 0:
        parser.error(f"--back ({args.back}) must not be negative.")

    return args
