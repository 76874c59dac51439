#!/usr/bin/env python3
# album_picker/app.py
import logging
import os
import random
import sys
from pathlib import Path

from album_picker.core import constants
from album_picker.core.candidates import ascend, enumerate_directories, enumerate_files
from album_picker.core.launcher import LaunchError, launch
from album_picker.core.matcher import EmptyCandidateSetError, resolve_query
from album_picker.core.randomizer import draw_index
from album_picker.core.selector import InteractiveSelector
from album_picker.core.settings import load_settings, write_default_config
from album_picker.ui.argument_parser import parse_arguments
from album_picker.ui.cli_interface import Colors, colorize
from album_picker.utils.logging_setup import setup_logging


def resolve_root(args, settings) -> Path:
    """CLI root, then the configured album folder, then the working directory; then --back."""
    if args.root is not None:
        root = Path(os.path.expanduser(args.root))
    elif settings.album_dir:
        root = Path(os.path.expanduser(settings.album_dir))
    else:
        root = Path.cwd()
    if args.back:
        root = ascend(root, args.back)
    return root


def pick(args, settings, root: Path, rng: random.Random):
    """Returns the chosen entry, or None when the user aborted."""
    def playlist_files():
        return enumerate_files(root, settings.playlist_patterns, recursive=True)

    if args.playlist_query is not None:
        files = playlist_files()
        if not files:
            raise EmptyCandidateSetError(f"No playlist files ({', '.join(settings.playlist_patterns)}) found under '{root}'.")
        return resolve_query(files, args.playlist_query)

    options = enumerate_directories(root)
    if not options:
        raise EmptyCandidateSetError("No child directories could be found. Ensure that a directory is given as an argument, "
                                     "or that the application is run from a main folder containing multiple album directories.")

    if args.query is not None:
        return resolve_query(options, args.query)
    if len(options) == 1:
        logging.info(f"Only one directory under {root}; using it without prompting.")
        return options[0]
    if args.random or settings.mode == "random":
        return options[draw_index(rng, len(options))]

    selection = InteractiveSelector(rng=rng).select(options, playlist_files)
    if selection.aborted:
        return None
    logging.info(f"Selection finished: {selection.status.value} -> {selection.candidate.full_path}")
    return selection.candidate


def main(argv_list=None) -> int:
    args = parse_arguments(argv_list)
    settings = load_settings([args.config] if args.config is not None else None)

    # --- Setup Logging ---
    log_file = args.log_file or settings.log_file or (constants.CONFIG_DIR_USER / constants.DEFAULT_LOG_FILE_NAME)
    log_file_path = Path(os.path.expanduser(str(log_file)))
    setup_logging(log_file_path, args.log_mode or settings.log_mode, args.log_level or settings.log_level)

    logging.info("="*30 + " Album Picker Started " + "="*30)
    logging.info(f"Version: {constants.SCRIPT_VERSION}")
    logging.info(f"Config files loaded: {settings.loaded_files if settings.loaded_files else 'None found'}")

    # --- First Run: no player configured ---
    if not args.no_launch and not settings.is_launchable:
        config_path = args.config or (constants.CONFIG_DIR_USER / constants.CONFIG_FILENAME_USER)
        try:
            write_default_config(config_path)
        except OSError as e:
            logging.error(f"Could not write default config {config_path}: {e}")
            print(colorize(f"Error: Could not write default config '{config_path}': {e}", Colors.RED), file=sys.stderr)
            return 1
        print(colorize(f"No player configured. Set [Launcher] executable in '{config_path}' and run again.", Colors.YELLOW))
        return 0

    root = resolve_root(args, settings)
    if not root.is_dir():
        logging.error(f"Album root is not a directory: {root}")
        print(colorize(f"Error: '{root}' is not a directory.", Colors.RED), file=sys.stderr)
        return 1
    logging.info(f"Album root: {root}")

    rng = random.Random(args.seed)
    try:
        chosen = pick(args, settings, root, rng)
    except EmptyCandidateSetError as e:
        logging.error(f"Nothing to pick under {root}: {e}")
        print(colorize(str(e), Colors.RED), file=sys.stderr)
        return 1
    if chosen is None:
        return 0

    print(f"Will play from '{colorize(chosen.name, Colors.BOLD + Colors.GREEN)}'.")
    if args.no_launch:
        print(chosen.full_path)
        return 0

    try:
        launch(settings.executable, settings.args, chosen.full_path)
    except LaunchError as e:
        print(colorize(f"Error: {e}", Colors.RED), file=sys.stderr)
        return 1
    logging.info("Album Picker finished successfully.")
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logging.info("KeyboardInterrupt received, shutting down.")
        print("\nAlbum Picker closed via Ctrl+C.")
        sys.exit(130)
    except Exception as e:
        logging.critical(f"Unhandled critical error at top level: {e}", exc_info=True)
        print(colorize(f"\nCritical error: {e}\nPlease check the log file for more details.", Colors.RED), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
