# album_picker/core/launcher.py
import logging
import os
import shlex
import subprocess

from album_picker.core.constants import SOURCE_PLACEHOLDERS


class LaunchError(RuntimeError):
    """Raised when the configured player cannot be started."""


def build_command(executable: str, args_template: str, source_path: str) -> list[str]:
    """
    Splits the argument template like a shell would and substitutes the chosen
    path for every placeholder. Substitution happens per token, so paths with
    spaces stay a single argument.
    """
    executable = (executable or "").strip()
    if not executable:
        raise LaunchError("No player executable configured ([Launcher] executable).")

    posix = os.name != "nt"
    command = [os.path.expanduser(executable)]
    for token in shlex.split(args_template or "", posix=posix):
        if not posix and len(token) >= 2 and token[0] == token[-1] == '"':
            # Non-POSIX splitting keeps the quotes; Popen re-quotes tokens itself.
            token = token[1:-1]
        for placeholder in SOURCE_PLACEHOLDERS:
            token = token.replace(placeholder, source_path)
        command.append(token)
    return command


def launch(executable: str, args_template: str, source_path: str) -> subprocess.Popen:
    """Starts the player on the chosen source and returns without waiting for it."""
    command = build_command(executable, args_template, source_path)
    logging.info(f"LAUNCHER: Starting {command}")
    popen_kwargs = {"stdin": subprocess.DEVNULL}
    if os.name == "nt":
        popen_kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        popen_kwargs["start_new_session"] = True
    try:
        return subprocess.Popen(command, **popen_kwargs)
    except OSError as e:
        logging.error(f"LAUNCHER: Could not start '{command[0]}': {e}", exc_info=True)
        raise LaunchError(f"Could not start '{command[0]}': {e}") from e
