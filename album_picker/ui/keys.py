# album_picker/ui/keys.py
import enum
import os
import select
import sys
from typing import Optional

ESCAPE = "\x1b"
ESCAPE_SEQUENCE_TIMEOUT = 0.05
# msvcrt.getwch() returns one of these before the code of an arrow or function key.
WINDOWS_KEY_PREFIXES = ("\x00", "\xe0")


class Key(enum.Enum):
    CONFIRM = "confirm"
    REJECT = "reject"
    QUERY = "query"
    FILE_QUERY = "file_query"
    ABORT = "abort"
    OTHER = "other"


KEY_MAP = {
    "y": Key.CONFIRM,
    "n": Key.REJECT,
    "/": Key.QUERY,
    ";": Key.FILE_QUERY,
    ESCAPE: Key.ABORT,
    "": Key.ABORT, # End of input on the key stream; nothing more can be read.
}


def classify_key(char: str) -> Key:
    return KEY_MAP.get(char.lower(), Key.OTHER)


def read_key() -> str:
    """
    Reads a single key press without waiting for Enter. Returns '' at end of input.

    Keys that send several characters (arrows, function keys) come back as the
    whole sequence, so only a lone Esc reads as '\\x1b'.
    """
    if not sys.stdin.isatty():
        return sys.stdin.read(1)

    if sys.platform == "win32":
        import msvcrt
        char = msvcrt.getwch()
        if char in WINDOWS_KEY_PREFIXES:
            char += msvcrt.getwch()
    else:
        import termios
        import tty
        fd = sys.stdin.fileno()
        old = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            char = _read_posix_key(fd)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old)
    # Echo the key and end the prompt line, as cbreak mode does not.
    print(char if char.isprintable() else "", flush=True)
    return char


def _read_posix_key(fd) -> str:
    """Reads one key straight from the descriptor, bypassing sys.stdin's buffer."""
    data = os.read(fd, 1)
    if data == ESCAPE.encode():
        # The rest of an escape sequence arrives together with the Esc byte.
        while select.select([fd], [], [], ESCAPE_SEQUENCE_TIMEOUT)[0]:
            more = os.read(fd, 32)
            if not more:
                break
            data += more
    elif data and data[0] >= 0xC0:
        # UTF-8 lead byte: pull in its continuation bytes.
        remaining = 3 if data[0] >= 0xF0 else 2 if data[0] >= 0xE0 else 1
        data += os.read(fd, remaining)
    return data.decode(sys.stdin.encoding or "utf-8", errors="replace")


def read_line(prompt: str) -> Optional[str]:
    """Reads a line of free text; None when input has ended."""
    try:
        return input(prompt)
    except EOFError:
        return None
