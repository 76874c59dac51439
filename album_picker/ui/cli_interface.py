# album_picker/ui/cli_interface.py
import sys

# --- ANSI Color Codes ---
_IS_TTY = sys.stdout.isatty() # Basic check if we're likely in a TTY

class Colors:
    RESET = "\033[0m" if _IS_TTY else ""
    RED = "\033[91m" if _IS_TTY else ""
    GREEN = "\033[92m" if _IS_TTY else ""
    YELLOW = "\033[93m" if _IS_TTY else ""
    BLUE = "\033[94m" if _IS_TTY else ""
    BOLD = "\033[1m" if _IS_TTY else ""

def colorize(text, color_code):
    """Wraps text with ANSI color codes, if supported."""
    return f"{color_code}{text}{Colors.RESET}"
