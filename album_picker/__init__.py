# album_picker/__init__.py
from album_picker.core.constants import SCRIPT_VERSION as __version__
