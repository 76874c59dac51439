# album_picker/core/candidates.py
import fnmatch
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, NamedTuple, Protocol

from album_picker.ui.cli_interface import Colors, colorize


class NamedEntry(Protocol):
    """Anything the picker can offer: a display name plus the path handed to the launcher."""
    name: str
    full_path: str


class Candidate(NamedTuple):
    name: str
    full_path: str

    @classmethod
    def from_path(cls, path) -> "Candidate":
        path = Path(path)
        return cls(name=path.name, full_path=str(path.absolute()))


def enumerate_directories(root) -> list[Candidate]:
    """Immediate child directories of root, in the order the filesystem lists them."""
    root_path = Path(root)
    candidates = []
    with os.scandir(root_path) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    candidates.append(Candidate.from_path(root_path / entry.name))
            except OSError as e:
                logging.warning(f"CANDIDATES: Skipping unreadable entry {entry.path}: {e}")
    logging.info(f"CANDIDATES: Found {len(candidates)} child directories under {root_path}")
    return candidates


def enumerate_files(root, patterns: Iterable[str], recursive: bool = True) -> list[Candidate]:
    """Files beneath root whose names match any of the glob patterns (case-insensitive)."""
    root_path = Path(root)
    lowered_patterns = [p.lower() for p in patterns if p]
    candidates = []

    def matches(filename):
        lowered = filename.lower()
        return any(fnmatch.fnmatchcase(lowered, p) for p in lowered_patterns)

    if recursive:
        for dir_root, _, files in os.walk(root_path, followlinks=True):
            for file in files:
                if matches(file):
                    candidates.append(Candidate.from_path(Path(dir_root) / file))
    else:
        with os.scandir(root_path) as entries:
            for entry in entries:
                if entry.is_file() and matches(entry.name):
                    candidates.append(Candidate.from_path(root_path / entry.name))

    logging.info(f"CANDIDATES: Found {len(candidates)} files matching {lowered_patterns} under {root_path} (recursive={recursive})")
    return candidates


def ascend(root, times: int) -> Path:
    """Walks up `times` parent directories, stopping at the filesystem root."""
    current = Path(root).absolute()
    for _ in range(max(times, 0)):
        if current.parent == current:
            logging.warning(f"CANDIDATES: No parent directory above {current}")
            print(colorize(f"Directory back-travel limit exceeded. No parents found for directory '{current}'", Colors.YELLOW), file=sys.stderr)
            break
        current = current.parent
    return current
