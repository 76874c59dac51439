"""Shared fixtures for album_picker tests."""

import logging
import random

import pytest

from album_picker.core.candidates import Candidate


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def beatles():
    return [
        Candidate("Abbey Road", "/music/Abbey Road"),
        Candidate("Let It Be", "/music/Let It Be"),
        Candidate("Revolver", "/music/Revolver"),
    ]


@pytest.fixture
def album_root(tmp_path):
    """A music folder with three album folders, a loose file and nested playlists."""
    root = tmp_path / "albums"
    for name in ("Abbey Road", "Let It Be", "Revolver"):
        (root / name).mkdir(parents=True)
    (root / "cover.jpg").write_text("not an album")
    (root / "Revolver" / "revolver.m3u").write_text("01.mp3\n")
    (root / "Let It Be" / "extras").mkdir()
    (root / "Let It Be" / "extras" / "Naked Sessions.M3U8").write_text("01.flac\n")
    return root


@pytest.fixture(autouse=True)
def restore_root_logging():
    """app.main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
