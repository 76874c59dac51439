"""Tests for key classification and line reading."""

import io
import os
import sys

import pytest

from album_picker.ui import keys
from album_picker.ui.keys import Key, classify_key


@pytest.mark.parametrize("char,expected", [
    ("y", Key.CONFIRM),
    ("Y", Key.CONFIRM),
    ("n", Key.REJECT),
    ("N", Key.REJECT),
    ("/", Key.QUERY),
    (";", Key.FILE_QUERY),
    ("\x1b", Key.ABORT),
    ("", Key.ABORT),
    ("x", Key.OTHER),
    ("\n", Key.OTHER),
    ("1", Key.OTHER),
    ("\x1b[A", Key.OTHER),
    ("\xe0H", Key.OTHER),
])
def test_classify_key(char, expected):
    assert classify_key(char) is expected


def test_read_key_from_piped_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("ny"))
    assert keys.read_key() == "n"
    assert keys.read_key() == "y"
    assert keys.read_key() == ""


def test_read_line_returns_none_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert keys.read_line("> ") is None


def test_read_line_returns_text(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abbey road\n"))
    assert keys.read_line("> ") == "abbey road"


@pytest.fixture
def terminal(monkeypatch):
    """A pseudo-terminal standing in for stdin; yields the fd keystrokes are typed into."""
    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    stdin = os.fdopen(slave, "r")
    monkeypatch.setattr("sys.stdin", stdin)
    yield master
    stdin.close()
    os.close(master)


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX terminal")
def test_arrow_key_is_read_whole_and_ignored(terminal):
    os.write(terminal, b"\x1b[A")
    key = keys.read_key()
    assert key == "\x1b[A"
    assert classify_key(key) is Key.OTHER


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX terminal")
def test_lone_escape_still_aborts(terminal):
    os.write(terminal, b"\x1b")
    key = keys.read_key()
    assert key == "\x1b"
    assert classify_key(key) is Key.ABORT


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX terminal")
def test_terminal_keys_are_read_one_at_a_time(terminal):
    os.write(terminal, b"ny")
    assert keys.read_key() == "n"
    assert keys.read_key() == "y"
