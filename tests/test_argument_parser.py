"""Tests for command-line parsing."""

import pytest

from album_picker.ui.argument_parser import parse_arguments


def test_defaults():
    args = parse_arguments([])
    assert args.root is None
    assert args.back is None
    assert args.random is None
    assert args.query is None
    assert args.playlist_query is None
    assert args.no_launch is False


@pytest.mark.parametrize("argv,root,back", [
    (["/music/albums"], "/music/albums", None),
    (["/music/albums", "-b"], "/music/albums", 1),
    (["/music/albums", "--back"], "/music/albums", 1),
    (["/music/albums", "-b", "2"], "/music/albums", 2),
    (["-b", "2", "/music/albums"], "/music/albums", 2),
    (["--back", "3", "/music/albums"], "/music/albums", 3),
])
def test_root_and_back(argv, root, back):
    args = parse_arguments(argv)
    assert args.root == root
    assert args.back == back


def test_query_modes():
    assert parse_arguments(["-q", "abbey"]).query == "abbey"
    assert parse_arguments(["--playlist-query", "chill"]).playlist_query == "chill"
    assert parse_arguments(["-r"]).random is True


def test_modes_are_mutually_exclusive():
    with pytest.raises(SystemExit):
        parse_arguments(["-r", "-q", "abbey"])


def test_negative_back_is_rejected():
    with pytest.raises(SystemExit):
        parse_arguments(["-b", "-1"])


def test_seed_and_logging_options(tmp_path):
    args = parse_arguments(["--seed", "42", "--log-level", "DEBUG", "--log-file", str(tmp_path / "x.log")])
    assert args.seed == 42
    assert args.log_level == "DEBUG"
    assert args.log_file == tmp_path / "x.log"
