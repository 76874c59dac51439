"""Tests for building candidate sets from the filesystem."""

from pathlib import Path

from album_picker.core.candidates import (
    Candidate,
    ascend,
    enumerate_directories,
    enumerate_files,
)


def test_enumerate_directories_lists_only_child_folders(album_root):
    found = enumerate_directories(album_root)
    assert sorted(c.name for c in found) == ["Abbey Road", "Let It Be", "Revolver"]
    for candidate in found:
        assert Path(candidate.full_path).is_absolute()
        assert Path(candidate.full_path).is_dir()


def test_enumerate_directories_is_not_recursive(album_root):
    assert "extras" not in {c.name for c in enumerate_directories(album_root)}


def test_enumerate_directories_of_empty_folder(tmp_path):
    assert enumerate_directories(tmp_path) == []


def test_enumerate_files_finds_playlists_recursively(album_root):
    found = enumerate_files(album_root, ["*.m3u", "*.m3u8"], recursive=True)
    assert sorted(c.name for c in found) == ["Naked Sessions.M3U8", "revolver.m3u"]


def test_enumerate_files_non_recursive(album_root):
    (album_root / "top.m3u").write_text("")
    found = enumerate_files(album_root, ["*.m3u", "*.m3u8"], recursive=False)
    assert [c.name for c in found] == ["top.m3u"]


def test_enumerate_files_ignores_other_extensions(album_root):
    assert enumerate_files(album_root, ["*.pls"]) == []


def test_candidate_from_path(tmp_path):
    candidate = Candidate.from_path(tmp_path / "Blue Train")
    assert candidate.name == "Blue Train"
    assert candidate.full_path == str((tmp_path / "Blue Train").absolute())


def test_ascend_walks_up(tmp_path):
    deep = tmp_path / "a" / "b" / "c"
    deep.mkdir(parents=True)
    assert ascend(deep, 2) == (tmp_path / "a").absolute()
    assert ascend(deep, 0) == deep.absolute()


def test_ascend_stops_at_filesystem_root(tmp_path, capsys):
    top = Path(tmp_path.anchor)
    assert ascend(tmp_path, 10_000) == top
    assert "back-travel limit exceeded" in capsys.readouterr().err
