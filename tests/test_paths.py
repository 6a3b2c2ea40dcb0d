# python
"""
tests/test_paths.py
Unit tests for path joining, splitting and name/extension helpers.
"""
from storagefs.paths import (
    Include,
    combine_paths,
    directories_path,
    extension_path,
    name_path,
    normalize,
)


def test_combine_paths_strips_trailing_separator() -> None:
    assert combine_paths(["a/", "b"]) == "a/b"
    assert combine_paths(["a\\", "b"]) == "a/b"


def test_combine_paths_converts_backslashes() -> None:
    assert combine_paths(["docs\\notes\\todo.txt"]) == "docs/notes/todo.txt"


def test_combine_single_path() -> None:
    assert combine_paths(["folder/"]) == "folder"
    assert combine_paths([]) == ""


def test_normalize_splits_segments() -> None:
    assert normalize("folder/sub/file.txt") == ("folder", "sub", "file.txt")
    assert normalize("a", "b/c") == ("a", "b", "c")


def test_normalize_drops_empty_segments() -> None:
    assert normalize("/docs//readme.txt") == ("docs", "readme.txt")
    assert normalize("") == ()
    assert normalize("/") == ()


def test_name_path() -> None:
    assert name_path("folder/file.txt", True) == "file.txt"
    assert name_path("folder/file.txt", False) == "file"
    assert name_path("folder/file.txt") == "file.txt"
    assert name_path("archive.tar.gz", Include.WITHOUT) == "archive"
    assert name_path("folder/") == "folder"


def test_extension_path() -> None:
    assert extension_path("folder/file.txt") == "txt"
    assert extension_path("archive.tar.gz") == "gz"
    assert extension_path("folder/README") == ""


def test_directories_path() -> None:
    assert directories_path("folder/sub/file.txt") == "folder/sub"
    assert directories_path("file.txt") == ""
    assert directories_path("folder\\file.txt") == "folder"
