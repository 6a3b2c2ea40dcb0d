"""
Path helpers: separator normalization, joining and name/extension extraction.

Both "/" and "\\" are accepted as separators. Empty segments produced by
leading or repeated separators are dropped, so "/docs//a.txt" and
"docs/a.txt" address the same file.
"""
from enum import Enum
from typing import Iterable, Tuple, Union

SEPARATOR = "/"
ALT_SEPARATOR = "\\"

Path = Tuple[str, ...]


class Include(Enum):
    WITH = "with"
    WITHOUT = "without"


def _strip_trailing(path: str) -> str:
    if path.endswith(SEPARATOR) or path.endswith(ALT_SEPARATOR):
        return path[:-1]
    return path


def combine_paths(paths: Iterable[str]) -> str:
    """
    Join path strings with a single "/" between them, in order.

    Backslashes become "/" and one trailing separator is stripped from each
    piece before joining, e.g. combine_paths(["a/", "b"]) == "a/b".
    """
    pieces = [_strip_trailing(p or "").replace(ALT_SEPARATOR, SEPARATOR) for p in paths]
    return SEPARATOR.join(pieces)


def normalize(*paths: str) -> Path:
    """Split the combined path into its non-empty segments."""
    joined = combine_paths(paths)
    return tuple(segment for segment in joined.split(SEPARATOR) if segment)


def to_string(path: Path) -> str:
    return SEPARATOR.join(path)


def is_segment(name: str) -> bool:
    return bool(name) and SEPARATOR not in name and ALT_SEPARATOR not in name


def directories_path(path: str) -> str:
    """Return the containing directory of path, "" for a single segment."""
    return to_string(normalize(path)[:-1])


def name_path(path: str, include: Union[Include, bool] = Include.WITH) -> str:
    if isinstance(include, bool):
        include = Include.WITH if include else Include.WITHOUT
    segments = normalize(path)
    name = segments[-1] if segments else ""
    if include is Include.WITHOUT:
        return name.split(".", 1)[0]
    return name


def extension_path(path: str) -> str:
    """Return the text after the last "." of the whole path string."""
    if "." not in path:
        return ""
    return path.rsplit(".", 1)[1]
