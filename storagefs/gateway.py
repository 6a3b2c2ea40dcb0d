# python
"""
storagefs/gateway.py
Key-value stores the virtual filesystem persists its document into.
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)


class PersistenceGateway(Protocol):
    def exists(self, key: str) -> bool: ...
    def read_string(self, key: str) -> str: ...
    def write_string(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store, mostly for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def exists(self, key: str) -> bool:
        return key in self.data

    def read_string(self, key: str) -> str:
        return self.data[key]

    def write_string(self, key: str, value: str) -> None:
        self.data[key] = value


class DirectoryStore:
    """
    Store each key as a UTF-8 file under a root directory.

    Layout:
      {root}/{key}.json
    """

    SUFFIX = ".json"

    def __init__(self, root: Union[str, Path, None] = None):
        self.root = Path(root or "data").resolve()

    def _key_path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"invalid store key: {key!r}")
        return self.root / f"{key}{self.SUFFIX}"

    def exists(self, key: str) -> bool:
        return self._key_path(key).is_file()

    def read_string(self, key: str) -> str:
        return self._key_path(key).read_text(encoding="utf-8")

    def write_string(self, key: str, value: str) -> None:
        path = self._key_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")
        logger.debug("Wrote %d bytes to %s", len(value.encode()), path)


def create_store(kind: str, **kwargs) -> PersistenceGateway:
    kind = kind.lower()
    if kind in ("memory", "mem"):
        return MemoryStore(**kwargs)
    if kind in ("directory", "dir", "file"):
        return DirectoryStore(**kwargs)
    raise ValueError(f"unknown store kind: {kind}")
