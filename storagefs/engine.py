# python
"""
storagefs/engine.py
VirtualFileSystem: file and directory operations over a single JSON document
kept under one key of a key-value store.
"""
import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from . import paths, tree
from .env import DEFAULT_ROOT_NAME, load_config
from .errors import (
    DocumentNotFoundError,
    InvalidNameError,
    NameCollisionError,
    PathResolutionError,
)
from .events import EventLog
from .gateway import DirectoryStore, PersistenceGateway
from .paths import Include
from .tree import Directory

logger = logging.getLogger(__name__)


class VirtualFileSystem:
    """
    Every mutation loads the whole document, changes the in-memory tree and
    writes the whole document back. Read-only operations never write.

    Calls are not synchronized: two engines writing the same key concurrently
    will lose one of the updates.
    """

    def __init__(
        self,
        store: PersistenceGateway,
        root_name: str = DEFAULT_ROOT_NAME,
        events_file: Optional[str] = None,
    ):
        self.store = store
        self.set_root_name(root_name)
        self.events = EventLog(events_file)

    @classmethod
    def from_config(
        cls, store: Optional[PersistenceGateway] = None, **overrides: Any
    ) -> "VirtualFileSystem":
        """
        Build an engine from load_config(); without an explicit store, a
        DirectoryStore rooted at the configured data_dir is used.
        """
        config = load_config(overrides)
        if store is None:
            store = DirectoryStore(config["data_dir"])
        return cls(store, root_name=config["root_name"], events_file=config["events_file"])

    # Configuration

    def set_root_name(self, name: str) -> None:
        if not paths.is_segment(name) or name.startswith("."):
            raise InvalidNameError("root name must be a non-empty key without separators or a leading dot", name)
        self.root_name = name

    def setup(self) -> None:
        if self.store.exists(self.root_name):
            logger.debug("Filesystem document %s already present", self.root_name)
            return
        self.store.write_string(self.root_name, tree.empty_document())
        logger.info("Created empty filesystem document under %s", self.root_name)
        self.events.log("fs.setup", self.root_name)

    # Document access

    def _load(self) -> Directory:
        if not self.store.exists(self.root_name):
            raise DocumentNotFoundError(self.root_name)
        logger.debug("Loading filesystem document %s", self.root_name)
        return tree.loads(self.store.read_string(self.root_name))

    def _try_load(self) -> Optional[Directory]:
        try:
            return self._load()
        except DocumentNotFoundError:
            return None

    def _save(self, root: Directory) -> None:
        text = root.dumps()
        logger.debug("Saving filesystem document %s (%d bytes)", self.root_name, len(text.encode()))
        self.store.write_string(self.root_name, text)

    def _locate_parent(self, path: str) -> Tuple[Directory, Optional[Directory], str]:
        """
        Load the tree and resolve the directory containing path.
        Returns (root, parent or None, final segment).
        """
        segments = paths.normalize(path)
        if not segments:
            raise InvalidNameError("path does not name an entry", path)
        root = self._load()
        return root, root.resolve_directory(segments[:-1]), segments[-1]

    def _require_directory(self, path: str) -> Directory:
        found = self._load().resolve_directory(paths.normalize(path))
        if found is None:
            raise PathResolutionError("directory not found", path)
        return found

    @staticmethod
    def _check_name(name: str) -> None:
        if not paths.is_segment(name):
            raise InvalidNameError("new name must be a single non-empty path segment", name)

    def snapshot(self) -> Directory:
        """Return the whole tree as currently stored."""
        return self._load()

    # Files

    def write_file(self, path: str, content: str) -> None:
        if not isinstance(content, str):
            raise TypeError(f"file content must be str, not {type(content).__name__}")
        root, parent, name = self._locate_parent(path)
        if parent is None:
            raise PathResolutionError("containing directory not found", path)
        parent.files[name] = content
        self._save(root)
        logger.info("Wrote file %s (%d chars)", path, len(content))
        self.events.log("file.write", self.root_name, path=path, length=len(content))

    def read_file(self, path: str) -> Optional[str]:
        root = self._try_load()
        if root is None:
            return None
        return root.resolve_file(paths.normalize(path))

    def rename_file(self, path: str, new_name: str) -> None:
        self._check_name(new_name)
        root, parent, name = self._locate_parent(path)
        if parent is None or name not in parent.files:
            raise PathResolutionError("file not found", path)
        if new_name == name:
            return
        parent.files[new_name] = parent.files.pop(name)
        self._save(root)
        logger.info("Renamed file %s to %s", path, new_name)
        self.events.log("file.rename", self.root_name, path=path, new_name=new_name)

    def file_exists(self, path: str) -> bool:
        try:
            return self.read_file(path) is not None
        except PathResolutionError:
            return False

    def delete_file(self, path: str) -> None:
        if not paths.normalize(path):
            return
        root, parent, name = self._locate_parent(path)
        if parent is None or name not in parent.files:
            logger.debug("delete_file: %s not present", path)
            return
        del parent.files[name]
        self._save(root)
        logger.info("Deleted file %s", path)
        self.events.log("file.delete", self.root_name, path=path)

    # Directories

    def create_directory(self, path: str) -> None:
        segments = paths.normalize(path)
        if len(segments) > tree.MAX_DEPTH:
            raise InvalidNameError(f"directories may nest at most {tree.MAX_DEPTH} levels", path)
        root = self._load()
        node = root
        created = []
        for segment in segments:
            child = node.directories.get(segment)
            if child is None:
                child = node.directories[segment] = Directory()
                created.append(segment)
            node = child
        if not created:
            return
        self._save(root)
        logger.info("Created directory %s (%d new levels)", path, len(created))
        self.events.log("directory.create", self.root_name, path=path, created=created)

    def rename_directory(self, path: str, new_name: str) -> None:
        self._check_name(new_name)
        root, parent, name = self._locate_parent(path)
        if parent is None or name not in parent.directories:
            raise PathResolutionError("directory not found", path)
        if new_name == name:
            return
        if new_name in parent.directories:
            raise NameCollisionError(f"directory {new_name!r} already exists", path)
        parent.directories[new_name] = parent.directories.pop(name)
        self._save(root)
        logger.info("Renamed directory %s to %s", path, new_name)
        self.events.log("directory.rename", self.root_name, path=path, new_name=new_name)

    def directory_exists(self, path: str) -> bool:
        try:
            self._require_directory(path)
        except PathResolutionError:
            return False
        return True

    def delete_directory(self, path: str) -> None:
        if not paths.normalize(path):
            raise InvalidNameError("the root directory cannot be deleted", path)
        root, parent, name = self._locate_parent(path)
        if parent is None or name not in parent.directories:
            logger.debug("delete_directory: %s not present", path)
            return
        del parent.directories[name]
        self._save(root)
        logger.info("Deleted directory %s", path)
        self.events.log("directory.delete", self.root_name, path=path)

    def list_files(self, path: str = "") -> Dict[str, str]:
        return dict(self._require_directory(path).files)

    def list_directories(self, path: str = "") -> Dict[str, Dict[str, Any]]:
        directory = self._require_directory(path)
        return {name: child.serialize() for name, child in directory.directories.items()}

    # Path utilities

    @staticmethod
    def name_path(path: str, include: Union[Include, bool] = Include.WITH) -> str:
        return paths.name_path(path, include)

    @staticmethod
    def extension_path(path: str) -> str:
        return paths.extension_path(path)

    @staticmethod
    def directories_path(path: str) -> str:
        return paths.directories_path(path)

    @staticmethod
    def combine_paths(segments: Iterable[str]) -> str:
        return paths.combine_paths(segments)
