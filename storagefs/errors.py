"""
Exceptions raised by the virtual filesystem.

Every error carries the offending path (as given by the caller) so messages
stay readable when they surface through the command line.
"""
from typing import Optional


class StorageError(Exception):
    """Base class for all storagefs errors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} (path={self.path!r})"
        return self.message


class PathResolutionError(StorageError, LookupError):
    """A directory or file segment of the path does not exist."""


class DocumentNotFoundError(PathResolutionError):
    """No document is stored under the root key; setup() was never called."""

    def __init__(self, root_name: str) -> None:
        super().__init__(f"no filesystem document under key {root_name!r}; call setup() first")
        self.root_name = root_name


class MalformedDocumentError(StorageError, ValueError):
    """The persisted document is not a valid directory tree."""


class NameCollisionError(StorageError):
    """A rename targets a name already used by a sibling of the same kind."""


class InvalidNameError(StorageError, ValueError):
    """A path or name cannot address an entry (empty, root, or contains a separator)."""
