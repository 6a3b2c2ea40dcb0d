# python
"""storagefs package"""
__version__ = "0.1"

from storagefs.env import load_env

# Load .env values at import time so configuration relies on python-dotenv instead of manual parsing.
load_env()

from storagefs.errors import (  # noqa: E402
    DocumentNotFoundError,
    InvalidNameError,
    MalformedDocumentError,
    NameCollisionError,
    PathResolutionError,
    StorageError,
)
from storagefs.paths import Include  # noqa: E402
from storagefs.tree import Directory  # noqa: E402
from storagefs.gateway import DirectoryStore, MemoryStore, create_store  # noqa: E402
from storagefs.engine import VirtualFileSystem  # noqa: E402

__all__ = [
    "Directory",
    "DirectoryStore",
    "DocumentNotFoundError",
    "Include",
    "InvalidNameError",
    "MalformedDocumentError",
    "MemoryStore",
    "NameCollisionError",
    "PathResolutionError",
    "StorageError",
    "VirtualFileSystem",
    "create_store",
]
