"""Directory tree model and (de)serialization of the stored JSON document."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import jsonschema

from .errors import MalformedDocumentError
from .paths import Path

logger = logging.getLogger(__name__)

# schema validation recurses once per level through "$ref"
MAX_DEPTH = 100

DIRECTORY_NODE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "files": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "directories": {
            "type": "object",
            "additionalProperties": {"$ref": "#"},
        },
    },
    "required": ["files", "directories"],
    "additionalProperties": False,
}

DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "$id": "storagefs-directory.schema.json",
    **DIRECTORY_NODE_SCHEMA,
}


@dataclass
class Directory:
    """
    One directory node. Files and subdirectories live in separate mappings,
    so a file and a directory may share a name.
    """

    files: Dict[str, str] = field(default_factory=dict)
    directories: Dict[str, "Directory"] = field(default_factory=dict)

    def resolve_directory(self, path: Path) -> Optional["Directory"]:
        """Walk path from this node; None at the first missing segment."""
        node = self
        for segment in path:
            node = node.directories.get(segment)
            if node is None:
                return None
        return node

    def resolve_file(self, path: Path) -> Optional[str]:
        if not path:
            return None
        parent = self.resolve_directory(path[:-1])
        if parent is None:
            return None
        return parent.files.get(path[-1])

    def walk(self, prefix: Path = ()) -> Iterator[Tuple[Path, "Directory"]]:
        """Depth-first (path, directory) pairs, children in name order."""
        yield prefix, self
        for name in sorted(self.directories):
            yield from self.directories[name].walk(prefix + (name,))

    def serialize(self) -> Dict[str, Any]:
        return {
            "files": dict(self.files),
            "directories": {name: child.serialize() for name, child in self.directories.items()},
        }

    def dumps(self) -> str:
        return json.dumps(self.serialize(), ensure_ascii=False)


def _build(node: Mapping[str, Any]) -> Directory:
    return Directory(
        files=dict(node["files"]),
        directories={name: _build(child) for name, child in node["directories"].items()},
    )


def document_depth(document: Any) -> int:
    """Deepest directory nesting in a parsed document, the root being 0."""
    deepest = 0
    stack = [(document, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        children = node.get("directories") if isinstance(node, dict) else None
        if isinstance(children, dict):
            stack.extend((child, depth + 1) for child in children.values())
    return deepest


def deserialize(document: Any) -> Directory:
    """
    Build a Directory tree from a parsed document.
    Raises MalformedDocumentError if the document does not match DOCUMENT_SCHEMA
    or nests directories deeper than MAX_DEPTH.
    """
    depth = document_depth(document)
    if depth > MAX_DEPTH:
        logger.warning("Rejected filesystem document: depth %d exceeds %d", depth, MAX_DEPTH)
        raise MalformedDocumentError(f"filesystem document nests {depth} directories deep, limit is {MAX_DEPTH}")
    try:
        jsonschema.validate(instance=document, schema=DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as e:
        logger.warning("Rejected filesystem document: %s", e.message)
        raise MalformedDocumentError(f"invalid filesystem document: {e.message}") from e
    return _build(document)


def loads(text: str) -> Directory:
    try:
        document = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Filesystem document is not valid JSON: %s", e)
        raise MalformedDocumentError(f"filesystem document is not valid JSON: {e}") from e
    return deserialize(document)


def empty_document() -> str:
    return Directory().dumps()
