# python
"""
storagefs/cli.py
Command line front end over a directory-backed VirtualFileSystem.

Usage:
    python -m storagefs --data-dir data setup
    python -m storagefs mkdir docs
    python -m storagefs write docs/readme.txt "hi"
    python -m storagefs ls docs
"""
import argparse
import logging
import sys
from typing import List, Optional

from .engine import VirtualFileSystem
from .errors import StorageError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storagefs", description="Virtual filesystem kept in one JSON document")
    parser.add_argument("--data-dir", default=None, help="directory holding the store files")
    parser.add_argument("--root-name", default=None, help="store key of the filesystem document")
    parser.add_argument("--events-file", default=None, help="append mutation events to this JSONL file")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("setup")
    p = sub.add_parser("write")
    p.add_argument("path")
    p.add_argument("content")
    sub.add_parser("read").add_argument("path")
    p = sub.add_parser("rename")
    p.add_argument("path")
    p.add_argument("name")
    sub.add_parser("rm").add_argument("path")
    sub.add_parser("mkdir").add_argument("path")
    p = sub.add_parser("rename-dir")
    p.add_argument("path")
    p.add_argument("name")
    sub.add_parser("rmdir").add_argument("path")
    sub.add_parser("ls").add_argument("path", nargs="?", default="")
    sub.add_parser("exists").add_argument("path")
    sub.add_parser("tree")
    return parser


def _format_listing(fs: VirtualFileSystem, path: str) -> str:
    lines = [f"{name}/" for name in sorted(fs.list_directories(path))]
    lines.extend(sorted(fs.list_files(path)))
    return "\n".join(lines)


def _format_tree(fs: VirtualFileSystem) -> str:
    lines = ["/"]
    for rel, directory in fs.snapshot().walk():
        depth = len(rel)
        if rel:
            lines.append("  " * (depth - 1) + f"{rel[-1]}/")
        for name in sorted(directory.files):
            lines.append("  " * depth + name)
    return "\n".join(lines)


def run(fs: VirtualFileSystem, args: argparse.Namespace) -> int:
    cmd = args.command
    if cmd == "setup":
        fs.setup()
    elif cmd == "write":
        fs.write_file(args.path, args.content)
    elif cmd == "read":
        content = fs.read_file(args.path)
        if content is None:
            print(f"storagefs: {args.path}: No such file", file=sys.stderr)
            return 1
        print(content)
    elif cmd == "rename":
        fs.rename_file(args.path, args.name)
    elif cmd == "rm":
        fs.delete_file(args.path)
    elif cmd == "mkdir":
        fs.create_directory(args.path)
    elif cmd == "rename-dir":
        fs.rename_directory(args.path, args.name)
    elif cmd == "rmdir":
        fs.delete_directory(args.path)
    elif cmd == "ls":
        out = _format_listing(fs, args.path)
        if out:
            print(out)
    elif cmd == "exists":
        if fs.directory_exists(args.path):
            print("directory")
        elif fs.file_exists(args.path):
            print("file")
        else:
            print("missing")
            return 1
    elif cmd == "tree":
        print(_format_tree(fs))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        fs = VirtualFileSystem.from_config(
            data_dir=args.data_dir,
            root_name=args.root_name,
            events_file=args.events_file,
        )
        return run(fs, args)
    except StorageError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"storagefs: {exc}", file=sys.stderr)
        return 1
