"""Filesystem access used by the config builder.

The builder only needs four primitives. Keeping them behind a protocol lets the merge and
validation logic run against an in-memory fake in tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol


class FileSystem(Protocol):
    """Minimal read-only filesystem interface."""

    def exists(self, path: Path) -> bool:
        """Whether anything exists at `path`."""

    def probe(self, path: Path) -> None:
        """Check that `path` is accessible.

        Raises:
            FileNotFoundError: If nothing exists at `path`.
            OSError: On any other access failure.
        """

    def list_directories(self, path: Path) -> list[Path]:
        """Return the immediate, non-symlink subdirectories of `path`, sorted by name."""

    def read_json(self, path: Path) -> Any:
        """Read and decode a UTF-8 JSON document."""


class LocalFileSystem:
    """`FileSystem` backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def probe(self, path: Path) -> None:
        path.stat()

    def list_directories(self, path: Path) -> list[Path]:
        # lstat semantics: a symlink to a directory is not a sibling package.
        return sorted(
            (p for p in path.iterdir() if p.is_dir() and not p.is_symlink()),
            key=lambda p: p.name,
        )

    def read_json(self, path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))
