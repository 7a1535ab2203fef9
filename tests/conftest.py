"""Pytest configuration.

The repository uses a flat `src/` layout without an installed package. This conftest ensures tests
can import from the `src.*` namespace when running `pytest` locally, and provides in-memory
collaborators for the config builder.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, NoReturn

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.config.paths import AppPaths  # noqa: E402

APP_ROOT = Path("/work/packages/web")


class MemoryFileSystem:
    """In-memory `FileSystem`: JSON documents, plain files and directories keyed by path."""

    def __init__(self) -> None:
        self.documents: dict[Path, Any] = {}
        self.files: set[Path] = set()
        self.directories: set[Path] = set()
        self.probe_errors: dict[Path, OSError] = {}

    def add_document(self, path: Path, payload: Any) -> None:
        self.documents[path] = payload
        self.add_directory(path.parent)

    def add_file(self, path: Path) -> None:
        self.files.add(path)
        self.add_directory(path.parent)

    def add_directory(self, path: Path) -> None:
        self.directories.add(path)
        self.directories.update(path.parents)

    def exists(self, path: Path) -> bool:
        return path in self.documents or path in self.files or path in self.directories

    def probe(self, path: Path) -> None:
        if path in self.probe_errors:
            raise self.probe_errors[path]
        if not self.exists(path):
            raise FileNotFoundError(2, "No such file or directory", str(path))

    def list_directories(self, path: Path) -> list[Path]:
        return sorted((d for d in self.directories if d.parent == path), key=lambda p: p.name)

    def read_json(self, path: Path) -> Any:
        if path not in self.documents:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return self.documents[path]


class RecordingReporter:
    """`Reporter` that records output and raises `SystemExit` on termination."""

    def __init__(self) -> None:
        self.notices: list[str] = []
        self.reports: list[str] = []
        self.exit_codes: list[int] = []

    def notice(self, message: str) -> None:
        self.notices.append(message)

    def report(self, message: str) -> None:
        self.reports.append(message)

    def terminate(self, code: int) -> NoReturn:
        self.exit_codes.append(code)
        raise SystemExit(code)


@pytest.fixture()
def app_paths() -> AppPaths:
    return AppPaths(
        app_path=APP_ROOT,
        app_src=APP_ROOT / "src",
        app_package_json=APP_ROOT / "package.json",
        tests_setup=APP_ROOT / "src" / "setupTests.js",
        sibling_packages=APP_ROOT / "siblings",
        scripts_path=APP_ROOT / "node_modules" / "react-scripts",
    )


@pytest.fixture()
def memory_fs(app_paths: AppPaths) -> MemoryFileSystem:
    """A project with a bare `package.json` and no setup file or sibling packages."""

    fs = MemoryFileSystem()
    fs.add_document(app_paths.app_package_json, {"name": "web", "version": "0.1.0"})
    fs.add_directory(app_paths.app_src)
    return fs


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()
