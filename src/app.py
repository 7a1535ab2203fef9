"""Application composition root.

This module wires together settings, the project layout, filesystem access and the console
reporter for the config builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.config.paths import AppPaths, resolve_app_paths
from src.config.settings import Settings
from src.jest.builder import create_jest_config, ejected_resolver, scripts_resolver
from src.jest.filesystem import FileSystem, LocalFileSystem
from src.jest.reporter import ConsoleReporter, Reporter


@dataclass(frozen=True)
class App:
    """Shared dependencies of the command-line tools."""

    settings: Settings
    paths: AppPaths
    fs: FileSystem = field(default_factory=LocalFileSystem)
    reporter: Reporter = field(default_factory=ConsoleReporter)

    def build_config(self, *, ejecting: bool = False) -> dict[str, Any]:
        """Build the Jest config for running tests in place, or for writing into an ejected project.

        Ejecting uses `<rootDir>`-relative paths and leaves `rootDir` unset.
        """

        if ejecting:
            return create_jest_config(
                ejected_resolver(),
                None,
                True,
                paths=self.paths,
                fs=self.fs,
                reporter=self.reporter,
            )
        return create_jest_config(
            scripts_resolver(self.paths.scripts_path),
            str(self.paths.app_path),
            False,
            paths=self.paths,
            fs=self.fs,
            reporter=self.reporter,
        )


def create_app(settings: Settings) -> App:
    """Create the application container with real filesystem access and console output."""

    return App(settings=settings, paths=resolve_app_paths(settings))
