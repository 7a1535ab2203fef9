"""Conventional project layout.

Every path the Jest config builder touches is derived here from the settings, so the builder
itself never guesses at directory names.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from src.config.settings import Settings


@dataclass(frozen=True)
class AppPaths:
    """Absolute paths of the front-end project and its surroundings."""

    app_path: Path
    app_src: Path
    app_package_json: Path
    tests_setup: Path
    sibling_packages: Path
    scripts_path: Path


LERNA_MANIFEST = "lerna.json"
LERNA_PACKAGES_DIRNAME = "packages"


def find_monorepo_root(app_path: Path) -> Path | None:
    """Return the closest directory at or above `app_path` holding a `lerna.json`."""

    for candidate in (app_path, *app_path.parents):
        if (candidate / LERNA_MANIFEST).is_file():
            return candidate
    return None


def resolve_app_paths(settings: Settings) -> AppPaths:
    """Resolve the project layout for the configured app directory.

    Defaults:
        - sibling packages live in `packages/` of the enclosing lerna monorepo, or of the app
          itself when there is none (usually absent for standalone apps);
        - the scripts package is installed under `node_modules/react-scripts`.
    """

    app_path = settings.app_directory.expanduser().resolve()
    app_src = app_path / "src"

    monorepo_root = find_monorepo_root(app_path) or app_path
    sibling_packages = settings.sibling_packages_dir or monorepo_root / LERNA_PACKAGES_DIRNAME
    scripts_path = settings.scripts_directory or app_path / "node_modules" / "react-scripts"

    return AppPaths(
        app_path=app_path,
        app_src=app_src,
        app_package_json=app_path / "package.json",
        tests_setup=app_src / "setupTests.js",
        sibling_packages=sibling_packages.expanduser().resolve(),
        scripts_path=scripts_path.expanduser().resolve(),
    )
