"""Jest configuration builder.

The builder produces the configuration the test runner receives: fixed defaults, an optional
`rootDir`, and the whitelisted overrides from the project's `package.json`. Unsupported overrides
terminate the process through the reporter.
"""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Callable
from pathlib import Path
from typing import Any

from src.config.paths import AppPaths
from src.jest.filesystem import FileSystem
from src.jest.manifest import read_manifest
from src.jest.overrides import (
    UnsupportedOverridesError,
    apply_overrides,
    format_unsupported_overrides,
)
from src.jest.reporter import Reporter
from src.jest.siblings import sibling_packages_fragment

logger = logging.getLogger(__name__)

Resolver = Callable[[str], str]

ROOT_DIR_TOKEN = "<rootDir>"
# Relative to <rootDir> so an ejected config never embeds an absolute filename.
SETUP_TESTS_TOKEN = f"{ROOT_DIR_TOKEN}/src/setupTests.js"
EJECTED_BABEL_TRANSFORM = f"{ROOT_DIR_TOKEN}/node_modules/babel-jest"

NODE_MODULES_PREFIX = r"[/\\]node_modules[/\\]"
CSS_MODULE_PATTERN = r"^.+\.module\.css$"


def scripts_resolver(scripts_path: Path) -> Resolver:
    """Resolve config files against the installed scripts package."""

    def resolve(relative_path: str) -> str:
        return os.path.normpath(os.path.join(scripts_path, relative_path))

    return resolve


def ejected_resolver() -> Resolver:
    """Resolve config files as `<rootDir>`-relative POSIX paths (for ejected projects)."""

    def resolve(relative_path: str) -> str:
        return posixpath.join(ROOT_DIR_TOKEN, relative_path)

    return resolve


def create_jest_config(
        resolve: Resolver,
        root_dir: str | None,
        is_ejecting: bool,
        *,
        paths: AppPaths,
        fs: FileSystem,
        reporter: Reporter,
) -> dict[str, Any]:
    """Build the Jest configuration for the project described by `paths`.

    Raises:
        FileNotFoundError: If the project's `package.json` is missing.
        ManifestError: If a manifest is malformed.
        OSError: If the sibling packages directory cannot be probed.
    """

    config: dict[str, Any] = {
        "collectCoverageFrom": [
            "src/**/*.{js,jsx}",
            "!src/**/*.stories.js",
            "!src/**/*.w3c.js",
        ],
        "setupFiles": [resolve("config/polyfills.js")],
    }
    if fs.exists(paths.tests_setup):
        config["setupTestFrameworkScriptFile"] = SETUP_TESTS_TOKEN

    config.update(
        {
            "testMatch": [
                f"{ROOT_DIR_TOKEN}/src/**/__tests__/**/*.js?(x)",
                f"{ROOT_DIR_TOKEN}/src/**/?(*.)(spec|test).js?(x)",
            ],
            "testEnvironment": "node",
            "testURL": "http://localhost",
            "transform": {
                r"^.+\.(js|jsx)$": (
                    EJECTED_BABEL_TRANSFORM
                    if is_ejecting
                    else resolve("config/jest/babelTransform.js")
                ),
                r"^.+\.css$": resolve("config/jest/cssTransform.js"),
                r"^(?!.*\.(js|jsx|css|json)$)": resolve("config/jest/fileTransform.js"),
            },
            "transformIgnorePatterns": [
                NODE_MODULES_PREFIX
                + sibling_packages_fragment(
                    fs, paths.sibling_packages, reporter, exclude=paths.app_path
                )
                + r".+\.(js|jsx)$",
                CSS_MODULE_PATTERN,
            ],
            "moduleNameMapper": {
                "^react-native$": "react-native-web",
                CSS_MODULE_PATTERN: resolve("config/jest/cssModuleIdentity.js"),
            },
            "moduleFileExtensions": ["web.js", "js", "json", "web.jsx", "jsx", "node"],
        }
    )
    if root_dir:
        config["rootDir"] = root_dir

    overrides = read_manifest(fs, paths.app_package_json).jest_overrides()
    unsupported = apply_overrides(config, overrides)
    if unsupported:
        logger.info("unsupported jest overrides keys=%s", ",".join(unsupported))
        reporter.report(format_unsupported_overrides(unsupported))
        reporter.terminate(1)
        raise UnsupportedOverridesError(unsupported)

    logger.debug(
        "jest config built app=%s root_dir=%s ejecting=%s",
        paths.app_path,
        root_dir,
        is_ejecting,
    )
    return config
