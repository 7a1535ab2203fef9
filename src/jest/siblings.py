"""Detection of locally-developed sibling packages (lerna-style monorepos).

Sibling packages are linked into `node_modules` but ship untranspiled sources, so Jest must not
skip them when applying transforms. The detected names become a negative lookahead inside the
`node_modules` transform-ignore pattern.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.jest.filesystem import FileSystem
from src.jest.manifest import read_manifest
from src.jest.reporter import Reporter

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
PATH_SEPARATOR_CLASS = r"[/\\]"


def detect_sibling_packages(
        fs: FileSystem,
        packages_dir: Path,
        reporter: Reporter,
        *,
        exclude: Path | None = None,
) -> list[str]:
    """Return the declared names of the packages found directly under `packages_dir`.

    A missing directory yields an empty list and a notice; any other access failure propagates,
    as does a subdirectory without a readable manifest. The `exclude` directory (the app itself
    when it lives among its siblings) is never listed.
    """

    try:
        fs.probe(packages_dir)
    except FileNotFoundError:
        reporter.notice("No lerna packages directory detected")
        return []

    names: list[str] = []
    for package_dir in fs.list_directories(packages_dir):
        if package_dir == exclude:
            continue
        manifest = read_manifest(fs, package_dir / MANIFEST_FILENAME)
        if not manifest.name:
            logger.warning("sibling package without a name skipped dir=%s", package_dir)
            continue
        names.append(manifest.name)
    return names


def sibling_packages_pattern(names: list[str]) -> str:
    """Build the negative-lookahead fragment that lets `names` through the ignore pattern.

    Only the first `/` of the joined alternation is widened to `[/\\]`; scoped names after the
    first keep a literal `/`.
    """

    if not names:
        return ""
    alternation = "|".join(names).replace("/", PATH_SEPARATOR_CLASS, 1)
    return "(?!" + alternation + ")"


def sibling_packages_fragment(
        fs: FileSystem,
        packages_dir: Path,
        reporter: Reporter,
        *,
        exclude: Path | None = None,
) -> str:
    """Detect sibling packages and return their exclusion fragment ("" when there are none)."""

    names = detect_sibling_packages(fs, packages_dir, reporter, exclude=exclude)
    if not names:
        return ""

    reporter.notice("Local lerna packages detected.")
    reporter.notice("Jest will transpile these packages:")
    reporter.notice(", ".join(names))
    return sibling_packages_pattern(names)
