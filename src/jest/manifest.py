"""Package manifest (`package.json`) model.

Only the fields the config builder reads are typed; everything else in the manifest is kept as-is.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from src.jest.filesystem import FileSystem


class ManifestError(ValueError):
    """Raised when a `package.json` cannot be decoded or has malformed fields."""


class PackageManifest(BaseModel):
    """The subset of `package.json` relevant to Jest configuration."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    jest: dict[str, Any] | None = None

    def jest_overrides(self) -> dict[str, Any]:
        """Return a fresh copy of the `jest` section (empty when absent)."""

        return dict(self.jest or {})


def read_manifest(fs: FileSystem, path: Path) -> PackageManifest:
    """Read and validate the manifest at `path`.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ManifestError: If the manifest is not valid JSON or has malformed fields.
    """

    try:
        payload = fs.read_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path} is not valid JSON: {exc}") from exc

    try:
        return PackageManifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"{path} is not a valid package manifest: {exc}") from exc
