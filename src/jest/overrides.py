"""Whitelisted `package.json` Jest overrides.

Only a handful of options may be overridden without ejecting. Anything else is a user error that
must stop the run with a clear explanation.
"""

from __future__ import annotations

from typing import Any

SUPPORTED_KEYS: tuple[str, ...] = (
    "collectCoverageFrom",
    "coverageReporters",
    "coverageThreshold",
    "snapshotSerializers",
)

EJECT_COMMAND = "npm run eject"


class UnsupportedOverridesError(ValueError):
    """Raised when overrides outside `SUPPORTED_KEYS` survive a reporter that did not exit."""

    def __init__(self, keys: list[str]) -> None:
        super().__init__("Unsupported Jest overrides: " + ", ".join(keys))
        self.keys = keys


def apply_overrides(config: dict[str, Any], overrides: dict[str, Any]) -> list[str]:
    """Move every supported key from `overrides` into `config`.

    Returns:
        The keys left in `overrides`, i.e. the unsupported ones, in their original order.
    """

    for key in SUPPORTED_KEYS:
        if key in overrides:
            config[key] = overrides.pop(key)
    return list(overrides)


def _bullets(keys: list[str] | tuple[str, ...]) -> str:
    return "\n".join(f"  • {key}" for key in keys)


def format_unsupported_overrides(unsupported: list[str]) -> str:
    """Render the diagnostic shown when `package.json` overrides unsupported Jest options."""

    return (
        "Out of the box, the project scripts only support overriding "
        "these Jest options:\n\n"
        + _bullets(SUPPORTED_KEYS)
        + ".\n\n"
        "These options in your package.json Jest configuration "
        "are not currently supported:\n\n"
        + _bullets(unsupported)
        + "\n\nIf you wish to override other Jest options, you need to "
        "eject from the default setup. You can do so by running "
        + EJECT_COMMAND
        + " but remember that this is a one-way operation. "
        "You may also file an issue to discuss "
        "supporting more options out of the box.\n"
    )
