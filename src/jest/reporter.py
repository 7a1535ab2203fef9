"""User-facing notices, diagnostics and process termination.

The builder never prints or exits on its own; it goes through a `Reporter` so tests can observe
both without touching the real process.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import NoReturn, Protocol, TextIO


class Reporter(Protocol):
    """Collaborator for process-wide side effects."""

    def notice(self, message: str) -> None:
        """Emit an informational notice."""

    def report(self, message: str) -> None:
        """Emit an error diagnostic."""

    def terminate(self, code: int) -> NoReturn:
        """Terminate the process with `code`."""


@dataclass
class ConsoleReporter:
    """Notices and diagnostics both go to stderr; termination raises `SystemExit`.

    Stdout is reserved for the JSON configuration the CLI emits. The stream defaults to the
    current `sys.stderr` at call time.
    """

    err: TextIO | None = None

    def notice(self, message: str) -> None:
        print(message, file=self.err or sys.stderr)

    def report(self, message: str) -> None:
        print(message, file=self.err or sys.stderr)

    def terminate(self, code: int) -> NoReturn:
        sys.exit(code)
