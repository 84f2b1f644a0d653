"""Callbacks the UI layer plugs into the services.

The services never print; they narrate through these hooks so the CLI can
colour the output and tests can capture it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class DropHooks:
    """Optional callbacks for progress, errors and debug detail."""

    status: Callable[[str], None] | None = None
    error: Callable[[str], None] | None = None
    debug: Callable[[str, str], None] | None = None

    def emit_status(self, message: str) -> None:
        if self.status:
            self.status(message)

    def emit_error(self, message: str) -> None:
        if self.error:
            self.error(message)

    def emit_debug(self, label: str, value: str) -> None:
        if self.debug:
            self.debug(label, value)
