"""Adaptador git: último tag vía `git describe --abbrev=0`.

Por qué un adaptador:
- El Core solo conoce `TagSource`; el subproceso vive aquí.
- Cualquier fallo (git ausente, repo sin tags) sale como `VersionResolutionError`.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from core.errors import VersionResolutionError
from core.interfaces.tag_source import TagSource

logger = logging.getLogger(__name__)

DESCRIBE_COMMAND: tuple[str, ...] = ("git", "describe", "--abbrev=0")


class GitTagSource(TagSource):
    """Reads the most recent tag of the working tree at `cwd`."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def describe_latest_tag(self) -> str:
        logger.debug("running %s in %s", " ".join(DESCRIBE_COMMAND), self._cwd or Path.cwd())
        try:
            completed = subprocess.run(
                list(DESCRIBE_COMMAND),
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise VersionResolutionError(f"could not start {DESCRIBE_COMMAND[0]}: {exc}") from exc

        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exit code {completed.returncode}"
            raise VersionResolutionError(f"{' '.join(DESCRIBE_COMMAND)} failed: {detail}")

        return completed.stdout
