"""Contract for anything that can describe the latest release tag."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TagSource(Protocol):
    """Minimal contract for a source-control tag query.

    Implementations raise `core.errors.VersionResolutionError` when the
    query cannot run or fails.
    """

    def describe_latest_tag(self) -> str:
        """Return the raw text of the most recent tag reachable from HEAD."""

        ...
