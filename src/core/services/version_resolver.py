"""Version resolution from the latest source-control tag."""

from __future__ import annotations

import logging

from core.config import DEFAULT_VERSION
from core.domain.models import VersionResolution
from core.domain.version import parse_version
from core.errors import VersionResolutionError
from core.interfaces.tag_source import TagSource
from core.services.hooks import DropHooks

logger = logging.getLogger(__name__)


def resolve_version(
    tag_source: TagSource,
    *,
    default: str = DEFAULT_VERSION,
    hooks: DropHooks | None = None,
    debug: bool = False,
) -> VersionResolution:
    """Ask `tag_source` for the latest tag and derive the run's version.

    Never raises for tag failures: the error is reported through `hooks` and
    `default` is used instead.
    """

    hooks = hooks or DropHooks()

    try:
        tag_text = tag_source.describe_latest_tag()
    except VersionResolutionError as exc:
        logger.debug("tag lookup failed: %s", exc)
        hooks.emit_error(f"Error retrieving git tag version, {exc}")
        resolution = VersionResolution(version=default, error=str(exc))
    else:
        version = parse_version(tag_text)
        if version is None:
            message = "git describe returned no tag"
            logger.debug(message)
            hooks.emit_error(f"Error retrieving git tag version, {message}")
            resolution = VersionResolution(version=default, tag=tag_text.strip(), error=message)
        else:
            resolution = VersionResolution(version=version, tag=tag_text.strip())

    if debug:
        hooks.emit_debug("Version:", resolution.version)
    hooks.emit_status(f"Git Tag version {resolution.version}")
    return resolution
