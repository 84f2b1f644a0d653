"""End-to-end CDN drop: resolve the version, then copy the bundles."""

from __future__ import annotations

from adapters.git_tags import GitTagSource
from core.config import AppSettings
from core.domain.models import BatchReport
from core.interfaces.tag_source import TagSource
from core.services.bundle_copier import copy_package_bundles
from core.services.hooks import DropHooks
from core.services.version_resolver import resolve_version


def create_cdn_drop(
    *,
    settings: AppSettings,
    tag_source: TagSource | None = None,
    hooks: DropHooks | None = None,
) -> BatchReport:
    hooks = hooks or DropHooks()
    tag_source = tag_source or GitTagSource(cwd=settings.resolved_root())

    resolution = resolve_version(
        tag_source,
        default=settings.default_version,
        hooks=hooks,
        debug=settings.debug,
    )
    return copy_package_bundles(
        resolution.version,
        settings,
        hooks=hooks,
        tag=resolution.tag,
    )
