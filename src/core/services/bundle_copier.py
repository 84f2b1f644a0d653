"""Copy package bundles into the versioned CDN drop folder.

Each package runs through the same steps: ensure the versioned directory,
copy the unminified bundle, copy the minified bundle, report. A failure in
any step aborts that package only; files already copied stay on disk.
"""

from __future__ import annotations

import glob
import logging
import shutil
from pathlib import Path

from core.config import AppSettings
from core.domain.models import (
    BatchReport,
    CopyStage,
    DestinationLayout,
    PackageEntry,
    PackageOutcome,
)
from core.errors import CdnDropError, DirectoryCreationError, SourceCopyError
from core.services.hooks import DropHooks

logger = logging.getLogger(__name__)

VERIFY_MESSAGE = (
    "Publishing files have been placed in CDN drop folder. "
    "Please verify, and submit new PR to deploy to CDN..."
)


def discover_packages(pattern: str, *, dist_folder: str = "dist") -> list[PackageEntry]:
    """Expand `pattern` one level deep into package entries.

    Matches are resolved to real paths. Non-directories are skipped. Order is
    whatever `glob` yields.
    """

    entries: list[PackageEntry] = []
    for match in glob.glob(pattern):
        real = Path(match).resolve()
        if not real.is_dir():
            logger.debug("skipping non-directory match %s", real)
            continue
        entries.append(PackageEntry.from_directory(real, dist_folder=dist_folder))
    return entries


def build_layout(destination_root: Path, package_name: str, version: str) -> DestinationLayout:
    return DestinationLayout(
        destination_root=destination_root,
        package_name=package_name,
        version=version,
    )


def ensure_directory(path: Path) -> bool:
    """Create `path` if it does not exist yet. Returns True when created.

    Only the last segment is created; a missing parent is an error.
    """

    if path.exists():
        return False
    try:
        path.mkdir()
    except OSError as exc:
        raise DirectoryCreationError(f"could not create {path}: {exc}") from exc
    return True


def copy_bundle(source: Path, destination: Path) -> None:
    try:
        shutil.copy2(source, destination)
    except OSError as exc:
        raise SourceCopyError(f"could not copy {source} to {destination}: {exc}") from exc


def copy_package(
    entry: PackageEntry,
    version: str,
    destination_root: Path,
    *,
    hooks: DropHooks | None = None,
    debug: bool = False,
) -> PackageOutcome:
    """Run one package through the copy steps and return its outcome."""

    hooks = hooks or DropHooks()
    layout = build_layout(destination_root, entry.package_name, version)
    outcome = PackageOutcome(package=entry, layout=layout)

    if debug:
        hooks.emit_debug("Source File Path:", str(entry.source_file))
        hooks.emit_debug("Source File Path Minified:", str(entry.source_file_min))
        hooks.emit_debug("Destination File Path:", str(layout.dest_file))
        hooks.emit_debug("Destination File Path Minified:", str(layout.dest_file_min))

    try:
        outcome.created_directory = ensure_directory(layout.dest_dir)
        if outcome.created_directory:
            hooks.emit_status(
                f"new package bundle folder, {version}, has been created for the CDN drop ... "
            )
        outcome.stage = CopyStage.DIRECTORY_ENSURED

        copy_bundle(entry.source_file, layout.dest_file)
        hooks.emit_status(
            f"Unminified package, {entry.package_name}, has been copied to the CDN drop folder ... "
        )
        outcome.stage = CopyStage.UNMINIFIED_COPIED

        copy_bundle(entry.source_file_min, layout.dest_file_min)
        hooks.emit_status(
            f"Minified package, {entry.package_name}, has been copied to the CDN drop folder ... "
        )
        outcome.stage = CopyStage.MINIFIED_COPIED
    except CdnDropError as exc:
        logger.debug("aborting %s after %s", entry.package_name, outcome.stage.value)
        hooks.emit_error(str(exc))
        outcome.stage = CopyStage.ABORTED
        outcome.error = str(exc)
        return outcome

    hooks.emit_status(VERIFY_MESSAGE)
    outcome.stage = CopyStage.REPORTED
    return outcome


def copy_package_bundles(
    version: str,
    settings: AppSettings,
    *,
    hooks: DropHooks | None = None,
    tag: str | None = None,
) -> BatchReport:
    """Copy every discovered package's bundles for `version`."""

    hooks = hooks or DropHooks()
    destination_root = settings.resolved_destination_root()
    hooks.emit_status("Preparing package bundles ...")

    packages = discover_packages(
        settings.resolved_source_glob(),
        dist_folder=settings.dist_folder,
    )
    logger.debug("discovered %d package(s)", len(packages))

    report = BatchReport(version=version, tag=tag)
    for entry in packages:
        report.outcomes.append(
            copy_package(
                entry,
                version,
                destination_root,
                hooks=hooks,
                debug=settings.debug,
            )
        )
    return report
