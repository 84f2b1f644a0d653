"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Las rutas se derivan, nunca se guardan dos veces: `PackageEntry` sabe dónde
  están sus bundles y `DestinationLayout` sabe a dónde van.
- `PackageOutcome` y `BatchReport` dejan inspeccionar el resultado de cada paquete.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PackageEntry(BaseModel):
    """One package directory matched by the source glob."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(
        ...,
        min_length=1,
        description="Final path segment of the matched directory.",
    )
    source_dir: Path = Field(
        ...,
        description="Real (symlink-resolved) path of the package root.",
    )
    dist_folder: str = Field(
        default="dist",
        min_length=1,
        description="Folder holding the built bundles.",
    )

    @classmethod
    def from_directory(cls, directory: Path, *, dist_folder: str = "dist") -> "PackageEntry":
        return cls(package_name=directory.name, source_dir=directory, dist_folder=dist_folder)

    @property
    def source_file(self) -> Path:
        return self.source_dir / self.dist_folder / f"{self.package_name}.js"

    @property
    def source_file_min(self) -> Path:
        return self.source_dir / self.dist_folder / f"{self.package_name}.min.js"


class DestinationLayout(BaseModel):
    """Where one package's bundles land for a given version.

    `<destination_root>/<package_name>/<version>/<package_name>{.js,.min.js}`
    """

    model_config = ConfigDict(frozen=True)

    destination_root: Path
    package_name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)

    @property
    def dest_dir(self) -> Path:
        return self.destination_root / self.package_name / self.version

    @property
    def dest_file(self) -> Path:
        return self.dest_dir / f"{self.package_name}.js"

    @property
    def dest_file_min(self) -> Path:
        return self.dest_dir / f"{self.package_name}.min.js"


class CopyStage(str, Enum):
    """Per-package progress; `ABORTED` is terminal on any failure."""

    DISCOVERED = "discovered"
    DIRECTORY_ENSURED = "directory_ensured"
    UNMINIFIED_COPIED = "unminified_copied"
    MINIFIED_COPIED = "minified_copied"
    REPORTED = "reported"
    ABORTED = "aborted"


class PackageOutcome(BaseModel):
    """Result of processing a single package."""

    package: PackageEntry
    layout: DestinationLayout
    stage: CopyStage = CopyStage.DISCOVERED
    created_directory: bool = Field(
        default=False,
        description="True when this run created the versioned directory.",
    )
    error: str | None = Field(
        default=None,
        description="Message of the error that aborted the package, if any.",
    )

    @property
    def ok(self) -> bool:
        return self.stage is CopyStage.REPORTED


class VersionResolution(BaseModel):
    """Version chosen for the run and how it was obtained."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1)
    tag: str | None = Field(
        default=None,
        description="Raw tag text returned by source control.",
    )
    error: str | None = None

    @property
    def resolved(self) -> bool:
        return self.tag is not None and self.error is None


class BatchReport(BaseModel):
    """Outcomes of one copy run, in processing order."""

    version: str
    tag: str | None = None
    outcomes: list[PackageOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[PackageOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[PackageOutcome]:
        return [o for o in self.outcomes if not o.ok]
