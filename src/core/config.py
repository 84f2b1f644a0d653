"""Configuración del CDN drop.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings, prefijo `CDN_DROP_`, `.env` local).
- Se construye una vez al arrancar y se pasa explícitamente a cada servicio.
"""

from __future__ import annotations

import glob
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERSION = "1.0.0"
DEFAULT_SOURCE_GLOB = "packages/web-components/*"
DEFAULT_DESTINATION_ROOT = "sites/site-utilities/statics/assets/scripts/"


class AppSettings(BaseSettings):
    """Immutable run configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CDN_DROP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    root_dir: Path = Field(
        default_factory=Path.cwd,
        description="Monorepo root; relative paths below resolve against it.",
    )
    source_glob: str = Field(
        default=DEFAULT_SOURCE_GLOB,
        min_length=1,
        description="Glob matching package root directories (one level).",
    )
    destination_root: Path = Field(
        default=Path(DEFAULT_DESTINATION_ROOT),
        description="CDN drop folder holding `<package>/<version>/` directories.",
    )
    dist_folder: str = Field(
        default="dist",
        min_length=1,
        description="Folder inside each package that holds the built bundles.",
    )
    default_version: str = Field(
        default=DEFAULT_VERSION,
        min_length=1,
        description="Version used when the latest tag cannot be resolved.",
    )
    debug: bool = Field(
        default=False,
        description="Print source/destination paths and the raw version.",
    )

    def resolved_root(self) -> Path:
        return Path(self.root_dir).resolve()

    def resolved_source_glob(self) -> str:
        return os.path.join(glob.escape(str(self.resolved_root())), self.source_glob)

    def resolved_destination_root(self) -> Path:
        return (self.resolved_root() / self.destination_root).resolve()
