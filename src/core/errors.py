"""Error taxonomy for the CDN drop.

Every error here is caught by the service layer and turned into a console
line plus a `PackageOutcome`; none of them ends the run.
"""

from __future__ import annotations


class CdnDropError(Exception):
    """Base class for all CDN drop failures."""


class VersionResolutionError(CdnDropError):
    """The tag-describe command could not start or exited with an error."""


class DirectoryCreationError(CdnDropError):
    """The versioned destination directory could not be created."""


class SourceCopyError(CdnDropError):
    """A bundle could not be copied into the destination directory."""
