"""
sdkdedup — replace duplicate assemblies in a directory tree with links.

Core features:
- Full-content xxHash64 fingerprints, grouped into equivalence classes
- Deterministic master choice (closest to root, then path order), so reruns are no-ops
- Relative symbolic links (default) or hard links, with per-file error accounting
- Summary line parsed by packaging scripts: "... saving <X.XX> MB."
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("sdkdedup")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from sdkdedup.commands import DeduplicationCommand
from sdkdedup.core import (
    DeduplicationParams, DeduplicationStats, LinkMode, ReplaceStrategy,
    FileRecord, DuplicateGroup, LinkOutcome, DirectoryNotFoundError, LinkError)
from sdkdedup.services import LinkService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "DeduplicationStats",
    "LinkMode",
    "ReplaceStrategy",
    "FileRecord",
    "DuplicateGroup",
    "LinkOutcome",
    "DirectoryNotFoundError",
    "LinkError",
    "LinkService",
    "__version__",
]
