"""
Core deduplication engine — scanner, hasher, grouper, master selector, linker and reporter.

This package contains the whole pipeline of sdkdedup:
- FileScannerImpl: recursive directory traversal with an extension allow-list
- HasherImpl + XXHashAlgorithmImpl: streaming xxHash64 content fingerprints
- FileGrouperImpl: fingerprint-based equivalence classes with per-file error collection
- MasterSelector: deterministic (depth, path) master choice
- LinkerImpl: replaces duplicates with hard or relative symbolic links
- Reporter: progress lines and the summary line parsed by packaging scripts
- Models: FileRecord, DuplicateGroup, LinkOutcome and configuration objects
"""

from .errors import DeduplicationError, DirectoryNotFoundError, LinkError
from .models import (
    FileRecord, DuplicateGroup, LinkOutcome, FileError, DeduplicationStats, DeduplicationParams,
    LinkMode, ReplaceStrategy, Stage, DEFAULT_EXTENSIONS)
from .scanner import FileScannerImpl
from .hasher import HasherImpl, XXHashAlgorithmImpl
from .grouper import FileGrouperImpl
from .sorter import MasterSelector
from .linker import LinkerImpl
from .reporter import Reporter

__all__ = [
    "DeduplicationError",
    "DirectoryNotFoundError",
    "LinkError",
    "FileRecord",
    "DuplicateGroup",
    "LinkOutcome",
    "FileError",
    "DeduplicationStats",
    "DeduplicationParams",
    "LinkMode",
    "ReplaceStrategy",
    "Stage",
    "DEFAULT_EXTENSIONS",
    "FileScannerImpl",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "FileGrouperImpl",
    "MasterSelector",
    "LinkerImpl",
    "Reporter",
]
