"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.

Key Components:
---------------
- HashAlgorithm: Standardized interface for streaming hash functions (xxHash64 by default).
- Hasher: Interface for computing the content fingerprint of a file.
- FileScanner: Interface for scanning directories and returning eligible paths.
- FileGrouper: Interface for partitioning files into equivalence classes.
- HardLinker: Platform capability for creating hard links.
- Linker: Interface for replacing duplicates with links to their master.
"""

from typing import Protocol, List, Dict, Tuple, Any, Callable, Optional
from sdkdedup.core.models import DuplicateGroup, DeduplicationStats, FileRecord, LinkOutcome


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in a different fingerprint function without affecting
    the rest of the deduplication logic.
    """

    def new(self) -> Any:
        """Returns a fresh hash object supporting update() and hexdigest()."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting the full content of a file."""
    def compute_fingerprint(self, path: str) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning a directory tree.

    Methods:
        scan: Returns the eligible file paths under the configured root.
    """
    def scan(self) -> List[str]:
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by content fingerprint.
    """
    def group(self, paths: List[str], root_dir: str) -> Tuple[Dict[str, DuplicateGroup], DeduplicationStats]:
        """
        Fingerprint every path and partition the records.

        Returns:
            A tuple containing:
                - fingerprint -> DuplicateGroup, in first-seen order
                - statistics with any per-file hashing errors
        """
        ...


class HardLinker(Protocol):
    """
    Creates a hard link at `link_path` denoting the same data as `existing_path`.
    Raises LinkError on failure.
    """
    def create_hard_link(self, link_path: str, existing_path: str) -> None:
        ...


class Linker(Protocol):
    """
    Interface for the linking phase.
    """
    def link_groups(
        self,
        groups: List[DuplicateGroup],
        group_callback: Optional[Callable[[DuplicateGroup, FileRecord, List[LinkOutcome]], None]] = None
    ) -> DeduplicationStats:
        """
        Select a master per group and link every other member to it.

        Args:
            groups: Groups that still need linking.
            group_callback: Optional callback after each group (group, master, outcomes).

        Returns:
            Statistics with link counts, bytes saved and per-file link errors.
        """
        ...

    def link_duplicate(self, duplicate: FileRecord, master: FileRecord) -> LinkOutcome:
        """Replace one duplicate; failures are returned, not raised."""
        ...
