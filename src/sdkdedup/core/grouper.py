"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Fingerprints eligible files and partitions them into equivalence classes.
"""

import os
import logging
from typing import List, Dict, Tuple
from sdkdedup.core.interfaces import FileGrouper, Hasher
from sdkdedup.core.models import FileRecord, DuplicateGroup, DeduplicationStats, Stage
from sdkdedup.core.hasher import HasherImpl, XXHashAlgorithmImpl

logger = logging.getLogger(__name__)


def path_depth(path: str, root_dir: str) -> int:
    """Number of directory levels between root_dir and the file (0 for files directly in root)."""
    relative = os.path.relpath(path, root_dir)
    return len([part for part in relative.replace(os.sep, '/').split('/') if part]) - 1


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper using xxHash-based fingerprints.
    Uses an injected Hasher instance for flexibility and testability.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl(XXHashAlgorithmImpl())

    def group(self, paths: List[str], root_dir: str) -> Tuple[Dict[str, DuplicateGroup], DeduplicationStats]:
        """
        Groups files by full-content fingerprint.
        A file that cannot be read is recorded as a hash error and skipped;
        the remaining files are still grouped.
        Args:
            paths: Eligible file paths from the scanner
            root_dir: Scan root, used to compute path depth
        Returns:
            Tuple of (fingerprint -> group, stats with hashing errors)
        """
        stats = DeduplicationStats(files_scanned=len(paths))
        groups: Dict[str, DuplicateGroup] = {}

        for path in paths:
            try:
                record = self._build_record(path, root_dir)
            except OSError as e:
                logger.debug(f"Failed to hash {path}: {e}")
                stats.record_error(path, Stage.HASH, self._describe(e))
                continue

            group = groups.get(record.fingerprint)
            if group is None:
                group = groups[record.fingerprint] = DuplicateGroup(fingerprint=record.fingerprint)
            group.add_file(record)

        if stats.hash_errors:
            logger.warning(f"Skipped {stats.hash_errors} files due to hash computation errors")

        return groups, stats

    def _build_record(self, path: str, root_dir: str) -> FileRecord:
        stat_result = os.stat(path)
        fingerprint = self.hasher.compute_fingerprint(path)
        return FileRecord(
            path=path,
            fingerprint=fingerprint,
            size=stat_result.st_size,
            depth=path_depth(path, root_dir),
            identity=(stat_result.st_dev, stat_result.st_ino),
        )

    @staticmethod
    def _describe(error: OSError) -> str:
        return error.strerror or str(error)
