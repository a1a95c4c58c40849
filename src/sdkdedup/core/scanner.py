"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file scanning for deduplication.
Features:
- Recursively scans the root directory with os.walk
- Never follows directory symlinks and skips file symlinks
- Applies a case-insensitive extension allow-list
- Returns a sorted list of absolute, normalized paths
"""

import os
from typing import List, Optional
import time
import logging

from sdkdedup.core.errors import DirectoryNotFoundError
from sdkdedup.core.interfaces import FileScanner
from sdkdedup.core.models import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans a directory recursively and filters files by extension.

    Attributes:
        root_dir: Root directory to scan (normalized to an absolute path)
        extensions: Allowed file extensions (e.g., [".dll", ".exe"])
    """

    def __init__(self, root_dir: str, extensions: Optional[List[str]] = None):
        self.root_dir = os.path.normpath(os.path.abspath(root_dir))
        self.extensions = [ext.lower() for ext in extensions] if extensions else list(DEFAULT_EXTENSIONS)

    def scan(self) -> List[str]:
        """
        Single-pass scan of the tree.
        Raises DirectoryNotFoundError if the root is missing.
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: extensions={self.extensions}")

        if not os.path.isdir(self.root_dir):
            logger.debug(f"Directory does not exist: {self.root_dir}")
            raise DirectoryNotFoundError(self.root_dir)

        found_files = []
        start_time = time.time()

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error, followlinks=False):
            # Stable traversal order
            dirs.sort()
            for filename in sorted(files):
                path = os.path.join(root, filename)
                if self._process_file(path):
                    found_files.append(path)

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} matching files.")

        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    def _process_file(self, path: str) -> bool:
        """
        Check an individual path against the symlink policy and extension filter.
        Args:
            path: Absolute path of a directory entry reported as a file
        Returns:
            True if the file is eligible for deduplication
        """
        if os.path.islink(path):
            logger.debug(f"Skipping symbolic link: {path}")
            return False

        if not self._extension_passes(path):
            return False

        logger.debug(f"Accepted file: {path}")
        return True

    def _extension_passes(self, path: str) -> bool:
        """
        Check if file matches any of the allowed extensions (case-insensitive).
        """
        ext = os.path.splitext(path)[1].lower()
        return ext in self.extensions
