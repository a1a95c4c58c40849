"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/link_service.py
Cross-platform link operations.
Hard links go through a HardLinker chosen once per host: the native
CreateHardLinkW API on Windows, link() everywhere else. Symbolic links
always store a path relative to the link's own directory.
"""
import os
import sys
import ctypes
import uuid
import logging
from typing import Optional

from sdkdedup.core.errors import LinkError
from sdkdedup.core.interfaces import HardLinker
from sdkdedup.core.models import LinkMode, ReplaceStrategy

logger = logging.getLogger(__name__)


class PosixHardLinker(HardLinker):
    """Hard links through link(2)."""

    def create_hard_link(self, link_path: str, existing_path: str) -> None:
        try:
            os.link(existing_path, link_path)
        except OSError as e:
            raise LinkError(e.errno, f"link() failed with error code {e.errno}: {e.strerror}") from e


class WindowsHardLinker(HardLinker):
    """Hard links through kernel32!CreateHardLinkW."""

    def __init__(self):
        from ctypes import wintypes

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        self._create_hard_link = kernel32.CreateHardLinkW
        self._create_hard_link.argtypes = (wintypes.LPCWSTR, wintypes.LPCWSTR, wintypes.LPVOID)
        self._create_hard_link.restype = wintypes.BOOL

    def create_hard_link(self, link_path: str, existing_path: str) -> None:
        if not self._create_hard_link(link_path, existing_path, None):
            error_code = ctypes.get_last_error()
            raise LinkError(error_code, f"CreateHardLink failed with error code {error_code}")


def get_hard_linker(platform: Optional[str] = None) -> HardLinker:
    """Returns the hard link implementation for the host (or the given sys.platform value)."""
    platform = platform or sys.platform
    if platform == "win32":
        return WindowsHardLinker()
    return PosixHardLinker()


class LinkService:
    """
    Replaces a file with a link to another file.
    All failures are raised as LinkError.
    """

    def __init__(self, hard_linker: Optional[HardLinker] = None):
        self._hard_linker = hard_linker

    @property
    def hard_linker(self) -> HardLinker:
        # Created lazily: symbolic-link runs never touch the platform API
        if self._hard_linker is None:
            self._hard_linker = get_hard_linker()
        return self._hard_linker

    @staticmethod
    def relative_target(link_path: str, target_path: str) -> str:
        """Path of target_path as seen from the directory containing link_path."""
        return os.path.relpath(target_path, os.path.dirname(link_path))

    def create_link(self, link_path: str, target_path: str, mode: LinkMode) -> None:
        """Creates a new link at link_path (which must not exist)."""
        if mode == LinkMode.HARD:
            self.hard_linker.create_hard_link(link_path, target_path)
            return
        # The relative target must be computed for the final path, not a temporary sibling
        try:
            os.symlink(self.relative_target(link_path, target_path), link_path)
        except OSError as e:
            raise LinkError(e.errno, e.strerror or str(e)) from e

    def replace_with_link(
            self,
            path: str,
            target_path: str,
            mode: LinkMode = LinkMode.SYMBOLIC,
            strategy: ReplaceStrategy = ReplaceStrategy.ATOMIC
    ) -> None:
        """
        Replaces the file at path with a link to target_path.

        ATOMIC leaves the original file in place if anything fails.
        DELETE_FIRST removes the file before linking; a failed link leaves the path missing.
        """
        if strategy == ReplaceStrategy.DELETE_FIRST:
            self._delete(path)
            self.create_link(path, target_path, mode)
            return

        temp_path = self._temp_path(path)
        replaced = False
        try:
            if mode == LinkMode.HARD:
                self.hard_linker.create_hard_link(temp_path, target_path)
            else:
                os.symlink(self.relative_target(path, target_path), temp_path)
            os.replace(temp_path, path)
            replaced = True
        except LinkError:
            raise
        except OSError as e:
            raise LinkError(e.errno, e.strerror or str(e)) from e
        finally:
            if not replaced:
                self._discard(temp_path)
        logger.debug(f"Replaced {path} with {mode.display_name} to {target_path}")

    @staticmethod
    def _temp_path(path: str) -> str:
        directory, name = os.path.split(path)
        return os.path.join(directory, f".{name}.{uuid.uuid4().hex[:8]}.tmp")

    @staticmethod
    def _delete(path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise LinkError(e.errno, f"Failed to delete file: {e.strerror}") from e

    @staticmethod
    def _discard(temp_path: str) -> None:
        if not os.path.lexists(temp_path):
            return
        try:
            os.remove(temp_path)
        except OSError as e:
            logger.warning(f"Failed to remove temporary link {temp_path}: {e}")
