"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/linker.py
Replaces every non-master file of a duplicate group with a link to the master.

Failures are collected per file in the returned stats; one bad duplicate
never stops the remaining duplicates or groups from being processed.
"""
import filecmp
import logging
from typing import List, Optional, Callable

from sdkdedup.core.errors import LinkError
from sdkdedup.core.interfaces import Linker
from sdkdedup.core.models import (
    DuplicateGroup, DeduplicationStats, FileRecord, LinkOutcome, LinkMode, ReplaceStrategy)
from sdkdedup.core.sorter import MasterSelector
from sdkdedup.services.link_service import LinkService

logger = logging.getLogger(__name__)

GroupCallback = Callable[[DuplicateGroup, FileRecord, List[LinkOutcome]], None]


class LinkerImpl(Linker):
    """
    Links duplicates to their master according to the configured mode and strategy.

    Attributes:
        mode: Hard or symbolic links
        strategy: Atomic rename or delete-then-link
        verify: Compare content byte-for-byte before replacing a duplicate
    """

    def __init__(
            self,
            mode: LinkMode = LinkMode.SYMBOLIC,
            strategy: ReplaceStrategy = ReplaceStrategy.ATOMIC,
            verify: bool = False,
            link_service: Optional[LinkService] = None
    ):
        self.mode = mode
        self.strategy = strategy
        self.verify = verify
        self.link_service = link_service or LinkService()

    def link_groups(
            self,
            groups: List[DuplicateGroup],
            group_callback: Optional[GroupCallback] = None
    ) -> DeduplicationStats:
        """
        Processes each group in order: select master, link every duplicate.
        Args:
            groups: Duplicate groups, as returned by MasterSelector.duplicate_groups
            group_callback: Called after each group with (group, master, outcomes)
        Returns:
            DeduplicationStats with link counts, bytes saved and link errors
        """
        stats = DeduplicationStats(duplicate_groups=len(groups))

        for group in groups:
            master, duplicates = MasterSelector.select(group)
            logger.debug(f"Master for {group.fingerprint}: {master.path}")

            outcomes = [self.link_duplicate(duplicate, master) for duplicate in duplicates]
            for outcome in outcomes:
                stats.record_outcome(outcome)

            if group_callback:
                group_callback(group, master, outcomes)

        return stats

    def link_duplicate(self, duplicate: FileRecord, master: FileRecord) -> LinkOutcome:
        """Replaces one duplicate. Never raises for filesystem failures."""
        if duplicate.path == master.path:
            raise ValueError("A master cannot be linked to itself.")

        if duplicate.identity is not None and duplicate.identity == master.identity:
            logger.debug(f"Already linked: {duplicate.path}")
            return LinkOutcome(duplicate.path, master.path, success=True, skipped=True)

        try:
            if self.verify and not self._same_content(duplicate, master):
                raise LinkError("content differs from master")
            self.link_service.replace_with_link(duplicate.path, master.path, self.mode, self.strategy)
        except OSError as e:
            message = e.strerror or str(e)
            logger.debug(f"Failed to create {self.mode.display_name} from {duplicate.path} to {master.path}: {message}")
            return LinkOutcome(duplicate.path, master.path, success=False, error=message)

        logger.debug(f"Linked {duplicate.path} -> {master.path}")
        return LinkOutcome(duplicate.path, master.path, success=True, bytes_saved=duplicate.size)

    @staticmethod
    def _same_content(duplicate: FileRecord, master: FileRecord) -> bool:
        if duplicate.size != master.size:
            return False
        return filecmp.cmp(duplicate.path, master.path, shallow=False)
