"""
Unified command orchestrator for deduplication.
This is the SINGLE source of truth for the pipeline — used by the CLI and by embedding callers.
"""
from typing import List, Optional
from sdkdedup.core.interfaces import FileGrouper
from sdkdedup.core.models import DeduplicationParams, DeduplicationStats, DuplicateGroup
from sdkdedup.core.scanner import FileScannerImpl
from sdkdedup.core.grouper import FileGrouperImpl
from sdkdedup.core.sorter import MasterSelector
from sdkdedup.core.linker import LinkerImpl
from sdkdedup.core.reporter import Reporter
from sdkdedup.services.link_service import LinkService


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow, strictly in sequence:
    1. Scan the root for eligible files
    2. Fingerprint and group them
    3. Select a master per group and link the duplicates
    4. Report totals

    Usage:
        params = DeduplicationParams(root_dir="/usr/share/dotnet", link_mode=LinkMode.HARD)
        stats = DeduplicationCommand().execute(params)
        sys.exit(0 if stats.success else 1)
    """

    def __init__(
            self,
            grouper: Optional[FileGrouper] = None,
            link_service: Optional[LinkService] = None
    ):
        self._grouper = grouper or FileGrouperImpl()
        self._link_service = link_service
        self._groups: List[DuplicateGroup] = []

    def execute(self, params: DeduplicationParams, reporter: Optional[Reporter] = None) -> DeduplicationStats:
        """
        Execute deduplication with given parameters.

        Args:
            params: Validated deduplication parameters
            reporter: Output sink; defaults to stdout/stderr

        Returns:
            Combined statistics; `stats.success` is the run result

        Raises:
            DirectoryNotFoundError: If the root directory does not exist (nothing is modified)
        """
        reporter = reporter or Reporter(link_mode=params.link_mode, verbose=params.verbose)
        scanner = FileScannerImpl(root_dir=params.root_dir, extensions=params.extensions)

        # Step 1: Scan (raises before anything is printed or touched)
        paths = scanner.scan()
        reporter.scan_started(scanner.root_dir)
        reporter.files_found(len(paths))

        # Step 2: Fingerprint and group; the whole tree is grouped before linking starts
        groups, hash_stats = self._grouper.group(paths, scanner.root_dir)
        self._groups = MasterSelector.duplicate_groups(groups.values())
        reporter.groups_found(len(self._groups))

        # Step 3: Link
        linker = LinkerImpl(
            mode=params.link_mode,
            strategy=params.strategy,
            verify=params.verify,
            link_service=self._link_service
        )
        link_stats = linker.link_groups(self._groups, group_callback=reporter.group_linked)

        # Step 4: Report
        stats = hash_stats.merge(link_stats)
        reporter.summary(stats)
        return stats

    def get_groups(self) -> List[DuplicateGroup]:
        """Duplicate groups processed by the last execution."""
        return list(self._groups)
