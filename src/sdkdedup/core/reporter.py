"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/reporter.py
Textual progress and summary output.

The summary line is parsed by packaging scripts (they match `saving <number> MB`),
so its wording must not change.
"""
import os
import sys
from typing import List, TextIO, Optional

from sdkdedup.core.models import (
    DeduplicationStats, DuplicateGroup, FileRecord, LinkMode, LinkOutcome, Stage)
from sdkdedup.utils.convert_utils import ConvertUtils


class Reporter:
    """Writes run progress to `out` and errors to `err`."""

    def __init__(
            self,
            link_mode: LinkMode = LinkMode.SYMBOLIC,
            verbose: bool = False,
            out: Optional[TextIO] = None,
            err: Optional[TextIO] = None
    ):
        self.link_mode = link_mode
        self.verbose = verbose
        self._out = out
        self._err = err

    # Resolved on every write so pytest's capsys sees the output
    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    @property
    def link_type(self) -> str:
        return self.link_mode.display_name

    def scan_started(self, root_dir: str) -> None:
        print(f"Scanning for duplicate assemblies in '{root_dir}' (using {self.link_type}s)...", file=self.out)

    def files_found(self, count: int) -> None:
        print(f"Found {count} assemblies eligible for deduplication.", file=self.out)

    def groups_found(self, count: int) -> None:
        print(f"Found {count} groups of duplicate assemblies.", file=self.out)

    def group_linked(self, group: DuplicateGroup, master: FileRecord, outcomes: List[LinkOutcome]) -> None:
        """Per-group detail, verbose mode only."""
        if not self.verbose:
            return

        print(f"Group: {os.path.basename(master.path)} ({len(group.files)} files, {master.size:,} bytes)", file=self.out)
        print(f"  Master: {master.path}", file=self.out)
        for outcome in outcomes:
            if outcome.skipped:
                print(f"  Already linked: {outcome.source_path}", file=self.out)
            elif outcome.success:
                print(f"  Linked: {outcome.source_path} -> {outcome.target_path}", file=self.out)
            else:
                print(f"  Failed: {outcome.source_path} ({outcome.error})", file=self.out)

    def report_errors(self, stats: DeduplicationStats) -> None:
        failed_links = {o.source_path: o for o in stats.outcomes if not o.success}
        for error in stats.errors:
            if error.stage == Stage.HASH:
                print(f"Error: Failed to hash file '{error.path}': {error.message}", file=self.err)
            else:
                outcome = failed_links.get(error.path)
                target = outcome.target_path if outcome else "?"
                print(
                    f"Error: Failed to create {self.link_type} from '{error.path}' to '{target}': {error.message}",
                    file=self.err
                )

    def summary_line(self, stats: DeduplicationStats) -> str:
        return (
            f"Deduplication complete: {stats.files_linked} files replaced with {self.link_type}s, "
            f"saving {ConvertUtils.bytes_to_mb(stats.bytes_saved)} MB."
        )

    def summary(self, stats: DeduplicationStats) -> None:
        """Errors first, then the summary line. Always printed, even after failures."""
        self.report_errors(stats)
        if self.verbose:
            print(
                f"Reclaimed {ConvertUtils.bytes_to_human(stats.bytes_saved)} across {stats.duplicate_groups} groups.",
                file=self.out
            )
            if stats.errors:
                print(f"{stats.hash_errors} hash error(s), {stats.link_errors} link error(s).", file=self.out)
        print(self.summary_line(stats), file=self.out)
