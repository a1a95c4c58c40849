"""
Tests for Reporter output. The summary line is a compatibility surface for
packaging scripts, so its exact shape is asserted.
"""
import re
from sdkdedup.core.models import (
    DeduplicationStats, DuplicateGroup, FileRecord, LinkMode, LinkOutcome, Stage)
from sdkdedup.core.reporter import Reporter
from sdkdedup.utils.convert_utils import ConvertUtils


SAVINGS_PATTERN = re.compile(r"saving (\d+\.\d{2}) MB")


class TestSummaryLine:

    def test_symbolic_summary_shape(self):
        stats = DeduplicationStats(files_linked=3, bytes_saved=3 * 1024 * 1024 + 512 * 1024)

        line = Reporter(LinkMode.SYMBOLIC).summary_line(stats)

        assert line == "Deduplication complete: 3 files replaced with symbolic links, saving 3.50 MB."
        assert SAVINGS_PATTERN.search(line).group(1) == "3.50"

    def test_hard_link_summary_shape(self):
        line = Reporter(LinkMode.HARD).summary_line(DeduplicationStats())

        assert line == "Deduplication complete: 0 files replaced with hard links, saving 0.00 MB."

    def test_summary_printed_even_with_errors(self, capsys):
        stats = DeduplicationStats()
        stats.record_error("/sdk/bad.dll", Stage.HASH, "Permission denied")

        Reporter().summary(stats)

        captured = capsys.readouterr()
        assert "Error: Failed to hash file '/sdk/bad.dll': Permission denied" in captured.err
        assert "Deduplication complete: 0 files" in captured.out


class TestProgressOutput:

    def test_progress_lines(self, capsys):
        reporter = Reporter(LinkMode.HARD)
        reporter.scan_started("/sdk")
        reporter.files_found(12)
        reporter.groups_found(4)

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Scanning for duplicate assemblies in '/sdk' (using hard links)...",
            "Found 12 assemblies eligible for deduplication.",
            "Found 4 groups of duplicate assemblies.",
        ]

    def test_group_detail_only_when_verbose(self, capsys):
        master = FileRecord("/sdk/A/x.dll", "0" * 16, 1234567, 1)
        dup = FileRecord("/sdk/B/x.dll", "0" * 16, 1234567, 1)
        bad = FileRecord("/sdk/C/x.dll", "0" * 16, 1234567, 1)
        group = DuplicateGroup("0" * 16, [master, dup, bad])
        outcomes = [
            LinkOutcome(dup.path, master.path, success=True, bytes_saved=dup.size),
            LinkOutcome(bad.path, master.path, success=False, error="Permission denied"),
        ]

        Reporter(verbose=False).group_linked(group, master, outcomes)
        assert capsys.readouterr().out == ""

        Reporter(verbose=True).group_linked(group, master, outcomes)
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Group: x.dll (3 files, 1,234,567 bytes)",
            "  Master: /sdk/A/x.dll",
            "  Linked: /sdk/B/x.dll -> /sdk/A/x.dll",
            "  Failed: /sdk/C/x.dll (Permission denied)",
        ]

    def test_link_error_names_both_paths(self, capsys):
        stats = DeduplicationStats()
        stats.record_outcome(LinkOutcome("/sdk/B/x.dll", "/sdk/A/x.dll", success=False, error="boom"))

        Reporter(LinkMode.HARD).report_errors(stats)

        assert capsys.readouterr().err.strip() == (
            "Error: Failed to create hard link from '/sdk/B/x.dll' to '/sdk/A/x.dll': boom"
        )


class TestConvertUtils:

    def test_bytes_to_mb_two_decimals(self):
        assert ConvertUtils.bytes_to_mb(0) == "0.00"
        assert ConvertUtils.bytes_to_mb(1024 * 1024) == "1.00"
        assert ConvertUtils.bytes_to_mb(4) == "0.00"
        assert ConvertUtils.bytes_to_mb(-5) == "0.00"

    def test_bytes_to_human_picks_unit(self):
        assert ConvertUtils.bytes_to_human(0) == "0.00B"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(3 * 1024 * 1024) == "3.00MB"
        assert ConvertUtils.bytes_to_human(-1) == "0.00B"


class TestVerboseSummary:

    def test_reclaimed_line_precedes_summary(self, capsys):
        stats = DeduplicationStats(duplicate_groups=2, files_linked=3, bytes_saved=1536)

        Reporter(LinkMode.HARD, verbose=True).summary(stats)

        assert capsys.readouterr().out.splitlines() == [
            "Reclaimed 1.50KB across 2 groups.",
            "Deduplication complete: 3 files replaced with hard links, saving 0.00 MB.",
        ]

    def test_quiet_summary_is_one_line(self, capsys):
        Reporter(LinkMode.HARD).summary(DeduplicationStats(files_linked=1, bytes_saved=1536))

        assert len(capsys.readouterr().out.splitlines()) == 1
