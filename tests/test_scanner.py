"""
Unit tests for FileScannerImpl.
Verifies file discovery with the extension filter, symlink policy and error handling.
"""
import os
import pytest
from pathlib import Path
from sdkdedup.core.scanner import FileScannerImpl
from sdkdedup.core.errors import DirectoryNotFoundError
from conftest import needs_symlinks


class TestFileScannerImpl:
    """Test file scanning with filters and error handling."""

    def test_finds_only_assemblies_by_default(self, layout):
        """Default allow-list is .dll/.exe — text files are never returned."""
        scanner = FileScannerImpl(root_dir=str(layout["root"]))
        paths = scanner.scan()

        assert sorted(paths) == sorted([
            str(layout["a_dll"]), str(layout["b_dll"]), str(layout["c_dll"])
        ])
        assert not any(p.endswith(".txt") for p in paths)

    def test_extension_match_is_case_insensitive(self, nested_layout):
        scanner = FileScannerImpl(root_dir=str(nested_layout["root"]), extensions=[".exe"])
        paths = scanner.scan()

        assert str(nested_layout["exe_a"]) in paths
        assert str(nested_layout["exe_b"]) in paths  # run.EXE
        assert len(paths) == 2

    def test_custom_extension_filter(self, layout):
        scanner = FileScannerImpl(root_dir=str(layout["root"]), extensions=[".txt"])
        paths = scanner.scan()

        assert len(paths) == 2
        assert all(p.endswith("notes.txt") for p in paths)

    def test_scans_subdirectories_recursively(self, nested_layout):
        paths = FileScannerImpl(root_dir=str(nested_layout["root"])).scan()

        assert str(nested_layout["deep"]) in paths
        assert len(paths) == 5

    def test_returns_absolute_normalized_paths(self, layout, monkeypatch):
        monkeypatch.chdir(layout["root"])
        scanner = FileScannerImpl(root_dir="./A/../A")
        paths = scanner.scan()

        assert paths == [str(layout["a_dll"])]
        assert all(os.path.isabs(p) for p in paths)

    def test_missing_root_raises_directory_not_found(self, tmp_path):
        """A missing root is fatal for the run."""
        missing = tmp_path / "does_not_exist"
        scanner = FileScannerImpl(root_dir=str(missing))

        with pytest.raises(DirectoryNotFoundError) as exc_info:
            scanner.scan()
        assert str(missing) in str(exc_info.value)

    def test_file_as_root_raises_directory_not_found(self, layout):
        scanner = FileScannerImpl(root_dir=str(layout["a_dll"]))

        with pytest.raises(DirectoryNotFoundError):
            scanner.scan()

    def test_empty_directory_returns_empty_list(self, tmp_path):
        assert FileScannerImpl(root_dir=str(tmp_path)).scan() == []

    @needs_symlinks
    def test_skips_file_symlinks(self, layout):
        """Links left by a previous run must not be picked up again."""
        link = layout["root"] / "C" / "link.dll"
        link.symlink_to(Path("..") / "A" / "x.dll")

        paths = FileScannerImpl(root_dir=str(layout["root"])).scan()

        assert str(link) not in paths
        assert len(paths) == 3

    @needs_symlinks
    def test_does_not_follow_directory_symlinks(self, layout):
        """A directory symlink pointing back to the root must not cause re-traversal."""
        loop = layout["root"] / "C" / "loop"
        loop.symlink_to(layout["root"], target_is_directory=True)

        paths = FileScannerImpl(root_dir=str(layout["root"])).scan()

        assert len(paths) == 3
        assert not any("loop" in p for p in paths)
