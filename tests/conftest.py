"""
Shared fixtures for deduplication tests.
Creates isolated temporary layouts with controlled assembly files.
"""
import os
import pytest
from pathlib import Path
from typing import Dict


needs_symlinks = pytest.mark.skipif(
    os.name == "nt", reason="creating symbolic links needs extra privileges on Windows"
)


@pytest.fixture
def layout(tmp_path) -> Dict[str, Path]:
    """
    SDK-like layout:
    - A/x.dll and B/x.dll share content "1111" (one duplicate group)
    - C/y.dll is unique ("2222")
    - A/notes.txt and B/notes.txt share content but are not assemblies
    """
    files = {}
    for name in ("A", "B", "C"):
        (tmp_path / name).mkdir()

    files["a_dll"] = tmp_path / "A" / "x.dll"
    files["b_dll"] = tmp_path / "B" / "x.dll"
    files["c_dll"] = tmp_path / "C" / "y.dll"
    files["a_dll"].write_bytes(b"1111")
    files["b_dll"].write_bytes(b"1111")
    files["c_dll"].write_bytes(b"2222")

    files["a_txt"] = tmp_path / "A" / "notes.txt"
    files["b_txt"] = tmp_path / "B" / "notes.txt"
    files["a_txt"].write_bytes(b"same text")
    files["b_txt"].write_bytes(b"same text")

    files["root"] = tmp_path
    return files


@pytest.fixture
def nested_layout(tmp_path) -> Dict[str, Path]:
    """
    Three copies of one assembly at different depths plus an executable pair:
    - root/tool.dll            (depth 0, expected master)
    - root/sdk/tool.dll        (depth 1)
    - root/sdk/9.0/tool.dll    (depth 2)
    - root/sdk/a/run.exe, root/sdk/b/run.EXE (same depth, path decides)
    """
    files = {}
    content = b"MZ" + os.urandom(4096)
    exe = b"MZ-exe" + os.urandom(2048)

    (tmp_path / "sdk" / "9.0").mkdir(parents=True)
    (tmp_path / "sdk" / "a").mkdir()
    (tmp_path / "sdk" / "b").mkdir()

    files["top"] = tmp_path / "tool.dll"
    files["mid"] = tmp_path / "sdk" / "tool.dll"
    files["deep"] = tmp_path / "sdk" / "9.0" / "tool.dll"
    for key in ("top", "mid", "deep"):
        files[key].write_bytes(content)

    files["exe_a"] = tmp_path / "sdk" / "a" / "run.exe"
    files["exe_b"] = tmp_path / "sdk" / "b" / "run.EXE"
    files["exe_a"].write_bytes(exe)
    files["exe_b"].write_bytes(exe)

    files["root"] = tmp_path
    return files
