"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for scanning, grouping and linking duplicate assemblies.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


DEFAULT_EXTENSIONS = [".dll", ".exe"]


# =============================
# Enums
# =============================

class LinkMode(Enum):
    """
    Kind of link a duplicate is replaced with.
    """
    SYMBOLIC = "symbolic"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        """Name used in progress and summary lines."""
        mapping = {
            LinkMode.SYMBOLIC: "symbolic link",
            LinkMode.HARD: "hard link",
        }
        return mapping.get(self, self.value)


class ReplaceStrategy(Enum):
    """
    Order of operations when a duplicate is replaced by a link.
    """
    ATOMIC = "atomic"
    DELETE_FIRST = "delete-first"


class Stage(str, Enum):
    HASH = "hash"
    LINK = "link"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single eligible file, fingerprinted.
    Created once by the grouper and never modified afterwards.
    """
    path: str
    fingerprint: str
    size: int  # in bytes
    depth: int = 0  # path segments below the scan root
    identity: Optional[Tuple[int, int]] = None  # (st_dev, st_ino)

    def __post_init__(self):
        if self.size < 0:
            raise ValueError("File size cannot be negative")
        if self.depth < 0:
            raise ValueError("Path depth cannot be negative")

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Equivalence class: all files sharing one content fingerprint,
    in the order they were hashed.
    """
    fingerprint: str
    files: List[FileRecord] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def add_file(self, file: FileRecord) -> None:
        if file.fingerprint != self.fingerprint:
            raise ValueError("Cannot add file with different fingerprint to a group.")
        self.files.append(file)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def needs_linking(self) -> bool:
        """
        True if at least two members are distinct files on disk.
        Members that are already hard links of each other share an identity.
        """
        if not self.is_duplicate():
            return False
        identities = {f.identity if f.identity is not None else f.path for f in self.files}
        return len(identities) > 1

    def __repr__(self):
        return f"<DuplicateGroup fingerprint={self.fingerprint}, count={len(self.files)}>"


@dataclass(frozen=True)
class FileError:
    """A per-file failure, collected and reported at the end of the run."""
    path: str
    stage: Stage
    message: str


@dataclass(frozen=True)
class LinkOutcome:
    """Result of replacing one duplicate with a link to its master."""
    source_path: str
    target_path: str
    success: bool
    bytes_saved: int = 0
    error: Optional[str] = None
    skipped: bool = False


@dataclass
class DeduplicationStats:
    """
    Run totals. Each phase returns its own stats and the command merges them.
    """
    files_scanned: int = 0
    duplicate_groups: int = 0
    files_linked: int = 0
    bytes_saved: int = 0
    errors: List[FileError] = field(default_factory=list)
    outcomes: List[LinkOutcome] = field(default_factory=list)

    @property
    def hash_errors(self) -> int:
        return sum(1 for e in self.errors if e.stage == Stage.HASH)

    @property
    def link_errors(self) -> int:
        return sum(1 for e in self.errors if e.stage == Stage.LINK)

    @property
    def success(self) -> bool:
        """True only when nothing failed during hashing or linking."""
        return not self.errors

    def record_error(self, path: str, stage: Stage, message: str) -> None:
        self.errors.append(FileError(path=path, stage=stage, message=message))

    def record_outcome(self, outcome: LinkOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.skipped:
            return
        if outcome.success:
            self.files_linked += 1
            self.bytes_saved += outcome.bytes_saved
        else:
            self.record_error(outcome.source_path, Stage.LINK, outcome.error or "unknown error")

    def merge(self, other: "DeduplicationStats") -> "DeduplicationStats":
        """Returns a new stats object combining both."""
        return DeduplicationStats(
            files_scanned=self.files_scanned + other.files_scanned,
            duplicate_groups=self.duplicate_groups + other.duplicate_groups,
            files_linked=self.files_linked + other.files_linked,
            bytes_saved=self.bytes_saved + other.bytes_saved,
            errors=self.errors + other.errors,
            outcomes=self.outcomes + other.outcomes,
        )


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic — used by the CLI and by callers embedding the engine.
"""

@dataclass
class DeduplicationParams:
    """Parameters for one deduplication run with validation."""
    root_dir: str
    link_mode: LinkMode = LinkMode.SYMBOLIC
    verbose: bool = False
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    verify: bool = False
    strategy: ReplaceStrategy = ReplaceStrategy.ATOMIC

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        # Normalize extensions: ensure they start with dot and are lowercase
        normalized = []
        for ext in self.extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext and ext not in normalized:
                normalized.append(ext)
        self.extensions = normalized or list(DEFAULT_EXTENSIONS)
