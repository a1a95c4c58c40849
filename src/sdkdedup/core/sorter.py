"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Deterministic master selection inside duplicate groups — zero dependencies outside core.
"""
from typing import List, Tuple, Iterable
from sdkdedup.core.models import DuplicateGroup, FileRecord


class MasterSelector:
    """
    Orders files inside a duplicate group and picks the master.
    Sorting priority (applied lexicographically):
    1. Path depth, files closer to the root first
    2. Full path, ascending
    The order only depends on the paths, so repeated runs pick the same master.
    """

    @staticmethod
    def sort_key(file: FileRecord) -> Tuple[int, str]:
        return file.depth, file.path

    @staticmethod
    def select(group: DuplicateGroup) -> Tuple[FileRecord, List[FileRecord]]:
        """
        Returns (master, duplicates) for a group of two or more files.
        Does not modify the group.
        """
        if not group.is_duplicate():
            raise ValueError("Cannot select a master for a group with fewer than 2 files.")
        ordered = sorted(group.files, key=MasterSelector.sort_key)
        return ordered[0], ordered[1:]

    @staticmethod
    def duplicate_groups(groups: Iterable[DuplicateGroup]) -> List[DuplicateGroup]:
        """
        Groups that still require linking, ordered by their master path.
        Groups whose members are all one file on disk are already deduplicated.
        """
        pending = [g for g in groups if g.needs_linking()]
        pending.sort(key=lambda g: MasterSelector.sort_key(MasterSelector.select(g)[0]))
        return pending
