"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
"""


class DeduplicationError(Exception):
    """Base class for errors raised by the deduplication engine."""


class DirectoryNotFoundError(DeduplicationError, FileNotFoundError):
    """The scan root does not exist or is not a directory. Fatal for the run."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Directory '{directory}' does not exist.")


class LinkError(DeduplicationError, OSError):
    """Creating a link failed. Recorded per file, never aborts the run."""
