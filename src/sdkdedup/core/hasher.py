"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Computes content fingerprints with pluggable hash algorithms.

Files are read in fixed-size chunks and fed to a streaming hash object,
so large assemblies are never held in memory as a whole.
"""

import logging
import xxhash
from sdkdedup.core.interfaces import Hasher, HashAlgorithm

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024 * 1024


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    def new(self):
        return xxhash.xxh64()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Read errors propagate as OSError so the caller can record them per file.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = READ_CHUNK_SIZE):
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_fingerprint(self, path: str) -> str:
        """Returns the lowercase hex digest of the full file content."""
        digest = self.algorithm.new()
        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(self.chunk_size), b''):
                digest.update(chunk)
        result = digest.hexdigest()
        logger.debug(f"Fingerprint {result} for {path}")
        return result
