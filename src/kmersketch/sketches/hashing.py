"""
MurmurHash3 wrapper for k-mer hashing.

Uses the x86 32-bit variant with a fixed seed of 0, so the same k-mer
always maps to the same value across processes and machines.
"""

from typing import Union

import mmh3

MURMUR_SEED = 0


def hash_murmur32(kmer: Union[str, bytes]) -> int:
    """
    Hash a k-mer to a signed 32-bit integer.

    Args:
        kmer: K-mer as str (UTF-8 encoded) or bytes

    Returns:
        Signed 32-bit hash; may be negative
    """
    if isinstance(kmer, str):
        kmer = kmer.encode("utf-8")
    return mmh3.hash(kmer, MURMUR_SEED, signed=True)
