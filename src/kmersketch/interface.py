"""
Functional interface to the sketch core.

A thin set of module-level functions for binding layers that prefer
handles over methods. Each function delegates to KmerMinHash.
"""

from __future__ import annotations

from typing import List, Union

from kmersketch.sketches.minhash import DEFAULT_PRIME, KmerMinHash


def create(
    num: int,
    ksize: int,
    prime: int = DEFAULT_PRIME,
    is_protein: bool = False,
) -> KmerMinHash:
    """Create a new empty sketch handle."""
    return KmerMinHash(num, ksize, prime, is_protein)


def add_sequence(handle: KmerMinHash, seq: Union[str, bytes]) -> None:
    """Admit every k-mer of `seq`. See KmerMinHash.add_sequence."""
    handle.add_sequence(seq)


def add_hash(handle: KmerMinHash, value: int) -> None:
    handle.add_hash(value)


def get_mins(handle: KmerMinHash) -> List[int]:
    return handle.get_mins()


def merge(handle: KmerMinHash, other_handle: KmerMinHash) -> None:
    """Merge `other_handle` into `handle`; raises IncompatibleSketchError."""
    handle.merge(other_handle)


def count_common(handle: KmerMinHash, other_handle: KmerMinHash) -> int:
    return handle.count_common(other_handle)
