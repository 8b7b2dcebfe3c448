"""
Similarity estimates built on count_common.

count_common gives the number of shared retained values. Turning that
into a Jaccard estimate needs a denominator, and for sketches that have
not yet filled up to `num` the right one is the smaller sketch size.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from kmersketch.sketches.minhash import KmerMinHash


def jaccard(a: KmerMinHash, b: KmerMinHash) -> float:
    """
    Estimate the Jaccard similarity of the k-mer sets behind two sketches.

    Args:
        a: First sketch
        b: Compatible second sketch

    Returns:
        Estimate in [0, 1]; 0.0 if either sketch is empty

    Raises:
        IncompatibleSketchError: If the sketches are not compatible
    """
    common = a.count_common(b)
    if len(a) == 0 or len(b) == 0:
        return 0.0

    if a.is_full and b.is_full:
        denominator = min(a.num, b.num)
    else:
        denominator = min(len(a), len(b))
    return min(common / denominator, 1.0)


def containment(a: KmerMinHash, b: KmerMinHash) -> float:
    """Fraction of `a`'s retained values also retained by `b`."""
    common = a.count_common(b)
    if len(a) == 0:
        return 0.0
    return common / len(a)


def similarity_matrix(sketches: Sequence[KmerMinHash]) -> np.ndarray:
    """
    Pairwise Jaccard estimates.

    Returns:
        Symmetric (n, n) float matrix; diagonal is 1.0 for non-empty
        sketches and 0.0 for empty ones
    """
    n = len(sketches)
    matrix = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        matrix[i, i] = 1.0 if len(sketches[i]) else 0.0
        for j in range(i + 1, n):
            value = jaccard(sketches[i], sketches[j])
            matrix[i, j] = value
            matrix[j, i] = value
    return matrix
