"""
kmersketch Sketches Module

Bottom-k MinHash sketches over DNA and translated k-mers.

Key structures:
- KmerMinHash: Bounded set of the smallest k-mer hash values
- jaccard / containment: Similarity estimates between two sketches
- similarity_matrix: Pairwise Jaccard estimates for many sketches
"""

from kmersketch.sketches.hashing import hash_murmur32
from kmersketch.sketches.minhash import DEFAULT_PRIME, KmerMinHash
from kmersketch.sketches.similarity import containment, jaccard, similarity_matrix

__all__ = [
    "DEFAULT_PRIME",
    "KmerMinHash",
    "hash_murmur32",
    "jaccard",
    "containment",
    "similarity_matrix",
]
