"""
KmerMinHash - bottom-k MinHash sketch over DNA or translated k-mers.

The sketch keeps the `num` smallest distinct hash values (reduced modulo
`prime`) seen across every k-mer it was fed. Two sketches built with the
same ksize, prime and molecule type can be merged or compared directly;
the overlap of their retained values estimates the overlap of the
underlying k-mer sets.

Memory: one Python int per retained value, so ~num × 60 bytes
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Union

from sortedcontainers import SortedSet

from kmersketch.errors import IncompatibleSketchError, ShortSequenceError
from kmersketch.sequence.transforms import reverse_complement, translate
from kmersketch.sketches.hashing import hash_murmur32

logger = logging.getLogger(__name__)

DEFAULT_PRIME = 9999999967


class KmerMinHash:
    """
    Bounded set of the smallest k-mer hash values.

    Parameters are fixed at construction. The only mutation is admission
    of hash values, either directly (add_hash) or derived from sequence
    (add_sequence, add_kmer).

    Example:
        >>> mh = KmerMinHash(num=5, ksize=3)
        >>> mh.add_sequence("AAATTTCCC")
        >>> len(mh.get_mins()) <= 5
        True
    """

    __slots__ = ("_num", "_ksize", "_prime", "_is_protein", "_mins")

    def __init__(
        self,
        num: int,
        ksize: int,
        prime: int = DEFAULT_PRIME,
        is_protein: bool = False,
    ):
        """
        Initialize an empty sketch.

        Args:
            num: Maximum number of hash values retained
            ksize: K-mer length in nucleotides
            prime: Modulus of the hash value domain [0, prime)
            is_protein: Translate each window to amino acids before hashing
        """
        if num < 1:
            raise ValueError(f"num must be positive, got {num}")
        if ksize < 1:
            raise ValueError(f"ksize must be positive, got {ksize}")
        if prime < 2:
            raise ValueError(f"prime must be at least 2, got {prime}")

        self._num = int(num)
        self._ksize = int(ksize)
        self._prime = int(prime)
        self._is_protein = bool(is_protein)
        self._mins: SortedSet = SortedSet()

    @property
    def num(self) -> int:
        return self._num

    @property
    def ksize(self) -> int:
        return self._ksize

    @property
    def prime(self) -> int:
        return self._prime

    @property
    def is_protein(self) -> bool:
        return self._is_protein

    @property
    def is_full(self) -> bool:
        """True once the sketch holds `num` values."""
        return len(self._mins) == self._num

    # -------------------------------------------------------------------------
    # Admission
    # -------------------------------------------------------------------------

    def _shrink(self) -> None:
        while len(self._mins) > self._num:
            self._mins.pop()

    def add_hash(self, h: int) -> None:
        """
        Admit a raw hash value.

        The value is folded into [0, prime) first, so negative inputs
        are accepted. Re-adding a retained value is a no-op.
        """
        h = ((h % self._prime) + self._prime) % self._prime
        self._mins.add(h)
        self._shrink()

    def add_kmer(self, kmer: Union[str, bytes]) -> None:
        """Hash a single k-mer as-is and admit it."""
        self.add_hash(hash_murmur32(kmer))

    def add_sequence(self, sequence: Union[str, bytes]) -> None:
        """
        Admit every k-mer of a DNA sequence.

        DNA mode admits all forward windows, then all windows of the
        reverse complement. Protein mode admits, per window, the
        translation of the window and of its reverse complement.

        Args:
            sequence: Upper-case DNA string; bytes are read as Latin-1

        Raises:
            ShortSequenceError: If the sequence is shorter than ksize
            InvalidCharacterError: On a character outside {A,C,G,T};
                values admitted before the failure are kept
        """
        if isinstance(sequence, bytes):
            sequence = sequence.decode("latin-1")

        ksize = self._ksize
        if len(sequence) < ksize:
            raise ShortSequenceError(len(sequence), ksize)

        n_windows = len(sequence) - ksize + 1

        if not self._is_protein:
            for i in range(n_windows):
                self.add_kmer(sequence[i:i + ksize])

            rc = reverse_complement(sequence)
            for i in range(n_windows):
                self.add_kmer(rc[i:i + ksize])
        else:
            for i in range(n_windows):
                kmer = sequence[i:i + ksize]
                # Complementing first rejects bad characters before the
                # codon lookup sees them.
                rc = reverse_complement(kmer)
                self.add_kmer(translate(kmer))
                self.add_kmer(translate(rc))

    def add_many(self, hashes: Iterable[int]) -> None:
        """Admit several raw hash values."""
        for h in hashes:
            self.add_hash(h)

    # -------------------------------------------------------------------------
    # Sketch algebra
    # -------------------------------------------------------------------------

    def is_compatible(self, other: KmerMinHash) -> bool:
        """True if `other` shares ksize, prime and is_protein."""
        return (
            self._ksize == other._ksize
            and self._prime == other._prime
            and self._is_protein == other._is_protein
        )

    def _check_compatible(self, other: KmerMinHash, action: str) -> None:
        if self._ksize != other._ksize:
            raise IncompatibleSketchError("ksizes", self._ksize, other._ksize, action)
        if self._prime != other._prime:
            raise IncompatibleSketchError("primes", self._prime, other._prime, action)
        if self._is_protein != other._is_protein:
            raise IncompatibleSketchError(
                "molecule types", self._is_protein, other._is_protein, action
            )

    def merge(self, other: KmerMinHash) -> KmerMinHash:
        """
        Merge another sketch into this one.

        The result keeps the `num` smallest values of the union, which is
        the sketch that would have been built from both inputs together.

        Args:
            other: A compatible sketch (num may differ)

        Returns:
            Self (for chaining)

        Raises:
            IncompatibleSketchError: Before any change to either sketch
        """
        self._check_compatible(other, "merged")
        self._mins.update(other._mins)
        self._shrink()
        logger.debug(
            f"Merged sketch of {len(other._mins)} values, now holding {len(self._mins)}"
        )
        return self

    def count_common(self, other: KmerMinHash) -> int:
        """
        Number of hash values retained by both sketches.

        Raises:
            IncompatibleSketchError: If the sketches are not compatible
        """
        self._check_compatible(other, "compared")
        combined = self._mins | other._mins
        return len(self._mins) + len(other._mins) - len(combined)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get_mins(self) -> List[int]:
        """Snapshot of the retained values, ascending."""
        return list(self._mins)

    def copy(self) -> KmerMinHash:
        """Independent sketch with the same parameters and values."""
        dup = KmerMinHash(self._num, self._ksize, self._prime, self._is_protein)
        dup._mins.update(self._mins)
        return dup

    def __len__(self) -> int:
        return len(self._mins)

    def __repr__(self) -> str:
        molecule = "protein" if self._is_protein else "dna"
        return (
            f"KmerMinHash(num={self._num}, ksize={self._ksize}, "
            f"prime={self._prime}, {molecule}, size={len(self._mins)})"
        )
