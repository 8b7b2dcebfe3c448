"""
Error types raised by kmersketch.

All sketch failures derive from MinHashError so callers can catch the
whole family with one clause.
"""

from __future__ import annotations

from typing import Optional


class MinHashError(Exception):
    """Base error for sketch operations."""

    def __init__(self, message: str = "Generic minhash exception"):
        super().__init__(message)
        self.message = message


class ShortSequenceError(MinHashError):
    """Sequence is shorter than the sketch ksize. Nothing was admitted."""

    def __init__(self, length: int, ksize: int):
        super().__init__(
            f"sequence is shorter than ksize: length {length} < ksize {ksize}"
        )
        self.length = length
        self.ksize = ksize


class InvalidCharacterError(MinHashError):
    """
    Non-nucleotide character met while computing a reverse complement.

    Hashes admitted earlier in the same add_sequence call stay admitted.
    """

    def __init__(self, character: str, position: Optional[int] = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"invalid DNA character {character!r} in sequence{where}")
        self.character = character
        self.position = position


class IncompatibleSketchError(MinHashError, ValueError):
    """Sketches differ in ksize, prime or is_protein."""

    def __init__(self, attribute: str, ours, theirs, action: str = "merged"):
        super().__init__(
            f"different {attribute} cannot be {action}: {ours} vs {theirs}"
        )
        self.attribute = attribute
        self.ours = ours
        self.theirs = theirs
