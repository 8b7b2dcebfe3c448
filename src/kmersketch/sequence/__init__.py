"""
Sequence helpers used when turning DNA into k-mers.
"""

from kmersketch.sequence.codons import CODON_TABLE, STOP_MARKER
from kmersketch.sequence.transforms import reverse_complement, translate

__all__ = [
    "CODON_TABLE",
    "STOP_MARKER",
    "reverse_complement",
    "translate",
]
