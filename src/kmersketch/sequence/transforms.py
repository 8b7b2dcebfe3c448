"""
Nucleotide sequence transforms: reverse complement and translation.
"""

from __future__ import annotations

from kmersketch.errors import InvalidCharacterError
from kmersketch.sequence.codons import CODON_TABLE

COMPLEMENT = {"A": "T", "C": "G", "G": "C", "T": "A"}


def reverse_complement(seq: str) -> str:
    """
    Reverse complement of a DNA string over {A,C,G,T}.

    Args:
        seq: Upper-case nucleotide string

    Returns:
        String of the same length where out[n-1-i] pairs with seq[i]

    Raises:
        InvalidCharacterError: On any character outside {A,C,G,T}
    """
    out = []
    for i, base in enumerate(seq):
        try:
            out.append(COMPLEMENT[base])
        except KeyError:
            raise InvalidCharacterError(base, i) from None
    out.reverse()
    return "".join(out)


def translate(dna: str) -> str:
    """
    Translate DNA to amino acids, codon by codon.

    An incomplete trailing codon (1-2 bases) is dropped. Characters are
    not validated here; callers must ensure the input is over {A,C,G,T}.
    An unknown codon raises KeyError.
    """
    usable = (len(dna) // 3) * 3
    return "".join(CODON_TABLE[dna[j:j + 3]] for j in range(0, usable, 3))
