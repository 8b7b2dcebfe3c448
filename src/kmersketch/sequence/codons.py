"""
Standard genetic code.

Maps each of the 64 DNA codons over {A,C,G,T} to a one-letter amino acid
symbol, with STOP_MARKER for the three stop codons. Built once at import
and never mutated.
"""

from types import MappingProxyType
from typing import Mapping

STOP_MARKER = "*"

CODON_TABLE: Mapping[str, str] = MappingProxyType({
    "TTT": "F", "TTC": "F",
    "TTA": "L", "TTG": "L",

    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",

    "TAT": "Y", "TAC": "Y",
    "TAA": STOP_MARKER, "TAG": STOP_MARKER,

    "TGT": "C", "TGC": "C",
    "TGA": STOP_MARKER,
    "TGG": "W",

    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",

    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",

    "CAT": "H", "CAC": "H",
    "CAA": "Q", "CAG": "Q",

    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",

    "ATT": "I", "ATC": "I", "ATA": "I",
    "ATG": "M",

    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",

    "AAT": "N", "AAC": "N",
    "AAA": "K", "AAG": "K",

    "AGT": "S", "AGC": "S",
    "AGA": "R", "AGG": "R",

    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",

    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",

    "GAT": "D", "GAC": "D",
    "GAA": "E", "GAG": "E",

    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})
