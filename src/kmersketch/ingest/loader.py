"""
FASTA loader for sketch building.

Reads nucleotide records with Biopython and hands them on as upper-case
strings, which is the only form the sketch core accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union
import logging

from Bio import SeqIO

logger = logging.getLogger(__name__)


@dataclass
class SequenceRecord:
    """
    A single named nucleotide sequence.

    Attributes:
        record_id: FASTA identifier (first word of the header)
        sequence: Upper-case nucleotide string
        source: File the record was read from
    """
    record_id: str
    sequence: str
    source: str = ""

    def __len__(self) -> int:
        return len(self.sequence)


class SequenceLoader:
    """
    Loader for FASTA files.

    Example:
        >>> loader = SequenceLoader("genome.fa")
        >>> for record in loader:
        ...     print(record.record_id, len(record))
    """

    def __init__(self, path: Union[str, Path], fmt: str = "fasta"):
        """
        Initialize the loader.

        Args:
            path: Path to a sequence file
            fmt: Biopython SeqIO format name
        """
        self.path = Path(path)
        self.fmt = fmt

    def __iter__(self) -> Iterator[SequenceRecord]:
        return self.records()

    def records(self) -> Iterator[SequenceRecord]:
        """Yield records in file order."""
        if not self.path.exists():
            raise FileNotFoundError(f"Sequence file not found: {self.path}")

        count = 0
        for rec in SeqIO.parse(str(self.path), self.fmt):
            count += 1
            yield SequenceRecord(
                record_id=rec.id,
                sequence=str(rec.seq).upper(),
                source=str(self.path),
            )
        logger.debug(f"Read {count} records from {self.path}")


def load_sequences(path: Union[str, Path], fmt: str = "fasta") -> List[SequenceRecord]:
    """Convenience function to read every record of a file."""
    return list(SequenceLoader(path, fmt))
