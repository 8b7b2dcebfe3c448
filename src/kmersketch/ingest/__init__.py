"""
kmersketch Ingest Module

Sequence loading and sketch building.

Key components:
- SequenceLoader: Read FASTA files with Biopython
- SequenceRecord: A named nucleotide sequence
- SketchBuilder: Convert records to KmerMinHash sketches
- SketchStore: In-memory storage for sketches
"""

from kmersketch.ingest.loader import (
    SequenceLoader,
    SequenceRecord,
    load_sequences,
)
from kmersketch.ingest.sketch_builder import (
    SketchBuilder,
    SketchStore,
    build_sketches,
)

__all__ = [
    "SequenceLoader",
    "SequenceRecord",
    "load_sequences",
    "SketchBuilder",
    "SketchStore",
    "build_sketches",
]
