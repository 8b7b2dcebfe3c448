"""
kmersketch - Bottom-k MinHash sketches for DNA and protein k-mers.

Estimates similarity between large sequence collections from small,
mergeable samples of their smallest k-mer hash values.

Modules:
- sketches: KmerMinHash and similarity estimates
- sequence: Reverse complement, translation, codon table
- ingest: FASTA loading and sketch building
- interface: Handle-based functional API
"""

__version__ = "0.1.0"

from kmersketch.errors import (
    MinHashError,
    ShortSequenceError,
    InvalidCharacterError,
    IncompatibleSketchError,
)
from kmersketch.sketches import (
    DEFAULT_PRIME,
    KmerMinHash,
    jaccard,
    containment,
    similarity_matrix,
)
from kmersketch.config import SketchConfig
from kmersketch.ingest import (
    SequenceLoader,
    SequenceRecord,
    SketchBuilder,
    SketchStore,
    build_sketches,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "MinHashError",
    "ShortSequenceError",
    "InvalidCharacterError",
    "IncompatibleSketchError",
    # Sketches
    "DEFAULT_PRIME",
    "KmerMinHash",
    "jaccard",
    "containment",
    "similarity_matrix",
    # Config
    "SketchConfig",
    # Ingest
    "SequenceLoader",
    "SequenceRecord",
    "SketchBuilder",
    "SketchStore",
    "build_sketches",
]
