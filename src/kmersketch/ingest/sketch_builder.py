"""
Sketch Builder - Convert FASTA records to KmerMinHash sketches.

Builds one sketch per input file (all records admitted into the same
sketch) or one sketch per record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union
import logging
import re

from kmersketch.config import SketchConfig
from kmersketch.errors import ShortSequenceError
from kmersketch.ingest.loader import SequenceLoader, SequenceRecord
from kmersketch.sketches import KmerMinHash

logger = logging.getLogger(__name__)

_NON_ACGT = re.compile(r"[^ACGT]+")


@dataclass
class SketchStore:
    """
    In-memory store for sketches.

    Maps a name (file path or record id) to its sketch.
    """
    config: SketchConfig = field(default_factory=SketchConfig)
    _sketches: Dict[str, KmerMinHash] = field(default_factory=dict)

    def get_or_create(self, name: str) -> KmerMinHash:
        """
        Get existing sketch or create new one.

        Args:
            name: Sketch name

        Returns:
            KmerMinHash for this name
        """
        if name not in self._sketches:
            self._sketches[name] = self.config.new_sketch()
        return self._sketches[name]

    def get(self, name: str) -> Optional[KmerMinHash]:
        """Get sketch by name, or None if not found."""
        return self._sketches.get(name)

    def names(self) -> List[str]:
        """Sketch names in insertion order."""
        return list(self._sketches.keys())

    def all(self) -> List[KmerMinHash]:
        """Get all sketches."""
        return list(self._sketches.values())

    def __len__(self) -> int:
        return len(self._sketches)

    def __iter__(self) -> Iterator[KmerMinHash]:
        return iter(self._sketches.values())

    def summary(self) -> Dict:
        """Summary statistics."""
        if not self._sketches:
            return {"count": 0}

        sketches = list(self._sketches.values())
        return {
            "count": len(sketches),
            "full": sum(1 for s in sketches if s.is_full),
            "avg_size": sum(len(s) for s in sketches) / len(sketches),
            "num": self.config.num,
            "ksize": self.config.ksize,
            "is_protein": self.config.is_protein,
        }


class SketchBuilder:
    """
    Build KmerMinHash sketches from sequence files.

    Example:
        >>> builder = SketchBuilder(SketchConfig(num=500, ksize=21))
        >>> store = builder.build_from_files(["a.fa", "b.fa"])
        >>> print(f"Built {len(store)} sketches")
    """

    def __init__(
        self,
        config: Optional[SketchConfig] = None,
        per_record: bool = False,
        split_on_invalid: bool = False,
    ):
        """
        Initialize the sketch builder.

        Args:
            config: Sketch parameters (defaults read from the environment)
            per_record: One sketch per record instead of one per file
            split_on_invalid: Break records at non-ACGT characters and
                sketch each fragment instead of failing on them
        """
        self.config = config or SketchConfig()
        self.per_record = per_record
        self.split_on_invalid = split_on_invalid
        self.records_processed = 0
        self.records_skipped = 0

    def build_from_files(
        self,
        paths: Iterable[Union[str, Path]],
        store: Optional[SketchStore] = None,
    ) -> SketchStore:
        """
        Build sketches from FASTA files.

        Args:
            paths: Files to read
            store: Existing store to add to (a new one if omitted)

        Returns:
            SketchStore with one sketch per file or per record
        """
        store = store if store is not None else SketchStore(config=self.config)

        sources: Dict[str, str] = {}
        for path in paths:
            loader = SequenceLoader(path)
            before = self.records_processed
            for record in loader:
                name = record.record_id if self.per_record else str(path)
                if self.per_record:
                    first = sources.setdefault(name, str(path))
                    if first != str(path):
                        logger.warning(
                            f"Record '{name}' in {path} was already seen in {first}; "
                            f"admitting into the same sketch"
                        )
                self.add_record(store.get_or_create(name), record)
            logger.info(
                f"Sketched {self.records_processed - before} records from {path}"
            )

        logger.info(
            f"Built {len(store)} sketches "
            f"({self.records_processed} records, {self.records_skipped} skipped)"
        )
        return store

    def build_from_records(
        self,
        records: Iterable[SequenceRecord],
        name: str,
    ) -> KmerMinHash:
        """Admit every record into a single new sketch."""
        sketch = self.config.new_sketch()
        for record in records:
            self.add_record(sketch, record)
        logger.debug(f"Built sketch '{name}' holding {len(sketch)} values")
        return sketch

    def add_record(self, sketch: KmerMinHash, record: SequenceRecord) -> None:
        """
        Admit one record into a sketch.

        Records shorter than ksize are skipped with a warning. Any other
        error propagates.
        """
        if self.split_on_invalid:
            fragments = [f for f in _NON_ACGT.split(record.sequence) if f]
        else:
            fragments = [record.sequence]

        added = False
        for fragment in fragments:
            try:
                sketch.add_sequence(fragment)
                added = True
            except ShortSequenceError:
                continue

        if added:
            self.records_processed += 1
        else:
            self.records_skipped += 1
            logger.warning(
                f"Skipping record '{record.record_id}': no stretch of at least "
                f"{sketch.ksize} usable bases"
            )


def build_sketches(
    paths: Iterable[Union[str, Path]],
    config: Optional[SketchConfig] = None,
    per_record: bool = False,
) -> SketchStore:
    """Convenience function to build sketches from files."""
    builder = SketchBuilder(config=config, per_record=per_record)
    return builder.build_from_files(paths)
