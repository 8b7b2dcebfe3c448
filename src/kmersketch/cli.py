"""
kmersketch command line.

Usage:
    kmersketch sketch genome_a.fa genome_b.fa -k 21 -n 1000
    kmersketch compare genome_a.fa genome_b.fa --csv matrix.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from kmersketch.config import SketchConfig
from kmersketch.errors import MinHashError
from kmersketch.ingest import SketchBuilder, SketchStore
from kmersketch.sketches import similarity_matrix

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Set up logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmersketch",
        description="kmersketch - MinHash sketches of DNA and protein k-mers",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("files", nargs="+", help="FASTA files to sketch")
    common.add_argument(
        "-k", "--ksize",
        type=int,
        help="K-mer size (default: from KMERSKETCH_KSIZE env var, or 31)"
    )
    common.add_argument(
        "-n", "--num",
        type=int,
        help="Sketch size (default: from KMERSKETCH_NUM env var, or 500)"
    )
    common.add_argument(
        "--protein",
        action="store_true",
        help="Hash translated k-mers instead of DNA k-mers"
    )
    common.add_argument(
        "--per-record",
        action="store_true",
        help="Build one sketch per FASTA record instead of one per file"
    )
    common.add_argument(
        "--split-on-invalid",
        action="store_true",
        help="Break sequences at non-ACGT characters instead of failing"
    )
    common.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from KMERSKETCH_LOG_LEVEL env var)"
    )

    subparsers.add_parser(
        "sketch", parents=[common], help="Build sketches and summarize them"
    )
    compare = subparsers.add_parser(
        "compare", parents=[common], help="Pairwise Jaccard estimates"
    )
    compare.add_argument("--csv", type=str, help="Write the matrix to this CSV file")
    return parser


def _config_from_args(args: argparse.Namespace) -> SketchConfig:
    overrides = {}
    if args.ksize is not None:
        overrides["ksize"] = args.ksize
    if args.num is not None:
        overrides["num"] = args.num
    if args.protein:
        overrides["is_protein"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return SketchConfig(**overrides)


def _print_sketches(console: Console, store: SketchStore) -> None:
    table = Table(title="Sketches")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Full", justify="center", style="yellow")

    for name in store.names():
        sketch = store.get(name)
        table.add_row(name, f"{len(sketch):,}", "yes" if sketch.is_full else "no")
    console.print(table)


def _print_matrix(console: Console, frame: pd.DataFrame) -> None:
    table = Table(title="Jaccard estimates")
    table.add_column("", style="cyan")
    for name in frame.columns:
        table.add_column(name, justify="right")
    for name, row in frame.iterrows():
        table.add_row(name, *(f"{v:.3f}" for v in row))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    try:
        config = _config_from_args(args)
    except ValueError as e:
        console.print(f"[red]Invalid sketch parameters: {e}[/red]")
        return 1

    setup_logging(config.log_level)
    builder = SketchBuilder(
        config=config,
        per_record=args.per_record,
        split_on_invalid=args.split_on_invalid,
    )

    try:
        store = builder.build_from_files(args.files)
    except (MinHashError, OSError) as e:
        logger.error(f"Sketching failed: {e}")
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.command == "sketch":
        _print_sketches(console, store)
        return 0

    names = store.names()
    frame = pd.DataFrame(similarity_matrix(store.all()), index=names, columns=names)
    _print_matrix(console, frame)

    if args.csv:
        frame.to_csv(args.csv)
        console.print(f"[green]Wrote matrix to {args.csv}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
