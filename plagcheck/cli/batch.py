import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..errors import DocumentIOError, UsageError
from .main import _add_common_arguments, report_error, setup_logging

logger = logging.getLogger(__name__)

USAGE = "Usage: plagcheck-batch <original-file> <copy-file> [<copy-file> ...]"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plagcheck-batch",
        description="Score several copies against one original.",
    )
    parser.add_argument("paths", nargs="*", type=Path, metavar="FILE")
    _add_common_arguments(parser)
    return parser


def build_table(results) -> Table:
    table = Table(title=f"Similarity to {results[0].original.source_path}")
    table.add_column("Copy")
    table.add_column("Tokens", justify="right", no_wrap=True)
    table.add_column("Similarity", justify="right", no_wrap=True)
    for r in results:
        table.add_row(r.copy.source_path, str(len(r.copy.tokens)), r.percentage)
    return table


def main(argv: Optional[List[str]] = None) -> int:
    from ..pipeline import Pipeline

    args = create_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        if len(args.paths) < 2:
            raise UsageError(USAGE)
        pipeline = Pipeline(config={"report": {"rounding": args.rounding}})
        results = pipeline.compare_many(args.paths[0], args.paths[1:])
    except UsageError as e:
        report_error(str(e))
        return 1
    except DocumentIOError as e:
        report_error(f"Error: {e}")
        return 1

    console = Console()
    if args.quiet:
        for r in results:
            console.print(
                f"{r.copy.source_path} {r.percentage}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
    else:
        console.print(build_table(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
