import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from ..errors import DocumentIOError, UsageError
from ..report import ROUNDING_MODES

logger = logging.getLogger(__name__)

USAGE = "Usage: plagcheck <original-file> <copy-file> <result-file>"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the single-pair checker."""
    parser = argparse.ArgumentParser(
        prog="plagcheck",
        description="Score a copy against an original by cosine similarity "
        "and write the percentage to a result file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        metavar="FILE",
        help="<original-file> <copy-file> <result-file>",
    )
    _add_common_arguments(parser)
    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not print a completion message"
    )
    parser.add_argument(
        "--rounding",
        choices=list(ROUNDING_MODES),
        default="half-up",
        help="Rounding mode for the percentage (default: half-up)",
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def report_error(message: str) -> None:
    Console(stderr=True).print(message, markup=False, highlight=False, soft_wrap=True)


def _check_paths(paths: List[Path], expected: int) -> None:
    if len(paths) != expected:
        raise UsageError(
            f"Expected {expected} file arguments, got {len(paths)}. {USAGE}"
        )


def cmd_check(args) -> int:
    """Score one copy against one original and write the result file."""
    from ..pipeline import Pipeline

    original_path, copy_path, result_path = args.paths
    pipeline = Pipeline(config={"report": {"rounding": args.rounding}})
    result = pipeline.run(original_path, copy_path, result_path)

    if not args.quiet:
        Console().print(
            f"Plagiarism check complete: {result.percentage}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        _check_paths(args.paths, 3)
        return cmd_check(args)
    except UsageError as e:
        report_error(str(e))
        return 1
    except DocumentIOError as e:
        logger.debug("I/O failure", exc_info=True)
        report_error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
