# src/pla_kit/cli.py

"""Command-line interface for pla-kit.

Example:
    $ pla-kit -i schedule.pla -o schedule.json
    $ pla-kit -i schedule.pla -o - --format yaml --id 10000
"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import PlaParseError
from .export import dump_document, to_document
from .observability import InMemoryMetricsHook
from .parsers import ParserConfig, PlaParser

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the pla-kit command."""
    parser = argparse.ArgumentParser(
        prog="pla-kit",
        description="Parse a .pla schedule and export its entries as JSON or YAML.",
    )
    parser.add_argument(
        "-i", "--input-file", required=True, help="Input file name, in .pla format."
    )
    parser.add_argument(
        "-o",
        "--output-file",
        required=True,
        help="Output file name, or '-' for standard output.",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        dest="fmt",
        help="Export format (default: json).",
    )
    parser.add_argument(
        "--id",
        type=int,
        default=None,
        dest="entry_id",
        help="Export only the entry with this id.",
    )
    parser.add_argument(
        "--encoding", default="utf-8", help="Encoding of the input file."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _write_output(output_file: str, payload: str) -> None:
    if output_file == "-":
        sys.stdout.write(payload)
        if not payload.endswith("\n"):
            sys.stdout.write("\n")
        return
    Path(output_file).write_text(payload, encoding="utf-8")
    logger.info("Wrote %s", output_file)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the pla-kit command.

    Args:
        argv: Argument list; defaults to sys.argv[1:].

    Returns:
        Process exit code: 0 on success, 1 on a parse, read or write failure
        or an unknown --id.

    Raises:
        SystemExit: If the arguments are invalid (raised by argparse).
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    metrics = InMemoryMetricsHook()
    try:
        pla_parser = PlaParser.from_path(
            args.input_file,
            config=ParserConfig(encoding=args.encoding),
            metrics_hook=metrics,
        )
    except PlaParseError as exc:
        logger.error("Unable to parse %s: %s", args.input_file, exc)
        return 1
    except OSError as exc:
        logger.error("Unable to read %s: %s", args.input_file, exc)
        return 1
    logger.debug("Parse metrics: %s", dict(metrics.counters))

    if args.entry_id is None:
        entries = list(pla_parser.entries)
    else:
        entry = pla_parser.get_entry_by_id(args.entry_id)
        if entry is None:
            logger.error("No entry with id %d in %s", args.entry_id, args.input_file)
            return 1
        entries = [entry]

    document = to_document(entries, source=args.input_file)
    try:
        _write_output(args.output_file, dump_document(document, args.fmt))
    except OSError as exc:
        logger.error("Unable to write %s: %s", args.output_file, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
