"""Command-line interface for fasta-clean."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .cleaner import CleanRequest, clean_fasta
from .config import collect_runtime_config, parse_chunk_size
from .errors import MalformedFastaError, StreamError
from .logging_utils import LOG_LEVELS, configure_logging, get_logger

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_IO = 2
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fasta-clean",
        description="Upper case all genome characters, remove all non-ACGT characters "
        "and rewrap sequences to the line width of the first record.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", type=Path, help="The input FASTA file ('-' for stdin).")
    parser.add_argument(
        "output",
        type=Path,
        help="The output FASTA file ('-' for stdout). Will be overwritten if it exists.",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        type=str.lower,
        choices=list(LOG_LEVELS),
        default=None,
        help="The desired log level (default: FASTA_CLEAN_LOG_LEVEL or info).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        help="Write a JSON run manifest with record and base counts.",
    )
    parser.add_argument(
        "--chunk-size",
        type=parse_chunk_size,
        default=None,
        help="Bytes read from the input per chunk (default: FASTA_CLEAN_CHUNK_SIZE or 65536).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = collect_runtime_config(log_level=args.log_level, chunk_size=args.chunk_size)
    except ValueError as exc:
        configure_logging(verbose=args.verbose)
        get_logger().error("Invalid configuration: %s", exc)
        return EXIT_IO

    logger = configure_logging(level=config.log_level, verbose=args.verbose)
    logger.debug("Arguments: %s", vars(args))
    if config.env_file:
        logger.debug("Loaded environment from %s", config.env_file)

    request = CleanRequest(
        input_fasta=args.input,
        output_fasta=args.output,
        manifest_path=args.manifest,
        chunk_size=config.chunk_size,
    )

    try:
        clean_fasta(request, logger)
    except MalformedFastaError as exc:
        logger.error("Malformed FASTA input: %s", exc)
        return EXIT_MALFORMED
    except StreamError as exc:
        logger.error("%s", exc)
        return EXIT_IO
    except OSError as exc:
        logger.error(str(exc))
        return EXIT_IO
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
