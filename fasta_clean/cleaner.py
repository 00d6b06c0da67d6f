"""File-level cleaning run: open streams, normalize, close, report."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from .cursor import DEFAULT_CHUNK_SIZE
from .errors import OutputWriteError
from .io import now_iso, open_sink, open_source, write_json
from .normalizer import NormalizationStats, normalize_stream


@dataclass(slots=True)
class CleanRequest:
    input_fasta: Path
    output_fasta: Path
    manifest_path: Path | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(slots=True)
class CleanResult:
    stats: NormalizationStats
    output_path: Path
    manifest_path: Path | None


def clean_fasta(request: CleanRequest, logger) -> CleanResult:
    """Normalize ``request.input_fasta`` into ``request.output_fasta``.

    Both streams are flushed and closed before "Done." is logged. Failures to
    open, write or close the output are raised as ``OutputWriteError``. On a
    fatal error the partially written output file is left in place and the
    error propagates to the caller.
    """

    logger.info("Opening input file: %s", request.input_fasta)
    with open_source(request.input_fasta) as source:
        logger.info("Opening output file: %s", request.output_fasta)
        try:
            with open_sink(request.output_fasta) as target:
                logger.info("Cleaning...")
                stats = normalize_stream(source, target, chunk_size=request.chunk_size, logger=logger)
        except OSError as exc:
            # Buffered write errors usually surface on flush at close.
            raise OutputWriteError(f"cannot write {request.output_fasta}: {exc}") from exc
    logger.info("Done.")

    manifest_out = None
    if request.manifest_path is not None:
        manifest_out = Path(request.manifest_path)
        write_json(manifest_out, _build_manifest(request, stats))

    _log_summary(logger, stats, manifest_out)
    return CleanResult(stats=stats, output_path=Path(request.output_fasta), manifest_path=manifest_out)


def _build_manifest(request: CleanRequest, stats: NormalizationStats) -> dict:
    return {
        "timestamp": now_iso(),
        "inputs": {"fasta": str(request.input_fasta)},
        "outputs": {"fasta": str(request.output_fasta)},
        "params": {"chunk_size": request.chunk_size},
        **asdict(stats),
    }


def _log_summary(logger, stats: NormalizationStats, manifest_path: Path | None) -> None:
    logger.info(
        "Cleaned %s records: kept=%s bases, dropped=%s bytes",
        stats.records,
        stats.bases_kept,
        stats.bytes_dropped,
    )
    if stats.line_width is None:
        logger.info("No sequence data found; line width was not inferred.")
    else:
        logger.info("Line width: %s", stats.line_width)
    if manifest_path:
        logger.info("Clean manifest -> %s", manifest_path)
