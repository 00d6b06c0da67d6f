"""fasta-clean: streaming FASTA normalization."""

from .errors import FastaCleanError, InputReadError, MalformedFastaError, OutputWriteError, StreamError
from .normalizer import NormalizationStats, normalize_stream

__version__ = "0.1.0"

__all__ = [
    "FastaCleanError",
    "InputReadError",
    "MalformedFastaError",
    "NormalizationStats",
    "OutputWriteError",
    "StreamError",
    "normalize_stream",
    "__version__",
]
