"""IO helpers for fasta-clean."""

from .paths import now_iso, write_json
from .streams import open_sink, open_source

__all__ = [
    "now_iso",
    "open_sink",
    "open_source",
    "write_json",
]
