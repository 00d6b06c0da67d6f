"""Defaults and environment configuration for fasta-clean."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from dotenv import load_dotenv

from .cursor import DEFAULT_CHUNK_SIZE
from .logging_utils import resolve_level

LOG_LEVEL_ENV = "FASTA_CLEAN_LOG_LEVEL"
CHUNK_SIZE_ENV = "FASTA_CLEAN_CHUNK_SIZE"

PathLike = Union[str, Path]


@dataclass(slots=True)
class CleanDefaults:
    """Default values for the clean command."""

    log_level: str = "info"
    chunk_size: int = DEFAULT_CHUNK_SIZE


CLEAN_DEFAULTS = CleanDefaults()


@dataclass(slots=True)
class RuntimeConfig:
    log_level: str
    chunk_size: int
    env_file: Optional[Path] = None


def find_env_file(start_path: Optional[PathLike] = None) -> Optional[Path]:
    """Search for the closest .env file starting from start_path or CWD."""

    search_root = Path(start_path).resolve() if start_path else Path.cwd().resolve()
    for candidate_dir in _walk_upwards(search_root):
        candidate = candidate_dir / ".env"
        if candidate.is_file():
            return candidate
    return None


def collect_runtime_config(
    start_path: Optional[PathLike] = None,
    log_level: Optional[str] = None,
    chunk_size: Optional[int] = None,
) -> RuntimeConfig:
    """Source the nearest .env file and resolve settings against the defaults.

    Explicit ``log_level`` and ``chunk_size`` win over the environment, and
    values already present in the environment win over the .env file. An
    environment value that is overridden is not validated.
    """

    env_file = find_env_file(start_path)
    if env_file is not None:
        load_dotenv(env_file, override=False)

    if log_level is None:
        log_level = os.environ.get(LOG_LEVEL_ENV) or CLEAN_DEFAULTS.log_level
    resolve_level(log_level)

    if chunk_size is None:
        raw_chunk_size = os.environ.get(CHUNK_SIZE_ENV)
        chunk_size = parse_chunk_size(raw_chunk_size) if raw_chunk_size else CLEAN_DEFAULTS.chunk_size
    return RuntimeConfig(log_level=log_level, chunk_size=chunk_size, env_file=env_file)


def parse_chunk_size(value: str) -> int:
    try:
        chunk_size = int(value)
    except ValueError:
        raise ValueError(f"Chunk size must be an integer, got {value!r}") from None
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")
    return chunk_size


def _walk_upwards(start: Path) -> Iterable[Path]:
    current = start
    last = None
    while last != current:
        yield current
        last = current
        current = current.parent
