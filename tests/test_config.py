import logging
from pathlib import Path

import pytest

from fasta_clean import config
from fasta_clean.logging_utils import configure_logging, resolve_level


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so that values loaded from .env files are undone at teardown.
    for name in (config.LOG_LEVEL_ENV, config.CHUNK_SIZE_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_collect_runtime_config_reads_env_file(tmp_path: Path, clean_env) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                "FASTA_CLEAN_LOG_LEVEL=debug",
                "FASTA_CLEAN_CHUNK_SIZE=4096",
            ]
        ),
        encoding="utf-8",
    )
    nested_dir = tmp_path / "nested" / "deeper"
    nested_dir.mkdir(parents=True)

    cfg = config.collect_runtime_config(start_path=nested_dir)

    assert cfg.log_level == "debug"
    assert cfg.chunk_size == 4096
    assert cfg.env_file == env_file.resolve()


def test_existing_environment_wins_over_env_file(tmp_path: Path, clean_env) -> None:
    (tmp_path / ".env").write_text("FASTA_CLEAN_LOG_LEVEL=debug\n", encoding="utf-8")
    clean_env.setenv(config.LOG_LEVEL_ENV, "warn")

    cfg = config.collect_runtime_config(start_path=tmp_path)

    assert cfg.log_level == "warn"
    assert cfg.chunk_size == config.CLEAN_DEFAULTS.chunk_size


def test_defaults_without_env_file(tmp_path: Path, clean_env) -> None:
    clean_env.setattr(config, "find_env_file", lambda start_path=None: None)

    cfg = config.collect_runtime_config(start_path=tmp_path)

    assert cfg.log_level == "info"
    assert cfg.chunk_size == 64 * 1024
    assert cfg.env_file is None


@pytest.mark.parametrize("value", ["zero", "0", "-5"])
def test_invalid_chunk_size_is_rejected(tmp_path: Path, clean_env, value: str) -> None:
    clean_env.setenv(config.CHUNK_SIZE_ENV, value)
    with pytest.raises(ValueError):
        config.collect_runtime_config(start_path=tmp_path)


def test_invalid_log_level_is_rejected(tmp_path: Path, clean_env) -> None:
    clean_env.setenv(config.LOG_LEVEL_ENV, "chatty")
    with pytest.raises(ValueError):
        config.collect_runtime_config(start_path=tmp_path)


def test_resolve_level_accepts_rust_style_names() -> None:
    assert resolve_level("Info") == 20
    assert resolve_level("WARN") == 30
    assert resolve_level("trace") == 10
    assert resolve_level("off") > 50


def test_configure_logging_sets_package_level() -> None:
    logger = configure_logging(level="error")
    assert logger.name == "fasta_clean"
    assert logger.level == 40
    assert configure_logging(level="error", verbose=True).level == 10


def test_explicit_values_override_invalid_environment(tmp_path: Path, clean_env) -> None:
    clean_env.setenv(config.LOG_LEVEL_ENV, "chatty")
    clean_env.setenv(config.CHUNK_SIZE_ENV, "zero")

    cfg = config.collect_runtime_config(start_path=tmp_path, log_level="debug", chunk_size=10)

    assert cfg.log_level == "debug"
    assert cfg.chunk_size == 10


def test_explicit_level_does_not_hide_invalid_chunk_size(tmp_path: Path, clean_env) -> None:
    clean_env.setenv(config.CHUNK_SIZE_ENV, "zero")
    with pytest.raises(ValueError):
        config.collect_runtime_config(start_path=tmp_path, log_level="debug")


def test_configure_logging_twice_keeps_one_handler_set() -> None:
    configure_logging(level="info")
    root_handlers = len(logging.getLogger().handlers)
    package_handlers = len(logging.getLogger("fasta_clean").handlers)

    configure_logging(level="debug")

    assert len(logging.getLogger().handlers) == root_handlers
    assert len(logging.getLogger("fasta_clean").handlers) == package_handlers
