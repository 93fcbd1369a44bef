"""Shared pytest fixtures for the backup-utility test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_payload(size: int) -> bytes:
    """Deterministic, non-repeating-per-buffer bytes of the given length."""
    return bytes((i * 7 + i // 251) % 256 for i in range(size))


# ── Config Fixtures ───────────────────────────────────────────────


@pytest.fixture
def valid_config_path() -> Path:
    return FIXTURES_DIR / "valid_config.yaml"


@pytest.fixture
def invalid_config_path() -> Path:
    return FIXTURES_DIR / "invalid_config.yaml"


@pytest.fixture
def list_config_path() -> Path:
    return FIXTURES_DIR / "list_config.yaml"


@pytest.fixture
def unknown_key_config_path() -> Path:
    return FIXTURES_DIR / "unknown_key_config.yaml"


@pytest.fixture
def empty_config_path() -> Path:
    return FIXTURES_DIR / "empty_config.yaml"


# ── File Fixtures ─────────────────────────────────────────────────


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a source file of ``size`` bytes under tmp_path."""
    def _make(size: int, name: str = "source.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(make_payload(size))
        return path
    return _make


@pytest.fixture
def source_file(make_source) -> Path:
    """A 3000-byte source file, spanning several default buffers."""
    return make_source(3000)


@pytest.fixture
def dest_path(tmp_path: Path) -> Path:
    return tmp_path / "backup.bin"


@pytest.fixture
def missing_dir_dest(tmp_path: Path) -> Path:
    return tmp_path / "no_such_dir" / "backup.bin"
