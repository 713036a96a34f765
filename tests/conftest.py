"""Shared fixtures for dupcheck tests."""

import pytest

from dupcheck.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def small_settings() -> Settings:
    """Tiny byte cap so truncation is easy to exercise."""
    return Settings(ngram_size=3, max_file_size=8, table_size_hint=7, precision=2)


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content) -> str:
        p = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        p.write_bytes(content)
        return str(p)
    return _write
