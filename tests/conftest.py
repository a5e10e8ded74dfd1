"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_path() -> Path:
    """Path to a complete five-set scout file."""
    return DATA_DIR / "match.dvw"


@pytest.fixture
def sample_text(sample_path) -> str:
    """Content of the sample scout file."""
    return sample_path.read_text(encoding="utf-8")


@pytest.fixture
def settings():
    """Default decoder settings, isolated from the environment."""
    from dvw_reader.utils.config import Settings

    return Settings()


@pytest.fixture
def lenient_settings():
    """Settings that keep undecodable action codes instead of failing."""
    from dvw_reader.utils.config import Settings

    return Settings(strict_codes=False)


@pytest.fixture
def cursor_for():
    """Return a factory building a LineCursor over the given lines."""
    from dvw_reader.scanner import LineCursor

    def _create(*lines: str) -> LineCursor:
        return LineCursor("\n".join(lines))

    return _create
