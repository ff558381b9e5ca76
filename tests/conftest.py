"""Shared pytest fixtures for udic_plist tests."""

import tempfile
from pathlib import Path

import pytest


SAMPLE_DICTIONARY = (
    "! comment\n"
    "ab\thello world\tnoun\n"
    "\n"
    'xy\t<tag> & "quote"\n'
)


@pytest.fixture
def sample_text() -> str:
    """Return a small dictionary with a comment, a blank line and two entries."""
    return SAMPLE_DICTIONARY


@pytest.fixture
def temp_dir():
    """Create a temporary directory for file input/output tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_file(temp_dir: Path, sample_text: str) -> Path:
    """Write the sample dictionary to dict.txt in the temporary directory."""
    path = temp_dir / "dict.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path
