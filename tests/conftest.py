"""Pytest fixtures for routines-md tests."""

import io

import pytest
from pathlib import Path
from rich.console import Console

from routines_md.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from a clean environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_markdown() -> str:
    """A journal entry touching every block type the segmenter emits."""
    return "\n".join([
        "# Monday",
        "## Tasks",
        "- Buy milk",
        "1. Call **mom**",
        "> Stay curious",
        "---",
        "| Task | Done |",
        "|------|------|",
        "| Run | yes |",
        "```python",
        'print("hi")',
        "```",
        "Plain line",
        "[Docs](example.com)",
    ])


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary markdown file for testing."""
    file_path = tmp_path / "entry.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path


@pytest.fixture
def record_console() -> Console:
    """A console that records output instead of printing it."""
    return Console(record=True, file=io.StringIO(), width=80, color_system=None)
