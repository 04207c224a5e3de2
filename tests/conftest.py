"""Pytest fixtures for medq-text tests."""

import pytest
from pathlib import Path

from hypothesis import HealthCheck, settings

from medq_text import config

# isolated_settings is autouse and identical for every Hypothesis example.
settings.register_profile(
    "medq",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("medq")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings, ignoring the caller's env."""
    for name in (
        "MEDQ_TEXT_FORMAT",
        "MEDQ_TEXT_JSON_INDENT",
        "MEDQ_TEXT_CODE_THEME",
        "MEDQ_TEXT_CONSOLE_WIDTH",
        "MEDQ_TEXT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "_settings", None)
    yield
    config._settings = None


@pytest.fixture
def sample_answer() -> str:
    """AI explanation using every construct of the grammar."""
    return (
        "## Cardiac Cycle\n"
        "The heart has **four** chambers.\n"
        "\n"
        "- *Systole* is contraction\n"
        "• Diastole is relaxation\n"
        "1. Atria fill\n"
        "2) Ventricles eject\n"
        "---\n"
        "```python\n"
        "stroke_volume = edv - esv\n"
        "```\n"
        "Use `CO = HR x SV` to compute output."
    )


@pytest.fixture
def tmp_text_file(tmp_path: Path, sample_answer: str) -> Path:
    """Create a temporary text file for testing."""
    file_path = tmp_path / "answer.txt"
    file_path.write_text(sample_answer, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_output_path(tmp_path: Path) -> Path:
    """Get a temporary output path."""
    return tmp_path / "output.md"
