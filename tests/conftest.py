"""pytest conventional configuration file."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def no_executable_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any SublerCLI path set in the developer's environment."""
    monkeypatch.delenv("SUBLER_PATH", raising=False)


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """An existing media file to tag."""
    fil = tmp_path / "test.mp4"
    fil.touch()
    return fil


@pytest.fixture
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no text wrapping occurs in Rich console output."""
    monkeypatch.setattr("subler.commands.tags.command._CONSOLE_WIDTH", 999)
