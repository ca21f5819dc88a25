"""
Shared test fixtures and configuration.
"""

import random
from pathlib import Path

import pytest

from tokenscope.core.config.settings import Settings


class RecordingReporter:
    """Reporter that keeps everything it is told, per level."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.successes: list[str] = []
        self.errors: list[str] = []
        self.echoed: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def success(self, message: str) -> None:
        self.successes.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def echo(self, text: str) -> None:
        self.echoed.append(text)

    @property
    def mirrored(self) -> str:
        return "".join(self.echoed)


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch) -> Path:
    """Temporary working directory (the generator's and reader's cwd)."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Temporary application base directory (where reports go)."""
    base = tmp_path / "app"
    base.mkdir()
    return base


@pytest.fixture
def settings(work_dir: Path, base_dir: Path) -> Settings:
    """Pipeline settings with a small target and temporary anchors."""
    return Settings(target_size=8 * 1024, working_dir=work_dir, base_dir=base_dir)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240101)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def restore_logging():
    """Undo the root-logger changes made by ``setup_logging``."""
    import logging

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    raise_exceptions = logging.raiseExceptions
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.raiseExceptions = raise_exceptions
