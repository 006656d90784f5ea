# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a stray `.env` or CHECK_TASKS_* variable from leaking into Settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CHECK_TASKS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHECK_TASKS_ENCODING", raising=False)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def task_file(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str, name: str = "TODO.md") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
