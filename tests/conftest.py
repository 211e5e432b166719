from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

import pytest
from loguru import logger

from cini import scaffold as scaffold_module
from cini.config import ResolvedConfig


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CINI_CONFIG", raising=False)
    return tmp_path.resolve()


@pytest.fixture()
def git_calls(monkeypatch: pytest.MonkeyPatch) -> List[dict]:
    calls: List[dict] = []

    def _fake_run(command, **kwargs):
        calls.append({"command": command, "cwd": kwargs.get("cwd")})
        return subprocess.CompletedProcess(command, 0, stdout="", stderr="")

    monkeypatch.setattr(scaffold_module.subprocess, "run", _fake_run)
    return calls


@pytest.fixture()
def make_config():
    def _factory(project: str = "demo", **overrides) -> ResolvedConfig:
        return ResolvedConfig(project=project, **overrides)

    return _factory


@pytest.fixture()
def log_messages():
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
