"""
Shared pytest fixtures for digestkit tests.

This module provides:
- isolated_env: Clears DIGESTKIT_* variables, resets the container and
  runs each test from an empty directory so no config file is discovered
- run_digestkit: Helper to run the digestkit CLI via subprocess
- sample_file: A file with known contents
"""

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from digestkit.core.bootstrap import reset

from .vectors import THIS_IS_A_TEST


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test without DIGESTKIT_* env vars or a discoverable config."""
    for key in list(os.environ):
        if key.startswith("DIGESTKIT_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    reset()
    yield
    reset()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A file containing b"This is a test"."""
    path = tmp_path / "sample.txt"
    path.write_bytes(THIS_IS_A_TEST.encode())
    return path


def _run_digestkit_cmd(
    *args: str, cwd: Path, env: dict[str, str] | None = None, input: bytes | None = None
) -> subprocess.CompletedProcess:
    """Run a digestkit command using the current Python interpreter."""
    full_env = {k: v for k, v in os.environ.items() if not k.startswith("DIGESTKIT_")}
    full_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "digestkit", *args],
        cwd=cwd,
        capture_output=True,
        input=input,
        env=full_env,
    )


@pytest.fixture
def run_digestkit(tmp_path: Path) -> Callable[..., subprocess.CompletedProcess]:
    """
    Provide a helper function to run digestkit CLI commands.

    Returns:
        A callable that runs digestkit and returns CompletedProcess
        with stdout/stderr as bytes
    """

    def run(
        *args: str, env: dict[str, str] | None = None, input: bytes | None = None
    ) -> subprocess.CompletedProcess:
        return _run_digestkit_cmd(*args, cwd=tmp_path, env=env, input=input)

    return run
