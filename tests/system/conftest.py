"""Fixtures supporting CLI system tests."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

RunCli = Callable[
    [Sequence[str] | None, Mapping[str, str] | None, str | None],
    subprocess.CompletedProcess[str],
]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the repository root."""

    return Path(__file__).resolve().parents[2]


@pytest.fixture
def system_config_path(tmp_path: Path) -> Path:
    """Location of the configuration file the CLI reads during system tests."""

    return tmp_path / "sshmenu.yaml"


@pytest.fixture
def system_environment(
    tmp_path: Path,
    project_root: Path,
    system_config_path: Path,
) -> dict[str, str]:
    """Provide an isolated environment for invoking the CLI as a subprocess."""

    env = os.environ.copy()
    env["SSHMENU_CONFIG"] = str(system_config_path)
    env["XDG_CONFIG_HOME"] = str(tmp_path / "xdg")

    existing_path = env.get("PYTHONPATH")
    components = [str(project_root)]
    if existing_path:
        components.append(existing_path)
    env["PYTHONPATH"] = os.pathsep.join(components)

    return env


@pytest.fixture
def run_cli(system_environment: dict[str, str], project_root: Path) -> RunCli:
    """Return a helper that executes the CLI via ``python -m sshmenu``."""

    def _run(
        args: Sequence[str] | None,
        extra_env: Mapping[str, str] | None = None,
        input_text: str | None = None,
    ) -> subprocess.CompletedProcess[str]:
        command = [sys.executable, "-m", "sshmenu"]
        if args:
            command.extend(args)

        env = system_environment.copy()
        if extra_env:
            env.update(extra_env)

        return subprocess.run(
            command,
            cwd=project_root,
            env=env,
            input=input_text,
            text=True,
            encoding="utf-8",
            capture_output=True,
            check=False,
        )

    return _run
