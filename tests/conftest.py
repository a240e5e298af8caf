"""Shared pytest configuration for the test suite."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

WriteConfig = Callable[[str], Path]

SAMPLE_CONFIG = """\
global_command: "pamssh {server}"
projects:
  - name: Alpha
    servers:
      - name: web01
        description: Frontend node
      - name: db01
        description: Primary Postgres
        command: "ssh -p 2222 admin@db01"
  - name: Beta
    servers:
      - name: web02
        description: Staging WEB
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Tag every test that is not marked as system as a unit test."""

    for item in items:
        if "system" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@pytest.fixture()
def write_config(tmp_path: Path) -> WriteConfig:
    """Return a helper that writes YAML text to a temporary config file."""

    path = tmp_path / "sshmenu.yaml"

    def _write(text: str) -> Path:
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_config_path(write_config: WriteConfig) -> Path:
    """Write the sample two-project configuration and return its path."""

    return write_config(SAMPLE_CONFIG)
