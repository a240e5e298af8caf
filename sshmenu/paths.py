"""Utilities for resolving filesystem locations used by sshmenu."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from platformdirs.unix import Unix

__all__ = [
    "CONFIG_FILENAME",
    "executable_path",
    "is_standalone_executable",
    "resolve_config_path",
    "user_config_file",
]

CONFIG_FILENAME = "sshmenu.yaml"


def executable_path() -> Path:
    """Return the resolved path of the running program."""

    return Path(sys.argv[0]).resolve()


def is_standalone_executable(path: Path) -> bool:
    """Tell whether ``path`` is a launcher binary rather than Python source.

    Under ``python -m sshmenu`` the program path is the package's
    ``__main__.py``, which must never be treated as the executable.
    """

    return path.suffix not in {".py", ".pyc"} and path.stem != "__main__"


def user_config_file() -> Path:
    """Return the per-user configuration file location.

    The XDG layout is used on every platform, so this is
    ``~/.config/sshmenu/sshmenu.yaml`` unless ``XDG_CONFIG_HOME`` points
    somewhere else.
    """

    return Unix("sshmenu").user_config_path / CONFIG_FILENAME


def resolve_config_path() -> Path:
    """Pick the configuration file the menu should read.

    ``SSHMENU_CONFIG`` wins when set. Otherwise the per-user file is used if it
    exists, falling back to ``sshmenu.yaml`` next to the executable.
    """

    override = os.getenv("SSHMENU_CONFIG")
    if override:
        return Path(override).expanduser()

    candidate = user_config_file()
    if candidate.exists():
        return candidate
    return executable_path().parent / CONFIG_FILENAME
