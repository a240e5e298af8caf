"""Self-update support: replace the running binary with the latest release."""

from __future__ import annotations

import hashlib
import os
import platform
import subprocess
from collections.abc import Callable
from contextlib import suppress
from pathlib import Path
from typing import Any

import requests
import typer

from sshmenu import __version__
from sshmenu.paths import executable_path, is_standalone_executable

__all__ = [
    "BadContentError",
    "DownloadError",
    "RELEASE_BASE_URL",
    "UpdateError",
    "UpdateIOError",
    "release_url",
    "self_update",
]

RELEASE_BASE_URL = "https://github.com/vorn003/SSHMenu/releases/latest/download"
TEMP_FILENAME = ".sshmenu_update_tmp"

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "i386": "386",
    "i686": "386",
}

OutputFn = Callable[[str], None]
FetchFn = Callable[[str], Any]


class UpdateError(Exception):
    """Base exception for self-update failures."""

    exit_code = 1


class DownloadError(UpdateError):
    """Raised when the release cannot be fetched."""


class BadContentError(UpdateError):
    """Raised when the server answers with an HTML page instead of a binary."""

    exit_code = 2


class UpdateIOError(UpdateError):
    """Raised when reading or replacing local files fails."""


def release_url() -> str:
    """Return the download URL for this platform's release binary."""

    override = os.getenv("SSHMENU_UPDATE_URL")
    if override:
        return override
    system = platform.system().lower()
    machine = platform.machine().lower()
    arch = _ARCH_ALIASES.get(machine, machine)
    return f"{RELEASE_BASE_URL}/sshmenu_{system}_{arch}"


def _fetch(url: str) -> Any:
    return requests.get(url, stream=True)


def _md5sum(path: Path) -> str:
    digest = hashlib.md5()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 256), b""):
            digest.update(chunk)
    return digest.hexdigest()


def _download(url: str, target: Path, fetch: FetchFn) -> None:
    """Stream ``url`` into ``target``, rejecting HTML responses."""

    try:
        response = fetch(url)
    except requests.exceptions.RequestException as exc:
        raise DownloadError(f"Download failed: {exc}") from exc

    with response:
        content_type = response.headers.get("Content-Type", "")
        if "text/html" in content_type:
            msg = (
                "Error: Downloaded file is HTML, not a binary. "
                "Check the release URL or authentication."
            )
            raise BadContentError(msg)
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            raise DownloadError(f"Download failed: {exc}") from exc

        try:
            fd = os.open(target, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o755)
        except OSError as exc:
            raise UpdateIOError(f"Error creating temporary file for update: {exc}") from exc
        try:
            with os.fdopen(fd, "wb") as handle:
                for chunk in response.iter_content(chunk_size=1024 * 256):
                    if chunk:
                        handle.write(chunk)
        except (OSError, requests.exceptions.RequestException) as exc:
            with suppress(OSError):
                target.unlink()
            raise UpdateIOError(f"Error writing update: {exc}") from exc


def _show_new_version(executable: Path, output: OutputFn) -> None:
    output("Update complete. New version:")
    try:
        subprocess.run([str(executable), "--version"], check=True)
    except (OSError, subprocess.CalledProcessError):
        output("(error running updated binary to show version)")


def self_update(
    executable: Path | None = None,
    *,
    url: str | None = None,
    fetch: FetchFn | None = None,
    output: OutputFn | None = None,
) -> int:
    """Download the latest release and swap it in for ``executable``.

    Returns ``0`` on success or when already up to date. Failures raise
    :class:`UpdateError` subclasses whose ``exit_code`` the CLI reports.
    """

    exe_path = executable if executable is not None else executable_path()
    download_url = url if url is not None else release_url()
    fetch_fn = fetch if fetch is not None else _fetch
    emit = output if output is not None else typer.echo

    if not is_standalone_executable(exe_path):
        msg = (
            f"Cannot self-update {exe_path}: it is not a standalone sshmenu binary. "
            "Upgrade the Python package with pip instead."
        )
        raise UpdateIOError(msg)

    tmp_path = exe_path.parent / TEMP_FILENAME
    emit("Downloading latest release...")
    _download(download_url, tmp_path, fetch_fn)

    try:
        tmp_sum = _md5sum(tmp_path)
    except OSError as exc:
        raise UpdateIOError(f"Error computing md5sum for tempfile: {exc}") from exc
    try:
        exe_sum = _md5sum(exe_path)
    except OSError as exc:
        raise UpdateIOError(f"Error computing md5sum for executable: {exc}") from exc

    if tmp_sum == exe_sum:
        emit(f"No update needed, already on version: {__version__}")
        try:
            tmp_path.unlink()
        except OSError as exc:
            raise UpdateIOError(f"Error removing temporary file: {exc}") from exc
        return 0

    try:
        os.replace(tmp_path, exe_path)
    except OSError as exc:
        raise UpdateIOError(f"Error replacing executable: {exc}") from exc
    _show_new_version(exe_path, emit)
    return 0
