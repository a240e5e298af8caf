"""Helpers for turning a server selection into a running shell command."""

from __future__ import annotations

import subprocess
from collections.abc import Callable

import typer

from sshmenu.config import Server

__all__ = [
    "SERVER_PLACEHOLDER",
    "CommandExecutionError",
    "dispatch",
    "resolve_command",
    "run_command",
]

SERVER_PLACEHOLDER = "{server}"

OutputFn = Callable[[str], None]


class CommandExecutionError(Exception):
    """Raised when a dispatched command fails to start or exits non-zero."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def resolve_command(server: Server, global_command: str) -> str:
    """Return the shell command that connects to ``server``.

    An explicit per-server command is used verbatim. Otherwise every
    ``{server}`` in the global template is replaced with the server name.
    """

    if server.command:
        return server.command
    return global_command.replace(SERVER_PLACEHOLDER, server.name)


def _normalize_returncode(returncode: int) -> int:
    """Map negative subprocess return codes to the shell's 128+signal form."""

    if returncode < 0:
        return 128 - returncode
    return returncode


def run_command(command: str) -> None:
    """Run ``command`` through bash attached to the current terminal."""

    try:
        completed = subprocess.run(["bash", "-c", command], check=False)
    except OSError as exc:
        raise CommandExecutionError(f"unable to start bash: {exc}", 127) from exc

    exit_code = _normalize_returncode(completed.returncode)
    if completed.returncode < 0:
        raise CommandExecutionError(f"signal: {-completed.returncode}", exit_code)
    if exit_code != 0:
        raise CommandExecutionError(f"exit status {exit_code}", exit_code)


def _default_output(message: str) -> None:
    typer.echo(message)


def dispatch(
    server: Server,
    global_command: str,
    *,
    runner: Callable[[str], None] = run_command,
    output: OutputFn = _default_output,
) -> int:
    """Announce and execute the command for ``server``.

    Failures are reported but never raised; the exit code of the command is
    returned so callers can decide what to do next.
    """

    command = resolve_command(server, global_command)
    output(f"Running: {command}")
    try:
        runner(command)
    except CommandExecutionError as exc:
        output(f"Command failed: {exc}")
        return exc.exit_code
    return 0
